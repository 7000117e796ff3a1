"""
name_schema.py - Naming Schema Evaluation

Renders one filename from an ordered component list. Pure: the output
depends only on the arguments (including the fallback "now").
"""

from datetime import datetime
from typing import List, Optional, Sequence

from .models_fs import ComponentKind, RenameComponent
from .text_match import sanitize
from .time_format import format_date, format_time

FALLBACK_STEM = "file"


def format_sequence(seq: int, pad_width: int) -> str:
    """Zero-pad an ordinal to pad_width digits"""
    return str(seq).zfill(max(pad_width, 0))


def render_component(
    component: RenameComponent,
    folder_name: str,
    original_stem: str,
    created: Optional[datetime],
    modified: Optional[datetime],
    seq: Optional[int],
    now: datetime,
) -> str:
    """
    Render a single component

    Returns:
        Rendered fragment ("" when the component contributes nothing)
    """
    kind = component.kind
    if kind == ComponentKind.FOLDER_NAME:
        return sanitize(folder_name)
    elif kind == ComponentKind.ORIGINAL_STEM:
        return sanitize(original_stem)
    elif kind == ComponentKind.DATE_CREATED:
        return format_date(created, now)
    elif kind == ComponentKind.TIME_CREATED:
        return format_time(created, now)
    elif kind == ComponentKind.DATE_MODIFIED:
        return format_date(modified, now)
    elif kind == ComponentKind.TIME_MODIFIED:
        return format_time(modified, now)
    elif kind == ComponentKind.LITERAL:
        return sanitize(component.value)
    elif kind == ComponentKind.SEQUENCE:
        # Omitted during the base-name pass
        if seq is None:
            return ""
        return format_sequence(seq, component.pad_width)
    raise AssertionError(f"Unhandled component kind: {kind}")


def build_name(
    components: Sequence[RenameComponent],
    separator: str,
    folder_name: str,
    original_stem: str,
    extension: str,
    created: Optional[datetime] = None,
    modified: Optional[datetime] = None,
    seq: Optional[int] = None,
    now: Optional[datetime] = None,
) -> str:
    """
    Build a single filename from schema components

    Args:
        components: Ordered components
        separator: Separator between non-empty parts
        folder_name: Name of the containing folder
        original_stem: Filename without extension
        extension: Extension including leading dot (e.g. ".jpg") or "",
            appended verbatim
        created: Creation instant (None means unknown)
        modified: Modification instant (None means unknown)
        seq: Sequence value (None omits sequence components)
        now: Fallback instant for unknown timestamps

    Returns:
        Filename
    """
    if now is None:
        now = datetime.now()

    parts: List[str] = []
    for component in components:
        fragment = render_component(
            component, folder_name, original_stem, created, modified, seq, now
        )
        if fragment:
            parts.append(fragment)

    if parts:
        stem = separator.join(parts)
    else:
        stem = sanitize(original_stem) or FALLBACK_STEM

    return f"{stem}{extension}"
