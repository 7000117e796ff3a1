"""
plan_rename.py - Rename Preview Generation Module

Responsibilities:
- Derive evaluator inputs (folder name, stem, extension, instants) per candidate
- Two-pass collision-aware preview over a whole batch
- Sample preview and duplicate reporting for callers
"""

from collections import defaultdict
from datetime import datetime
from typing import List, Dict, Optional, Sequence
import logging

from .models_fs import Candidate, PreviewRow, RenameComponent, has_sequence
from .name_schema import build_name
from .text_match import is_valid_filename
from .time_format import instant_from_epoch

logger = logging.getLogger(__name__)

DEFAULT_FOLDER_NAME = "folder"

# Placeholder metadata for build_sample_preview
SAMPLE_FOLDER_NAME = "Downloads"
SAMPLE_STEM = "photo"
SAMPLE_EXTENSION = ".jpg"
SAMPLE_CREATED = datetime(2024, 4, 15, 9, 30, 0)
SAMPLE_MODIFIED = datetime(2024, 6, 20, 14, 45, 0)


def folder_name_of(folder: str) -> str:
    """Last non-empty segment of a folder path (either separator style)"""
    segments = [s for s in folder.replace("\\", "/").split("/") if s]
    return segments[-1] if segments else DEFAULT_FOLDER_NAME


def stem_of(name: str) -> str:
    """
    Filename without its extension

    A leading dot does not start an extension, so ".gitignore" keeps its
    whole name as stem.
    """
    dot_idx = name.rfind(".")
    return name[:dot_idx] if dot_idx > 0 else name


def normalize_extension(extension: str) -> str:
    """Ensure a leading dot when any extension text exists"""
    if not extension:
        return ""
    return extension if extension.startswith(".") else f".{extension}"


def build_file_preview(
    components: Sequence[RenameComponent],
    separator: str,
    candidate: Candidate,
    seq: Optional[int] = None,
    now: Optional[datetime] = None,
) -> str:
    """
    Build the preview filename for a single candidate

    Args:
        components: Ordered components
        separator: Separator between parts
        candidate: File metadata
        seq: None for the base-name pass, ordinal otherwise
        now: Fallback instant for unknown timestamps

    Returns:
        Filename
    """
    return build_name(
        components,
        separator,
        folder_name_of(candidate.folder),
        stem_of(candidate.name),
        normalize_extension(candidate.extension),
        instant_from_epoch(candidate.created),
        instant_from_epoch(candidate.mtime),
        seq,
        now,
    )


def build_preview_rows(
    candidates: Sequence[Candidate],
    components: Sequence[RenameComponent],
    separator: str,
    now: Optional[datetime] = None,
) -> List[PreviewRow]:
    """
    Compute a collision-aware new name for every candidate

    Pass 1 renders base names without sequence values. Pass 2 walks the
    candidates in input order and gives every member of a colliding group
    the next ordinal (1, 2, ...) for its base name. Without a sequence
    component the colliding members keep the same base name.

    Args:
        candidates: Batch in the order used for tie-breaking
        components: Ordered components
        separator: Separator between parts
        now: Fallback instant, sampled once for the whole batch if omitted

    Returns:
        One row per candidate, in input order
    """
    if now is None:
        now = datetime.now()

    # Pass 1: base names
    base_names: Dict[str, str] = {}
    for c in candidates:
        base_names[c.path] = build_file_preview(components, separator, c, None, now)

    counts: Dict[str, int] = defaultdict(int)
    for name in base_names.values():
        counts[name] += 1

    numbered = has_sequence(components)

    # Pass 2: ordinals for colliding groups only
    next_seq: Dict[str, int] = defaultdict(lambda: 1)
    rows: List[PreviewRow] = []

    for c in candidates:
        base = base_names[c.path]
        group_size = counts[base]
        if group_size > 1:
            seq = next_seq[base]
            next_seq[base] = seq + 1
            new_name = build_file_preview(components, separator, c, seq, now)
            if numbered:
                note = f"collision {seq}/{group_size}: {base}"
                rows.append(PreviewRow(candidate=c, new_name=new_name, sequence=seq, note=note))
            else:
                # No ordinal appears in the name
                note = f"duplicate name, no sequence component ({group_size} files)"
                rows.append(PreviewRow(candidate=c, new_name=new_name, note=note))
        else:
            rows.append(PreviewRow(candidate=c, new_name=base))

    for row in rows:
        valid, error = is_valid_filename(row.new_name)
        if not valid:
            row.note = f"{row.note}; {error}" if row.note else error

    collided = sum(1 for n in counts.values() if n > 1)
    if collided:
        logger.debug("Resolved %d collision group(s) across %d candidates", collided, len(candidates))

    return rows


def build_all_previews(
    candidates: Sequence[Candidate],
    components: Sequence[RenameComponent],
    separator: str,
    now: Optional[datetime] = None,
) -> Dict[str, str]:
    """
    Compute the path -> new name mapping for a batch

    Args:
        candidates: Batch in the order used for tie-breaking
        components: Ordered components
        separator: Separator between parts
        now: Fallback instant for unknown timestamps

    Returns:
        Mapping with exactly one entry per candidate path
    """
    rows = build_preview_rows(candidates, components, separator, now)
    return {row.candidate.path: row.new_name for row in rows}


def find_duplicate_names(previews: Dict[str, str]) -> Dict[str, List[str]]:
    """
    Find names still shared by several paths after resolution

    Args:
        previews: path -> new name

    Returns:
        name -> paths, only for names used more than once
    """
    by_name: Dict[str, List[str]] = defaultdict(list)
    for path, name in previews.items():
        by_name[name].append(path)
    return {name: paths for name, paths in by_name.items() if len(paths) > 1}


def build_sample_preview(
    components: Sequence[RenameComponent],
    separator: str,
    now: Optional[datetime] = None,
) -> str:
    """
    Render the schema against placeholder metadata

    Lets a user see what a schema looks like without real files.
    """
    return build_name(
        components,
        separator,
        SAMPLE_FOLDER_NAME,
        SAMPLE_STEM,
        SAMPLE_EXTENSION,
        SAMPLE_CREATED,
        SAMPLE_MODIFIED,
        None,
        now,
    )
