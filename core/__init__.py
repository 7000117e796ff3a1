"""
core - Schema Rename Preview Core Module

Computes the filenames a schema-based batch rename would produce, without
touching the filesystem. Scanning helpers produce the candidate batch.
"""

from .models_fs import (
    ComponentKind,
    RenameComponent,
    RenameSchema,
    Candidate,
    PreviewRow,
    PreviewOptions,
    SortKey,
    FileTypePreset,
    SchemaError,
    has_sequence,
    COMPONENT_DESCRIPTIONS,
)

from .text_match import (
    sanitize,
    is_illegal_char,
    has_prefix,
    is_valid_filename,
)

from .time_format import (
    format_date,
    format_time,
    instant_from_epoch,
)

from .name_schema import (
    build_name,
    render_component,
)

from .plan_rename import (
    build_file_preview,
    build_preview_rows,
    build_all_previews,
    build_sample_preview,
    find_duplicate_names,
)

from .scan_files import (
    scan_candidates,
    filter_candidates,
    parse_extensions,
)

from .sort_rules import (
    sort_candidates,
    get_sort_key,
)

from .schema_store import (
    load_schema,
    save_schema,
    save_preview_log,
)

__all__ = [
    # Data models
    "ComponentKind",
    "RenameComponent",
    "RenameSchema",
    "Candidate",
    "PreviewRow",
    "PreviewOptions",
    "SortKey",
    "FileTypePreset",
    "SchemaError",
    "has_sequence",
    "COMPONENT_DESCRIPTIONS",

    # Text processing
    "sanitize",
    "is_illegal_char",
    "has_prefix",
    "is_valid_filename",

    # Date/time tokens
    "format_date",
    "format_time",
    "instant_from_epoch",

    # Schema evaluation
    "build_name",
    "render_component",

    # Preview
    "build_file_preview",
    "build_preview_rows",
    "build_all_previews",
    "build_sample_preview",
    "find_duplicate_names",

    # Scanning
    "scan_candidates",
    "filter_candidates",
    "parse_extensions",

    # Sorting
    "sort_candidates",
    "get_sort_key",

    # Schema files
    "load_schema",
    "save_schema",
    "save_preview_log",
]
