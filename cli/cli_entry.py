"""
cli_entry.py - CLI Entry Point

Supports:
- preview: Show the new name of every file in a folder for a schema
- sample: Show the schema applied to placeholder metadata
- components: List available component kinds
"""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from core import (
    RenameComponent, RenameSchema, PreviewOptions, SortKey, FileTypePreset,
    COMPONENT_DESCRIPTIONS, ComponentKind,
    scan_candidates, filter_candidates, parse_extensions, sort_candidates,
    build_preview_rows, build_sample_preview, find_duplicate_names,
    load_schema, save_preview_log, instant_from_epoch,
)
from core.logger_helper import configure_logging, get_logger

logger = get_logger(__name__)

BYTES_PER_MB = 1024 * 1024


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="schema_rename",
        description="Schema-based rename preview",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Preview names for every file in a folder
  python main.py preview ./photos -C folder_name -C date_created -C sequence:3

  # Use a schema file and save the hand-off log
  python main.py preview ./photos --schema schema.json --log-dir ./logs

  # Try a schema without any files
  python main.py sample -C literal:backup -C original_stem --separator -
"""
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Subcommands")

    # preview subcommand
    preview_parser = subparsers.add_parser("preview", help="Preview new names for a folder")
    preview_parser.add_argument("directory", type=str, help="Folder to scan")
    _add_schema_arguments(preview_parser)
    preview_parser.add_argument("--subfolders", "-r", action="store_true", help="Include subfolders")
    preview_parser.add_argument("--include-hidden", action="store_true", help="Include hidden files")
    preview_parser.add_argument("--prefix", "-p", type=str, default="", help="Filename prefix filter")
    preview_parser.add_argument("--ext", "-e", type=str, default="",
                                help="Extension allow-list, e.g. \".jpg .png\"")
    preview_parser.add_argument("--min-size", type=float, help="Minimum size (MB)")
    preview_parser.add_argument("--max-size", type=float, help="Maximum size (MB)")
    preview_parser.add_argument("--type", "-t", type=str, default="all",
                                choices=[p.value for p in FileTypePreset], help="File type preset")
    preview_parser.add_argument("--sort", type=str, default="name",
                                choices=[k.value for k in SortKey], help="Batch order")
    preview_parser.add_argument("--reverse", action="store_true", help="Reverse batch order")
    preview_parser.add_argument("--limit", type=int, default=50, help="Rows to show (0 for all)")
    preview_parser.add_argument("--log-dir", type=str, help="Save preview hand-off log to this folder")
    preview_parser.add_argument("--json", action="store_true", help="Print path -> new name as JSON")

    # sample subcommand
    sample_parser = subparsers.add_parser("sample", help="Apply schema to placeholder metadata")
    _add_schema_arguments(sample_parser)

    # components subcommand
    subparsers.add_parser("components", help="List component kinds")

    return parser


def _add_schema_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--schema", "-s", type=str, help="Schema JSON file")
    group.add_argument("--component", "-C", action="append", default=[], metavar="KIND[:ARG]",
                       help="Schema component, repeatable (see 'components')")
    parser.add_argument("--separator", type=str, help="Separator between parts (default _)")


def build_schema(args) -> RenameSchema:
    """
    Build schema from --schema or --component arguments

    Raises:
        SchemaError: Invalid file or component
    """
    if args.schema:
        schema = load_schema(Path(args.schema))
    else:
        schema = RenameSchema(components=[RenameComponent.parse(t) for t in args.component])
    if args.separator is not None:
        schema.separator = args.separator
    return schema


def build_options(args, schema: RenameSchema) -> PreviewOptions:
    """Map preview arguments to PreviewOptions"""
    return PreviewOptions(
        separator=schema.separator,
        include_subfolders=args.subfolders,
        include_hidden=args.include_hidden,
        prefix=args.prefix,
        extensions=parse_extensions(args.ext),
        min_size=None if args.min_size is None else int(args.min_size * BYTES_PER_MB),
        max_size=None if args.max_size is None else int(args.max_size * BYTES_PER_MB),
        file_type=FileTypePreset(args.type),
        sort_by=SortKey(args.sort),
        reverse=args.reverse,
        log_dir=Path(args.log_dir) if args.log_dir else None,
    )


def file_type_label(extension: str) -> str:
    """Type column text"""
    return extension or "(none)"


def modified_label(mtime: float) -> str:
    """Modified column text"""
    instant = instant_from_epoch(mtime)
    return instant.strftime("%Y-%m-%d %H:%M") if instant else "(unknown)"


def cmd_preview(args):
    """Handle preview command"""
    directory = Path(args.directory).resolve()
    if not directory.is_dir():
        print(f"Error: Directory does not exist: {directory}", file=sys.stderr)
        return 1

    schema = build_schema(args)
    options = build_options(args, schema)

    candidates = scan_candidates(
        directory,
        include_subfolders=options.include_subfolders,
        include_hidden=options.include_hidden,
        ignore_dirs=options.ignore_dirs,
    )
    total = len(candidates)
    candidates = filter_candidates(
        candidates,
        prefix=options.prefix,
        extensions=options.extensions,
        min_size=options.min_size,
        max_size=options.max_size,
        file_type=options.file_type,
    )
    candidates = sort_candidates(candidates, options.sort_by, options.reverse)

    # One instant for every file lacking timestamps, recorded in the log
    now = datetime.now()
    rows = build_preview_rows(candidates, schema.components, options.separator, now)
    previews = {row.candidate.path: row.new_name for row in rows}
    duplicates = find_duplicate_names(previews)

    if args.json:
        print(json.dumps(previews, ensure_ascii=False, indent=2))
    else:
        print(f"Preview directory: {directory}")
        print(f"Showing {len(candidates)} of {total} candidate file(s)")
        if not rows:
            if options.prefix:
                print("No files match the prefix search filter")
            else:
                print("No files matched the current scan filters")
            return 0

        shown = rows if args.limit <= 0 else rows[:args.limit]
        print("-" * 80)
        print(f"  {'File':<32} {'Type':<8} {'Modified':<16}    New name")
        for row in shown:
            label = row.candidate.name
            if options.include_subfolders:
                label = str(Path(row.candidate.path).relative_to(directory))
            marker = "->" if row.changed else "=="
            note = f" ({row.note})" if row.note else ""
            print(f"  {label:<32} {file_type_label(row.candidate.extension):<8} "
                  f"{modified_label(row.candidate.mtime):<16} {marker} {row.new_name}{note}")
        if len(rows) > len(shown):
            print(f"  ... and {len(rows) - len(shown)} more files")
        print("-" * 80)

        changed = sum(1 for row in rows if row.changed)
        print(f"Files to rename: {changed}, unchanged: {len(rows) - changed}")

        if duplicates:
            print("Warnings:")
            for name, paths in duplicates.items():
                print(f"  - {len(paths)} files would be named {name}")
            if not schema.has_sequence:
                print("  Add a 'sequence' component to number colliding files")

    if options.log_dir:
        log_file = save_preview_log(rows, schema, options.log_dir, now)
        if not args.json:
            print(f"Preview log: {log_file}")

    return 0


def cmd_sample(args):
    """Handle sample command"""
    schema = build_schema(args)
    print(build_sample_preview(schema.components, schema.separator))
    return 0


def cmd_components(args):
    """Handle components command"""
    for kind in ComponentKind:
        print(f"  {kind.value:<15} {COMPONENT_DESCRIPTIONS[kind]}")
    return 0


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    handlers = {
        "preview": cmd_preview,
        "sample": cmd_sample,
        "components": cmd_components,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except ValueError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
