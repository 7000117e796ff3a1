"""
schema_store.py - Schema Files and Preview Hand-off Log

Responsibilities:
- Load/save naming schemas as JSON
- Save the previewed path -> name mapping for the rename executor
"""

from pathlib import Path
from typing import List, Optional
from datetime import datetime
import json
import logging

from .models_fs import PreviewRow, RenameSchema, SchemaError
from .plan_rename import find_duplicate_names

logger = logging.getLogger(__name__)


def load_schema(path: Path) -> RenameSchema:
    """
    Load schema file

    Args:
        path: JSON file {"separator": ..., "components": [...]}

    Returns:
        Schema

    Raises:
        SchemaError: File unreadable or malformed
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise SchemaError(f"Cannot read schema file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SchemaError(f"Invalid JSON in schema file {path}: {e}") from e

    schema = RenameSchema.from_dict(data)
    logger.debug("Loaded schema with %d component(s) from %s", len(schema.components), path)
    return schema


def save_schema(schema: RenameSchema, path: Path) -> Path:
    """Save schema file"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(schema.to_dict(), f, ensure_ascii=False, indent=2)

    return path


def save_preview_log(
    rows: List[PreviewRow],
    schema: RenameSchema,
    log_dir: Path,
    now: Optional[datetime] = None
) -> Path:
    """
    Save preview hand-off log

    Args:
        rows: Preview rows in batch order
        schema: Schema used for the preview
        log_dir: Log directory
        now: Instant the preview used for unknown timestamps

    Returns:
        Log file path
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    if now is None:
        now = datetime.now()
    timestamp = now.strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"rename_preview_{timestamp}.json"

    previews = {row.candidate.path: row.new_name for row in rows}
    data = {
        "timestamp": timestamp,
        "now": now.isoformat(),
        "schema": schema.to_dict(),
        "total": len(rows),
        "changed": sum(1 for row in rows if row.changed),
        "previews": [
            {
                "path": row.candidate.path,
                "name": row.candidate.name,
                "new_name": row.new_name,
                "note": row.note
            }
            for row in rows
        ],
        "duplicates": find_duplicate_names(previews)
    }

    with open(log_file, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    logger.info("Preview log saved: %s", log_file)
    return log_file
