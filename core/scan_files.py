"""
scan_files.py - Candidate Scanning Module

Provides folder scanning and post-scan filtering that produce the
candidate batch handed to the preview
"""

from pathlib import Path
from typing import List, Optional, Callable, Iterable
import logging
import os

from .models_fs import Candidate, FileTypePreset
from .text_match import has_prefix

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_DIRS = [".git", "__pycache__", "node_modules"]


def _is_hidden(name: str) -> bool:
    return name.startswith('.')


def scan_candidates(
    root: Path,
    include_subfolders: bool = False,
    include_hidden: bool = False,
    ignore_dirs: Optional[List[str]] = None,
    progress_callback: Optional[Callable[[str], None]] = None
) -> List[Candidate]:
    """
    Scan folder for candidate files

    Args:
        root: Root directory
        include_subfolders: Whether to descend into subfolders
        include_hidden: Whether to include hidden files
        ignore_dirs: List of directories to ignore
        progress_callback: Progress callback function

    Returns:
        Candidate list (directory walk order)

    Raises:
        ValueError: Root directory does not exist
    """
    if ignore_dirs is None:
        ignore_dirs = DEFAULT_IGNORE_DIRS

    root = Path(root).resolve()
    if not root.is_dir():
        raise ValueError(f"Directory does not exist: {root}")

    results: List[Candidate] = []

    for dirpath, dirnames, filenames in os.walk(root):
        current_dir = Path(dirpath)

        if include_subfolders:
            # Modifying dirnames in place prevents os.walk from entering these directories
            dirnames[:] = [
                d for d in dirnames
                if d not in ignore_dirs and (include_hidden or not _is_hidden(d))
            ]
        else:
            dirnames[:] = []

        for filename in filenames:
            if not include_hidden and _is_hidden(filename):
                continue

            filepath = current_dir / filename

            if progress_callback:
                progress_callback(str(filepath))

            try:
                results.append(Candidate.from_path(filepath))
            except OSError as e:
                logger.warning("Skipping %s: %s", filepath, e)

    logger.debug("Scanned %d candidate(s) under %s", len(results), root)
    return results


def _normalize_ext(ext: str) -> str:
    ext = ext.strip().lower()
    return ext if not ext or ext.startswith('.') else f".{ext}"


def parse_extensions(text: str) -> List[str]:
    """
    Parse an extension allow-list such as ".jpg .png,pdf"

    Returns:
        Lowercase extensions with leading dots
    """
    tokens = text.replace(",", " ").split()
    exts = [_normalize_ext(t) for t in tokens]
    return [e for e in exts if e not in ("", ".")]


def filter_candidates(
    candidates: Iterable[Candidate],
    prefix: str = "",
    extensions: Optional[List[str]] = None,
    min_size: Optional[int] = None,
    max_size: Optional[int] = None,
    file_type: FileTypePreset = FileTypePreset.ALL
) -> List[Candidate]:
    """
    Filter scanned candidates, keeping their order

    Args:
        candidates: Scanned candidates
        prefix: Filename prefix (case-insensitive, empty matches all)
        extensions: Allowed extensions (with or without dot, empty allows all)
        min_size: Minimum size in bytes
        max_size: Maximum size in bytes
        file_type: File type preset (ALL keeps every extension)

    Returns:
        Filtered candidate list
    """
    allowed = {_normalize_ext(e) for e in extensions or []}
    allowed -= {"", "."}
    preset = file_type.extensions

    results: List[Candidate] = []
    for c in candidates:
        if not has_prefix(c.name, prefix):
            continue
        if allowed and _normalize_ext(c.extension) not in allowed:
            continue
        if preset and _normalize_ext(c.extension) not in preset:
            continue
        if min_size is not None and c.size < min_size:
            continue
        if max_size is not None and c.size > max_size:
            continue
        results.append(c)
    return results
