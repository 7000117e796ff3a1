"""
models_fs.py - Core Data Structure Definitions

Contains:
- ComponentKind / RenameComponent: One typed token of a naming schema
- RenameSchema: Ordered components plus separator
- Candidate: File under consideration for renaming
- PreviewRow: Rendered preview for one candidate
- SortKey / FileTypePreset / PreviewOptions: Scan and preview options configuration
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List, Dict, Any, FrozenSet, Iterable
from enum import Enum

DEFAULT_PAD_WIDTH = 3
DEFAULT_SEPARATOR = "_"


class SchemaError(ValueError):
    """Invalid schema descriptor"""


class SortKey(Enum):
    """Batch order enumeration"""
    NAME = "name"        # Filename
    PATH = "path"        # Full path
    MTIME = "mtime"      # Modification time
    CTIME = "ctime"      # Creation time (varies across platforms)
    SIZE = "size"        # File size


class FileTypePreset(Enum):
    """File type preset enumeration"""
    ALL = "all"
    IMAGES = "images"
    VIDEOS = "videos"
    AUDIO = "audio"
    DOCUMENTS = "documents"
    ARCHIVES = "archives"

    @property
    def extensions(self) -> FrozenSet[str]:
        """Lowercase extensions with leading dots (empty for ALL)"""
        return FILE_TYPE_EXTENSIONS.get(self, frozenset())


FILE_TYPE_EXTENSIONS = {
    FileTypePreset.IMAGES: frozenset({
        ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tif", ".tiff", ".webp",
        ".heic", ".heif", ".svg", ".ico", ".raw", ".cr2", ".nef", ".arw", ".dng",
    }),
    FileTypePreset.VIDEOS: frozenset({
        ".mp4", ".mov", ".avi", ".mkv", ".wmv", ".flv", ".webm", ".m4v", ".mpg",
        ".mpeg", ".3gp", ".mts", ".m2ts",
    }),
    FileTypePreset.AUDIO: frozenset({
        ".mp3", ".wav", ".flac", ".aac", ".ogg", ".m4a", ".wma", ".opus", ".aiff",
        ".alac",
    }),
    FileTypePreset.DOCUMENTS: frozenset({
        ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx", ".odt", ".ods",
        ".odp", ".txt", ".rtf", ".md", ".csv", ".epub",
    }),
    FileTypePreset.ARCHIVES: frozenset({
        ".zip", ".rar", ".7z", ".tar", ".gz", ".bz2", ".xz", ".tgz", ".zst",
    }),
}


class ComponentKind(Enum):
    """Component kind enumeration"""
    FOLDER_NAME = "folder_name"        # Containing folder name
    ORIGINAL_STEM = "original_stem"    # Filename without extension
    DATE_CREATED = "date_created"      # YYYYMMDD of creation time
    TIME_CREATED = "time_created"      # HHMMSS of creation time
    DATE_MODIFIED = "date_modified"    # YYYYMMDD of modification time
    TIME_MODIFIED = "time_modified"    # HHMMSS of modification time
    LITERAL = "literal"                # Fixed text
    SEQUENCE = "sequence"              # Zero-padded collision ordinal


COMPONENT_DESCRIPTIONS = {
    ComponentKind.FOLDER_NAME: "Name of the containing folder",
    ComponentKind.ORIGINAL_STEM: "Original filename without extension",
    ComponentKind.DATE_CREATED: "Creation date (YYYYMMDD)",
    ComponentKind.TIME_CREATED: "Creation time (HHMMSS)",
    ComponentKind.DATE_MODIFIED: "Modification date (YYYYMMDD)",
    ComponentKind.TIME_MODIFIED: "Modification time (HHMMSS)",
    ComponentKind.LITERAL: "Fixed text, e.g. literal:backup",
    ComponentKind.SEQUENCE: "Ordinal for colliding names, e.g. sequence:3",
}


def _parse_kind(value: Any) -> ComponentKind:
    try:
        return ComponentKind(value)
    except ValueError:
        raise SchemaError(f"Unknown component kind: {value!r}") from None


def _parse_pad_width(value: Any) -> int:
    if value is None or value == "":
        return DEFAULT_PAD_WIDTH
    if isinstance(value, str):
        try:
            width = int(value)
        except ValueError:
            raise SchemaError(f"Invalid pad width: {value!r}") from None
    elif isinstance(value, int) and not isinstance(value, bool):
        width = value
    else:
        # Floats are rejected rather than truncated
        raise SchemaError(f"Invalid pad width: {value!r}")
    if width < 0:
        raise SchemaError(f"Pad width cannot be negative: {width}")
    return width


@dataclass(frozen=True)
class RenameComponent:
    """Single schema component"""
    kind: ComponentKind
    value: str = ""                         # Literal text (literal only)
    pad_width: int = DEFAULT_PAD_WIDTH      # Zero padding digits (sequence only)

    @classmethod
    def of(cls, kind: ComponentKind) -> "RenameComponent":
        """Create a payload-free component"""
        return cls(kind=kind)

    @classmethod
    def literal(cls, value: str) -> "RenameComponent":
        """Create a literal text component"""
        return cls(kind=ComponentKind.LITERAL, value=value)

    @classmethod
    def sequence(cls, pad_width: int = DEFAULT_PAD_WIDTH) -> "RenameComponent":
        """Create a sequence component"""
        return cls(kind=ComponentKind.SEQUENCE, pad_width=pad_width)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenameComponent":
        """
        Create component from descriptor

        Args:
            data: {"kind": ..., "value": ..., "pad_width": ...}

        Returns:
            Component

        Raises:
            SchemaError: Unknown kind or invalid pad width
        """
        if not isinstance(data, dict):
            raise SchemaError(f"Component descriptor must be an object: {data!r}")
        kind = _parse_kind(data.get("kind"))
        if kind == ComponentKind.LITERAL:
            value = data.get("value")
            return cls.literal("" if value is None else str(value))
        if kind == ComponentKind.SEQUENCE:
            return cls.sequence(_parse_pad_width(data.get("pad_width")))
        return cls.of(kind)

    @classmethod
    def parse(cls, token: str) -> "RenameComponent":
        """
        Create component from short form "kind[:arg]"

        Examples: "original_stem", "literal:backup", "sequence:4"
        """
        kind_str, _, arg = token.partition(":")
        kind = _parse_kind(kind_str.strip())
        if kind == ComponentKind.LITERAL:
            return cls.literal(arg)
        if kind == ComponentKind.SEQUENCE:
            return cls.sequence(_parse_pad_width(arg.strip()))
        return cls.of(kind)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to descriptor"""
        data: Dict[str, Any] = {"kind": self.kind.value}
        if self.kind == ComponentKind.LITERAL:
            data["value"] = self.value
        elif self.kind == ComponentKind.SEQUENCE:
            data["pad_width"] = self.pad_width
        return data


def has_sequence(components: Iterable[RenameComponent]) -> bool:
    """Whether a component list can disambiguate collisions"""
    return any(c.kind == ComponentKind.SEQUENCE for c in components)


@dataclass
class RenameSchema:
    """Naming schema: ordered components joined by separator"""
    components: List[RenameComponent] = field(default_factory=list)
    separator: str = DEFAULT_SEPARATOR

    @property
    def has_sequence(self) -> bool:
        """Whether collisions can be disambiguated"""
        return has_sequence(self.components)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenameSchema":
        """
        Create schema from {"separator": ..., "components": [...]}

        Raises:
            SchemaError: Malformed descriptor
        """
        if not isinstance(data, dict):
            raise SchemaError("Schema must be an object")
        components = data.get("components", [])
        if not isinstance(components, list):
            raise SchemaError("Schema components must be a list")
        separator = data.get("separator", DEFAULT_SEPARATOR)
        return cls(
            components=[RenameComponent.from_dict(c) for c in components],
            separator="" if separator is None else str(separator),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "separator": self.separator,
            "components": [c.to_dict() for c in self.components],
        }


@dataclass
class Candidate:
    """File under consideration for renaming"""
    path: str                       # Full path (unique key)
    name: str                       # Filename (with suffix)
    folder: str                     # Containing folder path
    extension: str                  # Suffix, with or without leading dot
    created: float = 0              # Creation time (epoch seconds, <= 0 unknown)
    mtime: float = 0                # Modification time (epoch seconds, <= 0 unknown)
    size: int = 0                   # File size (bytes)

    @classmethod
    def from_path(cls, p: Path) -> "Candidate":
        """Create Candidate from Path object"""
        stat = p.stat()
        # st_birthtime only exists on some platforms
        created = getattr(stat, "st_birthtime", stat.st_ctime)
        return cls(
            path=str(p),
            name=p.name,
            folder=str(p.parent),
            extension=p.suffix,
            created=created,
            mtime=stat.st_mtime,
            size=stat.st_size,
        )


@dataclass
class PreviewRow:
    """Rendered preview for one candidate"""
    candidate: Candidate
    new_name: str
    sequence: Optional[int] = None  # Ordinal assigned within collision group
    note: str = ""                  # e.g. collision resolution explanation

    @property
    def changed(self) -> bool:
        """Whether the new name differs from the current name"""
        return self.new_name != self.candidate.name


@dataclass
class PreviewOptions:
    """Scan and preview options configuration"""
    separator: str = DEFAULT_SEPARATOR

    # Scan options
    include_subfolders: bool = False
    include_hidden: bool = False
    ignore_dirs: List[str] = field(default_factory=lambda: [".git", "__pycache__", "node_modules"])

    # Filters
    prefix: str = ""
    extensions: List[str] = field(default_factory=list)
    min_size: Optional[int] = None  # Bytes
    max_size: Optional[int] = None  # Bytes
    file_type: FileTypePreset = FileTypePreset.ALL

    # Batch order
    sort_by: SortKey = SortKey.NAME
    reverse: bool = False

    # Hand-off log directory (None disables)
    log_dir: Optional[Path] = None
