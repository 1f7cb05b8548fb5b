from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(str, Enum):
    """Kind of a filesystem entry discovered during a scan.

    Attributes:
        FILE: Regular file (or anything that is not a directory)
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"


class TypeFilter(str, Enum):
    """Entry kind a preset restricts its results to."""

    FILE = "file"
    DIRECTORY = "directory"
    ANY = "any"


class SortKey(str, Enum):
    """Ordering applied to the filtered flat record list.

    Values:
        NAME: Lexicographic by full relative path
        SIZE_ASC: Smallest first
        SIZE_DESC: Largest first
        DATE_ASC: Oldest modification time first
        DATE_DESC: Newest modification time first
    """

    NAME = "name"
    SIZE_ASC = "size-asc"
    SIZE_DESC = "size-desc"
    DATE_ASC = "date-asc"
    DATE_DESC = "date-desc"


class OutputFormat(str, Enum):
    """Textual representation produced by the renderer."""

    MARKDOWN = "markdown"
    ASCII = "ascii"
    JSON = "json"
    PATHS = "paths"
