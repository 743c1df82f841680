"""Core components: snapshot, provider interface, queue, classifier,
formatter and traverser."""

from .snapshot import MetadataSnapshot
from .adapter import MetadataProvider
from .directory_queue import DirectoryQueue
from .classifier import DirectoryClassifier
from .formatter import (
    EntryFormatter,
    VisitedEntry,
    file_type_char,
    permission_string,
    select_size_unit,
    format_size,
    format_mtime,
)
from .traverser import BreadthFirstTraverser

__all__ = [
    'MetadataSnapshot',
    'MetadataProvider',
    'DirectoryQueue',
    'DirectoryClassifier',
    'EntryFormatter',
    'VisitedEntry',
    'file_type_char',
    'permission_string',
    'select_size_unit',
    'format_size',
    'format_mtime',
    'BreadthFirstTraverser',
]
