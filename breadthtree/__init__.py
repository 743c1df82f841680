"""breadthtree - breadth-first directory tree reporter.

Visits a root directory, then every entry beneath it in strict level order,
printing one line per entry with optional ls-style columns::

    from breadthtree import print_tree
    print_tree("/var/log", show_permissions=True, size_in_units=True)

Or from the shell::

    bt -l /var/log
"""

__version__ = "0.1.0"

from .config import ReportConfig
from .exceptions import (
    BreadthTreeError,
    ConfigurationError,
    InvalidRootError,
    RootNotDirectoryError,
    QueueEmptyError,
    IdentityLookupError,
)
from .core import (
    MetadataSnapshot,
    MetadataProvider,
    DirectoryQueue,
    DirectoryClassifier,
    EntryFormatter,
    VisitedEntry,
    BreadthFirstTraverser,
)
from .adapters import FileSystemMetadataProvider
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    CollectErrorsPolicy,
    ReportErrorsPolicy,
)
from .planning import ReportPlan
from .api import iter_tree_entries, iter_tree_lines, print_tree, count_entries

__all__ = [
    '__version__',
    # Config
    'ReportConfig',
    # Errors
    'BreadthTreeError',
    'ConfigurationError',
    'InvalidRootError',
    'RootNotDirectoryError',
    'QueueEmptyError',
    'IdentityLookupError',
    # Core
    'MetadataSnapshot',
    'MetadataProvider',
    'DirectoryQueue',
    'DirectoryClassifier',
    'EntryFormatter',
    'VisitedEntry',
    'BreadthFirstTraverser',
    # Providers
    'FileSystemMetadataProvider',
    # Policies
    'ErrorPolicy',
    'FailFastPolicy',
    'CollectErrorsPolicy',
    'ReportErrorsPolicy',
    # Planning and API
    'ReportPlan',
    'iter_tree_entries',
    'iter_tree_lines',
    'print_tree',
    'count_entries',
]
