"""MetadataProvider abstraction for breadthtree.

The provider is the single place where the library touches the outside
world. Both the classifier and the formatter probe through it, so they share
one code path, and tests can swap the real filesystem for a synthetic one.
"""

from abc import ABC, abstractmethod
from typing import List

from .snapshot import MetadataSnapshot


class MetadataProvider(ABC):
    """Abstract source of filesystem metadata.

    Implementations raise ``OSError`` (or a subclass) when a probe or a
    listing fails, and ``IdentityLookupError`` when an id has no name. They
    must not cache: every call reflects the current state of the tree.
    """

    @abstractmethod
    def probe(self, path: str, follow_links: bool) -> MetadataSnapshot:
        """Take a metadata snapshot of ``path``.

        Args:
            path: Path to probe
            follow_links: If True, report the target of a symbolic link;
                otherwise report the link itself

        Returns:
            MetadataSnapshot for the path

        Raises:
            OSError: If the path cannot be probed
        """
        pass

    @abstractmethod
    def list_directory(self, path: str) -> List[str]:
        """Return the names of the immediate entries of a directory.

        The ``.`` and ``..`` references are never included. Names come back
        in whatever order the underlying listing yields them; callers must
        not assume any sorting.

        Args:
            path: Directory to list

        Returns:
            List of entry names (not joined paths)

        Raises:
            OSError: If the directory cannot be opened for listing
        """
        pass

    @abstractmethod
    def lookup_owner(self, uid: int) -> str:
        """Resolve a numeric user id to a user name.

        Raises:
            IdentityLookupError: If the id is unknown
        """
        pass

    @abstractmethod
    def lookup_group(self, gid: int) -> str:
        """Resolve a numeric group id to a group name.

        Raises:
            IdentityLookupError: If the id is unknown
        """
        pass
