"""Breadth-first traversal for breadthtree.

The traverser owns the directory queue and drives the walk: it visits the
root, then repeatedly takes the oldest pending directory, lists it, queues
the children the classifier approves, and visits every child.
"""

import os
from typing import Iterator, List, Optional, Set, Tuple

from .adapter import MetadataProvider
from .classifier import DirectoryClassifier
from .directory_queue import DirectoryQueue
from .formatter import EntryFormatter, VisitedEntry
from .snapshot import MetadataSnapshot
from ..config import ReportConfig
from ..error_policies import ErrorPolicy, LIST_DIRECTORY


class BreadthFirstTraverser:
    """Breadth-first (level-order) traversal of a directory tree.

    Visits all entries at depth N before any entry at depth N+1. Entries
    within one directory come out in listing order, which is whatever the
    filesystem yields and is never sorted.

    While following symlinks, directory identities (device, inode) are
    remembered for the length of one traversal so a directory reachable
    both directly and through a followed symlink is expanded once, and symlink cycles terminate.
    """

    def __init__(self,
                 config: ReportConfig,
                 provider: MetadataProvider,
                 policy: ErrorPolicy,
                 classifier: Optional[DirectoryClassifier] = None,
                 formatter: Optional[EntryFormatter] = None):
        """Initialize traverser.

        Args:
            config: Report configuration (root, symlink policy, columns)
            provider: Source of metadata and directory listings
            policy: Receives every recoverable error
            classifier: Override the default DirectoryClassifier
            formatter: Override the default EntryFormatter
        """
        self.config = config
        self.provider = provider
        self.policy = policy
        self.classifier = classifier or DirectoryClassifier(config, provider, policy)
        self.formatter = formatter or EntryFormatter(config, provider, policy)

        # Counters for the most recent traverse() call
        self.entries_visited = 0
        self.directories_expanded = 0

    def traverse(self) -> Iterator[VisitedEntry]:
        """Walk the tree from ``config.root``.

        Yields:
            VisitedEntry for every entry whose line could be rendered, in
            breadth-first order, starting with the root
        """
        self.entries_visited = 0
        self.directories_expanded = 0

        queue = DirectoryQueue()
        expanded: Set[Tuple[int, int]] = set()
        root = self.config.root

        entry = self._visit(root)
        if entry is not None:
            yield entry

        root_snapshot = self.classifier.classify(root)
        if root_snapshot is not None:
            expanded.add(root_snapshot.identity())
        queue.enqueue(root)

        while not queue.is_empty():
            directory = queue.dequeue()
            self.directories_expanded += 1

            for name in self._list(directory):
                child = os.path.join(directory, name)

                snapshot = self.classifier.classify(child)
                if snapshot is not None and self._first_expansion(snapshot, expanded):
                    queue.enqueue(child)

                # A child whose probe just failed has been reported once already
                entry = self._visit(child, self.classifier.last_error_path != child)
                if entry is not None:
                    yield entry

    def _visit(self, path: str, report_probe_error: bool = True) -> Optional[VisitedEntry]:
        self.entries_visited += 1
        return self.formatter.visit(path, report_probe_error)

    def _first_expansion(self, snapshot: MetadataSnapshot, expanded: Set[Tuple[int, int]]) -> bool:
        """Record a directory identity, returning False if already expanded.

        Identities are only tracked while following symlinks. Without
        following, every queued path is a real directory reached through its
        own parent, so distinct paths sharing an identity (bind mounts,
        providers without inode numbers) are each expanded.
        """
        if not self.config.follow_symlinks:
            return True
        identity = snapshot.identity()
        if identity in expanded:
            return False
        expanded.add(identity)
        return True

    def _list(self, directory: str) -> List[str]:
        """List a queued directory, reporting and skipping on failure."""
        try:
            names = self.provider.list_directory(directory)
        except OSError as e:
            self.policy.handle(e, LIST_DIRECTORY, directory)
            return []
        return [name for name in names if name not in (os.curdir, os.pardir)]
