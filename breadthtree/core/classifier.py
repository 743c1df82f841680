"""Decides which entries are scheduled for expansion."""

from typing import Optional

from .adapter import MetadataProvider
from .snapshot import MetadataSnapshot
from ..config import ReportConfig
from ..error_policies import ErrorPolicy, CLASSIFY


class DirectoryClassifier:
    """Answers "should this path be queued for further traversal?".

    The probe follows symlinks exactly when the configuration does. A path
    that cannot be probed is reported and treated as not expandable.
    """

    def __init__(self, config: ReportConfig, provider: MetadataProvider, policy: ErrorPolicy):
        self.config = config
        self.provider = provider
        self.policy = policy
        # Path whose probe failed in the most recent classify() call
        self.last_error_path: Optional[str] = None

    def approves(self, snapshot: MetadataSnapshot) -> bool:
        """Apply the expansion rule to an existing snapshot.

        Args:
            snapshot: Result of probing with ``follow_links`` set to
                ``config.follow_symlinks``

        Returns:
            True if the entry should be queued
        """
        if snapshot.is_symlink():
            # Only reachable when the probe did not resolve the link
            return self.config.follow_symlinks
        return snapshot.is_dir()

    def classify(self, path: str) -> Optional[MetadataSnapshot]:
        """Probe ``path`` and return its snapshot if it is expandable.

        Returns:
            The snapshot when the path should be queued, otherwise None
        """
        self.last_error_path = None
        try:
            snapshot = self.provider.probe(path, self.config.follow_symlinks)
        except OSError as e:
            self.last_error_path = path
            self.policy.handle(e, CLASSIFY, path)
            return None

        if not self.approves(snapshot):
            return None
        return snapshot

    def is_expandable(self, path: str) -> bool:
        """Check if ``path`` should be scheduled for expansion."""
        return self.classify(path) is not None
