"""Execution planning for breadthtree.

The ReportPlan checks everything that can be checked before the first line
is written: the configuration itself, and that the root exists and is a
directory under the configured symlink policy. Only these checks are fatal.
Once the plan exists, the walk reports problems through its ErrorPolicy and
carries on.
"""

from typing import Iterator, Optional

from .config import ReportConfig
from .core.adapter import MetadataProvider
from .core.classifier import DirectoryClassifier
from .core.formatter import EntryFormatter, VisitedEntry
from .core.traverser import BreadthFirstTraverser
from .adapters.filesystem import FileSystemMetadataProvider
from .error_policies import ErrorPolicy, ReportErrorsPolicy, describe_error
from .exceptions import ConfigurationError, InvalidRootError, RootNotDirectoryError


class ReportPlan:
    """Validated plan for one breadth-first report.

    This implements the "Execution Plan" pattern: validate compatibility
    before any filesystem traversal begins, then assemble the components.
    """

    def __init__(self,
                 config: ReportConfig,
                 provider: Optional[MetadataProvider] = None,
                 policy: Optional[ErrorPolicy] = None):
        """Create and validate a report plan.

        Args:
            config: Report configuration
            provider: Metadata source (defaults to the real filesystem)
            policy: Error policy (defaults to ReportErrorsPolicy on stderr)

        Raises:
            ConfigurationError: If the configuration is invalid
            InvalidRootError: If the root cannot be probed
            RootNotDirectoryError: If the root is not an expandable directory
        """
        self.config = config
        self.provider = provider or FileSystemMetadataProvider()
        self.policy = policy or ReportErrorsPolicy()

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.classifier = DirectoryClassifier(config, self.provider, self.policy)
        self.formatter = EntryFormatter(config, self.provider, self.policy)
        self._validate_root()

        self.traverser = BreadthFirstTraverser(
            config, self.provider, self.policy,
            classifier=self.classifier,
            formatter=self.formatter,
        )

    def _validate_root(self) -> None:
        root = self.config.root
        try:
            snapshot = self.provider.probe(root, self.config.follow_symlinks)
        except OSError as e:
            raise InvalidRootError(root, describe_error(e)) from e

        if not self.classifier.approves(snapshot):
            raise RootNotDirectoryError(root)

    def execute(self) -> Iterator[VisitedEntry]:
        """Run the traversal.

        Yields:
            VisitedEntry values in breadth-first order
        """
        yield from self.traverser.traverse()

    @property
    def entries_visited(self) -> int:
        return self.traverser.entries_visited

    @property
    def directories_expanded(self) -> int:
        return self.traverser.directories_expanded

    def __repr__(self) -> str:
        return f"ReportPlan(root={self.config.root!r}, provider={self.provider!r})"
