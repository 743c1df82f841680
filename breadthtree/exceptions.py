"""Exception hierarchy for breadthtree.

Only failures that happen before the first line is written are raised to
the caller. Everything that goes wrong during the walk itself is routed
through an ErrorPolicy instead (see error_policies.py).
"""


class BreadthTreeError(Exception):
    """Base class for errors raised by breadthtree."""
    pass


class ConfigurationError(BreadthTreeError):
    """Raised when a ReportConfig fails validation."""
    pass


class InvalidRootError(BreadthTreeError):
    """Raised when the root path cannot be probed at all."""

    def __init__(self, root: str, reason: str):
        self.root = root
        self.reason = reason
        super().__init__(f"'{root}': {reason}")


class RootNotDirectoryError(BreadthTreeError):
    """Raised when the root path is not a directory under the symlink policy."""

    def __init__(self, root: str):
        self.root = root
        super().__init__(f"'{root}' is not a dir")


class QueueEmptyError(BreadthTreeError):
    """Raised by DirectoryQueue.dequeue() when no paths remain."""
    pass


class IdentityLookupError(BreadthTreeError, LookupError):
    """Raised when a numeric user or group id has no name on this system."""

    def __init__(self, kind: str, ident: int):
        self.kind = kind
        self.ident = ident
        super().__init__(f"no {kind} name for id {ident}")
