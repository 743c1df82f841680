"""
Error handling policies for breadthtree.

Failures that happen while the walk is running (a directory that cannot be
listed, an entry that vanished before it could be probed, a uid with no
user name) never stop the traversal on their own. Each one is handed to an
ErrorPolicy, which decides how it is surfaced.
"""

import sys
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, TextIO


# Operation names passed to ErrorPolicy.handle()
CLASSIFY = 'classify'
LIST_DIRECTORY = 'list_directory'
VISIT = 'visit'
LOOKUP_OWNER = 'lookup_owner'
LOOKUP_GROUP = 'lookup_group'


def describe_error(error: Exception) -> str:
    """Return the human-readable reason for an error.

    For ``OSError`` this is the bare ``strerror`` ("Permission denied")
    rather than the ``[Errno 13] ...`` repr, since the path is printed
    separately.
    """
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors that
    occur during traversal.
    """

    @abstractmethod
    def handle(self, error: Exception, operation: str, path: Optional[str]) -> None:
        """
        Handle an error that occurred while processing ``path``.

        Args:
            error: The exception that was raised
            operation: What was being done (e.g. 'list_directory', 'visit')
            path: The path being processed when the error occurred

        Raises:
            Re-raises the error if the policy wants traversal to stop.
        """
        pass

    @staticmethod
    def _record(error: Exception, operation: str, path: Optional[str]) -> Dict[str, Any]:
        return {
            'path': path,
            'operation': operation,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': describe_error(error),
        }


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping traversal.

    Useful when a partial report is worse than no report.
    """

    def handle(self, error: Exception, operation: str, path: Optional[str]) -> None:
        """Re-raise the error immediately."""
        raise error


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that collects all errors without printing, for batch processing.

    Errors are available afterwards in ``errors``; paths whose listing was
    refused are also kept in ``skipped_paths``.
    """

    def __init__(self):
        """Initialize the policy."""
        self.errors: List[Dict[str, Any]] = []
        self.skipped_paths: List[str] = []

    def handle(self, error: Exception, operation: str, path: Optional[str]) -> None:
        """Silently collect the error."""
        self.errors.append(self._record(error, operation, path))
        if operation == LIST_DIRECTORY and path is not None:
            self.skipped_paths.append(path)

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'permission_errors': sum(1 for e in self.errors if e['error_type'] == 'PermissionError'),
            'lookup_errors': sum(1 for e in self.errors
                                 if e['operation'] in (LOOKUP_OWNER, LOOKUP_GROUP)),
            'skipped_paths': len(self.skipped_paths),
            'errors': self.errors,
        }


class ReportErrorsPolicy(CollectErrorsPolicy):
    """
    Policy that prints a diagnostic for each error and continues.

    This is the default. Each failure becomes one line on ``stream``
    (stderr unless told otherwise), in the form::

        <prefix>: Error: <path>: <reason>

    and is also recorded exactly as CollectErrorsPolicy would.
    """

    DEFAULT_PREFIX = 'breadthtree'

    def __init__(self, stream: Optional[TextIO] = None, prefix: Optional[str] = None):
        """
        Initialize the policy.

        Args:
            stream: Where diagnostics go (defaults to sys.stderr at call time)
            prefix: Leading program name for every diagnostic line
        """
        super().__init__()
        self._stream = stream
        self.prefix = prefix or self.DEFAULT_PREFIX

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def handle(self, error: Exception, operation: str, path: Optional[str]) -> None:
        """Print the error and record it."""
        super().handle(error, operation, path)
        reason = describe_error(error)
        if path is None:
            message = f"{self.prefix}: Error: {reason}"
        else:
            message = f"{self.prefix}: Error: {path}: {reason}"
        print(message, file=self.stream)
