"""High-level API for breadthtree.

Simple functional interfaces over ReportPlan for the common cases: iterate
over rendered lines, print a report, or count what would be printed.
"""

import os
import sys
from typing import Iterator, Optional, TextIO, Union

from .config import ReportConfig
from .core.adapter import MetadataProvider
from .core.formatter import VisitedEntry
from .error_policies import ErrorPolicy
from .planning import ReportPlan


def _build_config(root: Union[str, os.PathLike, ReportConfig], **options) -> ReportConfig:
    if isinstance(root, ReportConfig):
        if options:
            raise TypeError("options cannot be combined with a ReportConfig")
        return root
    return ReportConfig(root=root, **options)


def iter_tree_entries(
    root: Union[str, os.PathLike, ReportConfig],
    provider: Optional[MetadataProvider] = None,
    policy: Optional[ErrorPolicy] = None,
    **options
) -> Iterator[VisitedEntry]:
    """Traverse breadth-first and yield (path, line) pairs.

    The root is validated before the first entry is produced, so a bad
    root raises as soon as iteration starts.

    Args:
        root: Root directory, or a complete ReportConfig
        provider: Metadata source (defaults to the real filesystem)
        policy: Error policy (defaults to printing to stderr)
        **options: ReportConfig fields such as ``show_permissions=True``

    Yields:
        VisitedEntry values in breadth-first order

    Example:
        >>> for entry in iter_tree_entries("/etc", show_file_type=True):
        ...     print(entry.line)
    """
    config = _build_config(root, **options)
    plan = ReportPlan(config, provider, policy)
    yield from plan.execute()


def iter_tree_lines(
    root: Union[str, os.PathLike, ReportConfig],
    provider: Optional[MetadataProvider] = None,
    policy: Optional[ErrorPolicy] = None,
    **options
) -> Iterator[str]:
    """Like iter_tree_entries but yields only the rendered lines."""
    for entry in iter_tree_entries(root, provider, policy, **options):
        yield entry.line


def print_tree(
    root: Union[str, os.PathLike, ReportConfig],
    out: Optional[TextIO] = None,
    provider: Optional[MetadataProvider] = None,
    policy: Optional[ErrorPolicy] = None,
    **options
) -> int:
    """Write one newline-terminated line per visited entry.

    Args:
        root: Root directory, or a complete ReportConfig
        out: Text stream to write to (defaults to sys.stdout)
        provider: Metadata source
        policy: Error policy
        **options: ReportConfig fields

    Returns:
        Number of lines written

    Raises:
        BreadthTreeError: If the configuration or root is invalid; nothing
            has been written in that case
    """
    config = _build_config(root, **options)
    plan = ReportPlan(config, provider, policy)
    stream = out if out is not None else sys.stdout

    written = 0
    for entry in plan.execute():
        stream.write(entry.line + '\n')
        written += 1
    return written


def count_entries(
    root: Union[str, os.PathLike, ReportConfig],
    provider: Optional[MetadataProvider] = None,
    policy: Optional[ErrorPolicy] = None,
    **options
) -> int:
    """Count the lines a report would print."""
    return sum(1 for _ in iter_tree_entries(root, provider, policy, **options))
