"""Per-entry rendering for breadthtree.

The formatter turns one path into one output line. Columns appear in a
fixed order, each only when its flag is on and each followed by a single
space; the path is always the last column::

    [type] [permissions] [links] [owner] [group] [size] [mtime] path

The line is built completely before it is returned, so a failure halfway
through never leaves a fragment on the output stream.
"""

import stat
import time
from datetime import datetime
from typing import List, NamedTuple, Optional, Tuple

from .adapter import MetadataProvider
from .snapshot import MetadataSnapshot
from ..config import ReportConfig
from ..error_policies import ErrorPolicy, VISIT, LOOKUP_OWNER, LOOKUP_GROUP
from ..exceptions import IdentityLookupError


FILE_TYPE_CHARS = {
    stat.S_IFSOCK: 's',
    stat.S_IFLNK: 'l',
    stat.S_IFREG: '-',
    stat.S_IFBLK: 'b',
    stat.S_IFCHR: 'c',
    stat.S_IFDIR: 'd',
    stat.S_IFIFO: '|',
}
UNKNOWN_FILE_TYPE = '?'

# (bit, char) for owner, group and other, in display order
PERMISSION_BITS = (
    (stat.S_IRUSR, 'r'), (stat.S_IWUSR, 'w'), (stat.S_IXUSR, 'x'),
    (stat.S_IRGRP, 'r'), (stat.S_IWGRP, 'w'), (stat.S_IXGRP, 'x'),
    (stat.S_IROTH, 'r'), (stat.S_IWOTH, 'w'), (stat.S_IXOTH, 'x'),
)

SIZE_UNITS = 'bKMG?'
SIZE_STEP = 1024
SIZE_WIDTH = 10
NAME_WIDTH = 10
DATE_FORMAT = '%b %d, %Y'
DATE_PLACEHOLDER = '??? ??, ????'


class VisitedEntry(NamedTuple):
    """One visited path and the line rendered for it."""
    path: str
    line: str


def file_type_char(mode: int) -> str:
    """Return the one-character file type for a stat mode."""
    return FILE_TYPE_CHARS.get(stat.S_IFMT(mode), UNKNOWN_FILE_TYPE)


def permission_string(mode: int) -> str:
    """Return the 9-character ``rwxrwxrwx`` string for a stat mode."""
    return ''.join(char if mode & bit else '-' for bit, char in PERMISSION_BITS)


def select_size_unit(size: int) -> Tuple[str, int]:
    """Pick the display unit for a byte count.

    The value is divided by 1024 for as long as it is still larger than
    1024, so exactly 1024 bytes stays in bytes. Anything beyond gibibytes
    gets the ``?`` unit.

    Args:
        size: Size in bytes

    Returns:
        Tuple of (unit character, number of divisions applied)
    """
    value = size
    index = 0
    while value > SIZE_STEP and index < len(SIZE_UNITS) - 1:
        value //= SIZE_STEP
        index += 1
    return SIZE_UNITS[index], index


def format_size(size: int, in_units: bool) -> str:
    """Render the size column (without the trailing separator).

    Byte counts are always 10 columns wide. In unit mode, any unit other
    than bytes is shown as a whole number right-aligned in 9 columns
    followed by the unit letter, rounded to the nearest unit.
    """
    if in_units:
        unit, divisions = select_size_unit(size)
        if unit != 'b':
            divisor = SIZE_STEP ** divisions
            scaled = (size + divisor // 2) // divisor
            return f"{scaled:>{SIZE_WIDTH - 1}}{unit}"
    return f"{size:>{SIZE_WIDTH}}"


def format_mtime(mtime: float) -> str:
    """Render a modification time as ``Jan 05, 2024`` in local time.

    Timestamps beyond what ``datetime`` can hold (some filesystems store
    years past 9999) go through ``time.localtime`` instead. A value neither
    can convert renders as ``DATE_PLACEHOLDER``, which has the same width.
    """
    try:
        return datetime.fromtimestamp(mtime).strftime(DATE_FORMAT)
    except (ValueError, OverflowError, OSError):
        pass
    try:
        return time.strftime(DATE_FORMAT, time.localtime(mtime))
    except (ValueError, OverflowError, OSError):
        return DATE_PLACEHOLDER


class EntryFormatter:
    """Visitor that probes a path and renders its output line."""

    def __init__(self, config: ReportConfig, provider: MetadataProvider, policy: ErrorPolicy):
        self.config = config
        self.provider = provider
        self.policy = policy

    def render(self, path: str, report_probe_error: bool = True) -> Optional[str]:
        """Render the line for ``path``.

        A fresh snapshot is taken on every call. If the probe or a name
        lookup fails, the error goes to the policy and None is returned so
        that nothing is printed for this entry.

        Args:
            path: Path to render
            report_probe_error: If False, a failed probe is not handed to
                the policy (the caller already reported it)

        Returns:
            The complete line without a newline, or None on failure
        """
        try:
            snapshot = self.provider.probe(path, self.config.follow_symlinks)
        except OSError as e:
            if report_probe_error:
                self.policy.handle(e, VISIT, path)
            return None

        try:
            fields = self._fields(snapshot)
        except IdentityLookupError as e:
            operation = LOOKUP_OWNER if e.kind == 'user' else LOOKUP_GROUP
            self.policy.handle(e, operation, path)
            return None

        fields.append(path)
        return ' '.join(fields)

    def visit(self, path: str, report_probe_error: bool = True) -> Optional[VisitedEntry]:
        """Render ``path`` and pair it with its line, or return None."""
        line = self.render(path, report_probe_error)
        if line is None:
            return None
        return VisitedEntry(path, line)

    def _fields(self, snapshot: MetadataSnapshot) -> List[str]:
        config = self.config
        fields = []

        if config.show_file_type:
            fields.append(file_type_char(snapshot.mode))
        if config.show_permissions:
            fields.append(permission_string(snapshot.mode))
        if config.show_link_count:
            fields.append(str(snapshot.nlink))
        if config.show_owner:
            owner = self.provider.lookup_owner(snapshot.uid)
            fields.append(f"{owner:<{NAME_WIDTH}}")
        if config.show_group:
            group = self.provider.lookup_group(snapshot.gid)
            fields.append(f"{group:<{NAME_WIDTH}}")
        if config.show_size:
            fields.append(format_size(snapshot.size, config.size_in_units))
        if config.show_last_modified:
            fields.append(format_mtime(snapshot.mtime))

        return fields
