"""Point-in-time metadata for one filesystem entry."""

import os
import stat
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class MetadataSnapshot:
    """Result of a single stat-family call.

    Snapshots are never cached by the library. Every probe produces a new
    one, so a snapshot reflects the filesystem at the moment it was taken.
    """

    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    mtime: float
    dev: int = 0
    ino: int = 0

    @classmethod
    def from_stat(cls, st: os.stat_result) -> 'MetadataSnapshot':
        """Build a snapshot from an ``os.stat_result``."""
        return cls(
            mode=st.st_mode,
            nlink=st.st_nlink,
            uid=st.st_uid,
            gid=st.st_gid,
            size=st.st_size,
            mtime=st.st_mtime,
            dev=st.st_dev,
            ino=st.st_ino,
        )

    @property
    def file_type(self) -> int:
        """The ``S_IFMT`` portion of the mode."""
        return stat.S_IFMT(self.mode)

    @property
    def permissions(self) -> int:
        """The permission bits of the mode."""
        return stat.S_IMODE(self.mode)

    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    def is_symlink(self) -> bool:
        return stat.S_ISLNK(self.mode)

    def identity(self) -> Tuple[int, int]:
        """Return ``(dev, ino)``, which names the underlying object."""
        return (self.dev, self.ino)
