"""Filesystem metadata provider for breadthtree.

Backs the MetadataProvider interface with the host's stat/lstat, directory
listing and passwd/group databases.
"""

import grp
import os
import pwd
from typing import List

from ..core.adapter import MetadataProvider
from ..core.snapshot import MetadataSnapshot
from ..exceptions import IdentityLookupError


class FileSystemMetadataProvider(MetadataProvider):
    """Provider that reads the real filesystem.

    Nothing is cached. Two probes of the same path perform two system calls.
    """

    def probe(self, path: str, follow_links: bool) -> MetadataSnapshot:
        """Stat ``path``, following a final symlink only when asked."""
        if follow_links:
            st = os.stat(path)
        else:
            st = os.lstat(path)
        return MetadataSnapshot.from_stat(st)

    def list_directory(self, path: str) -> List[str]:
        """List entry names in the order the directory yields them."""
        with os.scandir(path) as entries:
            return [entry.name for entry in entries]

    def lookup_owner(self, uid: int) -> str:
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError:
            raise IdentityLookupError('user', uid) from None

    def lookup_group(self, gid: int) -> str:
        try:
            return grp.getgrgid(gid).gr_name
        except KeyError:
            raise IdentityLookupError('group', gid) from None

    def __repr__(self) -> str:
        return "FileSystemMetadataProvider()"
