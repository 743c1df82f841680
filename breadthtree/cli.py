"""Command-line front end for breadthtree.

Usage:
    bt [-h] [-L -d -g -i -p -s -t -u | -l] [dirname]

With no dirname the current working directory is reported.
"""

import argparse
import os
import sys
from typing import List, Optional

from .api import print_tree
from .config import ReportConfig
from .error_policies import ReportErrorsPolicy
from .exceptions import BreadthTreeError


EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Build the argument parser for the ``bt`` command."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Breadth-first listing of a directory tree.",
        epilog="Shortcut: -l enables -t, -p, -i, -u, -g and -s.",
    )
    parser.add_argument('dirname', nargs='?', default=None,
                        help="Directory to traverse (default: current directory)")
    parser.add_argument('-L', dest='follow_symlinks', action='store_true',
                        help="Follow symbolic links (default no)")
    parser.add_argument('-d', dest='show_last_modified', action='store_true',
                        help="Show the time of last modification (default no)")

    fmt = parser.add_argument_group("print format options")
    fmt.add_argument('-t', dest='show_file_type', action='store_true',
                     help="Information on file type (default no)")
    fmt.add_argument('-p', dest='show_permissions', action='store_true',
                     help="Permission bits (default no)")
    fmt.add_argument('-i', dest='show_link_count', action='store_true',
                     help="The number of links to file in inode table (default no)")
    fmt.add_argument('-u', dest='show_owner', action='store_true',
                     help="The user name associated with the file (default no)")
    fmt.add_argument('-g', dest='show_group', action='store_true',
                     help="The group name associated with the file (default no)")
    fmt.add_argument('-s', dest='size_in_units', action='store_true',
                     help="The size of file in K/M/G units (default bytes)")
    fmt.add_argument('-l', dest='long_listing', action='store_true',
                     help="Enables options -t, -p, -i, -u, -g, -s")
    return parser


def config_from_args(args: argparse.Namespace) -> ReportConfig:
    """Map parsed arguments onto a ReportConfig."""
    root = args.dirname if args.dirname is not None else os.getcwd()
    flags = {
        'follow_symlinks': args.follow_symlinks,
        'show_last_modified': args.show_last_modified,
        'show_file_type': args.show_file_type,
        'show_permissions': args.show_permissions,
        'show_link_count': args.show_link_count,
        'show_owner': args.show_owner,
        'show_group': args.show_group,
        'size_in_units': args.size_in_units,
    }
    if args.long_listing:
        # -l only ever turns columns on
        enabled = {name: True for name, value in flags.items() if value}
        return ReportConfig.long_listing(root, **enabled)
    return ReportConfig(root=root, **flags)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``bt`` console script.

    Returns:
        Process exit code: 0 on completion (even if some entries produced
        diagnostics), 1 if the root is unusable
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    prefix = parser.prog

    try:
        config = config_from_args(args)
    except OSError as e:
        print(f"{prefix}: Error: {e.strerror or e}", file=sys.stderr)
        return EXIT_FAILURE

    policy = ReportErrorsPolicy(prefix=prefix)
    try:
        print_tree(config, policy=policy)
    except BreadthTreeError as e:
        print(f"{prefix}: Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
