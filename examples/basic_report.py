#!/usr/bin/env python3
"""
Basic breadthtree usage.

This example demonstrates:
- Printing a report with a few columns
- Collecting errors instead of printing them
- Working with (path, line) pairs directly
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from breadthtree import (
    CollectErrorsPolicy,
    ReportConfig,
    iter_tree_entries,
    print_tree,
)


def main(root: str) -> int:
    print(f"=== Long listing of {root} ===")
    print_tree(ReportConfig.long_listing(root, show_last_modified=True))

    print("\n=== Paths only, errors collected ===")
    policy = CollectErrorsPolicy()
    directories = 0
    for entry in iter_tree_entries(root, policy=policy, show_size=False, show_file_type=True):
        if entry.line.startswith("d "):
            directories += 1

    stats = policy.get_statistics()
    print(f"Directories: {directories}")
    print(f"Errors: {stats['total_errors']} ({stats['skipped_paths']} unreadable directories)")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else "."))
