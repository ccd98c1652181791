# ==============================================================================
# File: file_sorter.py
_MAJOR_VERSION = 0
_MINOR_VERSION = 2
# Version: <Automatically calculated via dynamic import of target module>
# ------------------------------------------------------------------------------
# CHANGELOG:
_CHANGELOG_ENTRIES = [
    "Initial implementation of name and type ordering for bundle candidates.",
    "Unknown sort modes fall back to name ordering instead of failing.",
    "Type ordering relies on sorted() stability so files sharing an extension keep their input order.",
    "Added case_sensitive switch for the name comparer.",
    "case_sensitive now applies to type ordering too, so '.CS' sorts with '.cs' when disabled.",
]
# ------------------------------------------------------------------------------
from typing import List, Optional, Sequence
import argparse
import sys

import config


def normalize_sort_mode(mode: Optional[str]) -> str:
    """Maps user input onto SORT_BY_NAME or SORT_BY_EXTENSION."""
    if mode and mode.strip().lower() == config.SORT_BY_EXTENSION:
        return config.SORT_BY_EXTENSION
    return config.SORT_BY_NAME


def sort_files(files: Sequence, mode: Optional[str], case_sensitive: bool = True) -> List:
    """
    Orders CandidateFile records for bundling.

    'type' sorts on the extension string and is stable, so files with the same
    extension stay in the order they were given. Anything else sorts on the
    full path. With case_sensitive=False both keys are compared case-folded.
    """
    if normalize_sort_mode(mode) == config.SORT_BY_EXTENSION:
        if case_sensitive:
            return sorted(files, key=lambda f: f.extension)
        return sorted(files, key=lambda f: f.extension.casefold())

    if case_sensitive:
        return sorted(files, key=lambda f: str(f.absolute_path))
    return sorted(files, key=lambda f: str(f.absolute_path).casefold())


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Sort stage for code_bundler.")
    parser.add_argument('-v', '--version', action='store_true', help='Show version information and exit.')
    args = parser.parse_args()

    if args.version:
        from version_util import print_version_info
        print_version_info(__file__, "File Sorter")
        sys.exit(0)
    else:
        parser.print_help()
