# ==============================================================================
# File: file_selector.py
_MAJOR_VERSION = 0
_MINOR_VERSION = 2
# Version: <Automatically calculated via dynamic import of target module>
# ------------------------------------------------------------------------------
# CHANGELOG:
_CHANGELOG_ENTRIES = [
    "Initial implementation of recursive file discovery for bundling.",
    "Directory exclusion matches whole path segments below the root instead of substrings of the full path.",
    "Excluded directories are pruned in-place during os.walk so their contents are never listed.",
    "Language tags are translated through an injected language map; 'all' keeps every file.",
    "Missing or unreadable directories raise TraversalError instead of being skipped silently.",
    "Dot-files without a further suffix (e.g. .gitignore) use their whole name as the extension.",
]
# ------------------------------------------------------------------------------
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Set
import os
import re
import argparse
import sys

import config
from bundle_models import CandidateFile, TraversalError

_TAG_SEPARATORS = re.compile(r"[,\s]+")


def parse_language_tags(text: Optional[str]) -> List[str]:
    """Splits 'csharp, python' style input into unique tags, keeping input order."""
    tags: List[str] = []
    for tag in _TAG_SEPARATORS.split(text or ""):
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def get_extension(file_name: str) -> str:
    """Returns the final '.suffix' of file_name, or '' when there is none."""
    index = file_name.rfind('.')
    if index == -1 or index == len(file_name) - 1:
        return ""
    return file_name[index:]


class FileSelector:
    """
    Walks a root directory and returns the files eligible for bundling.
    The exclusion set and the language map are injected so tests can swap them.
    """
    def __init__(self, excluded_dirs: Iterable[str] = config.EXCLUDED_DIRECTORIES,
                 language_map: Mapping[str, str] = config.LANGUAGE_MAP):
        self.excluded_dirs = frozenset(excluded_dirs)
        self.language_map = {tag.lower(): ext for tag, ext in language_map.items()}
        self.files_scanned_count = 0

    def resolve_extensions(self, language_tags: Iterable[str]) -> Optional[Set[str]]:
        """
        Translates language tags to lower-case extensions.
        Returns None when the 'all' tag is present (no filtering).
        """
        extensions = set()
        for tag in language_tags:
            tag = tag.strip().lower()
            if not tag:
                continue
            if tag == config.ALL_LANGUAGES_TAG:
                return None
            if tag in self.language_map:
                extensions.add(self.language_map[tag].lower())
            elif tag.startswith('.'):
                extensions.add(tag)
            else:
                extensions.add("." + tag)
        return extensions

    def _walk(self, root_dir: Path):
        def on_error(error: OSError):
            raise TraversalError(f"Could not read directory '{error.filename}': {error.strerror}")

        for current_root, dirnames, filenames in os.walk(root_dir, onerror=on_error):
            # Prune in place so excluded trees are never entered
            dirnames[:] = [d for d in dirnames if d not in self.excluded_dirs]
            for filename in filenames:
                yield Path(current_root) / filename

    def _is_excluded(self, file_path: Path, root_dir: Path) -> bool:
        """True when a directory segment between root_dir and the file is excluded."""
        directory_parts = file_path.relative_to(root_dir).parts[:-1]
        return any(part in self.excluded_dirs for part in directory_parts)

    def select(self, root_dir, language_tags: Iterable[str]) -> List[CandidateFile]:
        """Returns the unordered list of files under root_dir matching language_tags."""
        root_dir = Path(root_dir).resolve()
        if not root_dir.exists():
            raise TraversalError(f"Could not find a part of the path '{root_dir}'.")
        if not root_dir.is_dir():
            raise TraversalError(f"The root path '{root_dir}' is not a directory.")

        extensions = self.resolve_extensions(language_tags)
        self.files_scanned_count = 0
        selected: List[CandidateFile] = []

        for file_path in self._walk(root_dir):
            self.files_scanned_count += 1
            if self._is_excluded(file_path, root_dir):
                continue

            extension = get_extension(file_path.name)
            if extensions is None or extension.lower() in extensions:
                selected.append(CandidateFile(absolute_path=file_path, extension=extension))

        return selected


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="File Selector for code_bundler: lists the files a bundle would include.")
    parser.add_argument('-v', '--version', action='store_true', help='Show version information and exit.')
    parser.add_argument('--root', type=str, default='.', help='Directory to scan (default: current directory).')
    parser.add_argument('--language', type=str, default='all', help="Comma-separated language tags or 'all'.")
    args = parser.parse_args()

    if args.version:
        from version_util import print_version_info
        print_version_info(__file__, "File Selector")
        sys.exit(0)

    try:
        selector = FileSelector()
        for candidate in selector.select(args.root, parse_language_tags(args.language)):
            print(candidate.absolute_path)
        print(f"\nScan complete. Total files scanned: {selector.files_scanned_count}")
    except TraversalError as e:
        print(f"FATAL ERROR during scan: {e.message}")
        sys.exit(1)
