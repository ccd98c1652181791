# ==============================================================================
# File: bundle_models.py
_MAJOR_VERSION = 0
_MINOR_VERSION = 2
# Version: <Automatically calculated via dynamic import of target module>
# ------------------------------------------------------------------------------
# CHANGELOG:
_CHANGELOG_ENTRIES = [
    "Initial creation of BundleConfig and CandidateFile records.",
    "Added BundleError hierarchy (configuration, traversal, I/O, unexpected).",
    "Added BundleResult so the pipeline reports failures as values instead of raising.",
    "BundleConfig.create validates required options and de-duplicates language tags.",
]
# ------------------------------------------------------------------------------
from pathlib import Path
from typing import NamedTuple, Optional, Tuple, Iterable
import argparse
import sys

import config
from file_sorter import normalize_sort_mode


# --- Error Taxonomy ---

class BundleError(Exception):
    """Base class for every failure the bundler reports to the user."""
    kind = "BundleError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(BundleError):
    """A required option is missing or a settings file is unusable."""
    kind = "ConfigurationError"


class TraversalError(BundleError):
    """The root directory is missing or cannot be listed."""
    kind = "TraversalError"


class BundleIOError(BundleError):
    """A source file could not be read or the destination could not be written."""
    kind = "IOError"


class UnexpectedError(BundleError):
    """Any other failure, wrapped so it can be reported like the rest."""
    kind = "UnexpectedError"


# --- Records ---

class CandidateFile(NamedTuple):
    absolute_path: Path
    extension: str


class BundleConfig(NamedTuple):
    """Fully resolved options for one bundle run."""
    output_path: Path
    language_tags: Tuple[str, ...]
    include_source_note: bool = False
    sort_mode: str = config.DEFAULT_SORT
    remove_empty_lines: bool = False
    author: str = ""

    @classmethod
    def create(cls, output_path, language_tags: Iterable[str], include_source_note: bool = False,
               sort_mode: Optional[str] = None, remove_empty_lines: bool = False,
               author: Optional[str] = None) -> "BundleConfig":
        """Validates raw option values and builds a BundleConfig."""
        if output_path is None or not str(output_path).strip():
            raise ConfigurationError("Option '--output' is required.")

        tags = []
        for tag in language_tags or ():
            tag = tag.strip()
            if tag and tag not in tags:
                tags.append(tag)
        if not tags:
            raise ConfigurationError("Option '--language' is required.")

        return cls(
            output_path=Path(output_path),
            language_tags=tuple(tags),
            include_source_note=bool(include_source_note),
            sort_mode=normalize_sort_mode(sort_mode),
            remove_empty_lines=bool(remove_empty_lines),
            author=author or "",
        )


class BundleResult(NamedTuple):
    success: bool
    output_path: Optional[Path] = None
    files_bundled: int = 0
    error: Optional[BundleError] = None


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Data records and error types for code_bundler.")
    parser.add_argument('-v', '--version', action='store_true', help='Show version information and exit.')
    args = parser.parse_args()

    if args.version:
        from version_util import print_version_info
        print_version_info(__file__, "Bundle Models")
        sys.exit(0)
    else:
        parser.print_help()
