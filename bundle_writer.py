# ==============================================================================
# File: bundle_writer.py
_MAJOR_VERSION = 0
_MINOR_VERSION = 2
# Version: <Automatically calculated via dynamic import of target module>
# ------------------------------------------------------------------------------
# CHANGELOG:
_CHANGELOG_ENTRIES = [
    "Initial implementation of the bundle writer (author banner, start/end markers, per-file sections).",
    "Added optional '// File:' notes relative to the traversal root.",
    "Added removal of empty and whitespace-only lines.",
    "Source files are split on \\r\\n, \\r and \\n only; a trailing terminator does not add an empty line.",
    "Lines are always written with '\\n' so bundles are identical across platforms.",
    "Wrapped the per-file loop in a tqdm progress bar (stderr).",
    "OS errors raise BundleIOError; the output handle is closed on every exit path.",
    "Undecodable bytes are replaced with U+FFFD so binary or Latin-1 files no longer abort an 'all' bundle.",
]
# ------------------------------------------------------------------------------
from pathlib import Path
from typing import List, Sequence
import codecs
import os
import re
import argparse
import sys

from tqdm import tqdm

import config
from bundle_models import BundleConfig, BundleIOError

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def read_source_lines(file_path: Path, encoding: str = config.DEFAULT_ENCODING) -> List[str]:
    """Reads a text file into lines without their terminators."""
    # utf-8-sig drops a leading byte order mark
    if codecs.lookup(encoding).name == 'utf-8':
        encoding = 'utf-8-sig'
    with open(file_path, 'r', encoding=encoding, errors='replace', newline='') as infile:
        text = infile.read()

    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def remove_blank_lines(lines: Sequence[str]) -> List[str]:
    """Drops lines that are empty or contain only whitespace."""
    return [line for line in lines if line.strip()]


class BundleWriter:
    """Streams an ordered list of CandidateFile records into a single bundle file."""

    def __init__(self, root_dir, encoding: str = config.DEFAULT_ENCODING, show_progress: bool = True):
        self.root_dir = Path(root_dir).resolve()
        self.encoding = encoding
        self.show_progress = show_progress
        self.files_written_count = 0

    def source_note(self, file_path: Path) -> str:
        note_path = os.path.relpath(file_path, self.root_dir)
        return config.SOURCE_NOTE_TEMPLATE.format(path=note_path)

    def write(self, files: Sequence, bundle_config: BundleConfig) -> Path:
        """
        Writes the bundle described by bundle_config and returns its resolved path.
        Raises BundleIOError on any read or write failure; the partially written
        output is left in place.
        """
        output_path = Path(bundle_config.output_path).resolve()
        newline = config.LINE_TERMINATOR
        self.files_written_count = 0

        try:
            with open(output_path, 'w', encoding=self.encoding, errors='replace', newline='') as outfile:
                outfile.write(config.AUTHOR_LINE_TEMPLATE.format(author=bundle_config.author) + newline)
                outfile.write(config.START_MARKER + newline)
                outfile.write(newline)

                with tqdm(files, desc="Bundling", unit="file", file=sys.stderr,
                          disable=not self.show_progress) as progress:
                    for candidate in progress:
                        if bundle_config.include_source_note:
                            outfile.write(self.source_note(candidate.absolute_path) + newline)

                        lines = read_source_lines(candidate.absolute_path, self.encoding)
                        if bundle_config.remove_empty_lines:
                            lines = remove_blank_lines(lines)

                        for line in lines:
                            outfile.write(line + newline)
                        outfile.write(newline)
                        self.files_written_count += 1

                outfile.write(config.END_MARKER + newline)
        except OSError as e:
            target = e.filename or output_path
            raise BundleIOError(f"{e.strerror or e} : '{target}'") from e

        return output_path


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Bundle Writer for code_bundler.")
    parser.add_argument('-v', '--version', action='store_true', help='Show version information and exit.')
    args = parser.parse_args()

    if args.version:
        from version_util import print_version_info
        print_version_info(__file__, "Bundle Writer")
        sys.exit(0)
    else:
        parser.print_help()
