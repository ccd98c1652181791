# ==============================================================================
# File: main.py
_MAJOR_VERSION = 0
_MINOR_VERSION = 2
# Version: <Automatically calculated via dynamic import of target module>
# ------------------------------------------------------------------------------
# CHANGELOG:
_CHANGELOG_ENTRIES = [
    "Initial implementation of the bundle and create-rsp commands.",
    "Integrated all pipeline components (selector, sorter, writer).",
    "run_bundle returns a BundleResult; main() is the only place errors are printed.",
    "Boolean flags accept an optional True/False value so response files replay cleanly.",
    "Added @file response file support using shell-style splitting.",
    "Output file is excluded from its own selection.",
    "Added --root, --config, --verbose and --no-progress options.",
]
# ------------------------------------------------------------------------------
from pathlib import Path
from typing import List, Optional
import argparse
import shlex
import sys

import config
from bundle_models import BundleConfig, BundleError, BundleResult, ConfigurationError, UnexpectedError
from config_manager import ConfigManager
from file_selector import FileSelector, parse_language_tags
from file_sorter import sort_files
from bundle_writer import BundleWriter
from response_file import create_response_file


class ResponseFileArgumentParser(argparse.ArgumentParser):
    """Reads '@file' arguments with shell quoting, so one line can hold a whole command."""

    def convert_arg_line_to_args(self, arg_line: str) -> List[str]:
        return shlex.split(arg_line)


def str_to_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ('true', 'yes', '1'):
        return True
    if lowered in ('false', 'no', '0'):
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got '{value}'")


def build_parser() -> argparse.ArgumentParser:
    parser = ResponseFileArgumentParser(
        prog="code-bundler",
        description="CLI tool for packaging code files into a single bundle.",
        fromfile_prefix_chars='@',
    )
    parser.add_argument('-v', '--version', action='store_true', help='Show version information and exit.')
    subparsers = parser.add_subparsers(dest='command')

    bundle = subparsers.add_parser('bundle', help='Bundle code files to a single file.')
    bundle.add_argument('--output', type=str, required=True, help='File path and name of the bundle.')
    bundle.add_argument('--language', type=str, required=True, help="Programming languages (comma-separated or 'all').")
    bundle.add_argument('--note', type=str_to_bool, nargs='?', const=True, default=False,
                        help='Include a source note before each file.')
    bundle.add_argument('--sort', type=str, default=config.DEFAULT_SORT, help="Sort order: 'name' or 'type'.")
    bundle.add_argument('--remove-empty-lines', type=str_to_bool, nargs='?', const=True, default=False,
                        help='Remove empty lines from code.')
    bundle.add_argument('--author', type=str, default="", help='Name of the file author.')
    bundle.add_argument('--root', type=str, default='.', help='Directory to bundle (default: current directory).')
    bundle.add_argument('--config', type=str, help='JSON settings file (default: ./bundler_config.json if present).')
    bundle.add_argument('--verbose', action='store_true', help='List the filtered files before bundling.')
    bundle.add_argument('--no-progress', action='store_true', help='Disable the progress bar.')

    create_rsp = subparsers.add_parser('create-rsp', help='Create a response file that replays a bundle command.')
    create_rsp.add_argument('file', nargs='?', help='Response file name (default: default.rsp).')

    return parser


def run_bundle(root_dir, bundle_config: BundleConfig, settings: Optional[ConfigManager] = None,
               verbose: bool = False, show_progress: Optional[bool] = None) -> BundleResult:
    """
    Orchestrates select -> sort -> write for one bundle.
    Never raises: every failure comes back as BundleResult(success=False, error=...).
    """
    try:
        if settings is None:
            settings = ConfigManager()
        if show_progress is None:
            show_progress = settings.SHOW_PROGRESS

        root_dir = Path(root_dir).resolve()
        print(f"Bundling project from: {root_dir}")

        selector = FileSelector(settings.EXCLUDED_DIRECTORIES, settings.LANGUAGE_MAP)
        files = selector.select(root_dir, bundle_config.language_tags)

        output_path = Path(bundle_config.output_path).resolve()
        files = [f for f in files if f.absolute_path.resolve() != output_path]

        if verbose:
            print("Filtered files for bundling:")
            for candidate in files:
                print(candidate.absolute_path)

        files = sort_files(files, bundle_config.sort_mode, settings.CASE_SENSITIVE_SORT)

        writer = BundleWriter(root_dir, encoding=settings.ENCODING, show_progress=show_progress)
        written = writer.write(files, bundle_config)
        return BundleResult(success=True, output_path=written, files_bundled=writer.files_written_count)
    except BundleError as e:
        return BundleResult(success=False, error=e)
    except Exception as e:
        return BundleResult(success=False, error=UnexpectedError(str(e)))


def report_result(result: BundleResult) -> int:
    """Prints the outcome of a bundle run and returns the process exit status."""
    if result.success:
        print("bundle command executed successfully!")
        print(f"The output file is created in: {result.output_path}")
        return 0
    print(f"An error occurred: {result.error.message}")
    return 1


def handle_bundle(args) -> int:
    try:
        settings = ConfigManager(Path(args.config) if args.config else None)
        bundle_config = BundleConfig.create(
            output_path=args.output,
            language_tags=parse_language_tags(args.language),
            include_source_note=args.note,
            sort_mode=args.sort,
            remove_empty_lines=args.remove_empty_lines,
            author=args.author,
        )
        show_progress = settings.SHOW_PROGRESS and not args.no_progress
    except ConfigurationError as e:
        print(f"An error occurred: {e.message}")
        return 2

    result = run_bundle(args.root, bundle_config, settings, verbose=args.verbose, show_progress=show_progress)
    return report_result(result)


def handle_create_rsp(args) -> int:
    try:
        create_response_file(Path(args.file) if args.file else None)
    except BundleError as e:
        print(f"An error occurred: {e.message}")
        return 1
    except Exception as e:
        print(f"An error occurred: {e}")
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from version_util import print_version_info
        print_version_info(__file__, "Code Bundler CLI")
        return 0

    if args.command == 'bundle':
        return handle_bundle(args)
    if args.command == 'create-rsp':
        return handle_create_rsp(args)

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
