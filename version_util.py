# ==============================================================================
# File: version_util.py
_MAJOR_VERSION = 0
_MINOR_VERSION = 2
# Version: <Automatically calculated via dynamic import of target module>
# ------------------------------------------------------------------------------
# CHANGELOG:
_CHANGELOG_ENTRIES = [
    "Initial implementation of per-module version reporting for code_bundler.",
    "Patch number derived from the length of each module's _CHANGELOG_ENTRIES list.",
    "Added --get_all command to audit the version status of every bundler module.",
    "Version lookup now reads module globals without executing the module's __main__ block.",
]
# ------------------------------------------------------------------------------
from pathlib import Path
import sys
import argparse
import importlib.util

# Every module of the project, relative to the project root.
VERSION_CHECK_FILES = [
    "version_util.py",
    "config.py",
    "config_manager.py",
    "bundle_models.py",
    "file_selector.py",
    "file_sorter.py",
    "bundle_writer.py",
    "response_file.py",
    "main.py",
    "test/test_all.py",
    "test/test_config_manager.py",
    "test/test_file_selector.py",
    "test/test_file_sorter.py",
    "test/test_bundle_writer.py",
    "test/test_response_file.py",
    "test/test_main.py",
]


def _load_module_by_path(filepath: Path):
    """Dynamically loads a module given its file path to access its variables."""
    module_name = f"_version_probe_{filepath.stem}"
    spec = importlib.util.spec_from_file_location(module_name, filepath)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load spec for {filepath}")

    module = importlib.util.module_from_spec(spec)
    # Sibling imports inside the probed module resolve against its own directory
    project_root = str(filepath.resolve().parent)
    if project_root not in sys.path:
        sys.path.append(project_root)
    spec.loader.exec_module(module)
    return module


def get_all_file_versions(project_root: Path):
    """Prints a version table for every file in VERSION_CHECK_FILES."""
    print("=" * 70)
    print("PROJECT VERSION AUDIT")
    print(f"Project Root: {project_root.resolve()}")
    print("=" * 70)
    print(f"{'FILE':<32}{'VERSION (M.m.P)':<18}{'CHANGELOG':<18}")
    print("-" * 70)

    for filename in VERSION_CHECK_FILES:
        filepath = project_root / filename
        if not filepath.exists():
            print(f"{filename:<32}{'---':<18}{'FILE NOT FOUND':<18}")
            continue

        try:
            module = _load_module_by_path(filepath)
        except Exception:
            print(f"{filename:<32}{'---':<18}{'IMPORT FAILED':<18}")
            continue

        major = getattr(module, '_MAJOR_VERSION', 'ERR')
        minor = getattr(module, '_MINOR_VERSION', 'ERR')
        if hasattr(module, '_CHANGELOG_ENTRIES'):
            patch = len(module._CHANGELOG_ENTRIES)
            status = "LIST-BASED"
        else:
            patch = "???"
            status = "MISSING"
        print(f"{filename:<32}{f'{major}.{minor}.{patch}':<18}{status:<18}")

    print("=" * 70)


def print_version_info(file_path: str, component_name: str, print_changelog: bool = True):
    """
    Prints the version information and changelog for a single file
    by dynamically loading its variables.
    """
    file_path_obj = Path(file_path).resolve()

    try:
        module = _load_module_by_path(file_path_obj)
    except Exception as e:
        print(f"Component: {component_name}")
        print(f"Project: {file_path_obj.parent.name}")
        print(f"Version: Error printing version info (Import failed): {e}")
        return

    major = getattr(module, '_MAJOR_VERSION', 'ERR')
    minor = getattr(module, '_MINOR_VERSION', 'ERR')
    changelog_list = getattr(module, '_CHANGELOG_ENTRIES', [])

    print(f"Component: {component_name}")
    print(f"Project: {file_path_obj.parent.name}")
    print(f"Version: {major}.{minor}.{len(changelog_list)}")

    if print_changelog:
        print("\nCHANGELOG:")
        for i, entry in enumerate(changelog_list, 1):
            print(f"    {i}. {entry}")


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="Version Utility for code_bundler.")
    parser.add_argument('-v', '--version', action='store_true', help='Show version information for this utility and exit.')
    parser.add_argument('--get_all', action='store_true', help='Perform a version audit across all project files.')
    args = parser.parse_args()

    project_root = Path(__file__).resolve().parent

    if args.version:
        print_version_info(__file__, "Version Utility")
        sys.exit(0)
    elif args.get_all:
        get_all_file_versions(project_root)
        sys.exit(0)
    else:
        parser.print_help()
        sys.exit(0)
