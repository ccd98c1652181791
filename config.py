# ==============================================================================
# File: config.py
_MAJOR_VERSION = 0
_MINOR_VERSION = 2
# Version: <Automatically calculated via dynamic import of target module>
# ------------------------------------------------------------------------------
# CHANGELOG:
_CHANGELOG_ENTRIES = [
    "Initial static settings for code_bundler: excluded directories and language map.",
    "Added bundle banner and marker strings.",
    "Added create-rsp prompt defaults.",
    "Tables are exposed read-only (frozenset / MappingProxyType) so they can be shared safely.",
]
# ------------------------------------------------------------------------------
from pathlib import Path
from types import MappingProxyType
import argparse
import sys

# --- Selection Settings ---
# Directory names skipped wherever they appear as a path segment below the root.
EXCLUDED_DIRECTORIES = frozenset({"bin", "obj", ".git", "node_modules"})

# Language tag -> file extension. Unknown tags map to "." + tag.
LANGUAGE_MAP = MappingProxyType({
    "csharp": ".cs",
    "python": ".py",
    "javascript": ".js",
    "java": ".java",
    "cpp": ".cpp",
    "html": ".html",
    "txt": ".txt",
    "word": ".docs",
})

ALL_LANGUAGES_TAG = "all"

# --- Output Format ---
AUTHOR_LINE_TEMPLATE = "// Author: {author}"
START_MARKER = "// Bundled Code Starts Here"
END_MARKER = "// Bundled Code Ends Here"
SOURCE_NOTE_TEMPLATE = "// File: {path}"
LINE_TERMINATOR = "\n"
DEFAULT_ENCODING = "utf-8"

# --- Sorting ---
SORT_BY_NAME = "name"
SORT_BY_EXTENSION = "type"
DEFAULT_SORT = SORT_BY_NAME

# --- Response File (create-rsp) Defaults ---
DEFAULT_RESPONSE_FILE = Path("default.rsp")
DEFAULT_LANGUAGES_ANSWER = "all"
DEFAULT_OUTPUT_ANSWER = "bundled_code.txt"
DEFAULT_AUTHOR_ANSWER = "Unknown Author"

# --- JSON Settings ---
DEFAULT_CONFIG_FILE = Path("./bundler_config.json")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Static configuration for code_bundler. Holds built-in tables and defaults.")
    parser.add_argument('-v', '--version', action='store_true', help='Show version information and exit.')
    args = parser.parse_args()

    if args.version:
        from version_util import print_version_info
        print_version_info(__file__, "Static Configuration and Global Settings")
        sys.exit(0)
    else:
        print(f"Excluded directories: {sorted(EXCLUDED_DIRECTORIES)}")
        for tag, ext in LANGUAGE_MAP.items():
            print(f"    {tag:<12} -> {ext}")
