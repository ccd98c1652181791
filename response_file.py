# ==============================================================================
# File: response_file.py
_MAJOR_VERSION = 0
_MINOR_VERSION = 2
# Version: <Automatically calculated via dynamic import of target module>
# ------------------------------------------------------------------------------
# CHANGELOG:
_CHANGELOG_ENTRIES = [
    "Initial implementation of the create-rsp interactive prompts.",
    "Split prompt answers -> BundleConfig and BundleConfig -> replay string into pure functions.",
    "Empty answers and end-of-input fall back to the documented defaults.",
    "Replay string quotes values with shell rules so the CLI can read it back with shlex.",
    "Values starting with '-' are written as --option=value so argparse does not read them as options.",
]
# ------------------------------------------------------------------------------
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional
import re
import argparse
import sys

import config
from bundle_models import BundleConfig, BundleIOError
from file_selector import parse_language_tags

# (answer key, question) in the order they are asked
PROMPTS = [
    ("languages", "Type the languages (e.g., csharp, javascript, html or 'all'):"),
    ("output", "Enter the name of the output file:"),
    ("note", "Do you want to add comments with the file name? (true/false):"),
    ("sort", "Sort type (name or type):"),
    ("remove_empty_lines", "Do you want to delete empty lines? (true/false):"),
    ("author", "The name of the creator:"),
]

_NEEDS_QUOTING = re.compile(r'[\s"\'\\]')


def parse_bool_answer(answer: Optional[str]) -> bool:
    """'true'/'false' in any case; anything else is False."""
    return (answer or "").strip().lower() == "true"


def _answer(answers: Mapping[str, Optional[str]], key: str, default: str) -> str:
    value = answers.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def prompts_to_config(answers: Mapping[str, Optional[str]]) -> BundleConfig:
    """Builds a BundleConfig from raw prompt answers (None means end-of-input)."""
    return BundleConfig.create(
        output_path=_answer(answers, "output", config.DEFAULT_OUTPUT_ANSWER),
        language_tags=parse_language_tags(_answer(answers, "languages", config.DEFAULT_LANGUAGES_ANSWER)),
        include_source_note=parse_bool_answer(answers.get("note")),
        sort_mode=_answer(answers, "sort", config.DEFAULT_SORT),
        remove_empty_lines=parse_bool_answer(answers.get("remove_empty_lines")),
        author=_answer(answers, "author", config.DEFAULT_AUTHOR_ANSWER),
    )


def _double_quote(value: str) -> str:
    return '"' + value.replace('\\', '\\\\').replace('"', '\\"') + '"'


def _quote_if_needed(value: str) -> str:
    if not value or _NEEDS_QUOTING.search(value):
        return _double_quote(value)
    return value


def _option(name: str, value: str, quoted: str) -> str:
    # argparse reads a separate token starting with '-' as an option
    if value.startswith('-'):
        return f"{name}={quoted}"
    return f"{name} {quoted}"


def config_to_replay_string(bundle_config: BundleConfig) -> str:
    """Serializes a BundleConfig into a single 'bundle ...' command line."""
    languages = ','.join(bundle_config.language_tags)
    output = str(bundle_config.output_path)
    return (
        f"bundle {_option('--language', languages, _quote_if_needed(languages))}"
        f" {_option('--output', output, _quote_if_needed(output))}"
        f" --note {bundle_config.include_source_note}"
        f" --sort {bundle_config.sort_mode}"
        f" --remove-empty-lines {bundle_config.remove_empty_lines}"
        f" {_option('--author', bundle_config.author, _double_quote(bundle_config.author))}"
    )


def ask_questions(input_func: Optional[Callable[[], str]] = None,
                  output_func: Optional[Callable[[str], None]] = None) -> Dict[str, Optional[str]]:
    """Asks every prompt in turn. End-of-input leaves the remaining answers as None."""
    input_func = input_func or input
    output_func = output_func or print
    answers: Dict[str, Optional[str]] = {key: None for key, _ in PROMPTS}
    for key, question in PROMPTS:
        output_func(question)
        try:
            answers[key] = input_func()
        except EOFError:
            break
    return answers


def write_response_file(file_path: Path, bundle_config: BundleConfig) -> Path:
    """Writes the replay string to file_path and returns its resolved path."""
    file_path = Path(file_path).resolve()
    try:
        file_path.write_text(config_to_replay_string(bundle_config), encoding='utf-8')
    except OSError as e:
        raise BundleIOError(f"{e.strerror or e} : '{file_path}'") from e
    return file_path


def create_response_file(file_path: Optional[Path] = None,
                         input_func: Optional[Callable[[], str]] = None) -> Path:
    """Interactive create-rsp flow: prompt, build the config, write the file."""
    file_path = Path(file_path or config.DEFAULT_RESPONSE_FILE).resolve()
    print(f"Creating response file: {file_path}")

    bundle_config = prompts_to_config(ask_questions(input_func))
    written = write_response_file(file_path, bundle_config)

    print(f"The response file was created successfully: {written}!")
    print(f"To run the command: code-bundler @{written}")
    return written


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Response file builder for code_bundler.")
    parser.add_argument('-v', '--version', action='store_true', help='Show version information and exit.')
    parser.add_argument('file', nargs='?', help='Response file to create (default: default.rsp).')
    args = parser.parse_args()

    if args.version:
        from version_util import print_version_info
        print_version_info(__file__, "Response File Builder")
        sys.exit(0)

    try:
        create_response_file(Path(args.file) if args.file else None)
    except Exception as e:
        print(f"An error occurred: {e}")
        sys.exit(1)
