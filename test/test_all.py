# ==============================================================================
# File: test_all.py
_MAJOR_VERSION = 0
_MINOR_VERSION = 2
# Version: <Automatically calculated via dynamic import of target module>
# ------------------------------------------------------------------------------
# CHANGELOG:
_CHANGELOG_ENTRIES = [
    "Acts as the primary test runner for code_bundler by default (no flag).",
    "SummaryTestResult records PASS/FAIL/ERROR/SKIP per test for the final table.",
    "Added --get_versions to audit module versions through version_util.",
    "Exit status is non-zero when any suite fails.",
]
# ------------------------------------------------------------------------------
from pathlib import Path
from typing import List, Tuple
import argparse
import sys
import unittest

TEST_MODULES = [
    "test_config_manager",
    "test_file_selector",
    "test_file_sorter",
    "test_bundle_writer",
    "test_response_file",
    "test_main",
]


class SummaryTestResult(unittest.TextTestResult):
    """Keeps (suite, test, status, detail) for every test it sees."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.rows: List[Tuple[str, str, str, str]] = []

    def _record(self, test, status: str, err=None):
        suite = getattr(test, '__module__', 'Internal')
        name = getattr(test, '_testMethodName', str(test))
        detail = ""
        if err:
            lines = [line.strip() for line in self._exc_info_to_string(err, test).splitlines() if line.strip()]
            detail = lines[-1] if lines else ""
        self.rows.append((suite, name, status, detail))

    def addSuccess(self, test):
        super().addSuccess(test)
        self._record(test, 'PASS')

    def addFailure(self, test, err):
        super().addFailure(test, err)
        self._record(test, 'FAIL', err)

    def addError(self, test, err):
        super().addError(test, err)
        self._record(test, 'ERROR', err)

    def addSkip(self, test, reason):
        super().addSkip(test, reason)
        self._record(test, 'SKIP')


def format_results_table(rows, total_run: int) -> str:
    """Renders the summary and a per-test table padded to the widest cell."""
    passed = sum(1 for row in rows if row[2] == 'PASS')
    failed = sum(1 for row in rows if row[2] in ('FAIL', 'ERROR'))
    percentage = (passed / total_run) * 100 if total_run else 0

    lines = [
        f"Tests Run: {total_run}",
        f"Passed: {passed}",
        f"Failed / Errored: {failed}",
        f"Passing Percentage: {percentage:.2f}%",
        "",
    ]

    header = ("Test Suite", "Test Name", "Status", "Details")
    readable = [
        (suite.replace('test_', '').replace('_', ' ').title(), name, status, detail.replace('|', '/'))
        for suite, name, status, detail in rows
    ]
    widths = [max(len(str(row[i])) for row in [header] + readable) + 2 for i in range(4)]

    def render(row):
        return "|" + "|".join(f" {cell}".ljust(widths[i]) for i, cell in enumerate(row)) + "|"

    lines.append(render(header))
    lines.append("|" + "|".join('-' * w for w in widths) + "|")
    lines.extend(render(row) for row in readable)
    return "\n".join(lines)


class SummaryTestRunner(unittest.TextTestRunner):
    resultclass = SummaryTestResult

    def run(self, test):
        result = super().run(test)
        print("\n" + "=" * 80)
        print("FINAL TEST EXECUTION SUMMARY")
        print("=" * 80)
        print(format_results_table(result.rows, result.testsRun))
        print("=" * 80 + "\n")
        return result


def run_tests() -> bool:
    """Loads every module in TEST_MODULES and runs them with SummaryTestRunner."""
    print("=" * 60)
    print("RUNNING UNIT TESTS")
    print("=" * 60)

    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    for module_name in TEST_MODULES:
        try:
            module = __import__(module_name)
        except ImportError as e:
            print(f"ERROR: Could not import test module {module_name}: {e}")
            continue
        suite.addTests(loader.loadTestsFromModule(module))

    result = SummaryTestRunner(stream=sys.stderr, verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == '__main__':
    test_dir = Path(__file__).resolve().parent
    project_root = test_dir.parent
    for path in (str(test_dir), str(project_root)):
        if path not in sys.path:
            sys.path.insert(0, path)

    parser = argparse.ArgumentParser(description="Test Runner for code_bundler. Runs unit tests by default or audits versions with a flag.")
    parser.add_argument('-v', '--version', action='store_true', help='Show version information for the test runner script.')
    parser.add_argument('--get_versions', action='store_true', help='Only audit module versions instead of running tests.')
    args = parser.parse_args()

    if args.version:
        from version_util import print_version_info
        print_version_info(__file__, "Test Runner")
        sys.exit(0)

    if args.get_versions:
        from version_util import get_all_file_versions
        get_all_file_versions(project_root)
        sys.exit(0)

    sys.exit(0 if run_tests() else 1)
