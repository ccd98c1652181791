# ==============================================================================
# File: test_file_selector.py
_MAJOR_VERSION = 0
_MINOR_VERSION = 2
# Version: <Automatically calculated via dynamic import of target module>
# ------------------------------------------------------------------------------
# CHANGELOG:
_CHANGELOG_ENTRIES = [
    "Initial implementation of FileSelector tests.",
    "Added exclusion tests for nested bin/obj/.git/node_modules segments and look-alike file names.",
    "Added language map injection test.",
    "Added TraversalError test for a missing root.",
]
# ------------------------------------------------------------------------------
import unittest
from pathlib import Path
import shutil
import argparse
import sys

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from file_selector import FileSelector, parse_language_tags, get_extension
from bundle_models import TraversalError

TEST_OUTPUT_DIR = Path(__file__).resolve().parent.parent / 'test_output_selector'
SOURCE_DIR = TEST_OUTPUT_DIR / 'project'

# Relative path -> content
TREE = {
    'Program.cs': "class Program {}",
    'README.TXT': "read me",
    'Makefile': "all:",
    '.gitignore': "bin/",
    'src/util.py': "x = 1",
    'src/view.js': "let a;",
    'src/Model.CS': "class Model {}",
    'src/bin.cs': "// file named like an excluded directory",
    'src/binary/keep.cs': "// directory that only starts with bin",
    'bin/Debug/out.cs': "// build output",
    'obj/gen.cs': "// generated",
    'src/obj/deep.cs': "// nested generated",
    '.git/config.txt': "[core]",
    'web/node_modules/lib/index.js': "module.exports = 1;",
}


def rel(candidates):
    return sorted(c.absolute_path.relative_to(SOURCE_DIR.resolve()).as_posix() for c in candidates)


class TestFileSelector(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        """Creates the sample project tree."""
        if TEST_OUTPUT_DIR.exists():
            shutil.rmtree(TEST_OUTPUT_DIR)
        for relative, content in TREE.items():
            path = SOURCE_DIR / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding='utf-8')

    @classmethod
    def tearDownClass(cls):
        if TEST_OUTPUT_DIR.exists():
            shutil.rmtree(TEST_OUTPUT_DIR)

    def setUp(self):
        self.selector = FileSelector()

    def test_01_all_keeps_every_non_excluded_file(self):
        """'all' (any case) keeps every file outside excluded directories, with or without extension."""
        result = rel(self.selector.select(SOURCE_DIR, ['ALL']))
        self.assertEqual(result, sorted([
            '.gitignore', 'Makefile', 'Program.cs', 'README.TXT',
            'src/Model.CS', 'src/bin.cs', 'src/binary/keep.cs',
            'src/util.py', 'src/view.js',
        ]))

    def test_02_excluded_segments_never_selected(self):
        """Files below bin, obj, .git or node_modules never appear, whatever the tags."""
        excluded = {'bin', 'obj', '.git', 'node_modules'}
        for tags in (['all'], ['csharp'], ['txt', 'javascript'], ['csharp', 'txt', 'javascript', 'python']):
            for relative in rel(self.selector.select(SOURCE_DIR, tags)):
                directories = relative.split('/')[:-1]
                self.assertFalse(excluded & set(directories), f"{relative} selected for {tags}")

    def test_03_extension_filter_is_case_insensitive(self):
        """csharp + txt keeps .cs and .txt files regardless of case."""
        result = rel(self.selector.select(SOURCE_DIR, ['csharp', 'txt']))
        self.assertEqual(result, sorted([
            'Program.cs', 'README.TXT', 'src/Model.CS', 'src/bin.cs', 'src/binary/keep.cs',
        ]))

    def test_04_selection_is_repeatable(self):
        first = self.selector.select(SOURCE_DIR, ['python', 'javascript'])
        second = self.selector.select(SOURCE_DIR, ['python', 'javascript'])
        self.assertEqual(set(first), set(second))
        self.assertEqual(rel(first), ['src/util.py', 'src/view.js'])

    def test_05_empty_tags_select_nothing(self):
        self.assertEqual(self.selector.select(SOURCE_DIR, []), [])

    def test_06_tag_resolution(self):
        """Known tags use the map; unknown tags become '.' + tag; dotted tags are literal."""
        extensions = self.selector.resolve_extensions(['Python', 'rs', '.Go'])
        self.assertEqual(extensions, {'.py', '.rs', '.go'})
        self.assertNotIn('.python', extensions)
        self.assertIsNone(self.selector.resolve_extensions(['csharp', 'All']))

    def test_07_injected_tables(self):
        """A custom language map and exclusion list replace the built-ins."""
        selector = FileSelector(excluded_dirs={'src'}, language_map={'csharp': '.CS'})
        result = rel(selector.select(SOURCE_DIR, ['csharp']))
        self.assertEqual(result, ['Program.cs', 'bin/Debug/out.cs', 'obj/gen.cs'])

    def test_08_missing_root_raises_traversal_error(self):
        with self.assertRaises(TraversalError):
            self.selector.select(TEST_OUTPUT_DIR / 'does_not_exist', ['all'])

    def test_09_file_root_raises_traversal_error(self):
        with self.assertRaises(TraversalError):
            self.selector.select(SOURCE_DIR / 'Program.cs', ['all'])

    def test_10_candidate_extension(self):
        by_name = {c.absolute_path.name: c.extension for c in self.selector.select(SOURCE_DIR, ['all'])}
        self.assertEqual(by_name['Program.cs'], '.cs')
        self.assertEqual(by_name['Makefile'], '')
        self.assertEqual(by_name['.gitignore'], '.gitignore')


class TestSelectorHelpers(unittest.TestCase):

    def test_01_parse_language_tags(self):
        self.assertEqual(parse_language_tags("csharp, python,,csharp  html"), ['csharp', 'python', 'html'])
        self.assertEqual(parse_language_tags(""), [])
        self.assertEqual(parse_language_tags(None), [])

    def test_02_get_extension(self):
        self.assertEqual(get_extension("archive.tar.gz"), ".gz")
        self.assertEqual(get_extension("noext"), "")
        self.assertEqual(get_extension("trailing."), "")


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="Unit tests for FileSelector.")
    parser.add_argument('-v', '--version', action='store_true', help='Show version information and exit.')
    args, unknown = parser.parse_known_args()

    if args.version:
        from version_util import print_version_info
        print_version_info(__file__, "FileSelector Unit Tests")
        sys.exit(0)

    unittest.main(argv=[sys.argv[0]] + unknown)
