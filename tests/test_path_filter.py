"""Tests for the path filter."""

import warnings

import pytest

from ai_reviewer.services.reviewer.path_filter import (
    compile_glob,
    filter_files,
    matches_any,
    parse_exclude_patterns,
)
from ai_reviewer.services.reviewer.schemas import DELETED_FILE_PATH, DiffFile


def paths(files):
    """Paths of the given diff files."""
    return [f.path for f in files]


class TestFilterFiles:
    """Tests for filter_files."""

    def test_excludes_test_files_and_deleted_sentinel(self):
        """Test files and deleted files are dropped, order kept."""
        files = [DiffFile("a/b.ts"), DiffFile("a/b.test.ts"), DiffFile(DELETED_FILE_PATH)]

        result = filter_files(files, ["**/*.test.ts"])

        assert paths(result) == ["a/b.ts"]

    def test_no_patterns_only_drops_deleted(self):
        """Without patterns only the deleted-file sentinel goes."""
        files = [DiffFile("z.py"), DiffFile(DELETED_FILE_PATH), DiffFile("a.py")]

        assert paths(filter_files(files, [])) == ["z.py", "a.py"]

    def test_preserves_relative_order(self):
        """Kept files stay in diff order."""
        files = [DiffFile(p) for p in ["c.py", "docs/x.md", "b.py", "docs/y.md", "a.py"]]

        assert paths(filter_files(files, ["docs/**"])) == ["c.py", "b.py", "a.py"]

    def test_returns_new_list(self):
        """The input list is not modified or returned."""
        files = [DiffFile("a.py")]

        result = filter_files(files, [])

        assert result == files
        assert result is not files

    def test_patterns_are_trimmed(self):
        """Surrounding whitespace in a pattern is ignored."""
        files = [DiffFile("dist/app.js"), DiffFile("src/app.js")]

        assert paths(filter_files(files, ["  dist/**  "])) == ["src/app.js"]


class TestGlobMatching:
    """Tests for compile_glob and matches_any."""

    @pytest.mark.parametrize(
        "pattern,path",
        [
            ("**/*.test.ts", "a/b.test.ts"),
            ("**/*.test.ts", "b.test.ts"),
            ("**/*.test.ts", "a/b/c/d.test.ts"),
            ("*.md", "README.md"),
            ("src/**/x.py", "src/x.py"),
            ("src/**/x.py", "src/a/b/x.py"),
            ("dist/**", "dist/a/b.js"),
            ("**", "anything/at/all"),
            ("file?.py", "file1.py"),
            ("file[0-9].py", "file7.py"),
            ("file[!0-9].py", "fileA.py"),
            ("yarn.lock", "yarn.lock"),
            ("[[]x", "[x"),
            ("[]]x", "]x"),
            ("[!]]x", "ax"),
            ("[&~|]x", "~x"),
        ],
    )
    def test_matches(self, pattern, path):
        """Globs match whole paths across the expected segments."""
        assert compile_glob(pattern).fullmatch(path)

    @pytest.mark.parametrize(
        "pattern,path",
        [
            ("*.md", "docs/README.md"),
            ("src/*.py", "src/a/b.py"),
            ("file?.py", "file/.py"),
            ("*.TS", "a.ts"),
            ("file[0-9].py", "fileA.py"),
            ("yarn.lock", "sub/yarn.lock"),
            ("a.b", "axb"),
            ("dist/**", "dist"),
            ("[[]x", "xx"),
        ],
    )
    def test_does_not_match(self, pattern, path):
        """Single stars stay in one segment and matching is case-sensitive."""
        assert not compile_glob(pattern).fullmatch(path)

    def test_matches_any_ignores_blank(self):
        """Blank patterns never match."""
        assert matches_any("a.py", ["", "  "]) is False
        assert matches_any("a.py", ["", "*.py"]) is True

    @pytest.mark.parametrize("pattern", ["[[]x", "[a&&b]", "[~~]", "[a||b]", "[\\\\]"])
    def test_class_compiles_without_warning(self, pattern):
        """Brackets and set operators inside a class are taken literally."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            compile_glob.cache_clear()
            compile_glob(pattern)

    def test_trailing_double_star_needs_something_below(self):
        """dir/** matches files below the directory, not the directory itself."""
        assert compile_glob("a/**").fullmatch("a/b")
        assert not compile_glob("a/**").fullmatch("a")


class TestParseExcludePatterns:
    """Tests for parse_exclude_patterns."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("", []),
            (None, []),
            ("**/*.lock", ["**/*.lock"]),
            ("a, b ,,c ", ["a", "b", "c"]),
        ],
    )
    def test_split_and_trim(self, value, expected):
        """Comma-separated input is split, trimmed and emptied of blanks."""
        assert parse_exclude_patterns(value) == expected
