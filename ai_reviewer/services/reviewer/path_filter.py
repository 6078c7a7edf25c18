"""Drop files the reviewer should not look at."""

import re
from functools import lru_cache

from ai_reviewer.services.reviewer.schemas import DiffFile


def parse_exclude_patterns(value: str | None) -> list[str]:
    """Split the comma-separated ``exclude`` input into trimmed patterns."""
    if not value:
        return []
    return [p.strip() for p in value.split(",") if p.strip()]


@lru_cache(maxsize=256)
def compile_glob(pattern: str) -> re.Pattern:
    """Compile a path glob.

    ``*`` and ``?`` stay inside one path segment, ``**`` spans segments and
    ``**/`` also matches no directory at all. Matching is case-sensitive.
    A trailing ``/**`` matches what is below the directory, not the
    directory path itself: ``a/**`` does not match ``a``.
    """
    i, n = 0, len(pattern)
    parts = []

    while i < n:
        c = pattern[i]
        if c == "*":
            j = i
            while j < n and pattern[j] == "*":
                j += 1
            starts_segment = i == 0 or pattern[i - 1] == "/"
            ends_segment = j == n or pattern[j] == "/"
            if j - i >= 2 and starts_segment and ends_segment:
                if j < n:
                    parts.append("(?:.*/)?")
                    i = j + 1
                else:
                    parts.append(".*")
                    i = j
                continue
            parts.append("[^/]*")
            i = j
            continue
        if c == "?":
            parts.append("[^/]")
        elif c == "[":
            j = i + 1
            if j < n and pattern[j] in "!^":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            j = pattern.find("]", j)
            if j == -1:
                parts.append(re.escape(c))
            else:
                body = pattern[i + 1:j]
                negate = body[0] in "!^"
                if negate:
                    body = body[1:]
                # "[", "\\" and set operators are literal inside a class
                body = re.sub(r"([\\\[&~|])", r"\\\1", body)
                parts.append(f"[{'^' if negate else ''}{body}]")
                i = j
        else:
            parts.append(re.escape(c))
        i += 1

    return re.compile("".join(parts))


def matches_any(path: str, patterns: list[str]) -> bool:
    for pattern in patterns:
        pattern = pattern.strip()
        if pattern and compile_glob(pattern).fullmatch(path):
            return True
    return False


def filter_files(files: list[DiffFile], patterns: list[str]) -> list[DiffFile]:
    """Remove deleted files and files matching any exclusion pattern.

    Relative order of the kept files is preserved.
    """
    return [f for f in files if not f.is_deleted and not matches_any(f.path, patterns)]
