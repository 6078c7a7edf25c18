"""Convert a unified diff into reviewer data types."""

from unidiff import Hunk, PatchedFile, PatchSet
from unidiff.errors import UnidiffParseError

from ai_reviewer.core.exceptions import ReviewerError
from ai_reviewer.services.reviewer.schemas import (
    DELETED_FILE_PATH,
    ChangeKind,
    DiffFile,
    DiffHunk,
    DiffLineChange,
)


def parse_diff(diff_text: str) -> list[DiffFile]:
    """Parse unified diff text into files and hunks, in diff order.

    Args:
        diff_text: Unified diff as returned by the GitHub diff media type

    Returns:
        One DiffFile per changed file. Deleted files get the
        ``/dev/null`` path.
    """
    if not diff_text or not diff_text.strip():
        return []

    try:
        patch_set = PatchSet(diff_text)
    except UnidiffParseError as e:
        raise ReviewerError(f"Malformed diff: {e}") from e

    return [
        DiffFile(
            path=_target_path(patched_file),
            hunks=tuple(_convert_hunk(hunk) for hunk in patched_file),
        )
        for patched_file in patch_set
    ]


def _target_path(patched_file: PatchedFile) -> str:
    target = patched_file.target_file
    if patched_file.is_removed_file or target == DELETED_FILE_PATH:
        return DELETED_FILE_PATH
    if target.startswith("b/"):
        return target[2:]
    return target


def _convert_hunk(hunk: Hunk) -> DiffHunk:
    changes = []
    # New-file line preceding the current position; deleted lines reuse it
    previous_target = None

    for line in hunk:
        text = line.value.rstrip("\r\n")
        if line.is_added or line.is_context:
            line_number = line.target_line_no
            previous_target = line_number
            kind = ChangeKind.ADDED if line.is_added else ChangeKind.CONTEXT
        elif line.is_removed:
            line_number = previous_target if previous_target is not None else max(hunk.target_start, 1)
            kind = ChangeKind.DELETED
        else:
            # "\ No newline at end of file"
            continue
        changes.append(DiffLineChange(kind=kind, line_number=line_number, text=text))

    return DiffHunk(content=str(hunk).rstrip("\n"), changes=tuple(changes))
