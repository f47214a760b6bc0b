from __future__ import annotations

from collections.abc import Iterable

from ts_generic_lint.diagnostics import Diagnostic, TextEdit
from ts_generic_lint.exceptions import OverlappingEditsError


def collect_edits(diagnostics: Iterable[Diagnostic]) -> list[TextEdit]:
    return [d.fix for d in diagnostics if d.fix is not None]


def apply_fixes(source: str, edits: Iterable[TextEdit]) -> str:
    """
    Applies insertion edits to ``source`` and returns the new text.

    Insertion points are UTF-8 byte offsets into ``source``. Edits are applied from the last
    offset to the first so earlier insertions never shift later ones. Two edits at the same
    offset have no defined order and are rejected.
    """
    edits = sorted(edits, key=lambda e: e.insertion_point, reverse=True)
    if not edits:
        return source

    data = source.encode("utf-8")
    seen = set()
    for edit in edits:
        if not 0 <= edit.insertion_point <= len(data):
            raise OverlappingEditsError(
                f"Insertion point {edit.insertion_point} is outside the source "
                f"(length {len(data)})"
            )
        if edit.insertion_point in seen:
            raise OverlappingEditsError(
                f"Multiple edits insert at offset {edit.insertion_point}"
            )
        seen.add(edit.insertion_point)

    for edit in edits:
        point = edit.insertion_point
        data = data[:point] + edit.inserted_text.encode("utf-8") + data[point:]
    return data.decode("utf-8")
