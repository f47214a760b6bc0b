import pytest

from ts_generic_lint.diagnostics import Diagnostic, TextEdit
from ts_generic_lint.exceptions import OverlappingEditsError
from ts_generic_lint.fixes import apply_fixes, collect_edits
from ts_generic_lint.nodes import SourceRange


def test_no_edits_returns_source_unchanged():
    assert apply_fixes("let a: Uint8Array;", []) == "let a: Uint8Array;"


def test_single_insertion():
    assert (
        apply_fixes("let a: Uint8Array;", [TextEdit(17, "<ArrayBuffer>")])
        == "let a: Uint8Array<ArrayBuffer>;"
    )


@pytest.mark.parametrize("reverse", [False, True])
def test_edit_order_does_not_matter(reverse):
    source = "type T = [Uint8Array, Uint8Array];"
    edits = [TextEdit(20, "<ArrayBuffer>"), TextEdit(32, "<ArrayBuffer>")]
    if reverse:
        edits.reverse()
    assert apply_fixes(source, edits) == (
        "type T = [Uint8Array<ArrayBuffer>, Uint8Array<ArrayBuffer>];"
    )


def test_offsets_are_utf8_bytes():
    source = "let é: Uint8Array;"
    offset = source.encode("utf-8").index(b";")
    assert apply_fixes(source, [TextEdit(offset, "<ArrayBuffer>")]) == (
        "let é: Uint8Array<ArrayBuffer>;"
    )


def test_insertion_at_end_of_source():
    assert apply_fixes("x: Uint8Array", [TextEdit(13, "<ArrayBuffer>")]) == (
        "x: Uint8Array<ArrayBuffer>"
    )


def test_edits_at_same_offset_are_rejected():
    with pytest.raises(OverlappingEditsError, match="Multiple edits insert at offset 17"):
        apply_fixes("let a: Uint8Array;", [TextEdit(17, "<A>"), TextEdit(17, "<B>")])


@pytest.mark.parametrize("offset", [-1, 19])
def test_edits_outside_source_are_rejected(offset):
    with pytest.raises(OverlappingEditsError, match="outside the source"):
        apply_fixes("let a: Uint8Array;", [TextEdit(offset, "<ArrayBuffer>")])


def test_collect_edits_skips_diagnostics_without_fix():
    fix = TextEdit(17, "<ArrayBuffer>")
    diagnostics = [
        Diagnostic("missingGeneric", SourceRange(7, 17), "missing", fix),
        Diagnostic("wrongGeneric", SourceRange(18, 21), "wrong"),
    ]
    assert collect_edits(diagnostics) == [fix]
