import pytest

from ts_generic_lint.checker import GenericArgumentChecker
from ts_generic_lint.config import RuleConfig
from ts_generic_lint.diagnostics import TextEdit
from ts_generic_lint.errors import MISSING_GENERIC, WRONG_GENERIC
from ts_generic_lint.nodes import SourceRange

from tests.helper_functions import make_reference, make_type

VALID_CASES = [
    "let a: Uint8Array<ArrayBuffer>;",
    "type MyType = Uint8Array<ArrayBuffer>;",
    "function foo(param: Uint8Array<ArrayBuffer>): Uint8Array<ArrayBuffer> { return param; }",
    "class C { prop: Uint8Array<ArrayBuffer>; }",
    "type Nested = Readonly<Uint8Array<ArrayBuffer>>;",
    # Inference already yields Uint8Array<ArrayBuffer> for constructions.
    "let a = new Uint8Array()",
    "let a = Uint8Array.from()",
    "let a: Uint8Array<ArrayBuffer, unknown>;",
    "let a: Uint16Array;",
    "type Pair = [Uint8Array<ArrayBuffer>, ArrayBuffer];",
]

INVALID_CASES = [
    (
        "let a: Uint8Array;",
        ["missingGeneric"],
        "let a: Uint8Array<ArrayBuffer>;",
    ),
    (
        "type T = Uint8Array;",
        ["missingGeneric"],
        "type T = Uint8Array<ArrayBuffer>;",
    ),
    (
        "type U = Uint8Array | string;",
        ["missingGeneric"],
        "type U = Uint8Array<ArrayBuffer> | string;",
    ),
    (
        "type A = Uint8Array[];",
        ["missingGeneric"],
        "type A = Uint8Array<ArrayBuffer>[];",
    ),
    (
        "function f(): Uint8Array { return new Uint8Array(); }",
        ["missingGeneric"],
        "function f(): Uint8Array<ArrayBuffer> { return new Uint8Array(); }",
    ),
    (
        "function f(param: Uint8Array) {}",
        ["missingGeneric"],
        "function f(param: Uint8Array<ArrayBuffer>) {}",
    ),
    (
        "function f<D extends string | Uint8Array>() {}",
        ["missingGeneric"],
        "function f<D extends string | Uint8Array<ArrayBuffer>>() {}",
    ),
    (
        "function f(options: { data: Uint8Array; }) {};",
        ["missingGeneric"],
        "function f(options: { data: Uint8Array<ArrayBuffer>; }) {};",
    ),
    (
        """function f(
                callback: () => Promise<{ contents: Promise<Uint8Array> }>
            ) {}""",
        ["missingGeneric"],
        """function f(
                callback: () => Promise<{ contents: Promise<Uint8Array<ArrayBuffer>> }>
            ) {}""",
    ),
    (
        "export function f(options: { data: Uint8Array; }): void;",
        ["missingGeneric"],
        "export function f(options: { data: Uint8Array<ArrayBuffer>; }): void;",
    ),
    (
        "export function f({ data }: { data: Uint8Array; }): void;",
        ["missingGeneric"],
        "export function f({ data }: { data: Uint8Array<ArrayBuffer>; }): void;",
    ),
    (
        "class C { prop: Uint8Array; }",
        ["missingGeneric"],
        "class C { prop: Uint8Array<ArrayBuffer>; }",
    ),
    (
        "class C { method(options: { data: Uint8Array }) {} }",
        ["missingGeneric"],
        "class C { method(options: { data: Uint8Array<ArrayBuffer> }) {} }",
    ),
    (
        "const f = (param: Uint8Array = new Uint8Array()) => {}",
        ["missingGeneric"],
        "const f = (param: Uint8Array<ArrayBuffer> = new Uint8Array()) => {}",
    ),
    (
        "f<Uint8Array>();",
        ["missingGeneric"],
        "f<Uint8Array<ArrayBuffer>>();",
    ),
    (
        "f<{ data: Uint8Array; }>();",
        ["missingGeneric"],
        "f<{ data: Uint8Array<ArrayBuffer>; }>();",
    ),
    (
        "const a = { f(): Uint8Array {} }",
        ["missingGeneric"],
        "const a = { f(): Uint8Array<ArrayBuffer> {} }",
    ),
    (
        "type MyTuple = [Uint8Array, number];",
        ["missingGeneric"],
        "type MyTuple = [Uint8Array<ArrayBuffer>, number];",
    ),
    (
        "blob.stream() as ReadableStream<Uint8Array>",
        ["missingGeneric"],
        "blob.stream() as ReadableStream<Uint8Array<ArrayBuffer>>",
    ),
    (
        "type T = Whatever & { start: () => ReadableStream<Uint8Array>; }",
        ["missingGeneric"],
        "type T = Whatever & { start: () => ReadableStream<Uint8Array<ArrayBuffer>>; }",
    ),
    (
        "interface A { data: Uint8Array }",
        ["missingGeneric"],
        "interface A { data: Uint8Array<ArrayBuffer> }",
    ),
    (
        "interface A extends B { data?: Uint8Array }",
        ["missingGeneric"],
        "interface A extends B { data?: Uint8Array<ArrayBuffer> }",
    ),
    (
        "interface A extends B { f(): Uint8Array }",
        ["missingGeneric"],
        "interface A extends B { f(): Uint8Array<ArrayBuffer> }",
    ),
    (
        "type Both = [Uint8Array, Uint8Array<ArrayBuffer>, Uint8Array];",
        ["missingGeneric", "missingGeneric"],
        "type Both = [Uint8Array<ArrayBuffer>, Uint8Array<ArrayBuffer>, Uint8Array<ArrayBuffer>];",
    ),
    # No output: a wrong argument needs a manual fix or a suppression.
    (
        "let a: Uint8Array<any>;",
        ["wrongGeneric"],
        None,
    ),
    (
        "type Nested = Readonly<Uint8Array<any>>;",
        ["wrongGeneric"],
        None,
    ),
    (
        "let a: Uint8Array<ArrayBufferLike | ArrayBuffer>;",
        ["wrongGeneric"],
        None,
    ),
]


@pytest.mark.parametrize("code", VALID_CASES)
def test_valid_cases(linter, code):
    assert linter.lint_source(code) == []


@pytest.mark.parametrize(("code", "message_ids", "output"), INVALID_CASES)
def test_invalid_cases(linter, code, message_ids, output):
    violations = linter.lint_source(code)
    assert [v.message_id for v in violations] == message_ids
    assert all(v.rule == GenericArgumentChecker.name for v in violations)

    result = linter.fix_source(code)
    assert result.output == (code if output is None else output)


@pytest.mark.parametrize(("code", "message_ids", "output"), INVALID_CASES)
def test_fixed_output_has_no_missing_generic(linter, code, message_ids, output):
    fixed = linter.fix_source(code).output
    assert "missingGeneric" not in [v.message_id for v in linter.lint_source(fixed)]
    assert linter.fix_source(fixed).fixed == 0


def test_missing_generic_diagnostic(rule_config):
    checker = GenericArgumentChecker(rule_config)
    node = make_reference("Uint8Array", start=7)

    diagnostic = checker.visit_type_reference(node)

    assert diagnostic.message_id == MISSING_GENERIC.name
    assert diagnostic.anchor_range == SourceRange(7, 17)
    assert diagnostic.message == "Uint8Array must be used as Uint8Array<ArrayBuffer>."
    assert diagnostic.fix == TextEdit(insertion_point=17, inserted_text="<ArrayBuffer>")


def test_wrong_generic_diagnostic_is_anchored_on_argument(rule_config):
    checker = GenericArgumentChecker(rule_config)
    node = make_reference("Uint8Array", make_type("predefined_type", 18, 21), start=7)

    diagnostic = checker.visit_type_reference(node)

    assert diagnostic.message_id == WRONG_GENERIC.name
    assert diagnostic.anchor_range == SourceRange(18, 21)
    assert diagnostic.message == "Uint8Array generic argument must be exactly 'ArrayBuffer'."
    assert diagnostic.fix is None
    assert not diagnostic.fixable


def test_compliant_and_unrelated_references_produce_nothing(rule_config):
    checker = GenericArgumentChecker(rule_config)
    assert checker.visit_type_reference(make_reference("Promise")) is None
    compliant = make_reference("Uint8Array", make_reference("ArrayBuffer", start=11))
    assert checker.visit_type_reference(compliant) is None


def test_diagnostic_to_dict(rule_config):
    checker = GenericArgumentChecker(rule_config)
    missing = checker.visit_type_reference(make_reference("Uint8Array", start=7))
    assert missing.to_dict() == {
        "messageId": "missingGeneric",
        "anchorRange": {"start": 7, "end": 17},
        "fix": {"insertionPoint": 17, "insertedText": "<ArrayBuffer>"},
    }

    wrong = checker.visit_type_reference(
        make_reference("Uint8Array", make_type("predefined_type", 18, 21), start=7)
    )
    assert wrong.to_dict() == {
        "messageId": "wrongGeneric",
        "anchorRange": {"start": 18, "end": 21},
    }


def test_messages_follow_configured_names():
    config = RuleConfig(target_type_name="Float64Array", required_argument_name="ArrayBuffer")
    checker = GenericArgumentChecker(config)
    diagnostic = checker.visit_type_reference(make_reference("Float64Array"))
    assert diagnostic.message == "Float64Array must be used as Float64Array<ArrayBuffer>."


def test_diagnostics_render_from_rule_config_catalog(rule_config):
    assert rule_config.messages == (MISSING_GENERIC, WRONG_GENERIC)
    checker = GenericArgumentChecker(rule_config)
    diagnostic = checker.visit_type_reference(make_reference("Uint8Array"))
    assert diagnostic.message == MISSING_GENERIC.render(target="Uint8Array", argument="ArrayBuffer")
