from __future__ import annotations

from ts_generic_lint.config import RuleConfig
from ts_generic_lint.diagnostics import Diagnostic, TextEdit
from ts_generic_lint.errors import MISSING_GENERIC, WRONG_GENERIC
from ts_generic_lint.matcher import Classification, classify, offending_argument
from ts_generic_lint.nodes import SourceRange, TypeReferenceNode


class BaseChecker:
    """
    Base class for checkers driven by :func:`ts_generic_lint.linter.scan`.

    Subclasses implement ``visit_type_reference`` and return at most one diagnostic per node.
    The traversal visits nested references itself, so checkers must not recurse.
    """

    name: str = ""

    def __init__(self, config: RuleConfig | None = None):
        self.config = config or RuleConfig()

    def visit_type_reference(self, node: TypeReferenceNode) -> Diagnostic | None:
        raise NotImplementedError

    def diagnostic(
        self, message_id: str, anchor: SourceRange, fix: TextEdit | None = None
    ) -> Diagnostic:
        return Diagnostic(
            message_id=message_id,
            anchor_range=anchor,
            message=self.config.render(message_id),
            fix=fix,
        )


class GenericArgumentChecker(BaseChecker):
    name = "enforce-generic-argument"

    def visit_type_reference(self, node: TypeReferenceNode) -> Diagnostic | None:
        classification = classify(node, self.config)

        if classification is Classification.MISSING_ARGUMENT:
            fix = TextEdit(
                insertion_point=node.name_range.end,
                inserted_text=f"<{self.config.required_argument_name}>",
            )
            return self.diagnostic(MISSING_GENERIC.name, node.name_range, fix)

        if classification is Classification.WRONG_ARGUMENT:
            return self.diagnostic(WRONG_GENERIC.name, offending_argument(node).source_range)

        return None
