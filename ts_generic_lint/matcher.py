from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from ts_generic_lint.config import RuleConfig
from ts_generic_lint.exceptions import MalformedNodeError
from ts_generic_lint.nodes import TypeNode, TypeReferenceNode


class Classification(Enum):
    NOT_APPLICABLE = "not_applicable"
    COMPLIANT = "compliant"
    MISSING_ARGUMENT = "missing_argument"
    WRONG_ARGUMENT = "wrong_argument"


def _check_shape(node: TypeReferenceNode) -> None:
    if not isinstance(getattr(node, "name", None), str):
        raise MalformedNodeError(f"Type reference without an identifier name: {node!r}")
    if not isinstance(getattr(node, "type_arguments", None), Sequence):
        raise MalformedNodeError(f"Type reference without a type-argument list: {node!r}")


def _is_required_argument(arg: TypeNode, config: RuleConfig) -> bool:
    return isinstance(arg, TypeReferenceNode) and arg.name == config.required_argument_name


def classify(node: TypeReferenceNode, config: RuleConfig) -> Classification:
    """
    Classifies a single type reference against the configured target type.

    Only the first type argument is inspected; the target is assumed to take one parameter.
    """
    _check_shape(node)
    if node.name != config.target_type_name:
        return Classification.NOT_APPLICABLE
    if not node.type_arguments:
        return Classification.MISSING_ARGUMENT
    if _is_required_argument(node.type_arguments[0], config):
        return Classification.COMPLIANT
    return Classification.WRONG_ARGUMENT


def offending_argument(node: TypeReferenceNode) -> TypeNode:
    return node.type_arguments[0]
