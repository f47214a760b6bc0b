"""
Rule and linter configuration.

Settings are read from the ``[tool.ts-generic-lint]`` table of ``pyproject.toml``::

    [tool.ts-generic-lint]
    target-type-name = "Uint8Array"
    required-argument-name = "ArrayBuffer"
    exclude = ["node_modules/", "dist/"]

Only the keys above are recognized; anything else is rejected rather than ignored.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field

import tomli

from ts_generic_lint.errors import MESSAGES, Message
from ts_generic_lint.exceptions import TsGenericLintException

_logger = logging.getLogger(__name__)

TOOL_TABLE = "ts-generic-lint"
DEFAULT_TARGET_TYPE_NAME = "Uint8Array"
DEFAULT_REQUIRED_ARGUMENT_NAME = "ArrayBuffer"

_STRING_KEYS = {
    "target-type-name": "target_type_name",
    "required-argument-name": "required_argument_name",
}
_KNOWN_KEYS = {*_STRING_KEYS, "exclude"}

# ASCII subset of the ECMAScript IdentifierName grammar.
_IDENTIFIER_REGEX = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


@dataclass(frozen=True)
class RuleConfig:
    target_type_name: str = DEFAULT_TARGET_TYPE_NAME
    required_argument_name: str = DEFAULT_REQUIRED_ARGUMENT_NAME
    messages: tuple[Message, ...] = MESSAGES

    def message(self, message_id: str) -> Message:
        for msg in self.messages:
            if msg.name == message_id:
                return msg
        raise TsGenericLintException(f"No message registered for {message_id!r}")

    def render(self, message_id: str) -> str:
        return self.message(message_id).render(
            target=self.target_type_name, argument=self.required_argument_name
        )


@dataclass(frozen=True)
class LintConfig:
    rule: RuleConfig = field(default_factory=RuleConfig)
    exclude: tuple[str, ...] = ()


def _validate_identifier(key, value):
    if not isinstance(value, str) or not _IDENTIFIER_REGEX.fullmatch(value):
        raise TsGenericLintException.invalid_parameter_value(
            f"`{key}` must be a TypeScript identifier, got {value!r}", key=key
        )
    return value


def _validate_exclude(value):
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise TsGenericLintException.invalid_parameter_value(
            f"`exclude` must be a list of strings, got {value!r}", key="exclude"
        )
    return tuple(value)


def config_from_dict(table: dict) -> LintConfig:
    if unknown := sorted(set(table) - _KNOWN_KEYS):
        raise TsGenericLintException.invalid_parameter_value(
            f"Unknown option(s) in [tool.{TOOL_TABLE}]: {', '.join(unknown)}. "
            f"Supported options: {', '.join(sorted(_KNOWN_KEYS))}",
            unknown=unknown,
        )
    rule_kwargs = {
        attr: _validate_identifier(key, table[key])
        for key, attr in _STRING_KEYS.items()
        if key in table
    }
    exclude = _validate_exclude(table["exclude"]) if "exclude" in table else ()
    return LintConfig(rule=RuleConfig(**rule_kwargs), exclude=exclude)


def load_config(path: str | None = None) -> LintConfig:
    """
    Loads the linter configuration.

    Args:
        path: Path to a ``pyproject.toml``. When omitted, ``pyproject.toml`` in the current
            directory is used if it exists.

    Returns:
        The parsed configuration, or the defaults when no file or no table is present.
    """
    if path is None:
        path = "pyproject.toml"
        if not os.path.exists(path):
            return LintConfig()

    try:
        with open(path, "rb") as f:
            data = tomli.load(f)
    except tomli.TOMLDecodeError as e:
        raise TsGenericLintException.invalid_parameter_value(
            f"Failed to parse {path}: {e}", path=path
        ) from e

    table = data.get("tool", {}).get(TOOL_TABLE)
    if table is None:
        _logger.debug("No [tool.%s] table in %s, using defaults", TOOL_TABLE, path)
        return LintConfig()
    return config_from_dict(table)
