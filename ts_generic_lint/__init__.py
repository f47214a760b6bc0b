"""
ts-generic-lint reports TypeScript references to a generic type that omit, or get wrong, its
type argument. The default rule requires ``Uint8Array<ArrayBuffer>`` and can insert the
missing ``<ArrayBuffer>`` automatically.
"""

from ts_generic_lint.checker import BaseChecker, GenericArgumentChecker
from ts_generic_lint.config import LintConfig, RuleConfig, load_config
from ts_generic_lint.diagnostics import Diagnostic, TextEdit, Violation
from ts_generic_lint.environment_variables import TS_GENERIC_LINT_CONFIGURE_LOGGING
from ts_generic_lint.exceptions import TsGenericLintException
from ts_generic_lint.fixes import apply_fixes
from ts_generic_lint.linter import Linter, lint_file, lint_paths, scan
from ts_generic_lint.matcher import Classification, classify
from ts_generic_lint.utils.logging_utils import _configure_lint_loggers
from ts_generic_lint.version import VERSION

__version__ = VERSION

if TS_GENERIC_LINT_CONFIGURE_LOGGING.get() is True:
    _configure_lint_loggers(root_module_name=__name__)

__all__ = [
    "BaseChecker",
    "Classification",
    "Diagnostic",
    "GenericArgumentChecker",
    "Linter",
    "LintConfig",
    "RuleConfig",
    "TextEdit",
    "TsGenericLintException",
    "Violation",
    "apply_fixes",
    "classify",
    "lint_file",
    "lint_paths",
    "load_config",
    "scan",
]
