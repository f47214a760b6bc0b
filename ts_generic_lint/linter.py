from __future__ import annotations

import itertools
import logging
import os
import re
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field

from tree_sitter import Tree

from ts_generic_lint.checker import BaseChecker, GenericArgumentChecker
from ts_generic_lint.config import LintConfig, RuleConfig
from ts_generic_lint.diagnostics import Diagnostic, Violation
from ts_generic_lint.environment_variables import TS_GENERIC_LINT_MAX_WORKERS
from ts_generic_lint.exceptions import SourceParseError, TsGenericLintException
from ts_generic_lint.fixes import apply_fixes, collect_edits
from ts_generic_lint.parser import (
    dialect_for_path,
    iter_comments,
    iter_type_references,
    line_col,
    parse,
)
from ts_generic_lint.utils.file_utils import iter_source_files

_logger = logging.getLogger(__name__)

DISABLE_COMMENT_REGEX = re.compile(
    r"ts-generic-lint:\s*disable=([A-Za-z0-9-]+(?:\s*,\s*[A-Za-z0-9-]+)*)"
)
DISABLE_ALL = "all"

# Same cap ESLint uses for repeated autofix passes.
MAX_FIX_PASSES = 10


def scan(tree: Tree, checkers: list[BaseChecker]) -> list[tuple[BaseChecker, Diagnostic]]:
    """
    Runs every checker over every type reference of ``tree``, outer references first.
    """
    results = []
    for node in iter_type_references(tree):
        for checker in checkers:
            if diagnostic := checker.visit_type_reference(node):
                results.append((checker, diagnostic))
    return results


def ignore_map(tree: Tree) -> dict[str, set[int]]:
    """
    Creates a mapping of message id to line numbers to ignore.

    {
        "<messageId>": {<line_number>, ...},
        ...
    }
    """
    mapping: dict[str, set[int]] = {}
    for lineno, comment in iter_comments(tree):
        if m := DISABLE_COMMENT_REGEX.search(comment):
            for name in map(str.strip, m.group(1).split(",")):
                mapping.setdefault(name, set()).add(lineno)
    return mapping


def _is_ignored(ignore: dict[str, set[int]], message_id: str, lineno: int) -> bool:
    return lineno in ignore.get(message_id, ()) or lineno in ignore.get(DISABLE_ALL, ())


@dataclass
class FixResult:
    output: str
    fixed: int
    violations: list[Violation]


class Linter:
    def __init__(self, config: RuleConfig | None = None):
        self.config = config or RuleConfig()
        self.checkers: list[BaseChecker] = []
        self.register_checker(GenericArgumentChecker(self.config))

    def register_checker(self, checker: BaseChecker) -> None:
        if any(c.name == checker.name for c in self.checkers):
            raise TsGenericLintException.invalid_parameter_value(
                f"A checker named {checker.name!r} is already registered"
            )
        self.checkers.append(checker)

    def lint_source(
        self, source: str, path: str = "<input>", dialect: str | None = None
    ) -> list[Violation]:
        tree = parse(source, dialect or dialect_for_path(path))
        data = source.encode("utf-8")
        ignore = ignore_map(tree)
        violations = []
        for checker, diagnostic in scan(tree, self.checkers):
            lineno, col_offset = line_col(data, diagnostic.anchor_range.start)
            if _is_ignored(ignore, diagnostic.message_id, lineno):
                continue
            violations.append(Violation(diagnostic, checker.name, path, lineno, col_offset))
        return sorted(violations, key=lambda v: v.diagnostic.anchor_range.start)

    def fix_source(
        self, source: str, path: str = "<input>", dialect: str | None = None
    ) -> FixResult:
        output = source
        fixed = 0
        for _ in range(MAX_FIX_PASSES):
            violations = self.lint_source(output, path, dialect)
            edits = collect_edits(v.diagnostic for v in violations)
            if not edits:
                break
            output = apply_fixes(output, edits)
            fixed += len(edits)
            _logger.debug("Applied %d fix(es) to %s", len(edits), path)
        else:
            violations = self.lint_source(output, path, dialect)
        return FixResult(output=output, fixed=fixed, violations=violations)


@dataclass
class FileReport:
    path: str
    violations: list[Violation] = field(default_factory=list)
    fixed: int = 0
    error: SourceParseError | None = None


def _decode(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        lineno, col_offset = line_col(data, e.start)
        raise SourceParseError(
            f"Decoding error at {lineno}:{col_offset}: not valid UTF-8 ({e.reason})",
            lineno=lineno,
            col_offset=col_offset,
        ) from e


def lint_file(
    path: str, config: LintConfig, fix: bool = False, root: str | None = None
) -> FileReport:
    """
    Lints one file. ``path`` is reported as given and resolved against ``root`` when set.
    """
    full_path = os.path.join(root, path) if root else path
    with open(full_path, "rb") as f:
        data = f.read()

    linter = Linter(config.rule)
    try:
        source = _decode(data)
        if not fix:
            return FileReport(path, violations=linter.lint_source(source, path))
        result = linter.fix_source(source, path)
    except SourceParseError as e:
        _logger.debug("Failed to parse %s: %s", path, e.message)
        return FileReport(path, error=e)

    if result.output != source:
        with open(full_path, "w", encoding="utf-8", newline="") as f:
            f.write(result.output)
    return FileReport(path, violations=result.violations, fixed=result.fixed)


def lint_paths(
    paths: list[str],
    config: LintConfig | None = None,
    fix: bool = False,
    max_workers: int | None = None,
) -> list[FileReport]:
    config = config or LintConfig()
    files = list(iter_source_files(paths, config.exclude))
    if not files:
        return []

    max_workers = max_workers or TS_GENERIC_LINT_MAX_WORKERS.get()
    root = os.getcwd()
    _logger.debug("Linting %d file(s) with max_workers=%s", len(files), max_workers)
    with ProcessPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(lint_file, f, config, fix, root) for f in files]
        reports = [f.result() for f in as_completed(futures)]
    return sorted(reports, key=lambda r: r.path)


def all_violations(reports: list[FileReport]) -> list[Violation]:
    return list(itertools.chain.from_iterable(r.violations for r in reports))
