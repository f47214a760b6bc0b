import os
import re
from collections.abc import Iterable, Iterator

from ts_generic_lint.parser import SOURCE_SUFFIXES

SKIPPED_DIRECTORIES = frozenset(["node_modules", ".git"])


def _exclude_regex(exclude: Iterable[str]) -> re.Pattern | None:
    if exclude := list(exclude):
        return re.compile("|".join(map(re.escape, exclude)))
    return None


def _normalize(path: str) -> str:
    path = os.path.normpath(path).replace(os.sep, "/")
    return path[2:] if path.startswith("./") else path


def _walk(directory: str) -> Iterator[str]:
    for root, dirs, files in os.walk(directory):
        dirs[:] = sorted(d for d in dirs if d not in SKIPPED_DIRECTORIES)
        for name in sorted(files):
            if name.endswith(SOURCE_SUFFIXES):
                yield os.path.join(root, name)


def iter_source_files(paths: Iterable[str], exclude: Iterable[str] = ()) -> Iterator[str]:
    """
    Expands ``paths`` into TypeScript source files.

    Directories are searched recursively for ``.ts``, ``.tsx``, ``.mts`` and ``.cts`` files;
    files are taken as given. Paths starting with any of the ``exclude`` prefixes (relative,
    ``/``-separated) are dropped.
    """
    exclude_regex = _exclude_regex(exclude)
    seen = set()
    for path in paths:
        candidates = _walk(path) if os.path.isdir(path) else [path]
        for candidate in candidates:
            normalized = _normalize(candidate)
            if normalized in seen:
                continue
            seen.add(normalized)
            if exclude_regex and exclude_regex.match(normalized):
                continue
            yield normalized
