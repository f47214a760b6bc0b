import pytest

from ts_generic_lint.environment_variables import (
    TS_GENERIC_LINT_LOGGING_LEVEL,
    TS_GENERIC_LINT_MAX_WORKERS,
)


def pytest_configure(config):
    config.addinivalue_line("markers", "multiprocess: test spawns a worker process pool")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for var in (TS_GENERIC_LINT_LOGGING_LEVEL, TS_GENERIC_LINT_MAX_WORKERS):
        monkeypatch.delenv(var.name, raising=False)
