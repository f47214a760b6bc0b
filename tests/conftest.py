import pytest

from ts_generic_lint.config import RuleConfig
from ts_generic_lint.linter import Linter


@pytest.fixture
def linter():
    return Linter()


@pytest.fixture
def rule_config():
    return RuleConfig()
