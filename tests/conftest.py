import pytest

from littlelisp.interpreter import global_environment


@pytest.fixture
def env():
    return global_environment()


@pytest.fixture(autouse=True)
def _default_config(monkeypatch):
    # Each test starts from the documented defaults regardless of the shell
    monkeypatch.delenv("LITTLELISP_PRINT_ECHO", raising=False)
    monkeypatch.delenv("LITTLELISP_LOG_LEVEL", raising=False)
