import pytest

from abslog import core, example
from abslog.levels import LoggerType


@pytest.fixture(autouse=True)
def _reset_globals():
    core.reset_ctx_key()
    core.reset_ctx_separator()
    core.set_logger_type(LoggerType.ZAP)
    yield
    core.reset_ctx_key()
    core.reset_ctx_separator()
    core.set_logger_type(LoggerType.ZAP)


def test_print_from_other_package(capsys):
    example.print_from_other_package()
    out, err = capsys.readouterr()
    prefix = "[id=1234567, name=John Doe, age=30] ->  "
    assert "Debug with context from other package" not in out + err
    assert prefix + "Default (Zap) Info with context from other package" in out
    assert prefix + "Default (Zap) Warn with context from other package" in out
    assert prefix + "Default (Zap) Error with context from other package" in err


def test_main_output(capsys):
    assert example.main() == 0
    out, err = capsys.readouterr()
    assert "Default (Zap) Info global" in out
    assert "Default (Zap) Debug global" not in out + err
    assert "Set By Type Logrus Info global" in err
    assert "Set By Type Logrus Info global" not in out
    assert "[id: 1234567, name: John Doe, age: 30] ->  Logrus Info with context" in err
    assert "[id: 1234567, name: John Doe, age: 30] ->  Zap Warn with context" in out
    assert "Set By Builder Logrus Warn global" in err
    assert "Set By Builder Zap Info global" in out
    assert "Set By Builder Zap Error global" in err


def test_main_leaves_zap_installed(capsys):
    example.main()
    capsys.readouterr()
    core.info("after main")
    out, _ = capsys.readouterr()
    assert "INFO" in out and "after main" in out