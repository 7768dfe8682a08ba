import pytest

from abslog import core
from abslog.adapter import LoggerPanic
from abslog.levels import LoggerType


def _plain(name):
    def method(self, *args):
        self.calls.append((name, args))
    return method


def _fmt(name):
    def method(self, format, *args):
        self.calls.append((name, format, args))
    return method


class Recorder:
    def __init__(self):
        self.calls = []

    debug = _plain("debug")
    info = _plain("info")
    warn = _plain("warn")
    error = _plain("error")
    fatal = _plain("fatal")
    panic = _plain("panic")
    debugf = _fmt("debugf")
    infof = _fmt("infof")
    warnf = _fmt("warnf")
    errorf = _fmt("errorf")
    fatalf = _fmt("fatalf")
    panicf = _fmt("panicf")


@pytest.fixture(autouse=True)
def _reset_globals():
    core.reset_ctx_key()
    core.reset_ctx_separator()
    core.set_logger_type(LoggerType.ZAP)
    yield
    core.reset_ctx_key()
    core.reset_ctx_separator()
    core.set_logger_type(LoggerType.ZAP)


@pytest.fixture
def recorder():
    rec = Recorder()
    core.set_logger(rec)
    return rec


def test_ctx_key_blank_falls_back_to_default():
    core.set_ctx_key("custom")
    core.set_ctx_key("   ")
    assert core.get_ctx_key() == "abslog"


def test_ctx_key_is_trimmed():
    core.set_ctx_key("  req ")
    assert core.get_ctx_key() == "req"
    core.reset_ctx_key()
    assert core.get_ctx_key() == "abslog"


def test_ctx_separator_rules():
    core.set_ctx_separator(" | ")
    assert core.get_ctx_separator() == " | "
    core.set_ctx_separator("  ")
    assert core.get_ctx_separator() == " -> "
    core.set_ctx_separator(":")
    core.reset_ctx_separator()
    assert core.get_ctx_separator() == " -> "


def test_ctx_values_map():
    ctx = {core.get_ctx_key(): {"id": "1234567", "name": "John Doe", "age": 30}}
    assert core.get_ctx_values(ctx) == "[id=1234567, name=John Doe, age=30] -> "


def test_ctx_values_list_and_string():
    key = core.get_ctx_key()
    assert core.get_ctx_values({key: ["a", "b"]}) == "[a, b] -> "
    assert core.get_ctx_values({key: "solo"}) == "[solo] -> "


def test_ctx_values_empty_cases():
    assert core.get_ctx_values(None) == ""
    assert core.get_ctx_values({}) == ""
    assert core.get_ctx_values({core.get_ctx_key(): 42}) == ""
    assert core.get_ctx_values({core.get_ctx_key(): [1, 2]}) == ""


def test_ctx_values_use_current_key_and_separator():
    core.set_ctx_key("req")
    core.set_ctx_separator(" | ")
    assert core.get_ctx_values({"abslog": "x"}) == ""
    assert core.get_ctx_values({"req": "x"}) == "[x] | "


def test_info_ctx_prefixes_message(recorder):
    core.info_ctx({"abslog": "x"}, "hello")
    assert recorder.calls == [("info", ("[x] ->  hello",))]


def test_ctx_without_values_passes_args_through(recorder):
    core.warn_ctx({}, "a", 1)
    core.error_ctxf(None, "n=%d", 3)
    assert recorder.calls == [("warn", ("a", 1)), ("errorf", "n=%d", (3,))]


def test_ctxf_prefixes_format(recorder):
    core.info_ctxf({"abslog": ["a", "b"]}, "n=%d", 3)
    assert recorder.calls == [("infof", "[a, b] ->  n=%d", (3,))]


def test_plain_functions_delegate(recorder):
    core.debug("d")
    core.warnf("w %s", "x")
    core.fatal("f")
    core.panicf("p")
    assert recorder.calls == [
        ("debug", ("d",)),
        ("warnf", "w %s", ("x",)),
        ("fatal", ("f",)),
        ("panicf", "p", ()),
    ]


def test_get_logger_returns_set_logger(recorder):
    assert core.get_logger() is recorder


def test_set_logger_type_rejects_unknown():
    with pytest.raises(ValueError, match="not supported"):
        core.set_logger_type(9)


def test_default_zap_routes_levels(capsys):
    core.debug("hidden debug")
    core.info("visible info")
    core.error("visible error")
    out, err = capsys.readouterr()
    assert "hidden debug" not in out + err
    assert "INFO" in out and "visible info" in out
    assert "visible error" in err and "visible error" not in out


def test_other_package_context_map(capsys):
    ctx = {core.get_ctx_key(): {"id": "1234567", "name": "John Doe", "age": 30}}
    core.debug_ctx(ctx, "Default (Zap) Debug with context from other package")
    core.info_ctx(ctx, "Default (Zap) Info with context from other package")
    core.warn_ctx(ctx, "Default (Zap) Warn with context from other package")
    core.error_ctx(ctx, "Default (Zap) Error with context from other package")
    out, err = capsys.readouterr()
    prefix = "[id=1234567, name=John Doe, age=30] ->  "
    assert "Debug with context" not in out + err
    assert prefix + "Default (Zap) Info with context from other package" in out
    assert prefix + "Default (Zap) Warn with context from other package" in out
    assert prefix + "Default (Zap) Error with context from other package" in err


def test_panic_and_fatal_raise(capsys):
    with pytest.raises(LoggerPanic, match="boom"):
        core.panic_ctx({"abslog": "x"}, "boom")
    with pytest.raises(SystemExit):
        core.fatalf("bye %d", 1)
    _, err = capsys.readouterr()
    assert "[x] ->  boom" in err
    assert "bye 1" in err