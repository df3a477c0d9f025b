# end-to-end exercise runs against in-memory streams; nothing touches the real console

import io
import pytest
from typer.testing import CliRunner
from typedavg.cli import app, run_average, run_greeting
from typedavg.config import ConfigError, load_settings
from typedavg.service import Platform
from typedavg.terminal import TerminalError, TerminalSession

runner = CliRunner()

@pytest.fixture
def clean_env(monkeypatch):
    # a developer's shell must not change what the exercises print
    monkeypatch.delenv("TYPEDAVG_INT_BITS", raising=False)
    monkeypatch.delenv("TYPEDAVG_LOG_LEVEL", raising=False)

def _session(text: str = ""):
    out = io.StringIO()
    return TerminalSession(stdin=io.StringIO(text), stdout=out), out

def test_run_average_prints_reference_result():
    session, out = _session()
    run_average(session, Platform())
    assert out.getvalue() == "Your code returned: 15\n\n\n"

def test_run_greeting_reads_one_token():
    session, out = _session("\n  Ada Lovelace\n")
    run_greeting(session, Platform())
    assert out.getvalue() == "Enter your name: Nice to meet you, Ada!\n\n\n"
    # the rest of the line stays available
    assert session.read_token() == "Lovelace"

def test_run_greeting_at_end_of_input():
    session, out = _session("")
    run_greeting(session, Platform())
    assert "Nice to meet you, !" in out.getvalue()

def test_write_to_closed_stream_raises_terminal_error():
    out = io.StringIO()
    out.close()
    session = TerminalSession(stdin=io.StringIO(), stdout=out)
    with pytest.raises(TerminalError):
        session.write_line("hello")

def test_cli_runs_named_exercise(clean_env):
    result = runner.invoke(app, ["variables"])
    assert result.exit_code == 0
    assert "b - a (unsigned) = 4294967294" in result.stdout
    assert "Your code returned" not in result.stdout

def test_cli_runs_all_exercises_in_order(clean_env):
    result = runner.invoke(app, [], input="Grace\n")
    assert result.exit_code == 0
    out = result.stdout
    assert out.index("Nice to meet you, Grace!") < out.index("a = 7") < out.index("Your code returned: 15")

def test_cli_help_exits_cleanly(clean_env):
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Usage" in result.output
    # help never runs an exercise
    assert "Your code returned" not in result.output

def test_cli_rejects_unknown_exercise(clean_env):
    result = runner.invoke(app, ["nope"])
    # usage error from the argument parser, before any exercise runs
    assert result.exit_code == 2
    assert "Your code returned" not in result.output

def test_cli_reports_bad_config_without_traceback(monkeypatch):
    monkeypatch.setenv("TYPEDAVG_INT_BITS", "12")
    result = runner.invoke(app, ["average"])
    assert result.exit_code == 1
    assert "Configuration error" in result.output
    assert not isinstance(result.exception, ConfigError)

def test_cli_uses_configured_int_width(monkeypatch):
    monkeypatch.setenv("TYPEDAVG_INT_BITS", "16")
    monkeypatch.delenv("TYPEDAVG_LOG_LEVEL", raising=False)
    result = runner.invoke(app, ["variables"])
    assert result.exit_code == 0
    assert "b - a (unsigned) = 65534" in result.stdout

def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("TYPEDAVG_INT_BITS", "64")
    monkeypatch.setenv("TYPEDAVG_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.int_bits == 64
    assert settings.log_level == "DEBUG"

@pytest.mark.parametrize("bits", ["12", "abc"])
def test_settings_reject_bad_width(monkeypatch, bits):
    monkeypatch.setenv("TYPEDAVG_INT_BITS", bits)
    with pytest.raises(ConfigError):
        load_settings()

def test_settings_reject_bad_log_level(monkeypatch):
    monkeypatch.delenv("TYPEDAVG_INT_BITS", raising=False)
    monkeypatch.setenv("TYPEDAVG_LOG_LEVEL", "LOUD")
    with pytest.raises(ConfigError):
        load_settings()
