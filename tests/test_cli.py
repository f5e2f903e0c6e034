import json
import logging
import runpy
from collections.abc import Iterator

import pytest

import either.cli
from either.cli import main, run
from either.laws import ALL_LAWS, LawFamily, select_laws


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("EITHER_LOG_LEVEL", "EITHER_REPORT_FORMAT", "EITHER_LAW_FAMILIES"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_laws_text(capsys: pytest.CaptureFixture[str]) -> None:
    assert run(["laws"]) == 0
    out = capsys.readouterr().out
    assert "All laws hold." in out


def test_laws_json_with_family(capsys: pytest.CaptureFixture[str]) -> None:
    assert run(["laws", "--format", "json", "--family", "monad"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["passed"] is True
    assert data["law_count"] == len(select_laws([LawFamily.MONAD]))


def test_laws_format_from_env(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("EITHER_REPORT_FORMAT", "markdown")
    assert run(["laws"]) == 0
    assert capsys.readouterr().out.startswith("# Either law report")


def test_laws_verbose(capsys: pytest.CaptureFixture[str]) -> None:
    assert run(["laws", "-v"]) == 0
    out = capsys.readouterr().out
    for law in ALL_LAWS:
        assert law.name in out


def test_unknown_family(capsys: pytest.CaptureFixture[str]) -> None:
    assert run(["laws", "--family", "bogus"]) == 2
    assert "Unknown law family" in capsys.readouterr().err


def test_invalid_configuration(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("EITHER_LOG_LEVEL", "loud")
    assert run(["laws"]) == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert run([]) == 1
    assert "usage: either" in capsys.readouterr().out


def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EITHER_LOG_LEVEL", "error")
    assert run(["laws"]) == 0
    assert logging.getLogger().level == logging.ERROR


def test_log_level_flag_overrides_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EITHER_LOG_LEVEL", "error")
    assert run(["--log-level", "debug", "laws"]) == 0
    assert logging.getLogger().level == logging.DEBUG


def test_keyboard_interrupt_returns_130(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def interrupted(argv: object = None) -> int:
        raise KeyboardInterrupt

    monkeypatch.setattr(either.cli, "run", interrupted)
    assert main() == 130
    assert "Operation cancelled by user." in capsys.readouterr().err


def test_python_m_either(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.argv", ["either", "laws", "--format", "json"])
    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module("either", run_name="__main__")
    assert exc_info.value.code == 0
    assert json.loads(capsys.readouterr().out)["passed"] is True
