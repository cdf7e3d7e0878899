import io
import json
import logging
import os
from pathlib import Path
import subprocess
import sys

import pytest

from amberpy.cli import EXIT_FINDINGS, EXIT_INFRA, EXIT_OK, main

COMPILER_OUTPUT = "ERROR bad thing\n  10| let x = \nat foo.ab:10:3\nERROR orphan\n"


def test_diagnostics_text_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output_file = tmp_path / "build.log"
    output_file.write_text(COMPILER_OUTPUT, encoding="utf-8")

    exit_code = main(["diagnostics", str(output_file)])

    assert exit_code == EXIT_FINDINGS
    assert capsys.readouterr().out == "foo.ab:10:3: error: bad thing\n    10| let x = \n"


def test_diagnostics_json_keep_unlocated_from_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO(COMPILER_OUTPUT))

    exit_code = main(["diagnostics", "--format", "json", "--keep-unlocated"])

    assert exit_code == EXIT_FINDINGS
    payload = json.loads(capsys.readouterr().out)
    assert [(item["message"], item["file"], item["line"]) for item in payload] == [
        ("bad thing\n  10| let x = ", "foo.ab", 10),
        ("orphan", None, 0),
    ]


def test_diagnostics_clean_output_exits_ok(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output_file = tmp_path / "build.log"
    output_file.write_text("ok\n", encoding="utf-8")

    assert main(["diagnostics", str(output_file)]) == EXIT_OK
    assert capsys.readouterr().out == ""


def test_missing_input_is_an_infrastructure_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["diagnostics", str(tmp_path / "missing.log")]) == EXIT_INFRA
    assert "missing.log" in capsys.readouterr().err


def test_indent_prints_check_and_in_place(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "main.ab"
    source.write_text("if x {\necho x\n}\n", encoding="utf-8")

    assert main(["indent", str(source), "--indent-unit", "2"]) == EXIT_OK
    assert capsys.readouterr().out == "if x {\n  echo x\n}\n"

    assert main(["indent", str(source), "--check"]) == EXIT_FINDINGS
    assert f"would reindent {source}" in capsys.readouterr().out

    assert main(["indent", str(source), "--in-place"]) == EXIT_OK
    assert source.read_text(encoding="utf-8") == "if x {\n    echo x\n}\n"
    assert main(["indent", str(source), "--check"]) == EXIT_OK


def test_config_file_is_applied_and_validated(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "main.ab"
    source.write_text("loop {\nbreak\n}\n", encoding="utf-8")
    good = tmp_path / "amberpy.yaml"
    good.write_text("amberpy:\n  indent_unit: 3\n", encoding="utf-8")
    bad = tmp_path / "bad.yaml"
    bad.write_text("indent_unit: 0\n", encoding="utf-8")

    assert main(["--config", str(good), "indent", str(source)]) == EXIT_OK
    assert capsys.readouterr().out == "loop {\n   break\n}\n"

    assert main(["--config", str(bad), "indent", str(source)]) == EXIT_INFRA
    assert "indent_unit must be positive" in capsys.readouterr().err


def test_highlight_html(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "main.ab"
    source.write_text('echo "hi"\n', encoding="utf-8")

    assert main(["highlight", str(source), "--formatter", "html"]) == EXIT_OK
    assert '<span class="nb">echo</span>' in capsys.readouterr().out


def test_check_with_missing_executable(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "main.ab"
    source.write_text("echo 1\n", encoding="utf-8")

    exit_code = main(["check", str(source), "--executable", str(tmp_path / "no-such-amber")])

    assert exit_code == EXIT_INFRA
    assert "Compiler executable not found" in capsys.readouterr().err


@pytest.mark.skipif(sys.platform == "win32", reason="uses a POSIX shell script as the compiler")
def test_check_runs_compiler_and_parses_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "main.ab"
    source.write_text("echo x\n", encoding="utf-8")
    fake_compiler = tmp_path / "amber"
    fake_compiler.write_text(
        "#!/bin/sh\n"
        "printf '\\033[31m ERROR\\033[0m Variable x does not exist\\n' >&2\n"
        "printf 'at %s:1:6\\n' \"$1\" >&2\n"
        "exit 1\n",
        encoding="utf-8",
    )
    os.chmod(fake_compiler, 0o755)

    exit_code = main(["check", str(source), "--executable", str(fake_compiler)])

    assert exit_code == EXIT_FINDINGS
    assert capsys.readouterr().out == f"{source}:1:6: error: Variable x does not exist\n"


def test_non_utf8_source_is_an_infrastructure_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "main.ab"
    source.write_bytes(b"echo \xff\n")

    assert main(["indent", str(source)]) == EXIT_INFRA
    assert main(["highlight", str(source)]) == EXIT_INFRA
    assert "not valid UTF-8" in capsys.readouterr().err


def test_check_parses_the_merged_output_stream(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    source = tmp_path / "main.ab"
    source.write_text("echo x\n", encoding="utf-8")
    calls: list[dict[str, object]] = []

    def fake_run(command: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        calls.append(kwargs)
        return subprocess.CompletedProcess(command, 1, stdout="Compiling\nERROR boom\nat x.ab:1:1\n", stderr=None)

    monkeypatch.setattr(subprocess, "run", fake_run)

    exit_code = main(["check", str(source)])

    assert exit_code == EXIT_FINDINGS
    assert calls[0]["stdout"] is subprocess.PIPE
    assert calls[0]["stderr"] is subprocess.STDOUT
    assert capsys.readouterr().out == "x.ab:1:1: error: boom\n"


def test_cli_logger_does_not_propagate(tmp_path: Path) -> None:
    output_file = tmp_path / "build.log"
    output_file.write_text("", encoding="utf-8")

    main(["-v", "diagnostics", str(output_file)])

    cli_logger = logging.getLogger("amberpy")
    assert cli_logger.propagate is False
    assert cli_logger.level == logging.INFO
    assert len(cli_logger.handlers) == 1
