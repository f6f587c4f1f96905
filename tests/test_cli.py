from unittest import mock

import pytest

from byteemu.cli import main

PROGRAM = bytes([0x08, 0x01, 0x28, 0xFF, 0xF9])


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    (tmp_path / "bin").mkdir()
    (tmp_path / "bin" / "prog.bin").write_bytes(PROGRAM)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_runs_program(workdir, capsys):
    with mock.patch("byteemu.emulator.time.sleep"):
        assert main(["prog.bin"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Creating Emulator", "Finished"]


def test_trace_flag_prints_instructions(workdir, capsys):
    assert main(["prog.bin", "0", "-p"]) == 0
    out = capsys.readouterr().out
    assert "mov a, 1" in out
    assert "XX HAL" in out


def test_missing_file(workdir, capsys):
    assert main(["nope.bin", "0"]) == 1
    out = capsys.readouterr().out
    assert "Unable to load file: nope.bin" in out
    assert "Finished" not in out


def test_bad_speed(workdir, capsys):
    assert main(["prog.bin", "fast"]) == 1
    assert capsys.readouterr().out.strip() == "Unable to parse speed"


def test_no_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out.strip() == "Please specifiy an input file"


def test_graphics_flag_still_runs(workdir, capsys):
    assert main(["prog.bin", "0", "-g"]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines()[-1] == "Finished"
    assert "window" in captured.err