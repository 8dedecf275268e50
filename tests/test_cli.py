#!/usr/bin/env python3
"""
Command line tests.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import io

from bftree.cli import main


def _write(tmp_path, code):
    path = tmp_path / "prog.bf"
    path.write_text(code)
    return str(path)


def test_cli_runs_program(tmp_path, capsysbinary):
    path = _write(tmp_path, "++++++++[>++++++++<-]>+.+.")
    assert main([path]) == 0
    captured = capsysbinary.readouterr()
    assert captured.out == b"AB"


def test_cli_input_option(tmp_path, capsysbinary):
    path = _write(tmp_path, ",.,.")
    assert main([path, "--input", "hi"]) == 0
    assert capsysbinary.readouterr().out == b"hi"


def test_cli_missing_file(tmp_path, capsysbinary):
    assert main([str(tmp_path / "missing.bf")]) == 1
    assert b"File not found" in capsysbinary.readouterr().err


def test_cli_malformed(tmp_path, capsysbinary):
    path = _write(tmp_path, "+]")
    assert main([path]) == 1
    assert b"MalformedProgram" in capsysbinary.readouterr().err


def test_cli_input_exhausted(tmp_path, capsysbinary):
    path = _write(tmp_path, "+.,")
    assert main([path, "--input", ""]) == 1
    captured = capsysbinary.readouterr()
    assert captured.out == b"\x01"
    assert b"InputExhausted" in captured.err


def test_cli_dump_and_trace(tmp_path, capsysbinary):
    path = _write(tmp_path, "+>++")
    assert main([path, "--dump", "--trace"]) == 0
    err = capsysbinary.readouterr().err.decode()
    assert "+ [001]" in err
    assert "> 001 [000]" in err
    assert "tape: 001 [002] (pointer 1, 2 cells)" in err


def test_cli_deep_nesting(tmp_path, capsysbinary):
    depth = 5000
    path = _write(tmp_path, "+" + "[" * depth + "-" + "]" * depth + "+++.")
    assert main([path]) == 0
    assert capsysbinary.readouterr().out == b"\x03"


class _ClosedPipe(io.RawIOBase):
    def writable(self):
        return True

    def write(self, b):
        raise BrokenPipeError(32, "Broken pipe")


class _PipedStdout:
    def __init__(self, fd):
        self.buffer = _ClosedPipe()
        self._fd = fd

    def fileno(self):
        return self._fd


def test_cli_broken_pipe(tmp_path, monkeypatch, capsys):
    path = _write(tmp_path, "+.+.")
    fd = os.open(str(tmp_path / "stdout.bin"), os.O_WRONLY | os.O_CREAT)
    try:
        monkeypatch.setattr(sys, "stdout", _PipedStdout(fd))
        assert main([path]) == 1
    finally:
        os.close(fd)
    assert "Traceback" not in capsys.readouterr().err
