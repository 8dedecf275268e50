from __future__ import annotations

import io
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .evaluator import run_program
from .tape import Tape


@dataclass(frozen=True)
class RunOptions:
    input: Optional[bytes] = None  # None reads from the process stdin
    max_cells: int = sys.maxsize
    wrap: bool = True
    trace: bool = False


@dataclass(frozen=True)
class RunResult:
    output: bytes
    cells: bytes
    pointer: int
    trace: List[str] = field(default_factory=list)


def run_string(source: Union[bytes, str], *, options: Optional[RunOptions] = None) -> RunResult:
    opts = options if options is not None else RunOptions()
    stdout = io.BytesIO()
    stdin = None if opts.input is None else io.BytesIO(opts.input)
    tape = Tape(stdin=stdin, stdout=stdout, max_cells=opts.max_cells, wrap=opts.wrap)
    trace: Optional[List[str]] = [] if opts.trace else None
    run_program(source, tape=tape, trace=trace)
    return RunResult(
        output=stdout.getvalue(),
        cells=bytes(tape.cells),
        pointer=tape.pointer,
        trace=trace or [],
    )


def run_file(path: Union[str, Path], *, options: Optional[RunOptions] = None) -> RunResult:
    p = Path(path)
    return run_string(p.read_bytes(), options=options)
