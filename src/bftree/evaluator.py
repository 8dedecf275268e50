from __future__ import annotations

from typing import BinaryIO, Dict, List, Optional, Type, Union

from .parser import parse
from .tape import Tape
from .tokens import (
    Decrement,
    Increment,
    Loop,
    MoveLeft,
    MoveRight,
    Program,
    ReadByte,
    WriteByte,
)


_DISPATCH: Dict[Type, str] = {
    MoveRight: 'move_right',
    MoveLeft: 'move_left',
    Increment: 'increment',
    Decrement: 'decrement',
    ReadByte: 'read',
    WriteByte: 'write',
}


def execute(program: Program, tape: Tape, trace: Optional[List[str]] = None) -> None:
    """
    Walk ``program`` in order against ``tape``.

    A Loop runs its whole body while the current cell is non-zero, testing
    before every pass. Nested bodies are tracked on an explicit stack of
    ``[body, index, is_loop]`` frames, so nesting depth is bounded by memory
    rather than by the interpreter's recursion limit. When ``trace`` is
    given, one line per executed leaf instruction is appended to it.
    """
    frames: List[list] = [[program, 0, False]]

    while frames:
        frame = frames[-1]
        body, i, is_loop = frame
        if i == len(body):
            if is_loop and not tape.is_current_zero():
                frame[1] = 0
            else:
                frames.pop()
            continue

        node = body[i]
        frame[1] = i + 1
        if isinstance(node, Loop):
            if not tape.is_current_zero():
                frames.append([node.body, 0, True])
            continue
        getattr(tape, _DISPATCH[type(node)])()
        if trace is not None:
            trace.append(f"{node.symbol} {tape}")


def run_program(source: Union[bytes, str], *, stdin: Optional[BinaryIO] = None,
                stdout: Optional[BinaryIO] = None, tape: Optional[Tape] = None,
                trace: Optional[List[str]] = None) -> Tape:
    """
    Parse and run ``source``; return the final tape.

    Runs on ``tape`` when one is given (its own streams are used and
    ``stdin``/``stdout`` are ignored), otherwise on a fresh tape.
    """
    program = parse(source)
    if tape is None:
        tape = Tape(stdin=stdin, stdout=stdout)
    execute(program, tape, trace)
    return tape
