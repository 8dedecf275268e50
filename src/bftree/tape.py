from __future__ import annotations

import sys
from typing import BinaryIO, Optional

from .errors import make_address_error, make_input_error


class Tape:
    """
    Growable tape of unsigned 8-bit cells with a movable pointer.

    The tape starts as a single zero cell and grows one cell at a time in
    either direction as the pointer walks off an end. Growth stops at
    ``max_cells``; from then on the pointer wraps around the ends of the
    tape (or, with ``wrap=False``, AddressSpaceExhausted is raised).

    Input and output are binary streams read and written one byte at a
    time. They default to the process's stdin/stdout buffers, looked up
    when first used.
    """

    def __init__(self, stdin: Optional[BinaryIO] = None, stdout: Optional[BinaryIO] = None,
                 max_cells: int = sys.maxsize, wrap: bool = True):
        if max_cells < 1:
            raise ValueError("max_cells must be at least 1")
        self.cells = bytearray(1)
        self.pointer = 0
        self.max_cells = max_cells
        self.wrap = wrap
        self._stdin = stdin
        self._stdout = stdout

    @classmethod
    def from_bytes(cls, data: bytes, pointer: int = 0, **kwargs) -> Tape:
        if not 0 <= pointer < len(data):
            raise ValueError("pointer out of bounds")
        tape = cls(**kwargs)
        if len(data) > tape.max_cells:
            raise ValueError("data is longer than max_cells")
        tape.cells = bytearray(data)
        tape.pointer = pointer
        return tape

    @property
    def stdin(self) -> BinaryIO:
        return self._stdin if self._stdin is not None else sys.stdin.buffer

    @property
    def stdout(self) -> BinaryIO:
        return self._stdout if self._stdout is not None else sys.stdout.buffer

    @property
    def current(self) -> int:
        return self.cells[self.pointer]

    def __len__(self) -> int:
        return len(self.cells)

    def __str__(self) -> str:
        start = max(0, self.pointer - 1)
        end = min(len(self.cells), self.pointer + 2)
        out = []
        for i in range(start, end):
            if i == self.pointer:
                out.append(f"[{self.cells[i]:03d}]")
            else:
                out.append(f"{self.cells[i]:03d}")
        return " ".join(out)

    def __repr__(self) -> str:
        return f"Tape(pointer={self.pointer}, cells={len(self.cells)})"

    # ===== Pointer movement =====

    def move_right(self) -> None:
        # Grows only when the pointer leaves the last cell, so "><>" ends with
        # two cells; re-entering existing cells never appends.
        if self.pointer + 1 < len(self.cells):
            self.pointer += 1
        elif len(self.cells) < self.max_cells:
            self.cells.append(0)
            self.pointer += 1
        elif self.wrap:
            self.pointer = 0
        else:
            raise make_address_error(max_cells=self.max_cells)

    def move_left(self) -> None:
        if self.pointer > 0:
            self.pointer -= 1
        elif len(self.cells) < self.max_cells:
            # Pointer stays at 0, now addressing the new cell.
            self.cells.insert(0, 0)
        elif self.wrap:
            self.pointer = len(self.cells) - 1
        else:
            raise make_address_error(max_cells=self.max_cells)

    # ===== Cell arithmetic =====

    def increment(self) -> None:
        self.cells[self.pointer] = (self.cells[self.pointer] + 1) & 0xFF

    def decrement(self) -> None:
        self.cells[self.pointer] = (self.cells[self.pointer] - 1) & 0xFF

    def is_current_zero(self) -> bool:
        return self.cells[self.pointer] == 0

    # ===== I/O =====

    def write(self) -> None:
        out = self.stdout
        out.write(bytes((self.cells[self.pointer],)))
        out.flush()

    def read(self) -> None:
        data = self.stdin.read(1)
        if not data:
            raise make_input_error()
        self.cells[self.pointer] = data[0]
