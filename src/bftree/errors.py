from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def _hint_for(kind: str, detail: str = '') -> Optional[str]:
    if kind == 'malformed':
        if detail == '[':
            return 'Every "[" needs a matching "]" later in the program.'
        if detail == ']':
            return 'A "]" was found with no open loop. Check for an extra "]" or a missing "[".'
        return None
    if kind == 'input':
        return 'The program reads more bytes than were supplied.'
    if kind == 'address':
        return 'Enable wrapping to let the pointer wrap around at the tape boundary.'
    return None


def _with_hint(message: str, hint: Optional[str]) -> str:
    return f"{message}\nHint: {hint}" if hint else message


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class MalformedProgram(BFError):
    bracket: str


@dataclass
class InputExhausted(BFError):
    pass


@dataclass
class AddressSpaceExhausted(BFError):
    max_cells: int


def make_malformed_error(*, bracket: str) -> MalformedProgram:
    if bracket == '[':
        message = "MalformedProgram: unmatched '['"
    else:
        message = "MalformedProgram: unexpected ']'"
    return MalformedProgram(
        message=_with_hint(message, _hint_for('malformed', bracket)),
        bracket=bracket,
    )


def make_input_error() -> InputExhausted:
    return InputExhausted(
        message=_with_hint('InputExhausted: no input byte available', _hint_for('input')),
    )


def make_address_error(*, max_cells: int) -> AddressSpaceExhausted:
    return AddressSpaceExhausted(
        message=_with_hint(
            f"AddressSpaceExhausted: tape cannot grow past {max_cells} cells",
            _hint_for('address'),
        ),
        max_cells=max_cells,
    )
