from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Type, Union


# ---------------- Instruction nodes ----------------
@dataclass(frozen=True)
class MoveRight:
    symbol = '>'


@dataclass(frozen=True)
class MoveLeft:
    symbol = '<'


@dataclass(frozen=True)
class Increment:
    symbol = '+'


@dataclass(frozen=True)
class Decrement:
    symbol = '-'


@dataclass(frozen=True)
class ReadByte:
    symbol = ','


@dataclass(frozen=True)
class WriteByte:
    symbol = '.'


@dataclass(frozen=True)
class Loop:
    body: Tuple["Instruction", ...] = ()


Action = Union[MoveRight, MoveLeft, Increment, Decrement, ReadByte, WriteByte]
Instruction = Union[Action, Loop]
Program = Tuple[Instruction, ...]

ACTIONS: Dict[int, Type[Action]] = {
    ord(cls.symbol): cls
    for cls in (MoveRight, MoveLeft, Increment, Decrement, ReadByte, WriteByte)
}
OPEN = ord('[')
CLOSE = ord(']')
ALPHABET = frozenset(ACTIONS) | {OPEN, CLOSE}


def emit(program: Program) -> str:
    """Render a parsed program back to canonical source text."""
    out = []
    stack = [iter(program)]
    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
            if stack:
                out.append(']')
        elif isinstance(node, Loop):
            out.append('[')
            stack.append(iter(node.body))
        else:
            out.append(node.symbol)
    return ''.join(out)
