from __future__ import annotations

from typing import List, Union

from .errors import make_malformed_error
from .tokens import ACTIONS, ALPHABET, CLOSE, OPEN, Instruction, Loop, Program


def filter_source(source: Union[bytes, bytearray, str]) -> bytes:
    """Drop every byte that is not one of the eight instruction symbols."""
    if isinstance(source, str):
        source = source.encode('utf-8')
    return bytes(b for b in source if b in ALPHABET)


def parse(source: Union[bytes, bytearray, str]) -> Program:
    """
    Parse source text into an immutable instruction tree.

    Anything outside the instruction alphabet is ignored. Loops are built
    with an explicit stack of open bodies, so nesting depth is bounded by
    memory rather than by the interpreter's recursion limit.

    Raises:
        MalformedProgram: on an unclosed '[' or a stray ']'.
    """
    stack: List[List[Instruction]] = [[]]

    for b in filter_source(source):
        if b == OPEN:
            stack.append([])
        elif b == CLOSE:
            if len(stack) == 1:
                raise make_malformed_error(bracket=']')
            body = stack.pop()
            stack[-1].append(Loop(tuple(body)))
        else:
            stack[-1].append(ACTIONS[b]())

    if len(stack) != 1:
        raise make_malformed_error(bracket='[')
    return tuple(stack[0])
