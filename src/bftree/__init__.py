from .api import RunOptions, RunResult, run_file, run_string
from .errors import AddressSpaceExhausted, BFError, InputExhausted, MalformedProgram
from .evaluator import execute, run_program
from .parser import filter_source, parse
from .tape import Tape
from .tokens import (
    Decrement,
    Increment,
    Loop,
    MoveLeft,
    MoveRight,
    ReadByte,
    WriteByte,
    emit,
)

__all__ = [
    'parse',
    'filter_source',
    'emit',
    'execute',
    'run_program',
    'Tape',
    'MoveRight',
    'MoveLeft',
    'Increment',
    'Decrement',
    'ReadByte',
    'WriteByte',
    'Loop',
    'BFError',
    'MalformedProgram',
    'InputExhausted',
    'AddressSpaceExhausted',
    'RunOptions',
    'RunResult',
    'run_string',
    'run_file',
]
