from __future__ import annotations

import argparse
import io
import os
import sys
from typing import List, Optional

from .errors import BFError
from .evaluator import run_program
from .tape import Tape


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bftree",
        description="Tree-walking interpreter for the eight-symbol tape language.",
    )
    parser.add_argument("filepath", help="Path to the program source file.")
    parser.add_argument("--input", default=None, help="Feed this text as program input instead of stdin")
    parser.add_argument("--dump", action="store_true", help="Print the tape around the pointer after the run")
    parser.add_argument("--trace", action="store_true", help="Print one line per executed instruction after the run")
    args = parser.parse_args(argv)

    try:
        with open(args.filepath, 'rb') as f:
            code = f.read()
    except FileNotFoundError:
        print(f"Error: File not found at '{args.filepath}'", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Could not read file '{args.filepath}': {e}", file=sys.stderr)
        return 1

    stdin = None if args.input is None else io.BytesIO(args.input.encode('utf-8'))
    tape = Tape(stdin=stdin)
    trace: Optional[List[str]] = [] if args.trace else None

    try:
        run_program(code, tape=tape, trace=trace)
    except BFError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except BrokenPipeError:
        # Reader closed the pipe; later flushes of stdout go to devnull.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        os.close(devnull)
        return 1
    finally:
        if trace:
            print("\n".join(trace), file=sys.stderr)
        if args.dump:
            print(f"tape: {tape} (pointer {tape.pointer}, {len(tape)} cells)", file=sys.stderr)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
