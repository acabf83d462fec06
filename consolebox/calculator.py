"""Menu-driven scientific calculator."""

from __future__ import annotations

import math
import sys
from enum import IntEnum
from typing import Iterator, TextIO

PI = 3.14159265


class Operation(IntEnum):
    """Menu options of the calculator."""

    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4
    EXPONENT = 5
    ROOT = 6
    LOG = 7
    SIN = 8
    COS = 9
    TAN = 10
    COSEC = 11
    SEC = 12
    COT = 13
    EXIT = 14


_BINARY = frozenset(Operation(n) for n in range(1, 8))
_TRIG = frozenset(Operation(n) for n in range(8, 14))

_WORDS = {
    Operation.ADD: "addition",
    Operation.SUBTRACT: "subtraction",
    Operation.MULTIPLY: "multiplication",
    Operation.DIVIDE: "division",
    Operation.EXPONENT: "exponent",
    Operation.ROOT: "root",
}


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _power(a: float, b: float) -> float:
    if a == 0 and b < 0:
        return math.inf
    try:
        return math.pow(a, b)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


def _log(x: float) -> float:
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    return math.log(x)


def binary_operation(option: int, first: float, second: float) -> float:
    """Apply one of the two-operand options (1 to 7)."""
    op = Operation(option)
    if op not in _BINARY:
        raise ValueError(f"option {option} does not take two numbers")
    if op is Operation.ADD:
        return first + second
    if op is Operation.SUBTRACT:
        return first - second
    if op is Operation.MULTIPLY:
        return first * second
    if op is Operation.DIVIDE:
        return _divide(first, second)
    if op is Operation.EXPONENT:
        return _power(first, second)
    if op is Operation.ROOT:
        return _power(first, _divide(1.0, second))
    return _divide(_log(first), _log(second))


def trig_operation(option: int, degrees: float) -> float:
    """Apply one of the trigonometric options (8 to 13) to an angle in degrees."""
    op = Operation(option)
    if op not in _TRIG:
        raise ValueError(f"option {option} is not a trigonometric function")
    radians = degrees * (PI / 180.0)
    if op is Operation.SIN:
        return math.sin(radians)
    if op is Operation.COS:
        return math.cos(radians)
    if op is Operation.TAN:
        return math.tan(radians)
    if op is Operation.COSEC:
        return _divide(1.0, math.sin(radians))
    if op is Operation.SEC:
        return _divide(1.0, math.cos(radians))
    return _divide(1.0, math.tan(radians))


def _fmt(value: float) -> str:
    return f"{value:g}"


_MENU = (
    "\t\t\tSCIENCTIFIC CALCULATOR\n\n"
    "\t1 : Addition\t\t\t8 : Sin\n"
    "\t2 : Subtraction\t\t\t9 : Cos\n"
    "\t3 : Multiplication\t\t10 : Tan\n"
    "\t4 : Division\t\t\t11 : Cosec\n"
    "\t5 : Exponent\t\t\t12 : Sec\n"
    "\t6 : Root\t\t\t13 : Cot\n"
    "\t7 : Log\t\t\t\t14 : Exit\n\n"
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class _EndOfInput(Exception):
    pass


def _read_number(tokens: Iterator[str], write, prompt: str) -> float:
    while True:
        write(prompt)
        token = next(tokens, None)
        if token is None:
            raise _EndOfInput
        try:
            return float(token)
        except ValueError:
            write(f"{token} is not a number")


def run(stream_in: TextIO, stream_out: TextIO) -> None:
    """Run the calculator until option 14 is chosen or input ends."""
    write = stream_out.write
    tokens = _tokens(stream_in)
    write(_MENU)
    try:
        while True:
            write("\nEnter your OPTION : ")
            token = next(tokens, None)
            if token is None:
                return
            try:
                op = Operation(int(token))
            except ValueError:
                write("Wrong choice, Enter valid choice to play the game! (1 to 14)")
                continue
            if op is Operation.EXIT:
                write("\nExit...")
                return
            if op in _BINARY:
                first = _read_number(tokens, write, "\nEnter your 1st number : ")
                second = _read_number(tokens, write, "\nEnter your 2nd number : ")
                result = _fmt(binary_operation(op, first, second))
                if op is Operation.LOG:
                    write(
                        f"Your result of Log base {_fmt(first)} off "
                        f"{_fmt(second)} is {result}"
                    )
                else:
                    write(
                        f"Your result of {_fmt(first)} {_WORDS[op]} to "
                        f"{_fmt(second)} is {result}"
                    )
            else:
                degrees = _read_number(tokens, write, "\nEnter your number : ")
                write(f"Your result is {_fmt(trig_operation(op, degrees))}")
    except _EndOfInput:
        return


def main(argv: list[str] | None = None) -> int:
    """Start the calculator on the console."""
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())