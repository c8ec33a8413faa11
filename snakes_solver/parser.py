"""Read test cases from whitespace-separated integer input.

Layout::

    numTests
    numLadders  from to  from to ...
    numSnakes   from to  from to ...
    ...                                 (repeated numTests times)

Squares are 1-based in the input and converted to 0-based cells here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from snakes_solver.board import BOARD_SIZE


class InputError(ValueError):
    """Input could not be turned into test cases."""


class MalformedInput(InputError):
    """Wrong token type or count."""


class InvalidInput(InputError):
    """Well-formed input naming a square that is not on the board."""


@dataclass
class TestCase:
    """One board's shortcuts, as 0-based ``(from, to)`` cells."""

    __test__ = False  # not a pytest class

    ladders: list[tuple[int, int]] = field(default_factory=list)
    snakes: list[tuple[int, int]] = field(default_factory=list)


class _Tokens:
    def __init__(self, text: str):
        self._tokens = text.split()
        self._pos = 0

    def next_int(self, what: str) -> int:
        if self._pos >= len(self._tokens):
            raise MalformedInput(f"unexpected end of input, expected {what}")
        token = self._tokens[self._pos]
        self._pos += 1
        try:
            return int(token)
        except ValueError:
            raise MalformedInput(
                f"token {self._pos} ({token!r}) is not an integer, expected {what}"
            ) from None

    def next_count(self, what: str) -> int:
        count = self.next_int(what)
        if count < 0:
            raise MalformedInput(f"token {self._pos}: {what} must not be negative, got {count}")
        return count


def _read_pairs(
    tokens: _Tokens, kind: str, case_no: int, total_cells: int,
) -> list[tuple[int, int]]:
    pairs = []
    for i in range(tokens.next_count(f"number of {kind}s")):
        square_from = tokens.next_int(f"{kind} {i + 1} start square")
        square_to = tokens.next_int(f"{kind} {i + 1} end square")
        for square in (square_from, square_to):
            if not 1 <= square <= total_cells:
                raise InvalidInput(
                    f"test case {case_no}, {kind} {i + 1}: square {square} "
                    f"is outside 1..{total_cells}"
                )
        pairs.append((square_from - 1, square_to - 1))
    return pairs


def iter_test_cases(text: str, total_cells: int = BOARD_SIZE) -> Iterator[TestCase]:
    """Yield test cases one at a time; errors surface at the bad case."""
    tokens = _Tokens(text)
    num_tests = tokens.next_count("number of test cases")
    for case_no in range(1, num_tests + 1):
        ladders = _read_pairs(tokens, "ladder", case_no, total_cells)
        snakes = _read_pairs(tokens, "snake", case_no, total_cells)
        yield TestCase(ladders=ladders, snakes=snakes)


def parse_test_cases(text: str, total_cells: int = BOARD_SIZE) -> list[TestCase]:
    return list(iter_test_cases(text, total_cells))
