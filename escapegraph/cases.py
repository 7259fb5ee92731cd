"""
Batch input and output format.

Input: the number of test cases, then per case a line "n m r", n obstacle
lines "x y" and m query lines "x y s". Coordinates are integers, r and s are
exact scalars ("3", "1.5" or "3/2"). Output: one line of 'y'/'n' per case.
"""
from dataclasses import dataclass, field
from fractions import Fraction
from typing import List, Tuple

from loguru import logger


class InputFormatError(ValueError):
    """The input text does not follow the test-case grammar."""


@dataclass
class EscapeQuery:
    """Start point and safety margin of one escape query."""
    x: int
    y: int
    margin: Fraction

    @property
    def point(self):
        return (self.x, self.y)


@dataclass
class EscapeCase:
    """Obstacles, base agent radius and queries of one test case."""
    radius: Fraction
    obstacles: List[Tuple[int, int]] = field(default_factory=list)
    queries: List[EscapeQuery] = field(default_factory=list)


class _TokenReader:
    def __init__(self, text):
        self.tokens = text.split()
        self.position = 0

    def _next(self, what):
        if self.position >= len(self.tokens):
            raise InputFormatError(f'Unexpected end of input while reading {what}')
        token = self.tokens[self.position]
        self.position += 1
        return token

    def integer(self, what):
        token = self._next(what)
        try:
            return int(token)
        except ValueError:
            raise InputFormatError(f"Expected an integer for {what}, got '{token}'") from None

    def count(self, what):
        value = self.integer(what)
        if value < 0:
            raise InputFormatError(f'Negative {what}: {value}')
        return value

    def scalar(self, what):
        token = self._next(what)
        try:
            return Fraction(token)
        except (ValueError, ZeroDivisionError):
            raise InputFormatError(f"Expected a number for {what}, got '{token}'") from None

    def remaining(self):
        return len(self.tokens) - self.position


def read_cases(text):
    """
    Parse the whole batch input.

    Args:
        text (str): Input text.

    Returns:
        list of EscapeCase: Test cases in input order.

    Raises:
        InputFormatError: On missing or malformed tokens.
    """
    reader = _TokenReader(text)
    cases = []
    for case_index in range(reader.count('test case count')):
        num_obstacles = reader.count(f'obstacle count of case {case_index + 1}')
        num_queries = reader.count(f'query count of case {case_index + 1}')
        case = EscapeCase(radius=reader.scalar(f'agent radius of case {case_index + 1}'))

        for _ in range(num_obstacles):
            case.obstacles.append((reader.integer('obstacle x'), reader.integer('obstacle y')))
        for _ in range(num_queries):
            case.queries.append(EscapeQuery(
                x=reader.integer('query x'),
                y=reader.integer('query y'),
                margin=reader.scalar('query margin'),
            ))
        cases.append(case)

    if reader.remaining():
        logger.warning(f'Ignoring {reader.remaining()} trailing token(s) after the last test case')
    return cases


def format_answers(answers):
    """Join per-query booleans into a 'y'/'n' line."""
    return ''.join('y' if answer else 'n' for answer in answers)
