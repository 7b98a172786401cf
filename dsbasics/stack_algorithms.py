"""Small algorithms built on a stack: bracket matching, factorial, RPN."""

from __future__ import annotations

import re

_OPENERS = {")": "(", "]": "[", "}": "{"}
_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")
_OPERATORS = {"+", "-", "*", "/"}


class ExpressionError(ValueError):
    """Raised for a malformed postfix expression."""


def is_balanced(text: str) -> bool:
    """Check the brackets ``()[]{}`` in ``text``.

    A closing bracket with nothing open makes the text unbalanced at once.
    A closing bracket that does not match the innermost open one is passed
    over, and the text is balanced when nothing is left open at the end.
    """
    stack: list[str] = []
    for char in text:
        if char in "([{":
            stack.append(char)
        elif char in _OPENERS:
            if not stack:
                return False
            if stack[-1] == _OPENERS[char]:
                stack.pop()
    return not stack


def factorial(n: int) -> int:
    """Return ``n!``."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    stack = list(range(1, n + 1))
    result = 1
    while stack:
        result *= stack.pop()
    return result


def format_factorial(n: int) -> str:
    """Show ``n!`` as its product, largest factor first."""
    if n == 0:
        return "0! = 1"
    factors = " * ".join(str(k) for k in range(n, 0, -1))
    return f"{n}! = {factors} = {factorial(n)}"


def _parse_int(token: str) -> int | None:
    match = _INTEGER_PREFIX.match(token)
    return int(match.group(1)) if match else None


def _divide(a: int, b: int) -> int:
    if b == 0:
        raise ExpressionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def evaluate_rpn(expression: str) -> int:
    """Evaluate a whitespace-separated postfix expression of integers.

    A token counts as a number when it starts with an optionally signed
    integer; division truncates toward zero.
    """
    stack: list[int] = []
    for token in expression.split():
        number = _parse_int(token)
        if number is not None:
            stack.append(number)
            continue
        if token not in _OPERATORS:
            raise ExpressionError(f"invalid argument: {token!r}")
        if len(stack) < 2:
            raise ExpressionError("invalid expression: missing operand")
        b = stack.pop()
        a = stack.pop()
        if token == "+":
            stack.append(a + b)
        elif token == "-":
            stack.append(a - b)
        elif token == "*":
            stack.append(a * b)
        else:
            stack.append(_divide(a, b))
    if len(stack) != 1:
        raise ExpressionError("invalid expression")
    return stack[0]