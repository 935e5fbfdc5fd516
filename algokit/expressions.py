"""Conversion of infix arithmetic expressions to postfix notation."""

from __future__ import annotations

__all__ = ["is_operator", "precedence", "infix_to_postfix"]

_OPERATORS = frozenset("+-*/")


def is_operator(ch: str) -> bool:
    """Return True for the binary operators + - * /."""
    return ch in _OPERATORS


def precedence(ch: str) -> int:
    """Return 3 for * and /, 2 for + and -, and 1 for anything else."""
    if ch in ("*", "/"):
        return 3
    if ch in ("+", "-"):
        return 2
    return 1


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression to postfix, treating operators as left-associative.

    Every character that is not an operator is copied to the output as is.
    """
    output = []
    stack = []
    for ch in infix:
        if not is_operator(ch):
            output.append(ch)
            continue
        while stack and precedence(ch) <= precedence(stack[-1]):
            output.append(stack.pop())
        stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)