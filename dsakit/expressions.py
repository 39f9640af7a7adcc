"""Bracket balancing and postfix expression evaluation."""

from __future__ import annotations

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENING = frozenset(_PAIRS.values())
_OPERATORS = frozenset("+-*/")


def are_pair(opening: str, closing: str) -> bool:
    """Return True if the two characters form a matching bracket pair."""
    return _PAIRS.get(closing) == opening


def is_balanced(expression: str) -> bool:
    """Return True if every bracket in the expression is properly matched."""
    stack: list[str] = []
    for char in expression:
        if char in _OPENING:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or not are_pair(stack[-1], char):
                return False
            stack.pop()
    return not stack


def is_operator(char: str) -> bool:
    """Return True for one of the four arithmetic operators."""
    return char in _OPERATORS


def perform_operation(operator: str, left: int, right: int) -> int:
    """Apply an operator to two integers; division truncates toward zero."""
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    raise ValueError(f"unknown operator: {operator!r}")


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of non-negative integers.

    Operands are runs of decimal digits; spaces and commas separate tokens
    and any other character is ignored.
    """
    stack: list[int] = []
    number: int | None = None
    for char in expression:
        if "0" <= char <= "9":
            number = (number or 0) * 10 + int(char)
            continue
        if number is not None:
            stack.append(number)
            number = None
        if is_operator(char):
            if len(stack) < 2:
                raise ValueError(f"not enough operands for {char!r}")
            right = stack.pop()
            left = stack.pop()
            stack.append(perform_operation(char, left, right))
    if number is not None:
        stack.append(number)
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]