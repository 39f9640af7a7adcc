import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.expressions import (
    are_pair,
    evaluate_postfix,
    is_balanced,
    is_operator,
    perform_operation,
)


@pytest.mark.parametrize(
    "opening, closing, expected",
    [("(", ")", True), ("{", "}", True), ("[", "]", True), ("(", "]", False), (")", "(", False)],
)
def test_are_pair(opening, closing, expected):
    assert are_pair(opening, closing) is expected


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("{[()]}", True),
        ("a(b)c", True),
        ("", True),
        ("(]", False),
        ("((", False),
        (")", False),
        ("([)]", False),
    ],
)
def test_is_balanced(expression, expected):
    assert is_balanced(expression) is expected


@pytest.mark.parametrize("char, expected", [("+", True), ("-", True), ("*", True), ("/", True), ("%", False), ("1", False)])
def test_is_operator(char, expected):
    assert is_operator(char) is expected


def test_division_truncates_toward_zero():
    assert perform_operation("/", -7, 2) == -3


def test_unknown_operator():
    with pytest.raises(ValueError):
        perform_operation("%", 1, 2)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        perform_operation("/", 1, 0)


def test_evaluate_worked_example():
    assert evaluate_postfix("2 3 * 5 4 * + 9 -") == 17


def test_evaluate_integer_division():
    assert evaluate_postfix("7,2 /") == 3


def test_evaluate_single_number():
    assert evaluate_postfix("42") == 42


@given(st.integers(0, 10_000), st.integers(1, 10_000), st.sampled_from("+-*/"))
def test_evaluate_single_operation(left, right, operator):
    assert evaluate_postfix(f"{left} {right} {operator}") == perform_operation(operator, left, right)
    assert evaluate_postfix(f"{left},{right}{operator}") == perform_operation(operator, left, right)


@pytest.mark.parametrize("expression", ["", "+", "5 +", "  ,  "])
def test_evaluate_malformed(expression):
    with pytest.raises(ValueError):
        evaluate_postfix(expression)