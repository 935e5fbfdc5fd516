import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.expressions import infix_to_postfix, is_operator, precedence


@pytest.mark.parametrize("ch", ["+", "-", "*", "/"])
def test_operators_recognised(ch):
    assert is_operator(ch) is True


@pytest.mark.parametrize("ch", ["a", "(", " ", "%", ""])
def test_non_operators(ch):
    assert is_operator(ch) is False


def test_precedence_levels():
    assert precedence("*") == precedence("/") == 3
    assert precedence("+") == precedence("-") == 2
    assert precedence("a") == 1


def test_higher_precedence_binds_first():
    assert infix_to_postfix("a+b*c") == "abc*+"
    assert infix_to_postfix("a*b+c") == "ab*c+"


def test_left_associative():
    assert infix_to_postfix("a-b-c") == "ab-c-"


def test_operands_only_pass_through():
    assert infix_to_postfix("abc") == "abc"
    assert infix_to_postfix("") == ""


_OPERATORS = set("+-*/")
_operand = st.sampled_from("abcdxyz")
_operator = st.sampled_from("+-*/")


@st.composite
def _expressions(draw):
    operands = draw(st.lists(_operand, min_size=1, max_size=12))
    operators = draw(st.lists(_operator, min_size=len(operands) - 1, max_size=len(operands) - 1))
    pieces = [operands[0]]
    for op, operand in zip(operators, operands[1:]):
        pieces.extend([op, operand])
    return "".join(pieces)


def _final_stack_depth(postfix):
    """Return the evaluation stack depth after reading postfix, or -1 on underflow."""
    depth = 0
    for ch in postfix:
        if ch in _OPERATORS:
            if depth < 2:
                return -1
            depth -= 1
        else:
            depth += 1
    return depth


@given(_expressions())
def test_output_is_rearrangement_keeping_operand_order(expression):
    postfix = infix_to_postfix(expression)
    assert sorted(postfix) == sorted(expression)
    operands_in = [ch for ch in expression if ch not in _OPERATORS]
    operands_out = [ch for ch in postfix if ch not in _OPERATORS]
    assert operands_out == operands_in


@given(_expressions())
def test_output_is_valid_postfix(expression):
    postfix = infix_to_postfix(expression)
    assert _final_stack_depth(postfix) == 1