import pytest

from listparsec import NoParseError, run
from arithparsec import evaluate, literal, term, addop, symbol


def test_literal():
	assert run(literal, "42 + 1") == [(42, "+ 1")]
	assert run(literal, "x") == []


def test_symbol_skips_trailing_space():
	assert run(symbol("("), "(  1") == [("(", "1")]


def test_addop_yields_function():
	[(f, rem)] = run(addop, "- 2")
	assert f(5, 2) == 3
	assert rem == "2"


@pytest.mark.parametrize("text, expected", [
	("1", 1),
	("1+2+3", 6),
	("10 - 3 - 2", 5),
	("2 + 3 * 4", 14),
	("(2 + 3) * 4", 20),
	("2 * (3 + 4) - 5", 9),
	("  8 / 2 / 2 ", 2),
	("7 / 2", 3),
	("7 / 2 * 2", 6),
	("((7))", 7),
])
def test_evaluate(text, expected):
	assert evaluate(text) == expected


def test_term_leaves_unparsed_tail():
	assert run(term, "1 + 2 )") == [(3, ")")]


@pytest.mark.parametrize("text", ["", "+", "1 +", "(1", "1 2", "a"])
def test_evaluate_rejects_invalid_input(text):
	with pytest.raises(NoParseError):
		evaluate(text)


def test_division_by_zero_propagates():
	with pytest.raises(ZeroDivisionError):
		evaluate("1 / 0")


def test_division_stays_integer():
	assert isinstance(evaluate("7 / 2"), int)


def test_long_sum():
	assert evaluate(" + ".join(["1"] * 3000)) == 3000
