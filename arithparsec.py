"""
Integer arithmetic built on listparsec; `/` is floor division.

	>>> evaluate("2 * (3 + 4) - 5")
	9
"""

import operator

from listparsec import (
	bind, or_, map, unit, many, satisfy, string, regex, between, chain1,
	forward, parse,
)

spaces = many(satisfy(str.isspace)).named('spaces')

def token(p):
	return bind(p, lambda v: bind(spaces, lambda _: unit(v)))

def symbol(s):
	return token(string(s))

def _op(s, f):
	return map(symbol(s), lambda _: f)

literal = token(map(regex('[0-9]+'), int)).named('literal')

prodop = or_(_op("*", operator.mul), _op("/", operator.floordiv))

addop = or_(_op("+", operator.add), _op("-", operator.sub))

factor = or_(literal, between(symbol("("), forward(lambda: term), symbol(")")))

product = chain1(factor, prodop)

term = chain1(product, addop)

expression = bind(spaces, lambda _: term)

def evaluate(text):
	return parse(expression, text)
