"""
List-of-successes parser combinators.

A parser maps an input string to a list of (value, remainder) pairs. The
empty list means failure; more than one pair means the parse is ambiguous.

	>>> run(sepBy(item, char(",")), "a,b,c")
	[(['a', 'b', 'c'], '')]

Set ``listparsec.debug = True`` and configure ``logging`` at DEBUG level to
get a trace of every parser invocation.
"""

import re
import logging

log = logging.getLogger("listparsec")

debug = False

# Parser :: String -> [(a, String)]
# bind :: (String -> [(a, String)])
#      -> (a -> String -> [(b, String)])
#      -> (String -> [(b, String)])

class Parser:
	__slots__ = ('fn', 'name')

	def __init__(self, fn, name=None):
		self.fn = fn
		self.name = getattr(fn, '__name__', repr(fn)) if name is None else name

	def __call__(self, string):
		if debug:
			log.debug("trying %s on %r", self.name, string)
		return self.fn(string)

	def named(self, name):
		return Parser(self.fn, name)

	def map(self, f):
		return map(self, f)

	def __rshift__(self, f):
		return bind(self, f)

	def __or__(self, other):
		return or_(self, other)

	def __and__(self, other):
		return and_(self, other)

	def __repr__(self):
		return f'<Parser {self.name}>'

class NoParseError(Exception):
	def __init__(self, msg, remainder):
		super().__init__(msg, remainder)
		self.msg = msg
		self.remainder = remainder

	def __str__(self):
		return f'{self.msg}: {self.remainder[:20]!r}'

def _item(string):
	if not string:
		return []
	return [(string[0], string[1:])]

item = Parser(_item, 'item')

def unit(value):
	def unit(string):
		return [(value, string)]
	return Parser(unit)

return_ = unit

def zero():
	def zero(string):
		return []
	return Parser(zero)

def bind(p, f):
	"""
	Run `p`, then the parser `f(value)` on each remainder `p` leaves.

	All results are kept, in the order `p` produced them.
	"""
	def bind(string):
		return [r for value, rem in p(string) for r in f(value)(rem)]
	return Parser(bind)

def map(p, f):
	def map(string):
		return [(f(value), rem) for value, rem in p(string)]
	return Parser(map)

def or_(p, q):
	"""
	Biased choice: all of `p`'s results if it has any, otherwise `q`'s.

	`q` is not run at all when `p` succeeds.
	"""
	def or_(string):
		results = p(string)
		if results:
			return results
		return q(string)
	return Parser(or_)

def and_(p, q):
	def and_(string):
		return p(string) + q(string)
	return Parser(and_)

def satisfy(pred):
	return bind(item, lambda c: unit(c) if pred(c) else zero()).named('satisfy')

def char(c):
	return satisfy(lambda x: x == c).named(f'char({c!r})')

def string(s):
	if not s:
		return unit(s).named("string('')")
	head = char(s[0])
	return bind(head, lambda c: map(string(s[1:]), lambda cs: c + cs)).named(f'string({s!r})')

def _nil(string):
	return [([], string)]

nil = Parser(_nil, 'nil')

def _unlink(node):
	values = []
	while node is not None:
		value, node = node
		values.append(value)
	values.reverse()
	return values

def repeat(step, seed):
	"""
	Apply the parser `step(acc)` to its own results until it fails.

	Yields every final accumulator with its remainder. Branches are explored
	depth first in the order `step` returns them, on an explicit stack, so
	the number of repetitions is not bounded by the recursion limit.
	"""
	def repeat(string):
		results = []
		stack = [(seed, string)]
		while stack:
			acc, rem = stack.pop()
			branches = step(acc)(rem)
			if branches:
				stack.extend(reversed(branches))
			else:
				results.append((acc, rem))
		return results
	return Parser(repeat)

def many(p):
	# values are kept as (value, previous) links until the branch ends
	links = repeat(lambda node: map(p, lambda v: (v, node)), None)
	return map(links, _unlink).named('many')

def many1(p):
	return bind(p, lambda a: map(many(p), lambda rest: [a] + rest))

def sepBy(p, sep):
	return or_(sepBy1(p, sep), nil)

def sepBy1(p, sep):
	return bind(p, lambda a: map(many(bind(sep, lambda _: p)), lambda rest: [a] + rest))

sep_by = sepBy
sep_by1 = sepBy1

def chain(p, op, default):
	return or_(chain1(p, op), unit(default))

def chain1(p, op):
	"""
	Left-associative fold of one or more `p` separated by `op`.

	`op` must yield a binary function; ``1+2+3`` folds as ``(1+2)+3``. A
	trailing operator without an operand is left unconsumed.
	"""
	def step(acc):
		return bind(op, lambda f: map(p, lambda b: f(acc, b)))
	return bind(p, lambda a: repeat(step, a))

def regex(s):
	s = re.compile(s)
	def regex(string):
		m = s.match(string)
		if m:
			return [(string[:m.end()], string[m.end():])]
		return []
	return Parser(regex)

def pair(p1, p2):
	return bind(p1, lambda a: map(p2, lambda b: (a, b)))

def between(pb, p, pa):
	return bind(pb, lambda _: bind(p, lambda v: map(pa, lambda _: v)))

def forward(thunk):
	# resolved on every call so the grammar may be defined after this parser
	def forward(string):
		return thunk()(string)
	return Parser(forward)

def run(parser, string):
	results = parser(string)
	if debug:
		log.debug("%r produced %d result(s)", parser, len(results))
	return results

apply_ = run

def parse(parser, string):
	"""
	Return the value of the first parse that consumes all of `string`.

	Raises `NoParseError` when there is none, with the shortest remainder
	any parse left.
	"""
	results = run(parser, string)
	for value, rem in results:
		if not rem:
			return value
	if not results:
		raise NoParseError("no parse", string)
	shortest = min((rem for _, rem in results), key=len)
	raise NoParseError("unconsumed input", shortest)
