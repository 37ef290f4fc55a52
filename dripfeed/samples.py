"""
A small zoo of grammars, useful for demonstration, for testing, and as examples
of how to write recursion (and therefore repetition) with nothing but literals,
alternation, and sequence.

The `define_...` functions add rules to any grammar you like, so they compose:
for instance, `define_separated(g, 'list', 'number', 'spaces')` works once 'number'
and 'spaces' exist (or will exist) in the same grammar. The remaining functions
build complete grammars exactly once per process and hand out the same sealed
object every time after that.
"""

import functools
from .grammar.rules import Grammar

DIGITS = '1234567890'

def define_number(g:Grammar, name='number'):
	""" number = digit number | digit, with digits tried from 1 through 9, then 0. """
	digit = name+'.digit'
	g.alternation(digit, *(d.encode() for d in DIGITS))
	g.sequence(name+'.more', digit, name)
	return g.alternation(name, name+'.more', digit)

def define_spaces(g:Grammar, name='spaces'):
	""" spaces = ws spaces | ws; ws = " " | "\\t" """
	ws = name+'.ws'
	g.alternation(ws, b' ', b'\t')
	g.sequence(name+'.more', ws, name)
	return g.alternation(name, name+'.more', ws)

def define_tree(g:Grammar, name, item):
	""" tree = item | "{" tree "," tree "}" """
	g.sequence(name+'.node', b'{', name, b',', name, b'}')
	return g.alternation(name, item, name+'.node')

def define_separated(g:Grammar, name, item, separator):
	""" list = item separator list | item """
	g.sequence(name+'.more', item, separator, name)
	return g.alternation(name, name+'.more', item)


@functools.lru_cache(None)
def a_plus_b() -> Grammar:
	""" One or more "a" followed by "b": ab = "ab" | "a" ab """
	g = Grammar('a-plus-b', start='ab')
	g.sequence('aab', b'a', 'ab')
	g.alternation('ab', b'ab', 'aab')
	return g.seal()

@functools.lru_cache(None)
def puzzle() -> Grammar:
	""" ("a" | "ab") ("bd" | "c"): the first choice sometimes has to be reconsidered. """
	g = Grammar('puzzle', start='abcd')
	g.sequence('abcd', 'a|ab', 'bd|c')
	g.alternation('a|ab', b'a', b'ab')
	g.alternation('bd|c', b'bd', b'c')
	return g.seal()

@functools.lru_cache(None)
def number() -> Grammar:
	g = Grammar('number', start='number')
	define_number(g)
	return g.seal()

@functools.lru_cache(None)
def spaces() -> Grammar:
	g = Grammar('spaces', start='spaces')
	define_spaces(g)
	return g.seal()

@functools.lru_cache(None)
def numbers() -> Grammar:
	""" Numbers separated by runs of spaces and tabs. """
	g = Grammar('numbers', start='numbers')
	define_separated(g, 'numbers', 'number', 'spaces')
	define_number(g)
	define_spaces(g)
	return g.seal()

@functools.lru_cache(None)
def trees() -> Grammar:
	""" Binary trees of numbers, written like {1,{2,3}} """
	g = Grammar('trees', start='tree')
	define_tree(g, 'tree', 'number')
	define_number(g)
	return g.seal()


SAMPLES = {
	'a-plus-b': a_plus_b,
	'puzzle': puzzle,
	'number': number,
	'spaces': spaces,
	'numbers': numbers,
	'trees': trees,
}
