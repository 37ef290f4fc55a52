"""
# Grammars of Literals, Alternations, and Sequences

There are exactly three kinds of rule:
	* A Literal matches a fixed, non-empty sequence of bytes.
	* An Alternation tries each member in the order given. The first member that leads
	  to a complete match of the whole input wins. (This is ordered choice, not a union.)
	* A Sequence matches each member in turn, with no gaps between them.

Rules refer to one another by integer handle into a Grammar, which acts as an arena.
A member may be mentioned by name before it is defined, and a rule may mention
itself. That is how recursive grammars get written: there is no other way to make
a cycle, and the cycle only ever goes through handles, never through object references.

The Grammar object follows a builder pattern: You construct an empty grammar,
define rules, and then seal it. Sealing checks that everything mentioned was
defined and that no rule can reach itself in leftmost position. (Such left-recursion
would send the matcher into an infinite descent, because it always tries the leftmost
derivation first.) Once sealed, a grammar never changes again, so any number of
matchers may share it without coordination.
"""

from typing import NamedTuple, Union

from .interface import (
	MAX_RULE_COUNT, LITERAL, ALTERNATION, SEQUENCE,
	GrammarError, CapacityError, UndefinedRuleError, LeftRecursionError,
)
from ..support.foundation import allocate, cyclic_components

Member = Union[str, int, bytes, bytearray]

class Literal(NamedTuple):
	text: bytes
	kind = LITERAL

	@property
	def size(self): return len(self.text)
	def leftmost(self): return ()

class Alternation(NamedTuple):
	members: tuple
	kind = ALTERNATION

	@property
	def size(self): return len(self.members)
	def leftmost(self): return self.members

class Sequence(NamedTuple):
	members: tuple
	kind = SEQUENCE

	@property
	def size(self): return len(self.members)
	def leftmost(self): return self.members[:1]


class Grammar:
	"""
	An arena of rules addressed by stable integer handles.

	Members of alternations and sequences may be given as:
		str: the name of a rule, which need not be defined yet;
		int: a handle previously returned by this same grammar;
		bytes: an anonymous literal, defined on the spot.
	"""

	def __init__(self, name="Grammar", *, start=None, capacity:int=MAX_RULE_COUNT):
		self.name = name
		self.start = start
		self.capacity = capacity
		self.__rules = []
		self.__names = []
		self.__catalog = {}
		self.__sealed = False

	def __len__(self): return len(self.__rules)

	def is_sealed(self) -> bool: return self.__sealed

	def __check_open(self):
		if self.__sealed: raise GrammarError("Grammar %r is sealed; it cannot be changed."%self.name)

	def __check_capacity(self, name, size:int):
		if size > self.capacity: raise CapacityError(name, size, self.capacity)

	def declare(self, name:str) -> int:
		""" Reserve a handle for a rule to be defined later. Declaring twice is harmless. """
		if name not in self.__catalog:
			self.__check_open()
			self.__rules.append(None)
			self.__catalog[name] = allocate(self.__names, name)
		return self.__catalog[name]

	def __check_vacant(self, name):
		if name in self.__catalog and self.__rules[self.__catalog[name]] is not None:
			raise GrammarError("Rule %r is defined twice."%name)

	def __define(self, name, rule) -> int:
		self.__check_open()
		if name is None:
			self.__rules.append(rule)
			return allocate(self.__names, None)
		self.__check_vacant(name)
		handle = self.declare(name)
		self.__rules[handle] = rule
		return handle

	def __check_member(self, name, member:Member):
		if isinstance(member, str): return
		if isinstance(member, (bytes, bytearray)):
			if not member: raise GrammarError("Rule %r has an empty literal member."%name)
			return self.__check_capacity(name, len(member))
		if isinstance(member, int) and not isinstance(member, bool):
			if 0 <= member < len(self.__rules): return
			raise GrammarError("Handle %d does not belong to grammar %r."%(member, self.name))
		raise TypeError("A member must be a rule name, a handle, or literal bytes; not %r."%(member,))

	def __member(self, member:Member) -> int:
		if isinstance(member, str): return self.declare(member)
		if isinstance(member, (bytes, bytearray)): return self.literal(None, member)
		return member

	def __members(self, name, members) -> tuple:
		"""
		Every member is checked before any is resolved, so a faulty definition
		leaves the grammar exactly as it was: no stray declarations or literals.
		"""
		if not members: raise GrammarError("Rule %r has no members."%name)
		self.__check_capacity(name, len(members))
		self.__check_vacant(name)
		for m in members: self.__check_member(name, m)
		return tuple(self.__member(m) for m in members)

	def literal(self, name:str, text) -> int:
		""" A literal matches exactly the given bytes. A str is taken as UTF-8. """
		if isinstance(text, str): text = text.encode('utf-8')
		text = bytes(text)
		if not text: raise GrammarError("Literal %r is empty."%name)
		self.__check_capacity(name, len(text))
		return self.__define(name, Literal(text))

	def alternation(self, name:str, *members:Member) -> int:
		""" Ordered choice: earlier members take priority. """
		self.__check_open()
		return self.__define(name, Alternation(self.__members(name, members)))

	def sequence(self, name:str, *members:Member) -> int:
		self.__check_open()
		return self.__define(name, Sequence(self.__members(name, members)))

	def handle(self, name:str) -> int:
		try: return self.__catalog[name]
		except KeyError: raise UndefinedRuleError([name]) from None

	def resolve(self, which=None) -> int:
		""" Turn a rule name or handle (or, failing that, the grammar's start rule) into a handle. """
		if which is None: which = self.start
		if which is None: raise GrammarError("Grammar %r has no start rule."%self.name)
		if isinstance(which, str): return self.handle(which)
		self.__check_member(None, which)
		return self.__member(which)

	def rule(self, handle:int):
		return self.__rules[handle]

	@property
	def rules(self) -> tuple:
		""" The (sealed) arena itself: rule objects indexed by handle. """
		return self.seal().__rules

	def name_of(self, handle:int) -> str:
		name = self.__names[handle]
		if name is None: return repr(self.__rules[handle].text)
		return name

	def seal(self):
		""" Validate and freeze. Idempotent; returns the grammar, for chaining. """
		if not self.__sealed:
			missing = [name for name, rule in zip(self.__names, self.__rules) if rule is None]
			if missing: raise UndefinedRuleError(missing)
			loops = cyclic_components([rule.leftmost() for rule in self.__rules])
			if loops: raise LeftRecursionError([self.name_of(q) for q in sorted(loops[0])])
			self.__rules = tuple(self.__rules)
			self.__sealed = True
		return self

	def describe(self, handle:int) -> str:
		""" One rule's right-hand side, in a BNF-ish notation. """
		rule = self.__rules[handle]
		if rule is None: return '<undefined>'
		if rule.kind == LITERAL: return repr(rule.text)
		glue = ' | ' if rule.kind == ALTERNATION else ' '
		return glue.join(self.name_of(m) for m in rule.members)

	def display(self):
		""" Print every named rule. Anonymous literals appear in-line wherever they are used. """
		width = max((len(name) for name in self.__catalog), default=0)
		for name, handle in self.__catalog.items():
			print(name.rjust(width), ':', self.describe(handle))

	def matcher(self, start=None):
		""" Seal the grammar (if need be) and begin a new matching session. """
		from ..matching.engine import Matcher
		return Matcher(self, start)
