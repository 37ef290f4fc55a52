"""
The incremental, backtracking matching engine.

A Matcher never calls itself recursively and never waits for input. Instead, the
derivation being attempted is an explicit tree of State objects (see module
`derivation`), with exactly one literal at the frontier: the active position.
Each byte fed in is compared against that literal. A match moves the frontier
forward; a mismatch backtracks to the nearest choice point with untried
alternatives, rewinding the input cursor to wherever that choice point began.
Since the buffered input is kept, a rewind may expose bytes which then get
matched again without waiting for anything new to arrive.

When no more input is coming, call `stop()`: it forces the engine to abandon
whatever derivation is waiting for more bytes and explore what remains, in
priority order, for a derivation that accounts for exactly the input received.

There is no memo of failed (rule, offset) pairs, so an unkind grammar and input
can make this take exponential time. That is a known property, not an accident.
"""

import sys

from ..grammar.interface import LITERAL, ALTERNATION, SEQUENCE
from .buffer import InputBuffer
from .derivation import State, Forest
from .interface import Diagnosis, MatchErrorListener

VERBOSE = False

class Matcher:
	"""
	One matching session: feed it bytes, then stop it, then ask if it succeeded.
	The grammar is shared and read-only; everything else here belongs to this session alone.
	"""

	census: Forest

	def __init__(self, grammar, start=None):
		self.__grammar = grammar.seal()
		self.__rules = grammar.rules
		self.__buffer = InputBuffer()
		self.__pos = None
		self.__matched = False
		self.__deepest = -1
		self.__expected = []
		self.census = Forest()
		self.__descend(grammar.resolve(start), None)

	@property
	def position(self) -> int:
		return self.__buffer.cursor

	@property
	def total(self) -> int:
		return self.__buffer.total

	def __trace(self, event, state:State):
		print("%-9s %s at %d (cursor %d)"%(
			event, self.__grammar.name_of(state.rule), state.start, self.__buffer.cursor,
		), file=sys.stderr)

	def __descend(self, handle:int, parent):
		"""
		Build the leftmost derivation of a rule down to its first literal,
		which becomes the active position.
		"""
		start = self.__buffer.cursor
		while True:
			rule = self.__rules[handle]
			is_literal = rule.kind == LITERAL
			parent = self.census.plant(handle, 0 if is_literal else rule.size, start, parent)
			if is_literal: break
			handle = rule.members[0]
		self.__pos = parent
		if VERBOSE: self.__trace('descend', parent)

	def __advance(self):
		""" The active literal is complete. Find the next thing to match, or notice the root is done. """
		node = self.__pos
		while node is not None:
			rule = self.__rules[node.rule]
			if rule.kind == SEQUENCE and node.progress + 1 < rule.size:
				node.progress += 1
				self.__descend(rule.members[node.progress], node)
				return
			parent = node.parent
			if parent is None:
				if VERBOSE: self.__trace('complete', node)
				self.__matched = True
				self.census.fell(node)
			node = parent
		self.__pos = None

	def __backtrack(self):
		"""
		Abandon the active literal and resume at the nearest untried alternative.

		Completed sequence parts stay in the tree exactly so they can be revisited here:
		if a later part fails, an earlier part may yet have some other way to match.
		"""
		node = self.__pos
		while node is not None:
			rule = self.__rules[node.rule]
			if rule.kind != LITERAL: node.children[node.progress] = None
			if rule.kind == ALTERNATION and node.progress + 1 < rule.size:
				node.progress += 1
				self.__buffer.rewind(node.start)
				if VERBOSE: self.__trace('backtrack', node)
				self.__descend(rule.members[node.progress], node)
				return
			if rule.kind == SEQUENCE and node.progress > 0:
				node.progress -= 1
				while self.__rules[node.rule].kind != LITERAL:
					node = node.children[node.progress]
			else:
				parent = node.parent
				self.census.fell(node)
				node = parent
		self.__pos = None

	def __note_failure(self, node:State, literal):
		position = self.__buffer.cursor
		remainder = literal.text[node.progress:]
		if position > self.__deepest:
			self.__deepest = position
			self.__expected = [remainder]
		elif position == self.__deepest and remainder not in self.__expected:
			self.__expected.append(remainder)

	def __step(self):
		node = self.__pos
		literal = self.__rules[node.rule]
		if literal.text[node.progress] != self.__buffer.peek():
			self.__note_failure(node, literal)
			self.__backtrack()
			return
		node.progress += 1
		self.__buffer.advance()
		if node.progress == literal.size: self.__advance()

	def __run(self):
		while self.__pos is not None and self.__buffer.pending():
			self.__step()

	def feed(self, byte:int):
		"""
		Supply one byte of input. Once the matcher is done, bytes are still counted,
		so surplus input spoils success, but no further matching happens.
		"""
		self.__buffer.append(byte)
		self.__run()

	def feed_bytes(self, data):
		""" Supply several bytes at once. The verdict is the same as feeding them one at a time. """
		for byte in data: self.__buffer.append(byte)
		self.__run()

	def stop(self):
		""" No more input is coming. Explore whatever alternatives remain until something is decided. """
		while self.__pos is not None:
			self.__note_failure(self.__pos, self.__rules[self.__pos.rule])
			self.__backtrack()
			self.__run()

	def done(self) -> bool:
		return self.__pos is None

	def succeeded(self) -> bool:
		return self.__matched and self.__buffer.cursor == self.__buffer.total

	def destroy(self):
		""" Release the entire derivation tree. Safe at any time, and more than once. """
		if self.__pos is not None:
			self.census.fell(self.__pos.root())
			self.__pos = None

	def diagnosis(self):
		"""
		None if the match succeeded. Otherwise, a Diagnosis. If the grammar was satisfied
		by a strict prefix of the input, the diagnosis points at the first surplus byte.
		"""
		if self.succeeded(): return None
		cursor, total = self.__buffer.cursor, self.__buffer.total
		if self.__deepest < 0 or self.__matched and self.__deepest < cursor:
			return Diagnosis(cursor, (), cursor >= total)
		return Diagnosis(self.__deepest, tuple(self.__expected), self.__deepest >= total)

	def excerpt(self, left:int=0, right:int=None) -> bytes:
		""" A copy of some of the input received so far. """
		return self.__buffer.view(left, right)


def recognize(grammar, data, start=None) -> bool:
	""" Is `data` (a bytes-like object) in the language of the grammar? """
	matcher = Matcher(grammar, start)
	try:
		matcher.feed_bytes(data)
		matcher.stop()
		return matcher.succeeded()
	finally:
		matcher.destroy()

def match(grammar, data, start=None, on_error:MatchErrorListener=None):
	"""
	Like `recognize`, but a failure is reported to the `on_error` listener,
	which by default raises UnexpectedByteError or UnexpectedEndOfInputError.
	Returns True on success, or else whatever the listener returns.
	"""
	if on_error is None: on_error = MatchErrorListener()
	matcher = Matcher(grammar, start)
	try:
		matcher.feed_bytes(data)
		matcher.stop()
		diagnosis = matcher.diagnosis()
	finally:
		matcher.destroy()
	if diagnosis is None: return True
	if diagnosis.at_end: return on_error.unexpected_end(diagnosis)
	return on_error.unexpected_byte(diagnosis)
