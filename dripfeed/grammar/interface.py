"""
Grammar Interface Definitions
"""

MAX_RULE_COUNT = 128 # Longest literal, and most members in any one alternation or sequence.

LITERAL, ALTERNATION, SEQUENCE = 'literal', 'alternation', 'sequence'

class GrammarError(ValueError):
	""" Something is wrong with the way a grammar was put together. """

class CapacityError(GrammarError):
	"""
	A literal or a member list exceeds the grammar's configured capacity.
	Parameters are the offending rule's name, the size asked for, and the capacity.
	"""
	def __init__(self, name, size, capacity):
		super().__init__("Rule %r has %d elements, but the capacity is %d."%(name, size, capacity))
		self.name, self.size, self.capacity = name, size, capacity

class UndefinedRuleError(GrammarError):
	""" Some rule names were mentioned (or declared) but never defined. """
	def __init__(self, names):
		super().__init__("Undefined rule(s): %s."%', '.join(map(repr, names)))
		self.names = names

class LeftRecursionError(GrammarError):
	"""
	These rules can reach themselves without consuming any input.
	A recognizer that always tries the leftmost derivation first would never get off the ground.
	"""
	def __init__(self, names):
		super().__init__("Rule(s) %s are left-recursive."%', '.join(map(repr, names)))
		self.names = names
