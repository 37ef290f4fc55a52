"""
Matching Interface Definitions
"""
from typing import NamedTuple

class Diagnosis(NamedTuple):
	"""
	Where the match went wrong, as best anyone can tell without a memo:
	position: the deepest input offset at which any literal failed to match.
	expected: the literals (as bytes) which were wanted at that offset, in the order first tried.
	at_end: True if that offset is the end of input, meaning the input ran out too soon.
	"""
	position: int
	expected: tuple
	at_end: bool
	
	def describe(self) -> str:
		wanted = ' or '.join(map(repr, self.expected)) or 'end of input'
		if self.at_end: return "Unexpected end of input at offset %d; expected %s."%(self.position, wanted)
		return "Unexpected byte at offset %d; expected %s."%(self.position, wanted)

class MatchError(ValueError):
	def __init__(self, diagnosis:Diagnosis):
		super().__init__(diagnosis.describe())
		self.diagnosis = diagnosis

class UnexpectedByteError(MatchError):
	pass

class UnexpectedEndOfInputError(MatchError):
	pass

class MatchErrorListener:
	"""
	Implement this interface to report/respond to a failed match.
	The default behavior is to raise the corresponding exception.
	Whatever these methods return becomes the result of `engine.match(...)`.
	"""
	def unexpected_byte(self, diagnosis:Diagnosis):
		raise UnexpectedByteError(diagnosis)
	
	def unexpected_end(self, diagnosis:Diagnosis):
		raise UnexpectedEndOfInputError(diagnosis)
