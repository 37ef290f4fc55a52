"""
The input buffer only ever grows. Consumed bytes stay put, because backtracking
may need to read them again from any earlier offset, right back to zero. So memory
use is proportional to the length of the input for as long as the session lives.
"""

class InputBuffer:
	def __init__(self):
		self.__data = bytearray()
		self.cursor = 0
	
	@property
	def total(self) -> int:
		return len(self.__data)
	
	def append(self, byte:int):
		if not 0 <= byte <= 255: raise ValueError("Not a byte: %r"%(byte,))
		self.__data.append(byte)
	
	def pending(self) -> int:
		""" How many bytes are buffered but not yet consumed. """
		return len(self.__data) - self.cursor
	
	def peek(self) -> int:
		return self.__data[self.cursor]
	
	def advance(self):
		assert self.cursor < len(self.__data)
		self.cursor += 1
	
	def rewind(self, offset:int):
		""" Go back to an earlier offset, so those bytes can be matched again. """
		if not 0 <= offset <= len(self.__data): raise ValueError("Cannot rewind to offset %r"%(offset,))
		self.cursor = offset
	
	def view(self, left:int=0, right:int=None) -> bytes:
		return bytes(self.__data[left:right])
