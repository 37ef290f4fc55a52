"""
This module is all about easing over the process to display where things go wrong.

A matcher knows only byte offsets. People would rather see the offending line, with
the trouble spot underlined. The SourceText wrapper turns an offset into a row and
column, slices out the corresponding line, and formats a decent-looking complaint.

Input is bytes, so the text is decoded as Latin-1 for display: every byte becomes
exactly one character, and byte offsets stay valid as character offsets. That may
render UTF-8 oddly, but the underline will always sit in the right place.

Line breaks follow the Unix, Apple, and DOS conventions (\n, \r, and \r\n).
"""

import bisect, re

LINE_BREAK = re.compile(r'\r\n?|\n')

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. Useful for polite error messages. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline_width = max(1, min(width, len(single_line)-start))
	underline = '^'*underline_width
	return prefix + single_line.rstrip() + '\n' + blanks + underline +" "+caption

class SourceText:
	""" Wrapper for some input: participates in half-respectable error-display with context. """
	def __init__(self, content:bytes, filename:str=None, first_line=1):
		self.content = bytes(content).decode('latin-1')
		self.filename = filename
		self.first_line = first_line
		self.__bounds = None

	def __make_bounds(self):
		""" Lazily only find line breaks if it turns out to be necessary for a particular text. """
		if self.__bounds is None:
			inside = [m.end() for m in LINE_BREAK.finditer(self.content)]
			self.__bounds = [0] + inside + [len(self.content)]

	def find_row_col(self, index:int):
		""" Based on a byte offset from the start of text. Respects self.first_line. """
		self.__make_bounds()
		row = bisect.bisect_right(self.__bounds, index, hi=len(self.__bounds) - 1) - 1
		col = index - self.__bounds[row]
		return row+self.first_line, col

	def line_of_text(self, row):
		""" Argument respects self.first_line. """
		self.__make_bounds()
		r = max(0, row - self.first_line)
		return self.content[self.__bounds[r]:self.__bounds[r + 1]]

	def _format_message(self, row, col, message):
		prefix = "At" if self.filename is None else str(self.filename)+":"
		return "%s line %d, column %d: %s" % (prefix, row, col + 1, message)

	def complaint(self, position:int, message:str, width:int=1):
		row, col = self.find_row_col(position)
		reference = self._format_message(row, col, message)
		line = self.line_of_text(row)
		illustrated = illustration(line, col, width, prefix=' >>> ')
		return "%s\n%s"%(reference, illustrated)
