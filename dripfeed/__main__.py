"""
Check whether some input belongs to the language of one of the sample grammars.

Input is fed to the matcher one byte at a time, exactly as it arrives. By default
newline bytes are skipped, so a trailing newline does not spoil the verdict.
Prints OK or FAIL, and exits with status 0 or 1 correspondingly.
"""

import sys, argparse
from typing import NamedTuple

from dripfeed import samples
from dripfeed.matching import engine
from dripfeed.support import failureprone

NEWLINES = frozenset(b'\r\n')

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m dripfeed', description=__doc__,)
	parser.add_argument('source_path', nargs='?', default='-', help='path to input file (default: standard input)')
	parser.add_argument('-g', '--grammar', choices=sorted(samples.SAMPLES), default='numbers', help='which sample grammar to match against')
	parser.add_argument('--keep-newlines', action='store_true', help='feed newline bytes to the matcher too')
	parser.add_argument('--explain', action='store_true', help='on failure, show where and what was expected')
	parser.add_argument('--show', action='store_true', help='print the chosen grammar before matching')
	parser.add_argument('-v', '--verbose', action='store_true', help='trace descents and backtracks on standard error')
	return parser.parse_args(argv)

def log_error(*parts):
	""" Simple place to override if you'd rather use a logging framework. """
	print(*parts, file=sys.stderr)

class Transcript(NamedTuple):
	""" The bytes actually read, and where each byte fed to the matcher sat among them. """
	raw: bytes
	offsets: list
	
	def locate(self, position:int) -> int:
		""" Translate an offset into the fed bytes to the corresponding offset into the raw bytes. """
		if position < len(self.offsets): return self.offsets[position]
		return self.offsets[-1] + 1 if self.offsets else 0

def drip(matcher:engine.Matcher, stream, keep_newlines=False) -> Transcript:
	""" Feed the stream one byte at a time until it runs dry or the matcher has certainly failed. """
	raw, offsets = bytearray(), []
	while not matcher.done() or matcher.succeeded():
		chunk = stream.read(1)
		if not chunk: break
		if keep_newlines or chunk[0] not in NEWLINES:
			offsets.append(len(raw))
			matcher.feed(chunk[0])
		raw += chunk
	matcher.stop()
	return Transcript(bytes(raw), offsets)

def explain(matcher:engine.Matcher, transcript:Transcript, filename):
	diagnosis = matcher.diagnosis()
	source = failureprone.SourceText(transcript.raw, filename=filename)
	width = max([len(e) for e in diagnosis.expected], default=1)
	log_error(source.complaint(transcript.locate(diagnosis.position), diagnosis.describe(), width))

def main(args) -> int:
	if args.verbose: engine.VERBOSE = True
	grammar = samples.SAMPLES[args.grammar]()
	if args.show: grammar.display()
	matcher = grammar.matcher()
	try:
		if args.source_path == '-': transcript = drip(matcher, sys.stdin.buffer, args.keep_newlines)
		else:
			with open(args.source_path, 'rb') as fh: transcript = drip(matcher, fh, args.keep_newlines)
		if matcher.succeeded():
			print('OK')
			return 0
		print('FAIL')
		if args.explain: explain(matcher, transcript, None if args.source_path == '-' else args.source_path)
		return 1
	finally:
		matcher.destroy()

if __name__ == '__main__': sys.exit(main(parse_arguments()))
