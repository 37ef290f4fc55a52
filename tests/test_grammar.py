import unittest

from dripfeed.grammar.rules import Grammar
from dripfeed.grammar.interface import (
	MAX_RULE_COUNT, LITERAL, ALTERNATION, SEQUENCE,
	GrammarError, CapacityError, UndefinedRuleError, LeftRecursionError,
)
from dripfeed import samples

class TestConstruction(unittest.TestCase):
	
	def setUp(self):
		self.g = Grammar('test')
	
	def test_00_three_kinds(self):
		a = self.g.literal('a', b'a')
		both = self.g.sequence('both', a, b'b')
		either = self.g.alternation('either', 'both', 'a')
		self.assertEqual(LITERAL, self.g.rule(a).kind)
		self.assertEqual(SEQUENCE, self.g.rule(both).kind)
		self.assertEqual(ALTERNATION, self.g.rule(either).kind)
		self.assertEqual((both, a), self.g.rule(either).members)
		self.assertEqual(2, self.g.rule(both).size)
	
	def test_01_text_may_be_str(self):
		h = self.g.literal('e', 'é')
		self.assertEqual('é'.encode('utf-8'), self.g.rule(h).text)
	
	def test_02_empty_things_are_rejected(self):
		with self.assertRaises(GrammarError): self.g.literal('nothing', b'')
		with self.assertRaises(GrammarError): self.g.alternation('neither')
		with self.assertRaises(GrammarError): self.g.sequence('none')
	
	def test_03_capacity(self):
		self.g.literal('ok', b'x' * MAX_RULE_COUNT)
		with self.assertRaises(CapacityError) as cm: self.g.literal('long', b'x' * (MAX_RULE_COUNT+1))
		self.assertEqual('long', cm.exception.name)
		self.assertEqual(MAX_RULE_COUNT+1, cm.exception.size)
		small = Grammar(capacity=3)
		small.alternation('three', b'a', b'b', b'c')
		with self.assertRaises(CapacityError): small.alternation('four', b'a', b'b', b'c', b'd')
		with self.assertRaises(CapacityError): small.sequence('four', b'a', b'b', b'c', b'd')
		with self.assertRaises(CapacityError): small.literal('four', 'abcd')
	
	def test_04_no_redefinition(self):
		self.g.literal('x', b'x')
		with self.assertRaises(GrammarError): self.g.literal('x', b'y')
		with self.assertRaises(GrammarError): self.g.alternation('x', b'y', b'z')
	
	def test_05_bogus_members(self):
		with self.assertRaises(TypeError): self.g.sequence('s', 3.5)
		with self.assertRaises(TypeError): self.g.sequence('s', None)
		with self.assertRaises(GrammarError): self.g.sequence('s', 99)
	
	def test_06_forward_reference(self):
		ab = self.g.declare('ab')
		self.g.sequence('aab', b'a', 'ab')
		self.assertEqual(ab, self.g.alternation('ab', b'ab', 'aab'))
		self.assertEqual(ab, self.g.handle('ab'))
		self.g.seal()

	def test_07_describe(self):
		g = samples.puzzle()
		self.assertEqual("a|ab bd|c", g.describe(g.handle('abcd')))
		self.assertEqual("b'a' | b'ab'", g.describe(g.handle('a|ab')))
		self.assertEqual("<undefined>", self.g.describe(self.g.declare('later')))
	
	def test_08_faulty_definitions_change_nothing(self):
		self.g.literal('a', b'a')
		faulty = [
			(TypeError, self.g.alternation, 't', 'helper', 3.5),
			(TypeError, self.g.sequence, 't', b'x', 'helper', None),
			(GrammarError, self.g.sequence, 't', 'helper', b'x', 99),
			(GrammarError, self.g.alternation, 't', 'helper', b''),
			(CapacityError, self.g.sequence, 't', 'helper', b'x' * (MAX_RULE_COUNT+1)),
			(GrammarError, self.g.sequence, 'a', 'helper', b'x'),
		]
		for error, method, *args in faulty:
			with self.subTest(args=args):
				with self.assertRaises(error): method(*args)
				self.assertEqual(1, len(self.g))
				self.assertRaises(UndefinedRuleError, self.g.handle, 'helper')
		self.g.sequence('t', 'a', b'b')
		self.g.seal()


class TestSealing(unittest.TestCase):
	
	def test_00_undefined(self):
		g = Grammar()
		g.sequence('s', b'a', 'missing', 'also')
		with self.assertRaises(UndefinedRuleError) as cm: g.seal()
		self.assertEqual(['missing', 'also'], cm.exception.names)
		self.assertFalse(g.is_sealed())
	
	def test_01_self_left_recursion(self):
		g = Grammar()
		g.alternation('s', 'more', b'a')
		g.sequence('more', 's', b'a')
		with self.assertRaises(LeftRecursionError) as cm: g.seal()
		self.assertEqual({'s', 'more'}, set(cm.exception.names))
	
	def test_02_direct_left_recursion(self):
		g = Grammar()
		g.sequence('s', 's', b'a')
		with self.assertRaises(LeftRecursionError) as cm: g.seal()
		self.assertEqual(['s'], cm.exception.names)
	
	def test_03_left_recursion_in_a_later_alternative(self):
		g = Grammar()
		g.alternation('s', b'a', 's')
		with self.assertRaises(LeftRecursionError): g.seal()
	
	def test_04_right_recursion_is_fine(self):
		g = Grammar()
		g.alternation('s', b'a', 'more')
		g.sequence('more', b'a', 's')
		self.assertIs(g, g.seal())
		self.assertIs(g, g.seal())
		self.assertTrue(g.is_sealed())
	
	def test_05_sealed_means_frozen(self):
		g = samples.a_plus_b()
		with self.assertRaises(GrammarError): g.literal('z', b'z')
		with self.assertRaises(GrammarError): g.declare('brand new')
		with self.assertRaises(GrammarError): g.sequence('s', b'a')
		self.assertEqual(g.handle('ab'), g.declare('ab'))
	
	def test_06_start_rule(self):
		g = Grammar()
		g.literal('x', b'x')
		with self.assertRaises(GrammarError): g.resolve()
		self.assertEqual(g.handle('x'), g.resolve('x'))
		with self.assertRaises(UndefinedRuleError): g.resolve('y')
		g.start = 'x'
		self.assertEqual(g.handle('x'), g.resolve())
	
	def test_07_rules_are_sealed_arena(self):
		g = Grammar()
		g.alternation('x', b'x', b'y')
		self.assertEqual(3, len(g.rules))
		self.assertTrue(g.is_sealed())
	
	def test_08_long_leftmost_chain(self):
		def chain(size, last):
			g = Grammar()
			for i in range(size): g.sequence('r%d'%i, 'r%d'%(i+1), b';')
			g.alternation('r%d'%size, *last)
			return g
		chain(5000, [b'x']).seal()
		with self.assertRaises(LeftRecursionError) as cm: chain(5000, [b'x', 'r0']).seal()
		self.assertEqual(5001, len(cm.exception.names))


if __name__ == '__main__':
	unittest.main()
