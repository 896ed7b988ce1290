import unittest

from variety import define, SumType, Constructor, Variant, AlreadyExists, ReservedName

class DefinitionTests(unittest.TestCase):

	def test_constructors_exist(self):
		Tree = define('Leaf', 'Inner')
		self.assertIsInstance(Tree.Leaf, Constructor)
		self.assertIsInstance(Tree.Inner, Constructor)
		self.assertTrue(callable(Tree.Leaf))

	def test_values_have_cases(self):
		Tree = define('Leaf', 'Inner')
		t1 = Tree.Leaf(3)
		t2 = Tree.Inner('root', Tree.Leaf(0), Tree.Leaf(4))
		for t in t1, t2:
			self.assertIsInstance(t, Variant)
			self.assertTrue(callable(t.cases))

	def test_constructor_tags_its_output(self):
		Shape = define('Circle', 'Square')
		c = Shape.Circle(1.5)
		self.assertEqual('Circle', c.tag)
		self.assertEqual((1.5,), c.payload)
		self.assertIs(Shape, c.definition)

	def test_variants_in_order(self):
		T = define('C', 'A', 'B')
		self.assertEqual(('C', 'A', 'B'), T.variants)
		self.assertEqual(['C', 'A', 'B'], list(T))
		self.assertEqual(3, len(T))
		self.assertIn('A', T)
		self.assertNotIn('D', T)
		self.assertNotIn('_', T)

	def test_each_definition_is_fresh(self):
		A = define('X')
		B = define('X')
		self.assertIsNot(A, B)
		self.assertIsNot(A.shared, B.shared)
		self.assertTrue(A.owns(A.X()))
		self.assertFalse(A.owns(B.X()))
		self.assertFalse(A.owns('X'))

	def test_empty_definition(self):
		T = define()
		self.assertEqual((), T.variants)
		self.assertEqual('<SumType>', repr(T))

	def test_repr(self):
		T = define('Nothing', 'Just')
		self.assertEqual('<SumType Nothing | Just>', repr(T))
		self.assertEqual('<Constructor Just of <SumType Nothing | Just>>', repr(T.Just))

	def test_subscript_reaches_awkward_names(self):
		T = define('not an identifier', 'variants', 'shared')
		odd = T['not an identifier'](1)
		self.assertEqual('not an identifier', odd.tag)
		self.assertEqual(('not an identifier', 'variants', 'shared'), T.variants)
		self.assertEqual('variants', T['variants']().tag)
		with self.assertRaises(KeyError):
			T['nope']

	def test_own_members_shadow_cases(self):
		T = define('match', 'owns')
		self.assertNotIsInstance(T.match, Constructor)
		self.assertEqual('match', T['match'](1).tag)
		self.assertEqual((1,), T['owns'](1).payload)

	def test_unknown_case(self):
		T = define('A')
		with self.assertRaises(AttributeError):
			T.B

	def test_duplicate_names(self):
		with self.assertRaises(AlreadyExists):
			define('A', 'B', 'A')

	def test_else_marker_is_reserved(self):
		with self.assertRaises(ReservedName):
			define('A', '_')

	def test_attributes_are_not_assignable(self):
		T = define('A')
		with self.assertRaises(AttributeError):
			T.greet = lambda self: 'hi'
		T.shared['greet'] = lambda self: 'hi'
		self.assertEqual('hi', T.A().greet())

	def test_accepts_any_iterable_of_names(self):
		T = SumType(name for name in ['Yes', 'No'])
		self.assertEqual(('Yes', 'No'), T.variants)


if __name__ == '__main__':
	unittest.main()
