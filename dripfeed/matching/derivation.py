"""
The derivation tree: one State per rule-instance currently under consideration.

Each State owns the States in its `children` slots (one slot per member of its rule,
filled only for branches actually attempted) and points back at its parent without
owning it. The matcher owns the root, and finds it by following parents up from
whatever literal is presently active.

A Forest plants and fells States on behalf of one matching session and keeps count,
so that a session can prove it let go of everything it ever allocated.
"""

class State:
	__slots__ = ('rule', 'progress', 'start', 'children', 'parent')

	def __init__(self, rule:int, size:int, start:int, parent):
		self.rule = rule
		self.progress = 0
		self.start = start
		self.children = [None] * size
		self.parent = parent

	def __repr__(self):
		return "<State rule=%d progress=%d start=%d>"%(self.rule, self.progress, self.start)

	def root(self):
		node = self
		while node.parent is not None: node = node.parent
		return node


class Forest:
	"""
	Node census for one session:
		planted: how many States were ever created;
		live: how many are still attached to something.
	"""
	def __init__(self):
		self.planted = 0
		self.live = 0

	def plant(self, rule:int, size:int, start:int, parent) -> State:
		""" Create a State and hang it in the parent's slot for the parent's current progress. """
		state = State(rule, size, start, parent)
		if parent is not None:
			assert parent.children[parent.progress] is None
			parent.children[parent.progress] = state
		self.planted += 1
		self.live += 1
		return state

	def fell(self, state:State):
		"""
		Release a State along with everything underneath it.
		This does not detach it from its parent's slot: the caller clears that.
		Iterative, because derivations can run far deeper than the recursion limit.
		"""
		if state is None: return
		stack = [state]
		while stack:
			node = stack.pop()
			stack.extend(child for child in node.children if child is not None)
			node.children = []
			node.parent = None
			self.live -= 1
