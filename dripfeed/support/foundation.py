""" Small is beautiful. These algorithms need no introduction. """

def allocate(a_list:list, item):
	"""
	Append an item to a list, and return the new item's index in that list.
	Too frequent an idiom not to abbreviate.
	"""
	idx = len(a_list)
	a_list.append(item)
	return idx

def strongly_connected_components_by_tarjan(graph):
	"""
	See https://en.wikipedia.org/wiki/Tarjan%27s_strongly_connected_components_algorithm
	Returns a list of strongly-connected components in reverse topological order.
	Each component is a list of member node numbers.
	
	Deviating from the wikipedia presentation, the depth-first search keeps an explicit
	stack of (node, remaining arcs) pairs rather than recursing, so a long chain of nodes
	cannot exhaust the interpreter's recursion limit. A node's index is its position
	on the component stack.
	
	It's expected that graph[q] is the list of arcs from (or perhaps to) node q.
	The linear-time bound assumes all nodes are numbered from 0..last.
	"""
	def visit(q):
		low_link[q] = index[q] = allocate(stack, q)
		on_stack[q] = True
		work.append((q, iter(graph[q])))
	def finish(q):
		if low_link[q] == index[q]:  # i.e. if node q is the root of an SCC:
			component = stack[index[q]:]
			del stack[index[q]:]
			for r in component: on_stack[r] = False
			output.append(component)
		if work:
			p = work[-1][0]
			low_link[p] = min(low_link[p], low_link[q])
	size = len(graph)
	index = [None] * size
	low_link = [None] * size
	on_stack = [False] * size
	stack = []
	work = []
	output = []
	for root in range(size):
		if index[root] is not None: continue
		visit(root)
		while work:
			q, arcs = work[-1]
			for r in arcs:
				if index[r] is None:
					visit(r)
					break
				elif on_stack[r]: low_link[q] = min(low_link[q], index[r])
			else:
				work.pop()
				finish(q)
	return output

def cyclic_components(graph) -> list:
	"""
	Those strongly-connected components which actually contain a cycle:
	either more than one member, or a single member with an arc to itself.
	"""
	return [
		component for component in strongly_connected_components_by_tarjan(graph)
		if len(component) > 1 or component[0] in graph[component[0]]
	]
