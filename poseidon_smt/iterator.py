class SparseTreeIterator:
    """
    Depth-first, left-before-right walk over materialized leaves.

    Yields leaf values. Absent children are skipped, so zero leaves only show
    up if they were materialized (e.g. by a delete).
    """

    def __init__(self, root):
        self._stack = [root] if root is not None else []

    def __iter__(self):
        return self

    def __next__(self):
        while self._stack:
            node = self._stack.pop()
            if node.is_leaf:
                return node.value
            if node.right is not None:
                self._stack.append(node.right)
            if node.left is not None:
                self._stack.append(node.left)
        raise StopIteration
