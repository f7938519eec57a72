from .constants import empty_value, get_empty_inner_hash
from .errors import InvalidNodeType
from .hasher import hash2


class Node:
    """One cell of the tree, either a LeafNode or an InnerNode."""

    is_leaf = False

    def contribution(self):
        """The value this node feeds into its parent's hash."""
        raise NotImplementedError

    def compute_hash(self, hasher):
        raise NotImplementedError

    def recalculate_hash(self, hasher):
        pass


class LeafNode(Node):
    is_leaf = True

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def contribution(self):
        return self.value

    def compute_hash(self, hasher):
        # the parent hashes the raw value together with its sibling
        return self.value

    def __repr__(self):
        return f"LeafNode({self.value})"


class InnerNode(Node):
    __slots__ = ("hash", "left", "right")

    def __init__(self, hash=None, left=None, right=None):
        self.hash = get_empty_inner_hash() if hash is None else hash
        self.left = left
        self.right = right

    @classmethod
    def empty(cls):
        return cls(get_empty_inner_hash())

    def contribution(self):
        return self.hash

    def child(self, go_right):
        return self.right if go_right else self.left

    def sibling(self, go_right):
        return self.left if go_right else self.right

    def with_child(self, go_right, node):
        """Shallow copy with one child replaced; the stored hash is left as is."""
        if go_right:
            return InnerNode(self.hash, self.left, node)
        return InnerNode(self.hash, node, self.right)

    def is_last_inner(self):
        return (self.left is not None and self.left.is_leaf) or (
            self.right is not None and self.right.is_leaf
        )

    def compute_hash(self, hasher):
        # Children on the touched path already hold fresh hashes, so only
        # their contributions are read here.
        last = self.is_last_inner()
        default = empty_value(last)
        left = self.left.contribution() if self.left is not None else default
        right = self.right.contribution() if self.right is not None else default
        return hash2(hasher, left, right, last_level=last)

    def recalculate_hash(self, hasher):
        # assign only after the hasher succeeded
        self.hash = self.compute_hash(hasher)

    def __repr__(self):
        return f"InnerNode(hash={self.hash})"


def as_inner(node, level=None):
    if node.is_leaf:
        raise InvalidNodeType(
            "expected an inner node" + (f" at level {level}" if level is not None else "")
        )
    return node
