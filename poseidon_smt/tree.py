import logging

from .constants import DEFAULT_DEPTH, empty_value, get_empty_inner_hash
from .errors import (
    InnerNodeExpected,
    InvalidBitsPathHash,
    InvalidDepth,
    InvalidLevel,
    InvalidNodeType,
    SiblingNotFound,
)
from .field import FIELD_BITS, FIELD_MODULUS, ZERO, field, get_path_bit, get_path_hash
from .hasher import PoseidonHasher
from .iterator import SparseTreeIterator
from .node import InnerNode, LeafNode, as_inner
from .proof import MerkleProof

logger = logging.getLogger(__name__)


class SparseMerkleTree:
    """
    Sparse Poseidon Merkle tree of fixed depth.

    Only nodes on inserted paths are materialized. A missing child stands for
    an empty subtree (hash ``get_empty_inner_hash()``) or, right above the
    leaves, for a zero leaf. Bit ``i`` of a path picks the child at level
    ``i``, 1 = right.
    """

    def __init__(self, depth=DEFAULT_DEPTH, hasher=None):
        if not isinstance(depth, int) or depth < 1 or depth > FIELD_BITS:
            raise InvalidDepth(depth)
        self.depth = depth
        self.hasher = hasher if hasher is not None else PoseidonHasher(2)
        self.root = InnerNode.empty()

    def __repr__(self):
        return f"SparseMerkleTree(depth={self.depth}, root={self.root.hash})"

    # --- paths ---

    get_path_bit = staticmethod(get_path_bit)
    get_path_hash = staticmethod(get_path_hash)

    def get_merkle_path(self, bits):
        if len(bits) != self.depth:
            raise InvalidBitsPathHash(f"expected {self.depth} bits, got {len(bits)}")
        return get_path_hash(bits)

    def _path(self, path):
        # a path is either a field element or a sequence of bools, one per level
        if isinstance(path, int):
            if not 0 <= path < FIELD_MODULUS:
                raise InvalidBitsPathHash(f"path {path} is not a field element")
            return path
        if isinstance(path, (str, bytes)):
            raise InvalidBitsPathHash(f"path must be an int or a sequence of bools, got {path!r}")
        bits = list(path)
        if not all(isinstance(b, bool) for b in bits):
            raise InvalidBitsPathHash("path bits must be bools")
        return self.get_merkle_path(bits)

    # --- reads ---

    def root_hash(self):
        return self.root.hash

    def is_empty(self):
        return self.root.hash == get_empty_inner_hash()

    def get_inner_node(self, path, level):
        """
        Inner node at ``level`` (root is level 0) on ``path``. Missing nodes are
        returned as detached empty inner nodes; the tree is not modified.
        """
        if level < 0 or level >= self.depth:
            raise InvalidLevel(level, self.depth)
        path = self._path(path)
        node = self.root
        for i in range(level):
            child = node.child(get_path_bit(path, i))
            if child is None:
                return InnerNode.empty()
            node = as_inner(child, i + 1)
        return node

    def get_node(self, path):
        """Leaf on ``path``, or None if that path was never inserted."""
        path = self._path(path)
        node = self.root
        for i in range(self.depth):
            node = as_inner(node, i).child(get_path_bit(path, i))
            if node is None:
                return None
        return node

    def get_value(self, path):
        node = self.get_node(path)
        if node is None:
            return ZERO
        if not node.is_leaf:
            raise InvalidNodeType("expected a leaf at the end of the path")
        return node.value

    # --- writes ---

    def insert_at_path(self, path, value):
        path = self._path(path)
        value = field(value)

        # descend, creating missing inner nodes on the way
        stack = []
        node = self.root
        for level in range(self.depth):
            stack.append(node)
            if level + 1 == self.depth:
                break
            child = node.child(get_path_bit(path, level))
            node = InnerNode.empty() if child is None else as_inner(child, level + 1)

        # rebuild the path bottom-up on copies; the live tree only changes
        # once every hash on the path has been computed
        new = LeafNode(value)
        for level in reversed(range(self.depth)):
            parent = stack[level].with_child(get_path_bit(path, level), new)
            parent.recalculate_hash(self.hasher)
            new = parent
        self.root = new
        logger.debug("set leaf %x -> %d, root %d", path, value, self.root.hash)

    def delete_at_path(self, path):
        self.insert_at_path(path, ZERO)

    def clear(self):
        self.root = InnerNode.empty()

    # --- proofs ---

    def generate_proof(self, path):
        path = self._path(path)
        siblings = []
        node = self.root
        for level in range(self.depth):
            if node.is_leaf:
                raise InnerNodeExpected(level)
            last = level + 1 == self.depth
            go_right = get_path_bit(path, level)

            sibling = node.sibling(go_right)
            if sibling is None:
                siblings.append(empty_value(last))
            elif sibling.is_leaf and not last:
                raise InnerNodeExpected(level + 1)
            else:
                siblings.append(sibling.contribution())

            child = node.child(go_right)
            if child is None:
                if last:
                    raise InvalidNodeType(f"no leaf at path {path:#x}")
                raise SiblingNotFound(level)
            node = child

        if not node.is_leaf:
            raise InvalidNodeType("expected a leaf at the end of the path")
        logger.debug("proof for %x with %d siblings", path, len(siblings))
        return MerkleProof(tuple(siblings), path, node.value, self.root.hash)

    # --- traversal ---

    def iter(self):
        return SparseTreeIterator(self.root)

    def __iter__(self):
        return self.iter()
