from .constants import (
    DEFAULT_DEPTH,
    EMPTY_INNER_HASH_BN,
    EMPTY_LEAF_HASH_BN,
    get_empty_inner_hash,
    get_empty_leaf_hash,
)
from .errors import (
    HasherError,
    InnerNodeExpected,
    InvalidBitsPathHash,
    InvalidDepth,
    InvalidLevel,
    InvalidNodeType,
    PoseidonMerkleError,
    ProofError,
    SiblingNotFound,
)
from .field import FIELD_MODULUS, ZERO, field, get_path_bit, get_path_hash, path_to_bits
from .hasher import Hasher, PoseidonHasher, hash2
from .iterator import SparseTreeIterator
from .node import InnerNode, LeafNode, Node
from .proof import MerkleProof
from .tree import SparseMerkleTree
from .visualizer import render_tree, visualize

__version__ = "0.1.0"
