# Canonical hashes standing in for unmaterialized parts of the tree.
# They are hard-coded so roots match other circom/Poseidon implementations
# bit for bit; never recompute them from the hasher.

from functools import lru_cache

from .field import ZERO

EMPTY_LEAF_HASH_BN = "19014214495641488759237505126948346942972912379615652741039992445865937985820"
EMPTY_INNER_HASH_BN = "10447686833432518214645507207530993719569269870494442919228205482093666444588"

DEFAULT_DEPTH = 20


@lru_cache(maxsize=None)
def get_empty_leaf_hash():
    """Pre-computed poseidon(0), mimics an empty leaf node."""
    return int(EMPTY_LEAF_HASH_BN)


@lru_cache(maxsize=None)
def get_empty_inner_hash():
    """Pre-computed hash of an empty inner node (two empty children)."""
    return int(EMPTY_INNER_HASH_BN)


def empty_value(last_level):
    # an absent child at the leaf level is a zero leaf, anywhere else a whole empty subtree
    return ZERO if last_level else get_empty_inner_hash()
