import logging
from dataclasses import dataclass
from typing import Tuple

from .errors import ProofError
from .field import get_path_bit
from .hasher import Hasher, hash2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MerkleProof:
    """
    Inclusion proof for one leaf.

    Attributes:
        siblings: sibling contributions ordered root -> leaf
        merkle_path: path as a field element, bit i = direction at level i
        leaf_value: value stored at the leaf
        root_hash: root the proof claims to belong to
    """

    siblings: Tuple[int, ...]
    merkle_path: int
    leaf_value: int
    root_hash: int

    @property
    def depth(self):
        return len(self.siblings)

    def compute_root(self, hasher: Hasher) -> int:
        if not self.siblings:
            raise ProofError("proof has no siblings")
        current = self.leaf_value
        # leaf to root, keeping the bit position of every level
        for level in reversed(range(len(self.siblings))):
            sibling = self.siblings[level]
            if get_path_bit(self.merkle_path, level):
                left, right = sibling, current
            else:
                left, right = current, sibling
            current = hash2(hasher, left, right, last_level=level == len(self.siblings) - 1)
        return current

    def verify_proof(self, hasher: Hasher) -> bool:
        """
        Recompute the root from the leaf and siblings and compare it with
        ``root_hash``. A mismatch is a normal False; hasher failures and
        malformed proofs raise.
        """
        computed = self.compute_root(hasher)
        if computed != self.root_hash:
            logger.debug("proof root mismatch: computed %d, claimed %d", computed, self.root_hash)
            return False
        return True

    def to_dict(self):
        # json strings are safer than long ints
        return {
            "siblings": [str(s) for s in self.siblings],
            "merkle_path": str(self.merkle_path),
            "leaf_value": str(self.leaf_value),
            "root_hash": str(self.root_hash),
        }

    @classmethod
    def from_dict(cls, d):
        try:
            return cls(
                tuple(int(s) for s in d["siblings"]),
                int(d["merkle_path"]),
                int(d["leaf_value"]),
                int(d["root_hash"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ProofError(f"malformed proof: {exc}") from exc
