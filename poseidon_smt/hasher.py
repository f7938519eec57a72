"""
Hash capability consumed by the tree.

Anything with a ``hash(inputs) -> int`` method works; ``PoseidonHasher`` is the
circom-compatible Poseidon over BN254 used in production.
"""

from typing import Protocol, Sequence

from circomlibpy.poseidon import PoseidonHash

from .constants import empty_value, get_empty_inner_hash
from .errors import HasherError


class Hasher(Protocol):
    def hash(self, inputs: Sequence[int]) -> int:
        ...


class PoseidonHasher:
    """Poseidon (circom parameters) with a fixed number of inputs."""

    def __init__(self, arity: int = 2):
        if arity < 1:
            raise HasherError(f"unsupported poseidon arity {arity}")
        self.arity = arity
        self._poseidon = PoseidonHash()

    def hash(self, inputs: Sequence[int]) -> int:
        if len(inputs) != self.arity:
            raise HasherError(f"expected {self.arity} inputs, got {len(inputs)}")
        try:
            return int(self._poseidon.hash(self.arity, list(inputs)))
        except Exception as exc:
            raise HasherError(f"poseidon hasher error: {exc}") from exc

    def __repr__(self):
        return f"PoseidonHasher(arity={self.arity})"


def hash2(hasher: Hasher, left: int, right: int, last_level: bool = False) -> int:
    """
    Parent hash of two children.

    Two empty children collapse to the empty inner hash without calling the
    hasher, so a subtree that only ever held zeros hashes like one that was
    never materialized.
    """
    default = empty_value(last_level)
    if left == default and right == default:
        return get_empty_inner_hash()
    try:
        return hasher.hash([left, right])
    except HasherError:
        raise
    except Exception as exc:
        raise HasherError(f"poseidon hasher error: {exc}") from exc
