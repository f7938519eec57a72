import pytest
from hypothesis import strategies as st

from poseidon_smt import FIELD_MODULUS, HasherError, PoseidonHasher, SparseMerkleTree

DEPTH = 2
TEST_PATH = [True, False]


class FakeHasher:
    """Cheap, order-sensitive stand-in for Poseidon."""

    def __init__(self):
        self.calls = 0

    def hash(self, inputs):
        self.calls += 1
        acc = 17
        for x in inputs:
            acc = (acc * 31 + x + 1) % FIELD_MODULUS
        return acc


class FailingHasher(FakeHasher):
    """Fails on every call once ``ok_calls`` calls have succeeded."""

    def __init__(self, ok_calls=0):
        super().__init__()
        self.ok_calls = ok_calls

    def hash(self, inputs):
        if self.calls >= self.ok_calls:
            raise HasherError("backend down")
        return super().hash(inputs)


class BrokenHasher(FakeHasher):
    """Backend that fails with its own exception type."""

    def hash(self, inputs):
        raise ValueError("backend exploded")


@st.composite
def populated_trees(draw, max_depth=12, min_entries=0, max_entries=12):
    """(depth, {path: non-zero value}) pairs with paths inside the tree."""
    depth = draw(st.integers(min_value=1, max_value=max_depth))
    entries = draw(
        st.dictionaries(
            st.integers(min_value=0, max_value=2**depth - 1),
            st.integers(min_value=1, max_value=FIELD_MODULUS - 1),
            min_size=min_entries,
            max_size=min(max_entries, 2**depth),
        )
    )
    return depth, entries


def build_tree(depth, items):
    tree = SparseMerkleTree(depth, hasher=FakeHasher())
    for path, value in items:
        tree.insert_at_path(path, value)
    return tree


@pytest.fixture(scope="session")
def poseidon():
    return PoseidonHasher(2)


@pytest.fixture
def tree(poseidon):
    return SparseMerkleTree(DEPTH, hasher=poseidon)


@pytest.fixture
def fake_hasher():
    return FakeHasher()
