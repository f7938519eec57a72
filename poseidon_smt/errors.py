class PoseidonMerkleError(Exception):
    """Base class for everything the tree raises."""


class InvalidDepth(PoseidonMerkleError):
    def __init__(self, depth=0):
        super().__init__(f"depth size should be greater than 0, got {depth}")
        self.depth = depth


class HasherError(PoseidonMerkleError):
    """The Poseidon backend failed or was called with the wrong arity."""


class InvalidNodeType(PoseidonMerkleError):
    pass


class InvalidBitsPathHash(PoseidonMerkleError):
    pass


class InvalidLevel(PoseidonMerkleError):
    def __init__(self, level, depth):
        super().__init__(f"invalid level {level} for a tree of depth {depth}")
        self.level = level
        self.depth = depth


class ProofError(PoseidonMerkleError):
    pass


class SiblingNotFound(ProofError):
    def __init__(self, level):
        super().__init__(f"sibling at position {level} not found to generate proof")
        self.level = level


class InnerNodeExpected(ProofError):
    def __init__(self, level=None):
        msg = "encountered a leaf node where an inner node was expected"
        if level is not None:
            msg += f" (level {level})"
        super().__init__(msg)
        self.level = level
