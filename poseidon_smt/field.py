# BN254 scalar field helpers. Field elements are plain ints in [0, FIELD_MODULUS).

from .errors import InvalidBitsPathHash

FIELD_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617
FIELD_BITS = FIELD_MODULUS.bit_length()  # 254

ZERO = 0


def field(val):
    """Reduce an int into the field, like Fr::from(...)."""
    return val % FIELD_MODULUS


def get_path_bit(path, position):
    # little-endian: bit 0 is the first decision taken from the root
    return (path >> position) & 1 == 1


def get_path_hash(bits):
    """
    Pack a sequence of booleans into a field element, bit i -> 2**i.
    Raises InvalidBitsPathHash if the packed integer is not a field element.
    """
    value = 0
    for i, bit in enumerate(bits):
        if bit:
            value |= 1 << i
    if value >= FIELD_MODULUS:
        raise InvalidBitsPathHash(f"{len(bits)} bits do not fit into the field")
    return value


def path_to_bits(path, depth):
    return [get_path_bit(path, i) for i in range(depth)]
