# Demo: fill a tree with random keys, prove one of them and dump the proof as JSON.
#   python -m poseidon_smt --depth 32 --count 100 > proof.json

import argparse
import json
import random
import sys

from .constants import DEFAULT_DEPTH
from .errors import PoseidonMerkleError
from .field import field
from .hasher import PoseidonHasher
from .tree import SparseMerkleTree


def to_int(aa):
    if isinstance(aa, (list, tuple)):
        return [to_int(a) for a in aa]
    elif isinstance(aa, bytes):
        return int.from_bytes(aa, byteorder='big')
    else:
        return to_int(str(aa).encode())


def main(argv=None):
    ap = argparse.ArgumentParser(prog="poseidon_smt", description="Sparse Poseidon Merkle tree demo")
    ap.add_argument("--depth", type=int, default=DEFAULT_DEPTH)
    ap.add_argument("--count", type=int, default=32, help="number of random leaves to insert")
    ap.add_argument("--seed", type=int, default=None)
    args = ap.parse_args(argv)

    rnd = random.Random(args.seed)
    try:
        smt = SparseMerkleTree(args.depth)
        keys = []
        for _ in range(args.count):
            k = rnd.randint(0, 2**args.depth - 1)
            if k in keys:
                continue
            keys.append(k)
            smt.insert_at_path(k, field(to_int("Val " + str(k))))

        print(f"Inserted {len(keys)} leaves, root {smt.root_hash()}", file=sys.stderr)
        if not keys:
            return 0

        key = rnd.choice(keys)
        proof = smt.generate_proof(key)
        ok = proof.verify_proof(PoseidonHasher(2))
    except PoseidonMerkleError as e:
        print("Error:", e, file=sys.stderr)
        return 1

    print(f"Proof for {key}: {'okay' if ok else 'FAILED'}", file=sys.stderr)
    print(json.dumps({"depth": args.depth, "proof": proof.to_dict()}, indent=4))
    return 0 if ok else 2


if __name__ == "__main__":
    sys.exit(main())
