"""
Deterministic filler bytes for test vectors.

NOTE: the digest is NOT re-keyed with a counter between rounds, so the stream
is just sha256(seed) repeated and truncated. Vector files already published
are pinned to exactly these bytes; do not "fix" this into a real PRNG unless
every consumer only checks round trips.
"""
import hashlib

DEFAULT_SEED = 1


def random_bytes(seed: int, length: int) -> bytes:
    if not 0 <= seed <= 0xFF:
        raise ValueError(f"seed must fit in one byte, got {seed}")
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    out = bytearray()
    while len(out) < length:
        digest = hashlib.sha256(bytes([seed])).digest()
        out += digest[:length - len(out)]
    return bytes(out)
