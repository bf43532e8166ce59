"""
Reference encoders whose output becomes the expected value of each vector.

RFC 4648 codecs come from the standard library, base58 / Monero base58 /
bech32 from bip_utils. All of them produce padded, canonical output; nothing
here post-processes the strings.
"""
import base64
from typing import Callable, Dict, List

from bip_utils import Base58Encoder, Base58XmrEncoder
from bip_utils.bech32.bech32 import Bech32Encoder, Bech32Encodings, Bech32Utils

Oracle = Callable[[bytes], str]

# static prefixes, only the data part varies between vectors
BECH32_HRP = "bech32"
BECH32M_HRP = "bech32m"


class Bech32mEncoder(Bech32Encoder):
    """Bech32 string encoder with the BIP-350 checksum constant."""

    @staticmethod
    def _ComputeChecksum(hrp: str, data: List[int]) -> List[int]:
        return Bech32Utils.ComputeChecksum(hrp, data, Bech32Encodings.BECH32M)


def bech32(data: bytes) -> str:
    return Bech32Encoder.Encode(BECH32_HRP, data)

def bech32m(data: bytes) -> str:
    return Bech32mEncoder.Encode(BECH32M_HRP, data)

def base32(data: bytes) -> str:
    return base64.b32encode(data).decode("ascii")

def base32hex(data: bytes) -> str:
    return base64.b32hexencode(data).decode("ascii")

def base58xmr(data: bytes) -> str:
    return Base58XmrEncoder.Encode(data)

def base58(data: bytes) -> str:
    return Base58Encoder.Encode(data)

def base64_std(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")

def base64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii")


# Iteration order is the record order within one input; keep it stable.
DEFAULT_ORACLES: Dict[str, Oracle] = {
    "bech32": bech32,
    "bech32m": bech32m,
    "base32": base32,
    "base32hex": base32hex,
    "base58xmr": base58xmr,
    "base58": base58,
    "base64": base64_std,
    "base64url": base64url,
}
