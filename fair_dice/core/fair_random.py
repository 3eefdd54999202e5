"""
fair_random.py
Implements the fair random generator: an unbiased integer draw over an arbitrary range,
bound by an HMAC-SHA-256 commitment whose key is disclosed later.

Protocol (one run):
    commitment = generator.commit(low, high)
    show commitment.digest_hex          # before the counterpart answers
    ... collect the counterpart's answer ...
    key = commitment.reveal()           # only after the answer is final
    verify_commitment(key, commitment.secret_value, commitment.digest)

The generator itself does not enforce that ordering; engine.py does.
Related modules:
- errors.py: InvalidRange, EntropySourceUnavailable.
- engine.py: Runs the protocol three times per game.
"""

import hashlib
import hmac
import logging
import secrets
from dataclasses import dataclass, field
from typing import Callable, Union

from .errors import EntropySourceUnavailable, InvalidRange

logger = logging.getLogger(__name__)

INT_MAX = 2 ** 31 - 1
SAMPLE_BYTES = 4
KEY_SIZE = 32


def to_hex(data: bytes) -> str:
    """Uppercase hexadecimal rendering used for every digest and key shown to the human."""
    return data.hex().upper()


def compute_digest(key: bytes, value: int) -> bytes:
    """
    HMAC-SHA256 of the decimal string of value, keyed with key.
    Args:
        key (bytes): HMAC key.
        value (int): Committed value.
    Returns:
        bytes: 32-byte digest.
    """
    return hmac.new(key, str(value).encode("utf-8"), hashlib.sha256).digest()


def verify_commitment(key: Union[bytes, str], value: int, digest: Union[bytes, str]) -> bool:
    """
    Recompute the digest for a revealed (key, value) pair and compare it to the one disclosed earlier.
    Args:
        key (bytes|str): Revealed key, raw or hex (either case).
        value (int): Revealed secret value.
        digest (bytes|str): Previously disclosed digest, raw or hex (either case).
    Returns:
        bool: True if the commitment holds.
    """
    if isinstance(key, str):
        key = bytes.fromhex(key)
    if isinstance(digest, str):
        digest = bytes.fromhex(digest)
    return hmac.compare_digest(compute_digest(key, value), digest)


@dataclass(frozen=True)
class Commitment:
    """
    One committed random draw.
    Fields:
        low (int): Inclusive lower bound of the draw.
        high (int): Inclusive upper bound of the draw.
        secret_value (int): The drawn value, uniform in [low, high].
        digest (bytes): HMAC-SHA256(key, str(secret_value)).
    The key is only reachable through reveal() and is kept out of repr().
    """
    low: int
    high: int
    secret_value: int
    digest: bytes
    _key: bytes = field(repr=False)

    @property
    def digest_hex(self) -> str:
        return to_hex(self.digest)

    def reveal(self) -> bytes:
        """Disclose the key. Calling it again returns the same key."""
        return self._key

    def verify(self) -> bool:
        return verify_commitment(self._key, self.secret_value, self.digest)


class FairRandom:
    """
    Fair random generator backed by a cryptographically secure byte source.
    Args:
        entropy (callable, optional): n -> bytes. Defaults to secrets.token_bytes.
        key_size (int): HMAC key length in bytes.
    """
    def __init__(self, entropy: Callable[[int], bytes] = None, key_size: int = KEY_SIZE):
        self.entropy = entropy or secrets.token_bytes
        self.key_size = key_size

    def random_bytes(self, n: int) -> bytes:
        """
        Draw n bytes from the entropy source.
        Raises:
            EntropySourceUnavailable: If the source fails or returns a short read.
        """
        try:
            data = self.entropy(n)
        except Exception as e:
            raise EntropySourceUnavailable(f"Secure random source failed: {e}") from e
        if data is None or len(data) != n:
            raise EntropySourceUnavailable(f"Secure random source returned {0 if data is None else len(data)} of {n} bytes")
        return bytes(data)

    def uniform_int(self, low: int, high: int) -> int:
        """
        Draw an integer uniformly from [low, high] by rejection sampling 31-bit samples.
        Args:
            low (int): Inclusive lower bound.
            high (int): Inclusive upper bound.
        Returns:
            int: Value in [low, high].
        Raises:
            InvalidRange: If the bounds are not integers, high < low, or the range exceeds INT_MAX.
        """
        for bound in (low, high):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise InvalidRange(f"Range bounds must be integers, got {low!r}..{high!r}")
        if high < low:
            raise InvalidRange(f"Empty range {low}..{high}")
        range_size = high - low + 1
        if range_size > INT_MAX:
            raise InvalidRange(f"Range {low}..{high} has more than {INT_MAX} values")
        # largest multiple of range_size that fits; samples at or above it are biased
        limit = INT_MAX // range_size * range_size
        rejected = 0
        while True:
            sample = int.from_bytes(self.random_bytes(SAMPLE_BYTES), "little") & INT_MAX
            if sample < limit:
                break
            rejected += 1
        if rejected:
            logger.debug("Rejected %d sample(s) for range %d..%d", rejected, low, high)
        return low + sample % range_size

    def commit(self, low: int, high: int) -> Commitment:
        """
        Draw a value in [low, high] and commit to it with a fresh key.
        Args:
            low (int): Inclusive lower bound.
            high (int): Inclusive upper bound.
        Returns:
            Commitment: Value, digest and reveal() handle.
        """
        value = self.uniform_int(low, high)
        key = self.random_bytes(self.key_size)
        digest = compute_digest(key, value)
        logger.debug("Committed to a value in %d..%d (HMAC=%s)", low, high, to_hex(digest))
        return Commitment(low=low, high=high, secret_value=value, digest=digest, _key=key)


_default_generator = FairRandom()


def commit(low: int, high: int) -> Commitment:
    """Commit to a uniform value in [low, high] using the shared secure generator."""
    return _default_generator.commit(low, high)
