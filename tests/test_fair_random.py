import hashlib
import hmac
import unittest

from fair_dice.core.errors import EntropySourceUnavailable, InvalidRange
from fair_dice.core.fair_random import (
    INT_MAX,
    FairRandom,
    commit,
    compute_digest,
    to_hex,
    verify_commitment,
)


class ScriptedBytes:
    """Entropy source returning pre-set chunks; each chunk must match the requested length."""
    def __init__(self, chunks):
        self.chunks = list(chunks)
        self.requests = []

    def __call__(self, n):
        self.requests.append(n)
        chunk = self.chunks.pop(0)
        assert len(chunk) == n, (len(chunk), n)
        return chunk


def chi_square(counts, expected):
    return sum((c - expected) ** 2 / expected for c in counts)


class TestUniformSampling(unittest.TestCase):
    """
    Tests for the rejection-sampled draw:
      - Values stay in range and are close to uniform (chi-square) for ranges that do and do not divide 2^31 - 1.
      - Samples at or above the rejection limit are discarded.
      - The sign bit of the 32-bit sample is cleared.
    """

    def test_values_are_approximately_uniform(self):
        gen = FairRandom()
        n = 6000
        for low, high in [(0, 5), (1, 3), (-2, 4)]:
            size = high - low + 1
            counts = [0] * size
            for _ in range(n):
                v = gen.uniform_int(low, high)
                self.assertTrue(low <= v <= high)
                counts[v - low] += 1
            # df <= 6; 30 is far beyond the 0.001 critical value
            self.assertLess(chi_square(counts, n / size), 30.0)

    def test_single_value_range(self):
        gen = FairRandom()
        self.assertEqual({gen.uniform_int(7, 7) for _ in range(20)}, {7})

    def test_samples_at_limit_are_rejected(self):
        # range 3: limit = 2147483646, so 0x7FFFFFFE is rejected and 5 is accepted (5 % 3 == 2)
        entropy = ScriptedBytes([b"\xfe\xff\xff\x7f", b"\xfe\xff\xff\xff", b"\x05\x00\x00\x00"])
        gen = FairRandom(entropy=entropy)
        self.assertEqual(gen.uniform_int(10, 12), 12)
        self.assertEqual(entropy.requests, [4, 4, 4])

    def test_sign_bit_is_cleared(self):
        entropy = ScriptedBytes([b"\x07\x00\x00\x80"])
        gen = FairRandom(entropy=entropy)
        self.assertEqual(gen.uniform_int(0, 5), 1)

    def test_invalid_ranges(self):
        gen = FairRandom()
        with self.assertRaises(InvalidRange):
            gen.uniform_int(3, 2)
        with self.assertRaises(InvalidRange):
            gen.uniform_int(0, INT_MAX)
        with self.assertRaises(InvalidRange):
            gen.uniform_int(0, 1.5)
        with self.assertRaises(ValueError):
            commit(1, 0)


class TestCommitment(unittest.TestCase):
    """
    Tests for the commitment: HMAC round trip, fresh keys, and the reveal handle.
    """

    def test_revealed_key_reproduces_digest(self):
        for high in (1, 5, 11):
            c = commit(0, high)
            key = c.reveal()
            self.assertEqual(len(key), 32)
            self.assertEqual(compute_digest(key, c.secret_value), c.digest)
            self.assertTrue(verify_commitment(key, c.secret_value, c.digest))
            self.assertTrue(verify_commitment(to_hex(key).lower(), c.secret_value, c.digest_hex))
            self.assertTrue(c.verify())

    def test_digest_binds_value(self):
        c = commit(0, 5)
        other = (c.secret_value + 1) % 6
        self.assertFalse(verify_commitment(c.reveal(), other, c.digest))

    def test_known_digest(self):
        key = bytes(range(32))
        expected = hmac.new(key, b"4", hashlib.sha256).digest()
        self.assertEqual(compute_digest(key, 4), expected)

    def test_keys_are_fresh(self):
        keys = {commit(0, 1).reveal() for _ in range(100)}
        self.assertEqual(len(keys), 100)

    def test_reveal_is_idempotent_and_key_not_in_repr(self):
        c = commit(0, 5)
        self.assertEqual(c.reveal(), c.reveal())
        self.assertNotIn(c.reveal().hex(), repr(c))
        self.assertNotIn(to_hex(c.reveal()), repr(c))

    def test_digest_hex_is_uppercase(self):
        c = commit(0, 5)
        self.assertEqual(c.digest_hex, c.digest.hex().upper())
        self.assertEqual(len(c.digest_hex), 64)

    def test_key_drawn_after_sample(self):
        key = b"k" * 32
        entropy = ScriptedBytes([b"\x03\x00\x00\x00", key])
        c = FairRandom(entropy=entropy).commit(0, 5)
        self.assertEqual(c.secret_value, 3)
        self.assertEqual(c.reveal(), key)
        self.assertEqual(entropy.requests, [4, 32])


class TestEntropySource(unittest.TestCase):

    def test_failing_source_is_fatal(self):
        def broken(n):
            raise OSError("no entropy")
        with self.assertRaises(EntropySourceUnavailable):
            FairRandom(entropy=broken).commit(0, 1)

    def test_any_source_failure_is_fatal(self):
        def broken(n):
            raise RuntimeError("device closed")
        with self.assertRaises(EntropySourceUnavailable) as ctx:
            FairRandom(entropy=broken).commit(0, 1)
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)

    def test_short_read_is_fatal(self):
        with self.assertRaises(EntropySourceUnavailable):
            FairRandom(entropy=lambda n: b"\x00").commit(0, 1)


if __name__ == '__main__':
    unittest.main()
