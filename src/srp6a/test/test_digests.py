import unittest
from srp6a import digests
from srp6a.errors import UnsupportedAlgorithm, SRPError
from .common import h2i

H = digests.H

# known answers: FIPS 180 "abc" examples, RFC 7693 appendices A and B, and
# the empty-string digests of the truncated blake2b variants
KNOWN_ANSWERS = [
    ("sha1", "", "da39a3ee5e6b4b0d3255bfef95601890afd80709"),
    ("sha1", "test", "a94a8fe5ccb19ba61c4c0873d391e987982fbbd3"),
    ("sha1", "calculator", "46237b3d702aad617eae653792a6269e836aa44d"),
    ("sha256", "",
     "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    ("sha256", "abc",
     "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    ("sha384", "abc",
     "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded163"
     "1a8b605a43ff5bed8086072ba1e7cc2358baeca134c825a7"),
    ("sha512", "abc",
     "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
     "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"),
    ("blake2s-256", "abc",
     "508c5e8c327c14e2e1a72ba34eeb452f37458b209ed63a294d999b4c86675982"),
    ("blake2b-224", "",
     "836cc68931c2e4e3e838602eca1902591d216837bafddfe6f0c8cb07"),
    ("blake2b-256", "test",
     "928b20366943e2afd11ebc0eae2e53a93bf177a4fcf35bcc64d503704e65e202"),
    ("blake2b-256", "calculator",
     "25777f7298db3b9b6200b0284d71b9755a5956839b7bc45aa27e1076a1f12012"),
    ("blake2b-384", "",
     "b32811423377f52d7862286ee1a72ee540524380"
     "fda1724a6f25d7978c6fd3244a6caf0498812673c5e05ef583825100"),
    ("blake2b-512", "abc",
     "ba80a53f981c4d0d6a2797b69f12f6e94c212f14685ac4b74b12bb6fdbffa2d1"
     "7d87c5392aab792dc252d5de4533cc9518d38aa8dbf1925ab92386edd4009923"),
    ]

class Digests(unittest.TestCase):
    def test_known_answers(self):
        for algorithm, data, expected in KNOWN_ANSWERS:
            self.assertEqual(H(algorithm, data), h2i(expected),
                             (algorithm, data))
            self.assertEqual(digests.digest(algorithm, data).hex(), expected)

    def test_digest_sizes(self):
        expected = {"sha1": 20, "sha256": 32, "sha384": 48, "sha512": 64,
                    "blake2s-256": 32, "blake2b-224": 28, "blake2b-256": 32,
                    "blake2b-384": 48, "blake2b-512": 64}
        self.assertEqual(sorted(expected), sorted(digests.HASH_ALGORITHMS))
        for algorithm, size in expected.items():
            self.assertEqual(digests.digest_size(algorithm), size)
            self.assertEqual(len(digests.digest(algorithm, "x")), size)

    def test_input_types(self):
        # an int is hashed as its big-endian octets
        for algorithm in digests.HASH_ALGORITHMS:
            self.assertEqual(H(algorithm, 0x616263), H(algorithm, "abc"))
            self.assertEqual(H(algorithm, b"abc"), H(algorithm, "abc"))
        # odd-length hex gets a leading zero nibble, not a dropped one
        self.assertEqual(H("sha1", 0x102), H("sha1", b"\x01\x02"))
        # text is UTF-8
        self.assertEqual(H("sha256", "päss"),
                         H("sha256", "päss".encode("utf-8")))
        self.assertRaises(TypeError, H, "sha256", 1.5)
        self.assertRaises(TypeError, H, "sha256", None)

    def test_unsupported(self):
        for name in ["md5", "SHA1", "sha-256", "", None, "blake2b"]:
            self.assertRaises(UnsupportedAlgorithm, H, name, "data")
            self.assertRaises(UnsupportedAlgorithm,
                              digests.check_algorithm, name)
        with self.assertRaises(UnsupportedAlgorithm) as cm:
            digests.check_algorithm("md5")
        self.assertIsInstance(cm.exception, SRPError)
        self.assertIsInstance(cm.exception, ValueError)
        self.assertIn("md5", str(cm.exception))

if __name__ == '__main__':
    unittest.main()
