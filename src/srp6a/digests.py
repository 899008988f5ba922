import hashlib
from functools import partial
from .errors import UnsupportedAlgorithm
from .util import number_to_bytes, bytes_to_number

"""Hash functions usable as SRP's H().

Algorithms are selected by name. Which ones a deployment accepts is decided
by its Params allow-list; this table is the upper bound of what can be
negotiated at all.

    H("sha256", "alice:password123")   # str: UTF-8 text
    H("sha256", 0xbeb25379)            # int: the integer's big-endian octets
    H("sha256", b"\\xbe\\xb2")          # bytes: raw octets

Each returns the digest as a non-negative integer. digest() returns the raw
octets instead, which is what gets concatenated into outer hashes.
"""

HASH_ALGORITHMS = {
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
    "sha384": hashlib.sha384,
    "sha512": hashlib.sha512,
    "blake2s-256": partial(hashlib.blake2s, digest_size=32),
    "blake2b-224": partial(hashlib.blake2b, digest_size=28),
    "blake2b-256": partial(hashlib.blake2b, digest_size=32),
    "blake2b-384": partial(hashlib.blake2b, digest_size=48),
    "blake2b-512": partial(hashlib.blake2b, digest_size=64),
    }

def check_algorithm(algorithm):
    """Return the digest constructor for 'algorithm', or raise
    UnsupportedAlgorithm."""
    try:
        return HASH_ALGORITHMS[algorithm]
    except (KeyError, TypeError):
        raise UnsupportedAlgorithm("Value %r does not match any of %s"
                                   % (algorithm,
                                      ", ".join(sorted(HASH_ALGORITHMS))))

def digest_size(algorithm):
    return check_algorithm(algorithm)().digest_size

def _to_bytes(data):
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, int) and not isinstance(data, bool):
        return number_to_bytes(data)
    raise TypeError("can only hash str, int, or bytes, not %r" % type(data))

def digest(algorithm, data):
    h = check_algorithm(algorithm)()
    h.update(_to_bytes(data))
    return h.digest()

def H(algorithm, data):
    return bytes_to_number(digest(algorithm, data))
