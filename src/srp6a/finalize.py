from hkdf import Hkdf
from .digests import check_algorithm
from .util import padded_number_to_bytes

SESSION_KEY_INFO = b"SRP-6a session key"

def session_key(S, N, algorithm, info=SESSION_KEY_INFO, length=None):
    """Expand the premaster secret into key material.

    S is encoded at the width of N before hashing, so both sides feed HKDF
    identical bytes even when S happens to have leading zeros. The result
    is not yet confirmed: the caller still has to prove to the peer that it
    holds the same key (for example with a MAC over the transcript).
    """
    assert isinstance(info, bytes)
    hash_f = check_algorithm(algorithm)
    if length is None:
        length = hash_f().digest_size
    h = Hkdf(salt=b"", input_key_material=padded_number_to_bytes(S, N),
             hash=hash_f)
    return h.expand(info, length)
