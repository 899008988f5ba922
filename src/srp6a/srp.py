import hmac, hashlib, json, os
from collections import namedtuple
from .arith import mod_exp, mod_add, is_zero_mod
from .digests import H, digest, check_algorithm
from .errors import IllegalParameterError
from .params import DefaultParams
from .util import (PAD, hex_to_bytes, hex_to_int, int_to_hex,
                   number_to_bytes, random_bits)

# Notation (RFC 5054 section 2.1):
#  N, g   group parameters: N = 2q+1 a safe prime, g a generator
#  s      user's salt
#  I, P   username (identity) and password, UTF-8
#  x      private key derived from s, I and P
#  v      password verifier, g^x % N
#  k      SRP-6a multiplier, H(N | PAD(g))
#  a, b   ephemeral private values, at least 256 random bits each
#  A, B   ephemeral public values
#  u      scrambling parameter, H(PAD(A) | PAD(B))
#  S      premaster secret
#
# server:                               client:
#  B = (k*v + g^b) % N      -- N,g,s,B -->
#                           <--   A    --  A = g^a % N
#  S = (A * v^u) ^ b % N                    S = (B - k*g^x) ^ (a + u*x) % N
#
# Any received A or B that is 0 mod N must abort the handshake.

# Password used to build the verifier for identities that have none. Any
# handshake built on it is a decoy and is refused at key derivation time.
FAKE_PASSWORD = "badpass"

class ServerChallenge(namedtuple("ServerChallenge",
                                 ["N", "g", "s", "B", "algorithm"])):
    """What the server sends in its Server Key Exchange: N, g, s, B and the
    hash algorithm to use."""
    __slots__ = ()

    def to_dict(self):
        return {"N": int_to_hex(self.N), "g": int_to_hex(self.g),
                "s": int_to_hex(self.s), "B": int_to_hex(self.B),
                "alg": self.algorithm}

    @classmethod
    def from_dict(klass, d):
        check_algorithm(d["alg"])
        return klass(N=hex_to_int(d["N"]), g=hex_to_int(d["g"]),
                     s=hex_to_int(d["s"]), B=hex_to_int(d["B"]),
                     algorithm=d["alg"])

    def serialize(self):
        return json.dumps(self.to_dict()).encode("ascii")

    @classmethod
    def from_serialized(klass, data):
        return klass.from_dict(json.loads(data.decode("ascii")))

VerifierRecord = namedtuple("VerifierRecord",
                            ["identity", "salt", "verifier", "algorithm",
                             "group_name"])

def _field(message, name):
    if hasattr(message, name):
        return getattr(message, name)
    return message[name]

# Verifier creation (section 2.4)

def compute_x(s, I, P, algorithm):
    inner = digest(algorithm, "%s:%s" % (I, P))
    return H(algorithm, number_to_bytes(s) + inner)

def verifier(s, I, P, N, g, algorithm):
    x = compute_x(s, I, P, algorithm)
    return mod_exp(g, x, N)

def create_verifier(I, P, params=DefaultParams, algorithm=None,
                    entropy_f=os.urandom):
    """Enroll a user: pick a fresh salt and compute the verifier to store.

    The salt, verifier, algorithm and group name must all be persisted; the
    password must not.
    """
    algorithm = params.check_algorithm(algorithm or params.algorithm)
    group = params.group
    s = random_bits(params.salt_bits, entropy_f)
    v = verifier(s, I, P, group.N, group.g, algorithm)
    return VerifierRecord(I, s, v, algorithm, group.name)

# Unknown identities (section 2.5.1.3): answer with a salt and verifier that
# are stable for the identity, so an unknown account looks exactly like a
# known one with a wrong password.

def fake_salt(I, server_secret):
    if isinstance(server_secret, str):
        server_secret = server_secret.encode("utf-8")
    if not server_secret:
        raise ValueError("server secret must not be empty")
    mac = hmac.new(server_secret, ("salt%s" % I).encode("utf-8"),
                   hashlib.sha1)
    return int(mac.hexdigest(), 16)

def fake_verifier(I, server_secret, N, g, algorithm):
    s = fake_salt(I, server_secret)
    return s, verifier(s, I, FAKE_PASSWORD, N, g, algorithm)

# Key exchange (sections 2.5.3, 2.5.4, 2.6)

def compute_k(N, g, algorithm):
    return H(algorithm, hex_to_bytes(int_to_hex(N) + PAD(g, N)))

def compute_u(A, B, N, algorithm):
    return H(algorithm, hex_to_bytes(PAD(A, N) + PAD(B, N)))

def server_public_value(b, v, N, g, algorithm):
    k = compute_k(N, g, algorithm)
    B = mod_add(k * v, mod_exp(g, b, N), N)
    if is_zero_mod(B, N):
        raise IllegalParameterError("server public value is 0 mod N")
    return B

def client_public_value(a, N, g):
    A = mod_exp(g, a, N)
    if is_zero_mod(A, N):
        raise IllegalParameterError("client public value is 0 mod N")
    return A

def server_premaster_secret(b, N, g, v, client_key_message, algorithm):
    """Compute S on the server.

    client_key_message is the client's A, either as an int or as a mapping
    or object with an 'A' entry.
    """
    if isinstance(client_key_message, int):
        A = client_key_message
    else:
        A = _field(client_key_message, "A")
    check_algorithm(algorithm)
    if is_zero_mod(A, N):
        raise IllegalParameterError("client public value is 0 mod N")
    B = server_public_value(b, v, N, g, algorithm)
    u = compute_u(A, B, N, algorithm)
    return mod_exp((A * mod_exp(v, u, N)) % N, b, N)

def client_premaster_secret(a, I, P, server_key_message, algorithm):
    """Compute S on the client.

    server_key_message carries N, g, s and B: a ServerChallenge, or a
    mapping with those keys.
    """
    N = _field(server_key_message, "N")
    g = _field(server_key_message, "g")
    s = _field(server_key_message, "s")
    B = _field(server_key_message, "B")
    check_algorithm(algorithm)
    if is_zero_mod(B, N):
        raise IllegalParameterError("server public value is 0 mod N")
    A = client_public_value(a, N, g)
    u = compute_u(A, B, N, algorithm)
    k = compute_k(N, g, algorithm)
    x = compute_x(s, I, P, algorithm)
    # B + N*k - k*g^x == B + k*(N - g^x), and g^x % N < N, so the base is
    # positive and congruent to B - k*g^x mod N
    base = (B + N * k) - k * mod_exp(g, x, N)
    return mod_exp(base, a + u * x, N)
