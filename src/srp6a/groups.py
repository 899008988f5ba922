import os
from .arith import mod_exp
from .errors import InsufficientSecurityError
from .util import hex_to_int, int_to_hex, size_bits, size_bytes, unbiased_randrange

"""SRP groups.

A group is a pair (N, g): N is a large safe prime (N = 2q+1 with q also
prime), and all arithmetic happens modulo N. g is a generator. Both sides
must use the same group, and a client must never accept a group it does not
already know: a malicious server could otherwise pick an N whose discrete
logarithms are easy and use the handshake to run an offline dictionary attack
against the password.

The groups in this module come from RFC 5054 Appendix A. Look them up by name
with get_group(), or check a received (N, g) against the table with
find_group().
"""

_SMALL_PRIMES = [3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59,
                 61, 67, 71, 73, 79, 83, 89, 97]

def is_probable_prime(n, rounds=32, entropy_f=os.urandom):
    # Miller-Rabin. A composite survives one round with probability < 1/4.
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False
    for p in _SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False
    d, r = n - 1, 0
    while d % 2 == 0:
        d //= 2
        r += 1
    for _ in range(rounds):
        a = unbiased_randrange(2, n - 1, entropy_f)
        x = mod_exp(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False
    return True

def is_safe_prime(n, rounds=32, entropy_f=os.urandom):
    if n < 5 or n % 2 == 0:
        return False
    q = (n - 1) // 2
    return (is_probable_prime(q, rounds, entropy_f) and
            is_probable_prime(n, rounds, entropy_f))

class Group:
    def __init__(self, name, N, g):
        self.name = name
        self.N = N
        self.g = g
        self.element_size_bits = size_bits(N)
        self.element_size_bytes = size_bytes(N)

        assert 1 < g < N, (name, g)
        # a generator of a prime-order group satisfies Fermat; this cheap
        # check catches typos in the constants. validate() does the real test
        assert mod_exp(g, N - 1, N) == 1, name

    def validate(self, rounds=32, entropy_f=os.urandom):
        """Check that N is a safe prime. Slow, intended for groups that were
        configured locally rather than taken from this module."""
        if not is_safe_prime(self.N, rounds, entropy_f):
            raise InsufficientSecurityError("N of group %r is not a safe prime"
                                            % (self.name,))
        q = (self.N - 1) // 2
        # g must not sit in the tiny subgroup {1, N-1}
        if mod_exp(self.g, 2, self.N) == 1:
            raise InsufficientSecurityError("g of group %r has order <= 2"
                                            % (self.name,))
        return q

    def matches(self, N, g):
        return self.N == N and self.g == g

    def __repr__(self):
        return "<Group %s (%d bits)>" % (self.name, self.element_size_bits)

    @classmethod
    def from_hex(klass, name, N_hex, g):
        return klass(name, hex_to_int(N_hex), g)

    def to_hex(self):
        return int_to_hex(self.N)


# RFC 5054 Appendix A. The 1024-bit group is the one used by the
# Appendix B test vectors; the 2048-bit group is what servers should use.

RFC5054_1024 = Group.from_hex("RFC5054-1024", """
    EEAF0AB9 ADB38DD6 9C33F80A FA8FC5E8 60726187 75FF3C0B 9EA2314C
    9C256576 D674DF74 96EA81D3 383B4813 D692C6E0 E0D5D8E2 50B98BE4
    8E495C1D 6089DAD1 5DC7D7B4 6154D6B6 CE8EF4AD 69B15D49 82559B29
    7BCF1885 C529F566 660E57EC 68EDBC3C 05726CC0 2FD4CBF4 976EAA9A
    FD5138FE 8376435B 9FC61D2F C0EB06E3""", g=2)

RFC5054_2048 = Group.from_hex("RFC5054-2048", """
    AC6BDB41 324A9A9B F166DE5E 1389582F AF72B665 1987EE07 FC319294
    3DB56050 A37329CB B4A099ED 8193E075 7767A13D D52312AB 4B03310D
    CD7F48A9 DA04FD50 E8083969 EDB767B0 CF609517 9A163AB3 661A05FB
    D5FAAAE8 2918A996 2F0B93B8 55F97993 EC975EEA A80D740A DBF4FF74
    7359D041 D5C33EA7 1D281E44 6B14773B CA97B43A 23FB8016 76BD207A
    436C6481 F1D2B907 8717461A 5B9D32E6 88F87748 544523B5 24B0D57D
    5EA77A27 75D2ECFA 032CFBDB F52FB378 61602790 04E57AE6 AF874E73
    03CE5329 9CCC041C 7BC308D8 2A5698F3 A8D0C382 71AE35F8 E9DBFBB6
    94B5C803 D89F7AE4 35DE236D 525F5475 9B65E372 FCD68EF2 0FA7111F
    9E4AFF73""", g=2)

GROUPS = {
    RFC5054_1024.name: RFC5054_1024,
    RFC5054_2048.name: RFC5054_2048,
    }

def get_group(name):
    try:
        return GROUPS[name]
    except KeyError:
        raise InsufficientSecurityError("unknown group %r" % (name,))

def find_group(N, g, groups=None):
    """Return the trusted group with exactly these (N, g), or None."""
    if groups is None:
        groups = GROUPS.values()
    for group in groups:
        if group.matches(N, g):
            return group
    return None
