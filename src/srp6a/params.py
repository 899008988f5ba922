from .digests import HASH_ALGORITHMS, check_algorithm
from .errors import UnsupportedAlgorithm
from .groups import GROUPS, RFC5054_2048, find_group

# A Params object holds everything both sides must agree on ahead of time:
# the group, the hash to use when starting a handshake, and the allow-lists
# of algorithms and groups that will be accepted from the peer. Build one at
# startup and share it; it is never mutated.

class Params:
    def __init__(self, group=RFC5054_2048, algorithm="sha256",
                 allowed_algorithms=None, trusted_groups=None,
                 private_value_bits=256, salt_bits=128):
        self.group = group
        if allowed_algorithms is None:
            allowed_algorithms = sorted(HASH_ALGORITHMS)
        for name in allowed_algorithms:
            check_algorithm(name)
        self.allowed_algorithms = tuple(allowed_algorithms)
        self.algorithm = self.check_algorithm(algorithm)

        if trusted_groups is None:
            trusted_groups = list(GROUPS.values())
        if group not in trusted_groups:
            trusted_groups = list(trusted_groups) + [group]
        self.trusted_groups = tuple(trusted_groups)

        # RFC 5054 says a and b SHOULD be at least 256 bits
        if private_value_bits < 256 or private_value_bits % 8:
            raise ValueError("private_value_bits must be a multiple of 8, "
                             "and at least 256")
        if salt_bits <= 0 or salt_bits % 8:
            raise ValueError("salt_bits must be a positive multiple of 8")
        self.private_value_bits = private_value_bits
        self.salt_bits = salt_bits

    def check_algorithm(self, algorithm):
        check_algorithm(algorithm)
        if algorithm not in self.allowed_algorithms:
            raise UnsupportedAlgorithm("algorithm %r is not allowed here"
                                       % (algorithm,))
        return algorithm

    def find_trusted_group(self, N, g):
        return find_group(N, g, self.trusted_groups)

DefaultParams = Params()
