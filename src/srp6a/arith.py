import hmac
from .util import int_to_hex

def mod_exp(base, exponent, modulus):
    """Return base**exponent % modulus by left-to-right square-and-multiply.

    Python integers are unbounded, so operands of any size are exact.
    mod_exp(x, 0, N) is 1 for every x and N, matching the usual convention
    that the empty product is 1.
    """
    if exponent < 0:
        raise ValueError("negative exponent")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent == 0:
        return 1
    base = base % modulus
    result = 1
    for bit in bin(exponent)[2:]:
        result = (result * result) % modulus
        if bit == "1":
            result = (result * base) % modulus
    return result

def mod_add(x, y, modulus):
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    return ((x % modulus) + (y % modulus)) % modulus

def safe_compare(x, y):
    """Constant-time integer equality.

    Both numbers are hex-encoded to the same width before comparing, and
    compare_digest does not stop at the first differing character.
    """
    a = int_to_hex(x)
    b = int_to_hex(y)
    width = max(len(a), len(b))
    return hmac.compare_digest(a.rjust(width, "0").encode("ascii"),
                               b.rjust(width, "0").encode("ascii"))

def is_zero_mod(x, modulus):
    return safe_compare(x % modulus, 0)
