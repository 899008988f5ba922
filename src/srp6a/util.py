import os, binascii, math, string

def size_bits(maxval):
    return maxval.bit_length() or 1

def size_bytes(maxval):
    return int(math.ceil(size_bits(maxval) / 8))

def int_to_hex(x):
    if x < 0:
        raise ValueError("cannot hex-encode a negative integer")
    return "%x" % x

def hex_to_int(h):
    # RFC listings break numbers into space-separated blocks
    s = "".join(h.split())
    if not s or not all(c in string.hexdigits for c in s):
        raise ValueError("not a non-negative hex integer: %r" % (h,))
    return int(s, 16)

def PAD(x, N):
    """Hex-encode x, left-padded with zeros to the hex length of N. Values
    that are already as long as N (or longer) are returned untouched."""
    width = len(int_to_hex(N))
    return int_to_hex(x).rjust(width, "0")

def hex_to_bytes(h):
    if len(h) % 2:
        h = "0" + h
    return binascii.unhexlify(h.encode("ascii"))

def number_to_bytes(num):
    return hex_to_bytes(int_to_hex(num))

def padded_number_to_bytes(num, N):
    return hex_to_bytes(PAD(num, N))

def bytes_to_number(s):
    if not isinstance(s, bytes):
        raise TypeError
    if not s:
        return 0
    return int(binascii.hexlify(s), 16)

def random_bits(bit_count, entropy_f=os.urandom):
    if bit_count <= 0 or bit_count % 8 != 0:
        raise ValueError("bit count %r must be a positive multiple of 8"
                         % (bit_count,))
    num_bytes = bit_count // 8
    data = entropy_f(num_bytes)
    assert len(data) == num_bytes
    return bytes_to_number(data)

def generate_mask(maxval):
    num_bytes = size_bytes(maxval)
    num_bits = size_bits(maxval)
    leftover_bits = num_bits % 8
    if leftover_bits:
        top_byte_mask_int = (0x1 << leftover_bits) - 1
    else:
        top_byte_mask_int = 0xff
    assert 0 <= top_byte_mask_int <= 0xff
    return (top_byte_mask_int, num_bytes)

def unbiased_randrange(start, stop, entropy_f):
    """Return a random integer k such that start <= k < stop, uniformly
    distributed across that range, like random.randrange but
    cryptographically bound and unbiased.
    """

    # we generate a random binary string up to 7 bits larger than we really
    # need, mask that down to be the right number of bits, then compare
    # against the range and try again if it's wrong. This will take a random
    # number of tries, but on average less than two
    maxval = stop - start
    if maxval <= 0:
        raise ValueError("empty range")

    top_byte_mask_int, num_bytes = generate_mask(maxval)
    while True:
        enough_bytes = bytearray(entropy_f(num_bytes))
        assert len(enough_bytes) == num_bytes
        enough_bytes[0] &= top_byte_mask_int
        candidate_int = bytes_to_number(bytes(enough_bytes))
        if candidate_int < maxval:
            return start + candidate_int
