"""
CipherKit - arithmetic in GF(2^8) under the Rijndael polynomial x^8+x^4+x^3+x+1.
"""

# 0x11b with the x^8 term dropped
REDUCTION = 0x1b


def xtime(x):
    # multiply by x ("double"): shift left and reduce if the high bit fell off
    shifted = (x << 1) & 0xff
    if x & 0x80:
        return shifted ^ REDUCTION
    return shifted


def gf_mul(a, b):
    # shift-and-add multiplication, one xtime per bit of b
    product = 0
    while b:
        if b & 1:
            product ^= a
        a = xtime(a)
        b >>= 1
    return product


def mix_column(column):
    """Multiply one state column by the circulant matrix {02, 03, 01, 01}.

    Uses 2a + 3b + c + d == a ^ e ^ 2(a ^ b), with e the XOR of the whole
    column, so only doublings are needed.
    """
    a, b, c, d = column
    e = a ^ b ^ c ^ d
    return [
        a ^ e ^ xtime(a ^ b),
        b ^ e ^ xtime(b ^ c),
        c ^ e ^ xtime(c ^ d),
        d ^ e ^ xtime(d ^ a),
    ]


def inv_mix_column(column):
    """Multiply one state column by the inverse matrix {0e, 0b, 0d, 09}."""
    a, b, c, d = column
    e = a ^ b ^ c ^ d
    z = xtime(e)
    x = e ^ xtime(xtime(z ^ a ^ c))
    y = e ^ xtime(xtime(z ^ b ^ d))
    return [
        a ^ x ^ xtime(a ^ b),
        b ^ y ^ xtime(b ^ c),
        c ^ x ^ xtime(c ^ d),
        d ^ y ^ xtime(d ^ a),
    ]
