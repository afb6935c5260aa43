"""
Copyright (c) 2020, the Zelnet developers
See LICENSE for details

A read-only byte buffer with some convenient conversions, used for network
magic values.
"""

from zelnet import ZelnetError


def intToBytes(i, length=None):
    """
    Encodes a non-negative integer to big-endian bytes.

    Args:
        i (int): The integer.
        length (int): optional. The encoded length. If not provided, the
            shortest possible encoding is used.

    Returns:
        bytes: The encoded integer.
    """
    if length is None:
        length = (i.bit_length() + 7) // 8
    try:
        return i.to_bytes(length, byteorder="big")
    except OverflowError:
        raise ZelnetError(f"integer {i} does not fit in {length} bytes")


def intFromBytes(b):
    """
    Decodes a big-endian unsigned integer from bytes.

    Args:
        b (bytes-like): The encoded integer.

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b, "big")


def decodeBA(b):
    """
    Decode into bytes.

    Args:
        b (str, bytes-like, ByteArray, int, list(int)): The value to decode.
            Strings are interpreted as hexadecimal. Integers are minimally
            encoded to an unsigned integer.

    Returns:
        bytes: The decoded bytes.
    """
    if isinstance(b, ByteArray):
        return b.b
    if isinstance(b, (bytes, bytearray)):
        return bytes(b)
    if isinstance(b, bool):
        raise TypeError("decodeBA: booleans are not byte values")
    if isinstance(b, int):
        return intToBytes(b) if b else bytes(1)
    if isinstance(b, str):
        return bytes.fromhex(b)
    if hasattr(b, "__iter__"):
        return bytes(b)
    raise TypeError("decodeBA: unknown type %s" % type(b))


class ByteArray:
    """
    ByteArray wraps an immutable byte string. Like the built-in bytes, it can
    be built from bytes-like objects and lists of ints, but an integer argument
    results in the shortest big-endian representation of that integer rather
    than a zero-valued buffer of that size. To get a zero-padded ByteArray of
    length n, use the `length` keyword argument.
    """

    __slots__ = ("b",)

    def __init__(self, b=b"", length=None):
        if isinstance(b, int) and not isinstance(b, bool) and length:
            v = intToBytes(b, length)
        else:
            v = decodeBA(b)
            if length:
                if len(v) > length:
                    raise ZelnetError(
                        "ByteArray: %i bytes exceeds length %i" % (len(v), length)
                    )
                v = bytes(length - len(v)) + v
        object.__setattr__(self, "b", v)

    def __setattr__(self, k, v):
        raise ZelnetError("ByteArray is read-only")

    def __eq__(self, a):
        try:
            return self.b == decodeBA(a)
        except Exception:
            return False

    def __ne__(self, a):
        return not self.__eq__(a)

    def __hash__(self):
        """Enables ByteArray to be a dict key."""
        return hash(self.b)

    def __repr__(self):
        return "ByteArray(" + self.hex() + ")"

    def __len__(self):
        return len(self.b)

    def __getitem__(self, k):
        if isinstance(k, slice):
            return ByteArray(self.b[k])
        return self.b[k]

    def __iter__(self):
        return iter(self.b)

    def __reversed__(self):
        return ByteArray(self.b[::-1])

    def __bytes__(self):
        return self.b

    def hex(self):
        """
        A hexadecimal string representation of the bytes.

        Returns:
            str: The hex bytes.
        """
        return self.b.hex()

    def int(self):
        """The bytes as an unsigned big-endian integer."""
        return intFromBytes(self.b)

    def bytes(self):
        """The bytes as Python `bytes`."""
        return self.b

    def littleEndian(self):
        """A copy of the ByteArray, reversed."""
        return reversed(self)
