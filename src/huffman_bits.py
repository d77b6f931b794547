# filename: huffman_bits.py


def pack_bits(bits):
    """Pack booleans into bytes, most significant bit first.

    A final incomplete group is shifted up so the unused low bits are zero.
    """
    b = bytearray()
    current = 0
    count = 0
    for bit in bits:
        current = (current << 1) | (1 if bit else 0)
        count += 1
        if count == 8:
            b.append(current)
            current = 0
            count = 0

    if count:
        b.append(current << (8 - count))
    return bytes(b)


class BitStream:
    """Restartable view of a byte buffer as a sequence of booleans."""

    def __init__(self, data):
        self.data = bytes(data)

    def __iter__(self):
        for byte in self.data:
            for shift in range(7, -1, -1):
                yield bool((byte >> shift) & 1)

    def __len__(self):
        return len(self.data) * 8


def unpack_bits(data):
    return BitStream(data)
