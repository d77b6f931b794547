import os
import sys

# Add src to path
SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if SRC_DIR not in sys.path:
	sys.path.insert(0, SRC_DIR)

from huffman_bits import BitStream, pack_bits, unpack_bits


def test_pack_empty():
	assert pack_bits([]) == b""


def test_pack_full_byte_msb_first():
	bits = [True, False, True, False, False, True, False, True]
	assert pack_bits(bits) == b"\xa5"


def test_pack_pads_final_byte_with_zero_low_bits():
	assert pack_bits([True]) == b"\x80"
	assert pack_bits([False, True, True]) == b"\x60"


def test_pack_length_is_ceil_of_bits():
	for n in range(0, 33):
		assert len(pack_bits([True] * n)) == (n + 7) // 8


def test_pack_accepts_generators():
	assert pack_bits(i % 2 == 0 for i in range(16)) == b"\xaa\xaa"


def test_unpack_msb_first():
	assert list(unpack_bits(b"\xa5")) == [True, False, True, False, False, True, False, True]


def test_unpack_emits_eight_bits_per_byte():
	bits = unpack_bits(b"\x00\xff\x80")
	assert len(bits) == 24
	assert list(bits) == [False] * 8 + [True] * 8 + [True] + [False] * 7


def test_unpack_is_restartable():
	bits = unpack_bits(b"\x12\x34")
	assert isinstance(bits, BitStream)
	assert list(bits) == list(bits)


def test_unpack_of_pack_keeps_prefix():
	bits = [bool(i % 3) for i in range(13)]
	unpacked = list(unpack_bits(pack_bits(bits)))
	assert unpacked[:13] == bits
	assert unpacked[13:] == [False] * 3
