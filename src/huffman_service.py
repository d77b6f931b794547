# filename: huffman_service.py

import logging
from itertools import chain, islice

from huffman_bits import pack_bits, unpack_bits
from huffman_core import HuffmanLogic
from huffman_errors import CorruptStreamError, EmptyInputError, FormatError
from huffman_signature import parse_signature, serialize_signature

logger = logging.getLogger(__name__)


class HuffmanCoder:
    """A Huffman tree and the encoding table derived from it.

    Wire format::

        <signature> "\\n" <number of symbols> "\\n" <payload bytes>
    """

    def __init__(self, root, logic=None):
        self.logic = logic or HuffmanLogic()
        self.root = root
        self.encoding_table = self.logic.generate_codes(root)

    @classmethod
    def from_text(cls, text):
        logic = HuffmanLogic()
        frequencies = logic.analyze_frequencies(text)
        if not frequencies:
            raise EmptyInputError("cannot encode empty text")
        return cls(logic.build_tree(logic.leaves_from_frequencies(frequencies)), logic)

    @classmethod
    def from_signature(cls, signature):
        logic = HuffmanLogic()
        return cls(parse_signature(signature, logic), logic)

    def signature(self):
        return serialize_signature(self.root)

    def encode_text(self, text):
        """Pack the paths of every symbol of ``text`` into payload bytes."""
        try:
            paths = [self.encoding_table[symbol] for symbol in text]
        except KeyError as exc:
            raise FormatError(f"symbol {exc.args[0]!r} is not in the encoding table") from exc
        return pack_bits(chain.from_iterable(paths))

    def encode(self, text):
        if not text:
            raise EmptyInputError("cannot encode empty text")
        header = f"{self.signature()}\n{len(text)}\n".encode("utf-8")
        payload = self.encode_text(text)
        logger.debug(
            "encoded %d symbols: %d header bytes, %d payload bytes",
            len(text), len(header), len(payload),
        )
        return header + payload

    def decode_payload(self, payload, content_length):
        """Walk the tree along the payload bits until ``content_length`` symbols are out."""
        bits = unpack_bits(payload)

        if self.root.is_leaf:
            # A lone leaf has an empty path, so there are no bits to walk.
            if payload:
                raise CorruptStreamError(
                    f"single-symbol stream carries {len(payload)} unexpected payload bytes"
                )
            return self.root.symbol * content_length

        decoded = []
        node = self.root
        consumed = 0
        stream = iter(bits)
        while len(decoded) < content_length:
            try:
                bit = next(stream)
            except StopIteration:
                raise CorruptStreamError(
                    f"payload ended after {len(decoded)} of {content_length} symbols"
                ) from None
            consumed += 1
            node = node.right if bit else node.left
            if node is None:
                raise CorruptStreamError(f"no child to follow at bit {consumed}")
            if node.is_leaf:
                decoded.append(node.symbol)
                node = self.root

        remaining = list(islice(stream, 8))
        if len(remaining) >= 8 or any(remaining):
            raise CorruptStreamError(
                f"{len(remaining)} bits after the last symbol are not zero padding"
            )

        logger.debug("decoded %d symbols from %d payload bits", content_length, consumed)
        return "".join(decoded)

    @classmethod
    def decode(cls, data):
        signature, content_length, payload = read_header(data)
        coder = cls.from_signature(signature)
        return coder.decode_payload(payload, content_length)


def read_header(data):
    """Split an encoded buffer into (signature, content length, payload)."""
    data = bytes(data)
    first = data.find(b"\n")
    if first < 0:
        raise FormatError("missing signature terminator")
    second = data.find(b"\n", first + 1)
    if second < 0:
        raise FormatError("missing content length terminator")

    try:
        signature = data[:first].decode("utf-8")
        length_text = data[first + 1:second].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FormatError("header is not valid UTF-8") from exc

    if not length_text.isdecimal() or not length_text.isascii():
        raise FormatError(f"invalid content length {length_text!r}")

    return signature, int(length_text), data[second + 1:]


def encode(text):
    return HuffmanCoder.from_text(text).encode(text)


def decode(data):
    return HuffmanCoder.decode(data)
