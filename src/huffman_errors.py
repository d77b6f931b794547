# filename: huffman_errors.py


class HuffmanError(ValueError):
    pass


class FormatError(HuffmanError):
    """Header or signature text that cannot be parsed."""


class EmptyInputError(HuffmanError):
    """Nothing to build a tree from."""


class CorruptStreamError(HuffmanError):
    """Payload bits that do not decode to the announced number of symbols."""
