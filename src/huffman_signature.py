# filename: huffman_signature.py

import math

from huffman_core import HuffmanLogic, HuffmanNode
from huffman_errors import FormatError
from huffman_escape import unescape_symbol

RECORD_SEPARATOR = "|^"
FIELD_SEPARATOR = ",^"


def serialize_signature(root):
    """Render the leaves of ``root`` in pre-order as ``symbol,^weight`` records.

    ``repr`` gives the shortest text that parses back to the same float, so a
    rebuilt tree sees exactly the weights the original was built from.
    """
    return RECORD_SEPARATOR.join(
        f"{leaf.label}{FIELD_SEPARATOR}{leaf.weight!r}" for leaf in root.iter_leaves()
    )


def parse_leaves(signature):
    leaves = []
    for index, record in enumerate(signature.split(RECORD_SEPARATOR)):
        fields = record.split(FIELD_SEPARATOR)
        if len(fields) != 2:
            raise FormatError(f"signature record {index} has {len(fields)} fields: {record!r}")

        label, weight_text = fields
        symbol = unescape_symbol(label)
        if len(symbol) != 1:
            raise FormatError(f"signature record {index} has invalid symbol {label!r}")

        try:
            weight = float(weight_text)
        except ValueError as exc:
            raise FormatError(f"signature record {index} has invalid weight {weight_text!r}") from exc
        if not math.isfinite(weight) or weight < 0:
            raise FormatError(f"signature record {index} has invalid weight {weight_text!r}")

        leaves.append(HuffmanNode(symbol, weight))
    return leaves


def parse_signature(signature, logic=None):
    """Rebuild the tree a signature was serialized from."""
    logic = logic or HuffmanLogic()
    return logic.build_tree(parse_leaves(signature))
