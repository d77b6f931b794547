# filename: huffman_core.py

import heapq
import logging
from collections import Counter

from huffman_errors import EmptyInputError, FormatError
from huffman_escape import escape_symbol

logger = logging.getLogger(__name__)

# Relative tolerance under which two weights count as equal.
EPSILON = 1e-5


class HuffmanNode:
    """Leaf (symbol + weight) or internal node (two children, summed weight).

    Ordering is the merge priority: lower weight first, and within the
    EPSILON band the lexicographically greater label first.
    """

    def __init__(self, symbol, weight, left=None, right=None):
        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right
        if symbol is not None:
            self.label = escape_symbol(symbol)
        else:
            # diagnostic only, names every symbol below this node
            self.label = left.label + right.label

    @classmethod
    def merge(cls, left, right):
        return cls(None, left.weight + right.weight, left, right)

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    def __lt__(self, other):
        if abs(self.weight - other.weight) < abs(self.weight) * EPSILON:
            return self.label > other.label
        return self.weight < other.weight

    def iter_nodes(self):
        """Pre-order: node, left subtree, right subtree."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if not node.is_leaf:
                stack.append(node.right)
                stack.append(node.left)

    def iter_leaves(self):
        return (node for node in self.iter_nodes() if node.is_leaf)

    def __repr__(self):
        return f"HuffmanNode({self.label!r}, {self.weight!r})"


def _canonical_order(leaves):
    # weight ascending, label descending; independent of the order supplied
    ordered = sorted(leaves, key=lambda node: node.label, reverse=True)
    return sorted(ordered, key=lambda node: node.weight)


class HuffmanLogic:
    def analyze_frequencies(self, text):
        """Map each distinct symbol of ``text`` to count / total."""
        if not text:
            return {}
        total = len(text)
        return {symbol: count / total for symbol, count in Counter(text).items()}

    def leaves_from_frequencies(self, frequencies):
        return [HuffmanNode(symbol, weight) for symbol, weight in frequencies.items()]

    def build_tree(self, leaves):
        """Merge the two lowest-priority nodes until a single root remains.

        A single leaf is returned as the root as is.
        """
        priority_queue = _canonical_order(leaves)
        if not priority_queue:
            raise EmptyInputError("cannot build a Huffman tree without symbols")

        seen = set()
        for leaf in priority_queue:
            if leaf.symbol in seen:
                raise FormatError(f"duplicate symbol {leaf.label!r}")
            seen.add(leaf.symbol)

        heapq.heapify(priority_queue)

        # Iteratively merge nodes to form the binary tree
        while len(priority_queue) > 1:
            left = heapq.heappop(priority_queue)
            right = heapq.heappop(priority_queue)
            heapq.heappush(priority_queue, HuffmanNode.merge(left, right))

        logger.debug("built Huffman tree over %d symbols", len(seen))
        return priority_queue[0]

    def generate_codes(self, node):
        """Assign every leaf its root-to-leaf path (False = left, True = right)."""
        codes = {}
        stack = [(node, ())]
        while stack:
            node, current_code = stack.pop()
            if node.is_leaf:
                codes[node.symbol] = current_code
                continue
            stack.append((node.right, current_code + (True,)))
            stack.append((node.left, current_code + (False,)))
        return codes
