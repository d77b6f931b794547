# filename: huffman_escape.py

# Symbols that would break a newline-delimited header field.
ESCAPES = {
    "\n": "\\n",
    "\r": "\\r",
}
UNESCAPES = {v: k for k, v in ESCAPES.items()}


def escape_symbol(symbol):
    return ESCAPES.get(symbol, symbol)


def unescape_symbol(text):
    return UNESCAPES.get(text, text)
