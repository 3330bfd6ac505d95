"""JSON-with-comments parsing.

``.gitinfo`` files may contain ``//`` and ``/* */`` comments and trailing
commas. Both are removed outside of string literals before handing the text
to :mod:`json`.
"""

import json
from typing import Any


def strip_comments(text: str) -> str:
    out = []
    i = 0
    n = len(text)
    in_string = False

    while i < n:
        ch = text[i]

        if in_string:
            if ch == "\\" and i + 1 < n:
                out.append(text[i:i + 2])
                i += 2
                continue
            if ch == '"':
                in_string = False
            out.append(ch)
            i += 1
            continue

        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
            continue

        nxt = text[i + 1] if i + 1 < n else ""
        if ch == "/" and nxt == "/":
            # Keep the newline itself so line numbers in parse errors still match.
            end = text.find("\n", i)
            i = n if end == -1 else end
            continue
        if ch == "/" and nxt == "*":
            end = text.find("*/", i + 2)
            stop = n if end == -1 else end + 2
            # A space keeps neighbouring tokens apart; newlines keep line numbers.
            out.append(" " + "\n" * text.count("\n", i, stop))
            i = stop
            continue

        out.append(ch)
        i += 1

    return "".join(out)


def strip_trailing_commas(text: str) -> str:
    out = []
    i = 0
    n = len(text)
    in_string = False

    while i < n:
        ch = text[i]

        if in_string:
            if ch == "\\" and i + 1 < n:
                out.append(text[i:i + 2])
                i += 2
                continue
            if ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == ",":
            j = i + 1
            while j < n and text[j] in " \t\r\n":
                j += 1
            if j < n and text[j] in "}]":
                i += 1
                continue

        out.append(ch)
        i += 1

    return "".join(out)


def loads(text: str) -> Any:
    """Parse JSONC text; raises ``json.JSONDecodeError`` on malformed input."""
    return json.loads(strip_trailing_commas(strip_comments(text)))
