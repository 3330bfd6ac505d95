"""String format predicates used by ``format`` schema keywords."""

import re

URI_PREFIXES = ("http://", "https://", "data:image/")

# Permissive on purpose: one "@" and a dot in the domain part. Not RFC 5322.
# fullmatch so a trailing newline is not accepted the way "$" would.
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_uri(s: str) -> bool:
    return s.startswith(URI_PREFIXES)


def is_valid_email(s: str) -> bool:
    return _EMAIL_RE.fullmatch(s) is not None
