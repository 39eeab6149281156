# Case Reference
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""Whitespace trimming for reference documents.

`str.strip()` without arguments also removes the ASCII separators
`\\x1c`-`\\x1f` and `\\x85` but keeps the byte order mark. Document text is
trimmed with the explicit set below instead: ASCII whitespace, the Unicode
space separators, the line/paragraph separators and the BOM.
"""

WHITESPACE = (
    "\t\n\x0b\x0c\r "
    "\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
    "\ufeff"
)


def trim(text: str) -> str:
    """Remove leading and trailing `WHITESPACE` characters."""

    return text.strip(WHITESPACE)
