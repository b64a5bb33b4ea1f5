"""Character reference decoding.

Only numeric references are decoded (&#60; and &#x3C;). Named references
such as &nbsp; are left in the text verbatim: Markdown renderers
understand them, and the converter does not carry an entity table.
"""

import re

_REFERENCE_PATTERN = re.compile(r"&(#[xX][0-9A-Fa-f]+|#[0-9]+|[A-Za-z][A-Za-z0-9]*);")


def decode_numeric_entity(text, is_hex=False):
    """Decode the numeric part of a reference like &#60; or &#x3C;.

    Args:
        text: The digits (without &#, x or ;)
        is_hex: Whether this is hexadecimal (&#x) or decimal (&#)

    Returns:
        The decoded character, or None when the number is not a Unicode
        scalar value
    """
    digits = text.lstrip("0") or "0"
    # No scalar value needs more than 7 digits in either base
    if len(digits) > 7:
        return None
    try:
        codepoint = int(digits, 16 if is_hex else 10)
    except (ValueError, OverflowError):
        return None
    if codepoint > 0x10FFFF:
        return None
    if 0xD800 <= codepoint <= 0xDFFF:  # Surrogate range
        return None
    return chr(codepoint)


def _replace_reference(match):
    name = match.group(1)
    if name[0] != "#":
        return match.group(0)
    if name[1] in "xX":
        decoded = decode_numeric_entity(name[2:], is_hex=True)
    else:
        decoded = decode_numeric_entity(name[1:])
    if decoded is None:
        return match.group(0)
    return decoded


def decode_entities_in_text(text):
    """Decode numeric character references in ``text``, left to right."""
    if "&" not in text:
        return text
    return _REFERENCE_PATTERN.sub(_replace_reference, text)
