"""Text normalization for trademark name comparison.

Canonical forms are used only for equality and containment checks and are
never shown to the user.
"""

import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def strip_diacritics_lower(text: object) -> str:
    """Remove accents/diacritics, lowercase and trim.

    Punctuation and inner whitespace are kept. Anything that is not a
    string yields an empty string.

    Args:
        text: Value to normalize

    Returns:
        Normalized string
    """
    if not isinstance(text, str):
        return ""

    # NFD separates base letters from combining marks
    text = unicodedata.normalize("NFD", text)
    text = "".join(c for c in text if unicodedata.category(c) != "Mn")

    return text.lower().strip()


def canonicalize(text: object) -> str:
    """Canonical form of a trademark name.

    - Remove accents/diacritics
    - Convert to lowercase
    - Remove everything that is not an ASCII letter or digit

    "Túnel Crew", "TUNEL CREW" and "tunel-crew" all become "tunelcrew".

    Args:
        text: Name to canonicalize (None or non-strings give "")

    Returns:
        Canonical string, possibly empty
    """
    return _NON_ALNUM.sub("", strip_diacritics_lower(text))
