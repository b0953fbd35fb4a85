import re
from collections.abc import Set

# Anything outside a-z (after lower-casing) separates alphabetic runs.
_RUN_RE = re.compile(r"[a-z]+")


def normalize(token: str, noise_words: Set[str] = frozenset()) -> str | None:
    """Return the keyword for a raw token, or None if it is not one.

    A token is a keyword only when it holds exactly one alphabetic run, so
    leading/trailing punctuation is dropped but any embedded non-letter
    rejects the whole token:

    normalize("Hello!")  -> "hello"
    normalize("don't")   -> None
    normalize("abc123")  -> "abc"
    """
    runs = _RUN_RE.findall(token.lower())
    if len(runs) != 1:
        return None
    word = runs[0]
    if word in noise_words:
        return None
    return word
