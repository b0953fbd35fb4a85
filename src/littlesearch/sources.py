"""Whitespace-delimited token sources backed by plain-text files."""

from collections.abc import Iterator
from pathlib import Path

from littlesearch.errors import SourceNotFoundError


def read_tokens(path: str | Path) -> Iterator[str]:
    """Yield the whitespace-delimited tokens of a file, one line at a time.

    The file is opened when iteration starts and closed once it is exhausted.
    Undecodable bytes become U+FFFD, which the normalizer treats as a
    separator.
    """
    try:
        f = open(path, encoding="utf-8", errors="replace")
    except OSError as e:
        raise SourceNotFoundError(str(path)) from e
    with f:
        for line in f:
            yield from line.split()
