"""Ranked OR search over two keywords' occurrence lists."""

from collections.abc import Sequence

from littlesearch.data_models.occurrence import Occurrence
from littlesearch.errors import UsageError

TOP_K = 5


def top_k(
    first: Sequence[Occurrence] | None,
    second: Sequence[Occurrence] | None,
    limit: int = TOP_K,
) -> list[str] | None:
    """Merge two descending-frequency lists into up to `limit` distinct doc ids.

    Ties go to `first`. A document found under both keywords is listed once,
    at its first (higher-ranked) appearance. Returns None when both lists are
    missing or empty.
    """
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    first = first or []
    second = second or []
    if not first and not second:
        return None

    docs: list[str] = []
    i = j = 0
    while len(docs) < limit:
        if i < len(first) and j < len(second):
            if first[i].frequency >= second[j].frequency:
                doc_id = first[i].doc_id
                i += 1
            else:
                doc_id = second[j].doc_id
                j += 1
        elif i < len(first):
            doc_id = first[i].doc_id
            i += 1
        elif j < len(second):
            doc_id = second[j].doc_id
            j += 1
        else:
            break
        if doc_id not in docs:
            docs.append(doc_id)
    return docs


def parse_query(text: str) -> tuple[str, str]:
    """Split a query line into its two keywords."""
    words = text.split()
    if len(words) != 2:
        raise UsageError(f"Expected exactly two keywords, got {len(words)}: {text!r}")
    return words[0], words[1]
