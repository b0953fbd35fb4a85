"""Turn one document's tokens into a keyword -> Occurrence table."""

from collections.abc import Iterable, Set

from littlesearch.data_models.occurrence import Occurrence
from littlesearch.normalize import normalize


def scan_document(
    doc_id: str, tokens: Iterable[str], noise_words: Set[str] = frozenset()
) -> dict[str, Occurrence]:
    table: dict[str, Occurrence] = {}
    for token in tokens:
        word = normalize(token, noise_words)
        if word is None:
            continue
        existing = table.get(word)
        if existing is None:
            table[word] = Occurrence(doc_id=doc_id, frequency=1)
        else:
            table[word] = existing.bumped()
    return table
