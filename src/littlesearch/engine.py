"""Search engine instance: noise words plus master index."""

from collections.abc import Iterable
from pathlib import Path

from littlesearch.data_models.occurrence import Occurrence
from littlesearch.master_index import MasterIndex
from littlesearch.query import TOP_K, top_k
from littlesearch.scan import scan_document
from littlesearch.sources import read_tokens


class SearchEngine:
    def __init__(self) -> None:
        self.index = MasterIndex()
        self.noise_words: frozenset[str] = frozenset()

    def load_noise_words(self, tokens: Iterable[str]) -> None:
        """Add noise words, taken verbatim (no normalization)."""
        self.noise_words = self.noise_words | frozenset(tokens)

    def index_document(
        self, doc_id: str, tokens: Iterable[str]
    ) -> dict[str, Occurrence]:
        """Scan one document and merge it into the index; returns its table."""
        table = scan_document(doc_id, tokens, self.noise_words)
        self.index.merge(table)
        return table

    def make_index(self, docs_file: str | Path, noise_words_file: str | Path) -> int:
        """Index every document named in `docs_file`, in order.

        Raises SourceNotFoundError if any file is missing; documents merged
        before the failure remain in the index. Returns the number of
        documents indexed.
        """
        self.load_noise_words(read_tokens(noise_words_file))
        count = 0
        for doc_file in read_tokens(docs_file):
            self.index_document(doc_file, read_tokens(doc_file))
            count += 1
        return count

    def top5search(self, kw1: str, kw2: str, limit: int = TOP_K) -> list[str] | None:
        """Documents containing kw1 or kw2, best frequency first, or None."""
        return top_k(self.index.get(kw1), self.index.get(kw2), limit=limit)
