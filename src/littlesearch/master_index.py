"""In-memory keyword -> occurrences index, each list kept in descending frequency."""

import polars as pl

from littlesearch.data_models.occurrence import Occurrence

_SCHEMA = {
    "keyword": pl.String,
    "doc_id": pl.String,
    "frequency": pl.Int64,
    "rank": pl.Int64,
}


def insert_last(occurrences: list[Occurrence]) -> list[int] | None:
    """Move the last occurrence into place by binary search.

    Every element but the last must already be in descending frequency order.
    Returns the midpoints probed, or None when the list has at most one
    element. An occurrence whose frequency matches a probed element is
    inserted in front of it.
    """
    if len(occurrences) <= 1:
        return None
    last = occurrences.pop()
    probes: list[int] = []
    low, high = 0, len(occurrences) - 1
    index = 0
    while low <= high:
        mid = (low + high) // 2
        probes.append(mid)
        index = mid
        freq = occurrences[mid].frequency
        if freq == last.frequency:
            break
        if freq < last.frequency:
            high = mid - 1
        else:
            low = mid + 1
            index = mid + 1
    occurrences.insert(index, last)
    return probes


class MasterIndex:
    def __init__(self) -> None:
        self._entries: dict[str, list[Occurrence]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._entries

    def keywords(self) -> list[str]:
        return sorted(self._entries)

    def get(self, keyword: str) -> list[Occurrence] | None:
        """Occurrences of a keyword, most frequent first (a copy)."""
        occurrences = self._entries.get(keyword)
        if occurrences is None:
            return None
        return list(occurrences)

    def merge(self, table: dict[str, Occurrence]) -> dict[str, list[int] | None]:
        """Merge one document's keyword table.

        A document already listed under a keyword keeps a single occurrence
        whose frequency is the sum of both. Returns the insert_last probe trace
        per keyword; keywords seen for the first time map to None.
        """
        traces: dict[str, list[int] | None] = {}
        for keyword, occurrence in table.items():
            occurrences = self._entries.get(keyword)
            if occurrences is None:
                self._entries[keyword] = [occurrence]
                traces[keyword] = None
            else:
                for pos, existing in enumerate(occurrences):
                    if existing.doc_id == occurrence.doc_id:
                        del occurrences[pos]
                        occurrence = existing.model_copy(
                            update={"frequency": existing.frequency + occurrence.frequency}
                        )
                        break
                occurrences.append(occurrence)
                traces[keyword] = insert_last(occurrences)
        return traces

    def to_polars(self, keyword: str | None = None) -> pl.DataFrame:
        """Flatten the index (or one keyword) into rows ordered by rank."""
        if keyword is None:
            keywords = self.keywords()
        else:
            keywords = [keyword] if keyword in self._entries else []
        rows = [
            (kw, occ.doc_id, occ.frequency, rank)
            for kw in keywords
            for rank, occ in enumerate(self._entries[kw], start=1)
        ]
        if not rows:
            return pl.DataFrame(schema=_SCHEMA)
        return pl.DataFrame(rows, schema=_SCHEMA, orient="row")
