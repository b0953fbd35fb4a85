from pydantic import ValidationError
import pytest

from littlesearch.data_models.occurrence import Occurrence


def test_bumped_returns_new_occurrence():
    occ = Occurrence(doc_id="doc1.txt")
    bumped = occ.bumped()
    assert occ.frequency == 1
    assert bumped == Occurrence(doc_id="doc1.txt", frequency=2)


def test_frozen():
    occ = Occurrence(doc_id="doc1.txt", frequency=3)
    with pytest.raises(ValidationError):
        occ.frequency = 4  # type: ignore[misc]


def test_frequency_must_be_positive():
    with pytest.raises(ValidationError):
        Occurrence(doc_id="doc1.txt", frequency=0)
