from pathlib import Path

import pytest

from littlesearch.errors import SourceNotFoundError
from littlesearch.sources import read_tokens


def test_reads_whitespace_delimited_tokens(tmp_path: Path):
    path = tmp_path / "doc.txt"
    path.write_text("Rain falls.\n\n  Rain\tfalls again.\n")
    assert list(read_tokens(path)) == ["Rain", "falls.", "Rain", "falls", "again."]


def test_missing_file(tmp_path: Path):
    missing = tmp_path / "missing.txt"
    tokens = read_tokens(missing)
    with pytest.raises(SourceNotFoundError) as exc_info:
        next(tokens)
    assert exc_info.value.path == str(missing)
    assert isinstance(exc_info.value, FileNotFoundError)


def test_undecodable_bytes_are_replaced(tmp_path: Path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9 rain\n")
    assert list(read_tokens(path)) == ["caf\ufffd", "rain"]


def test_directory_is_not_a_source(tmp_path: Path):
    with pytest.raises(SourceNotFoundError) as exc_info:
        list(read_tokens(tmp_path))
    assert exc_info.value.path == str(tmp_path)
