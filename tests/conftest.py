"""Shared test fixtures for sectioncount tests."""

import pytest


@pytest.fixture
def sample_document():
    """Return a document with several sections, out of title order."""
    return '''["usage"]
"Run the tool "
"on a file."
["install"]
"pip install sectioncount"
["changelog"]"- first release\\n- bug fixes"
'''


@pytest.fixture
def sample_unicode_document():
    """Return a document using unicode escapes, including a surrogate pair."""
    return r'''["greeting"]"hi\u0041there"
["emoji"]"smile \ud83d\ude00!"
["kana"]"\u3042\u3044\u3046"
'''


@pytest.fixture
def document_file(tmp_path, sample_document):
    """Write the sample document to a file and return its path."""
    path = tmp_path / "sections.txt"
    path.write_text(sample_document, encoding="utf-8")
    return path


@pytest.fixture
def base_dir(tmp_path, monkeypatch):
    """Restrict tool file access to tmp_path."""
    monkeypatch.setenv("SECTIONCOUNT_BASE_DIR", str(tmp_path))
    return tmp_path
