"""`python -m sidebyside` tests — settings-driven build and exit codes."""

import pytest

from sidebyside.__main__ import main
from sidebyside.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.setenv("SIDEBYSIDE_LOG_FORMAT", "text")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_build_bundled_document(monkeypatch, tmp_path):
    out = tmp_path / "features.html"
    monkeypatch.setenv("SIDEBYSIDE_OUTPUT_PATH", str(out))
    monkeypatch.setenv("SIDEBYSIDE_OUTPUT_FORMAT", "html")
    assert main() == 0
    assert "<h2>nameof operator</h2>" in out.read_text(encoding="utf-8")


def test_missing_source_exits_nonzero(monkeypatch, tmp_path):
    monkeypatch.setenv("SIDEBYSIDE_SOURCE_PATH", str(tmp_path / "missing.md"))
    monkeypatch.setenv("SIDEBYSIDE_OUTPUT_PATH", str(tmp_path / "out.html"))
    assert main() == 1
    assert not (tmp_path / "out.html").exists()
