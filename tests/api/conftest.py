"""API test fixtures — FastAPI app over httpx with a preloaded document.

Invariants:
    - Lifespan is not run by ASGITransport; the document_source singleton is
      patched directly so routes and readiness probes see the fixture document
"""

import pytest
from httpx import ASGITransport, AsyncClient

import sidebyside.infrastructure.document_source as source_module
from sidebyside.infrastructure.document_source import DocumentSource
from sidebyside.main import app


@pytest.fixture
def loaded_source(monkeypatch, sample_document):
    source = DocumentSource(sample_document)
    monkeypatch.setattr(source_module, "document_source", source)
    return source


@pytest.fixture
async def client(loaded_source):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def unloaded_client(monkeypatch):
    monkeypatch.setattr(source_module, "document_source", None)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
