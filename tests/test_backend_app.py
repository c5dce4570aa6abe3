from __future__ import annotations

import io
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from pypdf import PdfReader

from apps.backend.app.main import app, get_engine

from conftest import FakeEngine

DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@pytest.fixture()
def engine() -> Iterator[FakeEngine]:
    fake = FakeEngine(pages=2, width=300)
    app.dependency_overrides[get_engine] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture()
def client(engine: FakeEngine) -> TestClient:
    return TestClient(app)


def _pages(content: bytes) -> list[float]:
    return [round(float(page.mediabox.width), 2) for page in PdfReader(io.BytesIO(content)).pages]


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_formats_lists_supported_media_types(client: TestClient) -> None:
    response = client.get("/api/formats")
    assert response.status_code == 200
    formats = response.json()["formats"]
    assert "text/plain" in formats
    assert "image/png" in formats
    assert DOCX in formats


def test_prefixed_openapi(client: TestClient) -> None:
    response = client.get("/api/openapi.json")
    assert response.status_code == 200
    assert "/api/convert" in response.json()["paths"]


def test_convert_without_inputs_returns_400(client: TestClient, engine: FakeEngine) -> None:
    response = client.post("/api/convert")

    assert response.status_code == 400
    assert response.json() == {"error": "No files or URL provided"}
    assert engine.urls == []
    assert engine.html == []


def test_convert_with_blank_url_returns_400(client: TestClient) -> None:
    response = client.post("/api/convert", data={"url": ""})

    assert response.status_code == 400
    assert response.json() == {"error": "No files or URL provided"}


def test_convert_image_then_text(client: TestClient, image_factory) -> None:
    files = [
        ("file", ("photo.png", image_factory(640, 480), "image/png")),
        ("file", ("notes.txt", b"Meeting notes for Monday.", "text/plain")),
    ]

    response = client.post("/api/convert", files=files)

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == "attachment; filename=converted.pdf"
    assert _pages(response.content) == [794, 595.28]


def test_convert_url_comes_before_files(client: TestClient, engine: FakeEngine) -> None:
    files = [("file", ("notes.txt", b"after the page", "text/plain"))]

    response = client.post("/api/convert", data={"url": "https://example.com"}, files=files)

    assert response.status_code == 200
    assert _pages(response.content) == [300, 300, 595.28]
    assert engine.urls == ["https://example.com"]


def test_convert_word_document(client: TestClient, engine: FakeEngine, docx_bytes: bytes) -> None:
    files = [("file", ("report.docx", docx_bytes, DOCX))]

    response = client.post("/api/convert", files=files)

    assert response.status_code == 200
    assert _pages(response.content) == [300, 300]
    assert "Quarterly Report" in engine.html[0]


def test_unsupported_file_fails_whole_request(client: TestClient, image_factory) -> None:
    files = [
        ("file", ("photo.png", image_factory(), "image/png")),
        ("file", ("archive.zip", b"PK\x03\x04", "application/zip")),
    ]

    response = client.post("/api/convert", files=files)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to convert to PDF"}


def test_render_failure_returns_generic_500(client: TestClient, engine: FakeEngine) -> None:
    engine.fail = TimeoutError("navigation timed out")

    response = client.post("/api/convert", data={"url": "https://slow.example.com"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to convert to PDF"}
