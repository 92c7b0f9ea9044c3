"""Pytest fixtures for Shortcode Stripper tests."""

import logging

import pytest
from pathlib import Path

from shortcode_stripper import config
from shortcode_stripper.stores.memory_store import MemoryDocumentStore


@pytest.fixture(autouse=True)
def reset_state(monkeypatch: pytest.MonkeyPatch):
    """Give every test fresh settings and an unconfigured package logger."""
    monkeypatch.setattr(config, "_settings", None)
    for name in (
        "SHORTCODE_STRIPPER_MARKERS",
        "SHORTCODE_STRIPPER_EXTENSIONS",
        "SHORTCODE_STRIPPER_SECRET",
        "SHORTCODE_STRIPPER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    yield

    logger = logging.getLogger("shortcode_stripper")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def builder_content() -> str:
    """Post content as saved by a page builder."""
    return (
        '[vc_row full_width="stretch_row"][vc_column width="1/2"]'
        "<h2>Welcome</h2>\n<p>Hello there.</p>"
        "[/vc_column][/vc_row]"
        '[vc_button link="/contact" title="Contact"]'
    )


@pytest.fixture
def sample_documents(builder_content: str) -> dict[str, str]:
    """One document with shortcodes and two clean ones."""
    return {
        "1": builder_content,
        "2": "<p>Already clean.</p>",
        "3": "Uses [gallery ids=\"1,2\"] which is not a target.",
    }


@pytest.fixture
def memory_store(sample_documents: dict[str, str]) -> MemoryDocumentStore:
    """In-memory store holding the sample documents."""
    return MemoryDocumentStore(sample_documents)


@pytest.fixture
def export_folder(tmp_path: Path, sample_documents: dict[str, str]) -> Path:
    """Folder with one .html file per sample document."""
    folder = tmp_path / "export"
    folder.mkdir()
    for document_id, body in sample_documents.items():
        (folder / f"post-{document_id}.html").write_text(body, encoding="utf-8")
    return folder
