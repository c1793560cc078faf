"""Pytest configuration and fixtures for lead deduplication tests."""

import json
import logging
from pathlib import Path
from typing import Callable, Generator, List

import pytest

from leads_core.schemas import LeadSchema

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def reset_leads_logging() -> Generator:
    """Drop handlers installed by setup_logger so tests don't leak them."""
    yield
    for name in ("leads", "leads_core"):
        target = logging.getLogger(name)
        for handler in list(target.handlers):
            target.removeHandler(handler)
            handler.close()
        target.setLevel(logging.NOTSET)


@pytest.fixture
def make_lead() -> Callable[..., LeadSchema]:
    """Build a lead with sensible defaults for passenger fields."""

    def _make(_id: str, email: str, entry_date: str, **extra) -> LeadSchema:
        data = {
            "_id": _id,
            "email": email,
            "firstName": extra.get("firstName", "John"),
            "lastName": extra.get("lastName", "Smith"),
            "address": extra.get("address", "123 Street St"),
            "entryDate": entry_date,
        }
        return LeadSchema.model_validate(data)

    return _make


@pytest.fixture
def sample_leads() -> List[dict]:
    """Leads from the bundled sample document."""
    with open(PROJECT_ROOT / "leads.json", encoding="utf-8") as f:
        return json.load(f)["leads"]


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[..., Path]:
    """Write a document to a temp file and return its path."""

    def _write(document, name: str = "leads.json") -> Path:
        path = tmp_path / name
        if isinstance(document, (bytes, str)):
            path.write_bytes(document if isinstance(document, bytes) else document.encode("utf-8"))
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
