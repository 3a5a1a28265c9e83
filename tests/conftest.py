"""Root conftest: isolated settings, storage and sample receipts."""

from __future__ import annotations

from io import BytesIO

import pytest
from PIL import Image
from pypdf import PdfReader

from recibo.controller import ReceiptFormController
from recibo.models.receipt import LineItem, ReceiptForm
from recibo.pdf.receipt import ReceiptPDF
from recibo.settings import settings
from recibo.storage.local import LocalStorage


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "received_by", "Teresita Portillo")
    monkeypatch.setattr(settings, "phone", "6682311921")
    monkeypatch.setattr(settings, "signature_path", str(tmp_path / "missing" / "Firma.png"))
    monkeypatch.setattr(settings, "output_filename", "recibo-pago.pdf")
    monkeypatch.setattr(settings, "storage_backend", "local")
    monkeypatch.setattr(settings, "storage_local_path", str(tmp_path / "recibos"))


@pytest.fixture()
def signature_png(tmp_path) -> str:
    path = tmp_path / "Firma.png"
    Image.new("RGB", (240, 100), color=(255, 255, 255)).save(path)
    return str(path)


@pytest.fixture()
def storage(tmp_path) -> LocalStorage:
    return LocalStorage(str(tmp_path / "out"))


@pytest.fixture()
def controller(storage, signature_png) -> ReceiptFormController:
    return ReceiptFormController(storage, ReceiptPDF(signature_path=signature_png))


def _sample_form(**overrides) -> ReceiptForm:
    defaults = dict(
        from_="Juan Pérez",
        concept="Renta",
        items=[LineItem(description="Mes de enero", amount=1500)],
        comments="",
        received_by="Teresita Portillo",
        phone="6682311921",
        date="2025-01-15",
    )
    defaults.update(overrides)
    return ReceiptForm(**defaults)


@pytest.fixture()
def sample_form():
    return _sample_form


def _pdf_text(data: bytes) -> str:
    reader = PdfReader(BytesIO(data))
    return "\n".join(page.extract_text() for page in reader.pages)


@pytest.fixture()
def pdf_text():
    return _pdf_text
