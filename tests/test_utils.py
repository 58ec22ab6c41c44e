import io

import pytest
from pypdf import PdfWriter

from config import CONFIG
from services.exceptions import InvalidInput
from utils import extract_resume_text, file_extension


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("resume.PDF", ".pdf"),
        ("my.resume.txt", ".txt"),
        ("resume", ""),
        ("", ""),
    ],
)
def test_file_extension(filename, expected):
    assert file_extension(filename) == expected


def test_text_resume_is_decoded():
    assert extract_resume_text("resume.txt", "  Jane Smith\nPython  ".encode("utf-8")) == "Jane Smith\nPython"


def test_invalid_utf8_is_replaced_not_rejected():
    text = extract_resume_text("resume.txt", b"Caf\xe9 owner")
    assert text.startswith("Caf")
    assert text.endswith("owner")


def test_blank_pdf_yields_empty_text():
    buffer = io.BytesIO()
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    writer.write(buffer)

    assert extract_resume_text("resume.pdf", buffer.getvalue()) == ""


def test_corrupt_pdf_is_invalid_input():
    with pytest.raises(InvalidInput, match="Could not read PDF"):
        extract_resume_text("resume.pdf", b"not really a pdf")


@pytest.mark.parametrize("error", [ValueError("bad xref"), KeyError("/Root")])
def test_malformed_pdf_structure_is_invalid_input(monkeypatch, error):
    def broken_reader(stream):
        raise error

    monkeypatch.setattr("utils.PdfReader", broken_reader)
    with pytest.raises(InvalidInput, match="Could not read PDF"):
        extract_resume_text("resume.pdf", b"%PDF-1.4 truncated")


@pytest.mark.parametrize("filename", ["resume.docx", "resume.exe", "resume"])
def test_unsupported_extensions_are_rejected(filename):
    with pytest.raises(InvalidInput, match="Invalid file type"):
        extract_resume_text(filename, b"data")


def test_oversized_file_is_rejected(monkeypatch):
    monkeypatch.setitem(CONFIG["upload"], "max_bytes", 4)
    with pytest.raises(InvalidInput, match="too large"):
        extract_resume_text("resume.txt", b"12345")
