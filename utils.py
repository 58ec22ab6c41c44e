"""
Shared utility functions for applyassist
"""

import io
import os
from pypdf import PdfReader
from pypdf.errors import PyPdfError

# Local imports
from config import CONFIG
from services.exceptions import InvalidInput


def ensure_directory_exists(directory_path: str) -> None:
    """Ensure a directory exists, create if not."""
    os.makedirs(directory_path, exist_ok=True)


def file_extension(filename: str) -> str:
    return os.path.splitext(filename or "")[1].lower()


def extract_resume_text(filename: str, data: bytes) -> str:
    """
    Extracts plain text from an uploaded resume file (.txt or .pdf).
    Raises InvalidInput for unsupported or unreadable files.
    """
    extension = file_extension(filename)
    if extension not in CONFIG["upload"]["allowed_extensions"]:
        allowed = ", ".join(CONFIG["upload"]["allowed_extensions"])
        raise InvalidInput(f"Invalid file type. Only {allowed} files are allowed.")

    if len(data) > CONFIG["upload"]["max_bytes"]:
        raise InvalidInput("Resume file is too large.")

    if extension == ".txt":
        return data.decode("utf-8", errors="replace").strip()

    try:
        reader = PdfReader(io.BytesIO(data))
        resume_text = ""
        for page in reader.pages:
            resume_text += page.extract_text() or ""
    except (PyPdfError, ValueError, KeyError) as e:
        raise InvalidInput(f"Could not read PDF file: {e}") from e

    return resume_text.strip()
