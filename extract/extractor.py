# backend/extract/extractor.py

import io
import logging
import os

import fitz  # PyMuPDF
from docx import Document

from config import MAX_UPLOAD_BYTES
from errors import (
    ExtractionEmpty,
    ExtractionFailed,
    FileTooLarge,
    UnsupportedFileType,
    ValidationError,
)

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TXT_MIME = "text/plain"

# extension -> the only MIME type accepted with it
SUPPORTED_TYPES = {
    ".pdf": PDF_MIME,
    ".docx": DOCX_MIME,
    ".txt": TXT_MIME,
}

MIN_TEXT_LENGTH = 10


def extract_from_pdf(data):
    text_data = []
    with fitz.open(stream=data, filetype="pdf") as doc:
        for page in doc:
            text_data.append(page.get_text())
    return "\n".join(text_data)


def extract_from_docx(data):
    doc = Document(io.BytesIO(data))
    text_data = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            for cell in row.cells:
                text_data.append(cell.text)
    return "\n".join(text_data)


def extract_from_txt(data):
    return data.decode("utf-8", errors="replace")


EXTRACTORS = {
    ".pdf": extract_from_pdf,
    ".docx": extract_from_docx,
    ".txt": extract_from_txt,
}


def file_extension(filename):
    return os.path.splitext(filename or "")[1].lower()


def is_valid_file_type(filename, mimetype):
    """Extension and declared MIME type must both be supported and agree."""
    ext = file_extension(filename)
    mime = (mimetype or "").split(";")[0].strip().lower()
    expected = SUPPORTED_TYPES.get(ext)
    return expected is not None and mime == expected


def validate_upload(data, filename, mimetype, max_bytes=MAX_UPLOAD_BYTES):
    if data is None or not filename:
        raise ValidationError("No file uploaded")
    if len(data) > max_bytes:
        raise FileTooLarge("Maximum file size is %dMB" % (max_bytes // (1024 * 1024)))
    if not is_valid_file_type(filename, mimetype):
        raise UnsupportedFileType("Unsupported file type. Use PDF, DOCX, or TXT")


def extract_text(data, filename, mimetype, max_bytes=MAX_UPLOAD_BYTES):
    """Validate an uploaded document and return its plain text.

    Returns a dict with ``text``, ``filename`` and ``fileType`` (the upper-cased
    extension). Raises a ``ValidationError`` for bad uploads, ``ExtractionFailed``
    when the parsing library fails and ``ExtractionEmpty`` when fewer than ten
    readable characters come out.
    """
    validate_upload(data, filename, mimetype, max_bytes)

    ext = file_extension(filename)
    file_type = ext.lstrip(".").upper()

    try:
        text = EXTRACTORS[ext](data)
    except Exception as e:
        logger.exception("Error extracting text from %s", filename)
        raise ExtractionFailed("Failed to extract text from %s: %s" % (file_type, e))

    if not text or len(text.strip()) < MIN_TEXT_LENGTH:
        raise ExtractionEmpty(
            "Could not extract text from the file. Make sure it contains readable text."
        )

    logger.info("Extracted %d characters from %s", len(text), filename)
    return {"text": text, "filename": filename, "fileType": file_type}
