import base64
import binascii
import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Optional

from pypdf import PdfReader

from pathfinder.schemas import DATA_URI_RE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResumeDocument:
    mime_type: str
    data: bytes

    @property
    def b64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")


def parse_data_uri(uri: str) -> ResumeDocument:
    m = DATA_URI_RE.match(uri.strip())
    if not m:
        raise ValueError("not a base64 data URI")
    try:
        data = base64.b64decode(m.group("data"), validate=False)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"invalid base64 payload: {e}") from e
    return ResumeDocument(mime_type=m.group("mime").lower(), data=data)


def to_data_uri(mime_type: Optional[str], data: bytes) -> str:
    # upload content types may carry parameters ("text/plain; charset=utf-8")
    mime = (mime_type or "").split(";")[0].strip() or "application/octet-stream"
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


def extract_text_from_pdf(file_bytes: bytes) -> str:
    reader = PdfReader(BytesIO(file_bytes))
    text = ""

    for page in reader.pages:
        page_text = page.extract_text()
        if page_text:
            text += page_text + "\n"

    return text


def resume_text(doc: ResumeDocument) -> str:
    """Best-effort plain text for providers that only take text prompts."""
    if doc.mime_type == "application/pdf":
        try:
            return extract_text_from_pdf(doc.data)
        except Exception as e:
            logger.warning("PDF text extraction failed: %s", e)
            return ""
    if doc.mime_type.startswith("text/"):
        return doc.data.decode("utf-8", errors="replace")

    logger.info("Resume type %s not readable as text", doc.mime_type)
    return f"(resume provided as {doc.mime_type}; text not available)"
