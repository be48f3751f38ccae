import io
import logging
from typing import Union
from pdfminer.high_level import extract_text as pdf_extract_text

logger = logging.getLogger(__name__)


def extract_text_from_pdf(source: Union[str, bytes]) -> str:
    """Return the text layer of a PDF given its path or raw bytes.

    Broken or encrypted files yield an empty string so a single bad
    resume does not fail a whole batch.
    """
    try:
        if isinstance(source, (bytes, bytearray)):
            return pdf_extract_text(io.BytesIO(source)) or ''
        return pdf_extract_text(source) or ''
    except Exception as e:
        logger.warning("Could not extract text from PDF: %s", e)
        return ''
