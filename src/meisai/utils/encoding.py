"""Character decoding for statement downloads."""

import logging

logger = logging.getLogger(__name__)

PRIMARY_ENCODING = "utf-8-sig"
FALLBACK_ENCODING = "cp932"
REPLACEMENT_CHARACTER = "\ufffd"


def decode_document(data: bytes) -> str:
    """Decode raw statement bytes into text.

    Card issuers ship the export either as UTF-8 or as Shift_JIS (CP932).
    UTF-8 is tried first; when it produces replacement characters the
    CP932 decoding is used instead.

    Args:
        data: Raw file contents

    Returns:
        Decoded text
    """
    text = data.decode(PRIMARY_ENCODING, errors="replace")
    if REPLACEMENT_CHARACTER not in text:
        return text

    logger.info("Document is not valid %s, falling back to %s", PRIMARY_ENCODING, FALLBACK_ENCODING)
    return data.decode(FALLBACK_ENCODING, errors="replace")
