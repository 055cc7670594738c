"""
Charset ambiguity check on raw resource bytes.

Responsibilities:
- strict decode probes (no replacement characters, no silent recovery)
- the ASCII / UTF-8 / ISO-8859-1 verdict
- failing resources whose bytes are valid under both UTF-8 and ISO-8859-1
"""

from __future__ import annotations

import logging
from typing import Optional

from charset_normalizer import from_bytes

from .errors import EncodingAmbiguityFailure
from .models import EncodingVerdict
from .rules import ASCII, ISO_8859_1, UTF_8

logger = logging.getLogger(__name__)


def is_encoded(raw: bytes, charset: str) -> bool:
    try:
        raw.decode(charset, errors="strict")
    except UnicodeDecodeError:
        return False
    return True


def _sniff(raw: bytes) -> Optional[str]:
    # Only used to explain a failure; the verdict itself never depends on it.
    match = from_bytes(raw).best()
    return match.encoding if match is not None else None


def encoding_verdict(raw: bytes, sniff: bool = False) -> EncodingVerdict:
    verdict = EncodingVerdict(
        ascii=is_encoded(raw, ASCII),
        utf_8=is_encoded(raw, UTF_8),
        iso_8859_1=is_encoded(raw, ISO_8859_1),
    )
    if sniff and not verdict.ascii:
        verdict.detected = _sniff(raw)
    return verdict


def check_encoding_ambiguity(raw: bytes, resource_name: str) -> None:
    """
    Raise EncodingAmbiguityFailure if ``raw`` is not ASCII but decodes
    strictly as both UTF-8 and ISO-8859-1.
    """
    if is_encoded(raw, ASCII):
        return

    is_utf8 = is_encoded(raw, UTF_8)
    is_iso88591 = is_encoded(raw, ISO_8859_1)
    logger.debug("%s: utf-8=%s iso-8859-1=%s", resource_name, is_utf8, is_iso88591)

    if is_utf8 and is_iso88591:
        raise EncodingAmbiguityFailure(resource_name, detected=_sniff(raw))
