"""
Per-resource validation.

For one resource: optionally the encoding ambiguity check on the raw bytes,
then a parse that fails on the first repeated key. Stops at the first failure.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Tuple

from .encoding import check_encoding_ambiguity, encoding_verdict
from .errors import (
    DuplicateKeyFailure,
    EncodingAmbiguityFailure,
    MalformedResourceFailure,
)
from .models import Outcome, ValidationReport, ValidationResult
from .properties import PropertyEntry, decode_resource_bytes, iter_entries
from .scanner import Resource

logger = logging.getLogger(__name__)


def collect_entries(entries: Iterable[PropertyEntry], resource_name: str) -> Dict[str, str]:
    props: Dict[str, str] = {}
    for key, value in entries:
        if key in props:
            # equal values are still a redefinition
            raise DuplicateKeyFailure(key, props[key], value, resource_name)
        props[key] = value
    return props


class ResourceValidator:
    def __init__(self, check_encoding: bool = False):
        self.check_encoding = check_encoding

    def validate_bytes(self, raw: bytes, resource_name: str) -> Dict[str, str]:
        """
        Validate already-read resource content.

        Returns the parsed key/value mapping on success. Raises
        EncodingAmbiguityFailure, DuplicateKeyFailure, or the decoder's
        MalformedResourceFailure.
        """
        if self.check_encoding:
            check_encoding_ambiguity(raw, resource_name)
        else:
            logger.debug("%s: encoding check skipped", resource_name)

        text = decode_resource_bytes(raw)
        try:
            return collect_entries(iter_entries(text), resource_name)
        except MalformedResourceFailure as e:
            e.resource_name = resource_name
            raise

    def validate(self, resource: Resource) -> Dict[str, str]:
        raw = resource.read_bytes()
        props = self.validate_bytes(raw, resource.name)
        logger.debug("%s: ok, %d entries", resource.name, len(props))
        return props

    def _outcome(self, raw: bytes, resource_name: str) -> Tuple[ValidationResult, Optional[Dict[str, str]]]:
        try:
            props = self.validate_bytes(raw, resource_name)
        except DuplicateKeyFailure as e:
            outcome, message = Outcome.duplicate_key, str(e)
        except EncodingAmbiguityFailure as e:
            outcome, message = Outcome.encoding_ambiguity, str(e)
        except MalformedResourceFailure as e:
            outcome, message = Outcome.malformed, str(e)
        else:
            return ValidationResult(resource=resource_name, outcome=Outcome.passed), props
        return ValidationResult(resource=resource_name, outcome=outcome, message=message), None

    def check(self, resource: Resource) -> ValidationResult:
        """Like validate(), but reports failures as a result instead of raising."""
        result, _ = self._outcome(resource.read_bytes(), resource.name)
        return result

    def report(self, raw: bytes, resource_name: str) -> ValidationReport:
        result, props = self._outcome(raw, resource_name)
        return ValidationReport(
            result=result,
            encoding=encoding_verdict(raw, sniff=True),
            encoding_checked=self.check_encoding,
            entries=len(props) if props is not None else None,
        )
