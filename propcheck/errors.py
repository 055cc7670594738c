from __future__ import annotations

from typing import Optional


def _printable(text: str) -> str:
    # lone surrogates from \uD8xx escapes cannot be encoded as UTF-8 or JSON
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


class ResourceCheckFailure(AssertionError):
    """A content defect in one resource. Test runners report it as a failed assertion."""

    def __init__(self, message: str, resource_name: str):
        super().__init__(message)
        self.resource_name = resource_name


class DuplicateKeyFailure(ResourceCheckFailure):
    def __init__(self, key: str, old_value: str, new_value: str, resource_name: str):
        super().__init__(
            f"Two values for `{_printable(key)}` (`{_printable(old_value)}` vs. "
            f"`{_printable(new_value)}`) in {resource_name}",
            resource_name,
        )
        self.key = key
        self.old_value = old_value
        self.new_value = new_value


class EncodingAmbiguityFailure(ResourceCheckFailure):
    def __init__(self, resource_name: str, detected: Optional[str] = None):
        message = (
            f"{resource_name} is valid UTF-8 and valid ISO-8859-1. "
            "To avoid problems when auto-detecting the encoding, use the lowest common "
            "denominator of ASCII encoding and express non-ASCII characters with escape "
            "sequences using a tool like `native2ascii`."
        )
        if detected:
            message += f" (charset detection currently guesses {detected})"
        super().__init__(message, resource_name)
        self.detected = detected


class MalformedResourceFailure(ValueError):
    """Raised by the property line decoder when content cannot be parsed at all."""

    def __init__(self, message: str, line: Optional[int] = None):
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)
        self.line = line
        self.resource_name: Optional[str] = None
