"""
Fixed validation rules.

Values here are not configurable at runtime; see config.py for what is.
"""

PROPERTIES_EXTENSION = "properties"

# Platforms at or above this version read resource bytes as UTF-8 only,
# so the ambiguity check is pointless there.
ENCODING_CHECK_THRESHOLD = "2.357"

ASCII = "ascii"
UTF_8 = "utf-8"
ISO_8859_1 = "iso-8859-1"

# Characters that end a key (when unescaped).
KEY_TERMINATORS = "=: \t\f"
WHITESPACE = " \t\f"
COMMENT_MARKERS = "#!"
