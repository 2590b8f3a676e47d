"""
Utilities for building safe output file names.
"""

import re

# Characters rejected by common filesystems plus C0 and C1 control characters
FORBIDDEN_CHARS = re.compile(r'[/?<>\\:*|"\x00-\x1f\x80-\x9f]')


def sanitize_filename(name: str, replacement: str = "_") -> str:
    """Replaces every forbidden character in `name` with `replacement`."""
    return FORBIDDEN_CHARS.sub(replacement, name)


def output_filename(title: str, extension: str = "m4a", max_length: int = 36) -> str:
    """
    Builds the file name for a track title.

    The title is cut to `max_length` characters (code points, so multi-byte
    characters are never split), the extension is appended and the result is
    sanitized.
    """
    return sanitize_filename(f"{title[:max_length]}.{extension}")
