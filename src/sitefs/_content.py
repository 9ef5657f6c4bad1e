"""Content normalization applied by ``read_file`` unless ``escape=False``."""

from __future__ import annotations

import re

_CRLF = re.compile(r"\r\n")
_BOM = "\ufeff"


def escape_eol(text: str) -> str:
    """Replace every CRLF with LF."""
    return _CRLF.sub("\n", text)


def escape_bom(text: str) -> str:
    """Drop a leading byte-order mark."""
    return text[1:] if text.startswith(_BOM) else text


def escape_file_content(text: str) -> str:
    return escape_bom(escape_eol(text))
