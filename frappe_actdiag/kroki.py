from __future__ import annotations

import base64
import zlib
from typing import Optional

from .constants import (
    DIAGRAM_TYPE,
    KROKI_URL_DEFAULT,
    OUTPUT_FORMAT_DEFAULT,
    OUTPUT_FORMATS,
    ZLIB_LEVEL,
)


class DiagramEncodingError(RuntimeError):
    """Raised when the diagram source cannot be compressed."""


def encode_diagram(text: str) -> str:
    """Encode diagram source for a kroki GET URL.

    zlib stream at level 9, then base64url with `=` padding. The result can
    be used as a URL path segment as is.
    """
    try:
        compressor = zlib.compressobj(ZLIB_LEVEL)
    except zlib.error as e:
        raise DiagramEncodingError(f"fail to create the writer: {e}") from e
    try:
        compressed = compressor.compress(text.encode("utf-8"))
        compressed += compressor.flush()
    except zlib.error as e:
        raise DiagramEncodingError(f"fail to create the payload: {e}") from e
    return base64.urlsafe_b64encode(compressed).decode("ascii")


def decode_diagram(token: str) -> str:
    """Inverse of encode_diagram()."""
    compressed = base64.urlsafe_b64decode(token.encode("ascii"))
    return zlib.decompress(compressed).decode("utf-8")


def build_kroki_url(
    token: str,
    *,
    kroki_url: Optional[str] = None,
    output_format: str = OUTPUT_FORMAT_DEFAULT,
) -> str:
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"unsupported output format: {output_format!r}")
    base = (kroki_url or KROKI_URL_DEFAULT).rstrip("/")
    return f"{base}/{DIAGRAM_TYPE}/{output_format}/{token}"
