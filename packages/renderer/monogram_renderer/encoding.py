"""PNG encoding of rendered frames."""

from __future__ import annotations

import logging
from io import BytesIO

from PIL import Image

from .errors import EncodeError

_LOGGER = logging.getLogger("monogram.encoding")


def encode_png(image: Image.Image) -> bytes:
    buf = BytesIO()
    try:
        image.save(buf, format="PNG")
    except (OSError, ValueError, KeyError) as exc:
        _LOGGER.error(f"png encode failed: {exc}", extra={"event": "encode_failed"})
        raise EncodeError(f"Unable to encode PNG: {exc}") from exc
    return buf.getvalue()
