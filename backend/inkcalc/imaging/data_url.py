"""Data URL decoding and the "is this actually a drawing" gate."""

from __future__ import annotations

import base64
import binascii
import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Media types the vision model accepts
SUPPORTED_MEDIA_TYPES = frozenset({"image/jpeg", "image/png", "image/gif", "image/webp"})

_DATA_URL_RE = re.compile(
    r"^data:(?P<media_type>[\w.+-]+/[\w.+-]+)?(?P<params>(?:;[^,;]+)*?);base64,(?P<payload>.*)$",
    re.DOTALL,
)
_WHITESPACE_RE = re.compile(r"\s+")


class ImageValidationError(ValueError):
    """The submitted image is missing, malformed, or too small to be a drawing."""


@dataclass(frozen=True)
class DecodedImage:
    media_type: str
    data: bytes

    @property
    def b64(self) -> str:
        """Base64 text of the decoded bytes, re-encoded for transport."""
        return base64.b64encode(self.data).decode("ascii")


def decode_data_url(image: object) -> DecodedImage:
    """Split a base64 data URL into its media type and raw bytes."""
    if not isinstance(image, str) or not image:
        raise ImageValidationError("image is missing")

    match = _DATA_URL_RE.match(image.strip())
    if match is None:
        raise ImageValidationError("image is not a base64 data URL")

    media_type = (match.group("media_type") or "image/jpeg").lower()
    if media_type not in SUPPORTED_MEDIA_TYPES:
        raise ImageValidationError(f"unsupported media type {media_type}")

    payload = _WHITESPACE_RE.sub("", match.group("payload"))
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageValidationError(f"invalid base64 payload: {e}") from e

    return DecodedImage(media_type=media_type, data=data)


def validate_image(image: object, min_bytes: int = 1000) -> DecodedImage:
    """Decode the image and reject payloads too small to hold a drawing."""
    decoded = decode_data_url(image)
    if len(decoded.data) <= min_bytes:
        raise ImageValidationError(
            f"decoded image is {len(decoded.data)} bytes, need more than {min_bytes}"
        )
    return decoded
