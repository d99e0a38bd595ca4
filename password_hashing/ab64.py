"""Adapted base64: standard alphabet with "." instead of "+" and no padding."""

import base64
import binascii


def ab64_encode(data: bytes) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return encoded.rstrip("=").replace("+", ".")


def ab64_decode(value: str) -> bytes:
    """Decode adapted base64 text.

    Raises binascii.Error (a ValueError) for characters outside
    ``A-Za-z0-9./`` or a length that cannot come from ab64_encode. Unused
    trailing bits are ignored, so "AR" decodes like "AQ".
    """
    if "+" in value or "=" in value:
        raise binascii.Error("unexpected character in adapted base64")
    raw = value.replace(".", "+").encode("ascii")
    padding = b"=" * (-len(raw) % 4)
    return base64.b64decode(raw + padding, validate=True)
