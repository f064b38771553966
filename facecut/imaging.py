import base64
from enum import Enum

import cv2
import numpy as np

from .errors import DecodeError, EncodeError


class ImageFormat(Enum):
    """Output encodings, keyed by the file extension OpenCV encodes by."""

    JPG = ".jpg"
    PNG = ".png"
    JPEG = ".jpeg"

    @classmethod
    def parse(cls, value) -> "ImageFormat":
        """Accept an ImageFormat or an extension such as "png", ".JPG"."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            ext = value.strip().lower()
            if not ext.startswith("."):
                ext = "." + ext
            for fmt in cls:
                if fmt.value == ext:
                    return fmt
        raise ValueError(f"Unsupported image format: {value!r}")

    @property
    def mime_type(self) -> str:
        return "image/png" if self is ImageFormat.PNG else "image/jpeg"


def decode_image(data: bytes) -> np.ndarray:
    """Decode an encoded image into a BGR raster."""
    nparr = np.frombuffer(data, np.uint8)
    try:
        img = cv2.imdecode(nparr, cv2.IMREAD_COLOR)
    except cv2.error as exc:
        raise DecodeError(f"Failed to decode image: {exc}") from exc
    if img is None:
        raise DecodeError("Failed to decode image")
    return img


def encode_image(img: np.ndarray, fmt: ImageFormat = ImageFormat.JPG) -> bytes:
    try:
        ok, buf = cv2.imencode(fmt.value, img)
    except cv2.error as exc:
        raise EncodeError(f"Failed to encode image as {fmt.value}: {exc}") from exc
    if not ok:
        raise EncodeError(f"Failed to encode image as {fmt.value}")
    return buf.tobytes()


def b64_to_bytes(b64_string: str) -> bytes:
    try:
        return base64.b64decode(b64_string.strip(), validate=True)
    except ValueError as exc:
        raise DecodeError(f"Invalid base64 image: {exc}") from exc


def bytes_to_b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
