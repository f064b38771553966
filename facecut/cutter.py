import logging
from typing import List, Optional

import numpy as np

from .detection import FaceRegion
from .imaging import ImageFormat, b64_to_bytes, bytes_to_b64, decode_image, encode_image

logger = logging.getLogger(__name__)


def crop(image: np.ndarray, region: FaceRegion) -> np.ndarray:
    # Copy so the crop outlives the source raster.
    return image[region.y : region.y + region.h, region.x : region.x + region.w].copy()


class FaceCutter:
    """Cuts detected faces out of encoded images.

    ``detector`` is the handle returned by ``load_detector``; any object with
    a ``detect(image) -> list[FaceRegion]`` method works.
    """

    def __init__(self, detector):
        self.detector = detector

    def cut_faces(self, image_bytes: Optional[bytes], fmt=ImageFormat.JPG) -> List[bytes]:
        """Return one encoded crop per detected face, in detector order.

        Empty input gives an empty list. Undecodable input raises DecodeError.
        """
        if not image_bytes:
            return []
        fmt = ImageFormat.parse(fmt)

        image = decode_image(image_bytes)
        regions = self.detector.detect(image)

        faces = []
        for region in regions:
            faces.append(encode_image(crop(image, region), fmt))
        logger.debug("Cut %d face(s) as %s", len(faces), fmt.value)
        return faces

    def cut_faces_b64(self, b64_image: Optional[str], fmt=ImageFormat.JPG) -> List[str]:
        """Base64 variant of cut_faces. The input must not carry a data URI prefix."""
        if b64_image is None or not b64_image.strip():
            return []
        faces = self.cut_faces(b64_to_bytes(b64_image), fmt)
        return [bytes_to_b64(face) for face in faces]
