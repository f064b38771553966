from typing import List

import cv2
import numpy as np
import pytest

from facecut.detection import FaceRegion


class StubDetector:
    """Returns fixed regions and records the images it was given."""

    def __init__(self, regions: List[FaceRegion]):
        self.regions = list(regions)
        self.calls = []

    def detect(self, image):
        self.calls.append(image)
        return list(self.regions)


def encode(img: np.ndarray, ext: str = ".png") -> bytes:
    ok, buf = cv2.imencode(ext, img)
    assert ok
    return buf.tobytes()


@pytest.fixture
def photo() -> np.ndarray:
    rng = np.random.default_rng(0)
    return rng.integers(0, 256, size=(480, 640, 3), dtype=np.uint8)


@pytest.fixture
def photo_png(photo) -> bytes:
    return encode(photo, ".png")


@pytest.fixture
def two_faces() -> List[FaceRegion]:
    return [FaceRegion(40, 60, 120, 150), FaceRegion(400, 100, 90, 80)]
