import logging
import os
import threading
from typing import List, NamedTuple, Optional

import cv2
import numpy as np

from . import config
from .errors import DetectionError, ResourceLoadError

logger = logging.getLogger(__name__)


class FaceRegion(NamedTuple):
    x: int
    y: int
    w: int
    h: int


class CascadeDetector:
    """Frontal face detector backed by a Haar cascade.

    The classifier is read-only once loaded. ``detectMultiScale`` is not
    documented as safe for concurrent calls on one instance, so calls are
    serialized with a lock.
    """

    def __init__(
        self,
        cascade_path: str,
        scale_factor: float = 1.1,
        min_neighbors: int = 3,
        min_size: int = 0,
    ):
        if not os.path.isfile(cascade_path):
            raise ResourceLoadError(f"Cascade file not found: {cascade_path}")
        logger.info("Loading face cascade from %s", cascade_path)
        self.face_cascade = cv2.CascadeClassifier()
        try:
            loaded = self.face_cascade.load(cascade_path)
        except (cv2.error, SystemError) as exc:
            raise ResourceLoadError(f"Failed to load cascade {cascade_path}: {exc}") from exc
        if not loaded or self.face_cascade.empty():
            raise ResourceLoadError(f"Failed to load cascade {cascade_path}")

        self.cascade_path = cascade_path
        self.scale_factor = scale_factor
        self.min_neighbors = min_neighbors
        self.min_size = (min_size, min_size) if min_size > 0 else None
        self._lock = threading.Lock()

    def detect(self, image: np.ndarray) -> List[FaceRegion]:
        if image is None or image.size == 0:
            raise DetectionError("Cannot detect faces in an empty image")
        height, width = image.shape[:2]
        try:
            gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY) if image.ndim == 3 else image
            kwargs = {"scaleFactor": self.scale_factor, "minNeighbors": self.min_neighbors}
            if self.min_size:
                kwargs["minSize"] = self.min_size
            with self._lock:
                faces = self.face_cascade.detectMultiScale(gray, **kwargs)
        except cv2.error as exc:
            raise DetectionError(f"Face detection failed: {exc}") from exc

        regions = []
        for (x, y, w, h) in faces:
            # Keep every rectangle inside the raster.
            x0, y0 = max(0, int(x)), max(0, int(y))
            x1, y1 = min(width, int(x) + int(w)), min(height, int(y) + int(h))
            regions.append(FaceRegion(x0, y0, x1 - x0, y1 - y0))
        logger.info("Detected %d face(s)", len(regions))
        return regions


def load_detector(
    cascade_path: Optional[str] = None,
    scale_factor: Optional[float] = None,
    min_neighbors: Optional[int] = None,
    min_size: Optional[int] = None,
) -> CascadeDetector:
    """Load the face detector once at startup; unset arguments come from config."""
    return CascadeDetector(
        cascade_path or config.CASCADE_PATH,
        scale_factor=config.SCALE_FACTOR if scale_factor is None else scale_factor,
        min_neighbors=config.MIN_NEIGHBORS if min_neighbors is None else min_neighbors,
        min_size=config.MIN_FACE_SIZE if min_size is None else min_size,
    )
