from .cutter import FaceCutter
from .detection import CascadeDetector, FaceRegion, load_detector
from .errors import DecodeError, DetectionError, EncodeError, FaceCutError, ResourceLoadError
from .imaging import ImageFormat

__all__ = [
    "CascadeDetector",
    "DecodeError",
    "DetectionError",
    "EncodeError",
    "FaceCutError",
    "FaceCutter",
    "FaceRegion",
    "ImageFormat",
    "ResourceLoadError",
    "load_detector",
]
