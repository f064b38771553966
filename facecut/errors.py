class FaceCutError(Exception):
    """Base class for face cutting failures."""


class DecodeError(FaceCutError):
    """Input is not valid base64 or not a decodable image."""


class DetectionError(FaceCutError):
    """The cascade detector failed on an image."""


class EncodeError(FaceCutError):
    """A crop could not be encoded into the requested format."""


class ResourceLoadError(FaceCutError):
    """The cascade classifier file is missing or could not be loaded."""
