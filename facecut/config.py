import logging
import os

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
CASCADE_FILENAME = "haarcascade_frontalface_alt.xml"
CASCADE_PATH = os.environ.get("FACECUT_CASCADE_PATH", os.path.join(DATA_DIR, CASCADE_FILENAME))

# detectMultiScale parameters; the defaults are OpenCV's own.
SCALE_FACTOR = float(os.environ.get("FACECUT_SCALE_FACTOR", "1.1"))
MIN_NEIGHBORS = int(os.environ.get("FACECUT_MIN_NEIGHBORS", "3"))
MIN_FACE_SIZE = int(os.environ.get("FACECUT_MIN_FACE_SIZE", "0"))

LOG_LEVEL = os.environ.get("FACECUT_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

HOST = os.environ.get("FACECUT_HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "5000"))
MAX_CONTENT_LENGTH = int(os.environ.get("FACECUT_MAX_CONTENT_LENGTH", str(16 * 1024 * 1024)))


def configure_logging(level: str = LOG_LEVEL):
    logging.basicConfig(level=level, format=LOG_FORMAT)
