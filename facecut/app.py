import logging
from datetime import datetime, timezone

from flask import Flask, jsonify, request
from flask_cors import CORS

from . import config
from .cutter import FaceCutter
from .detection import load_detector
from .errors import DecodeError, DetectionError, EncodeError
from .imaging import ImageFormat, bytes_to_b64

logger = logging.getLogger(__name__)


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def strip_data_uri(b64_string: str) -> str:
    return b64_string.split(",")[-1]


def create_app(detector=None) -> Flask:
    """Build the app. The detector is loaded here unless one is passed in."""
    if detector is None:
        detector = load_detector()
    cutter = FaceCutter(detector)

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = config.MAX_CONTENT_LENGTH
    app.extensions["face_cutter"] = cutter
    CORS(app)

    @app.get("/api/health")
    def health():
        return jsonify({"status": "ok", "timestamp": now_iso()})

    @app.post("/api/faces")
    def cut_faces():
        upload = request.files.get("image")
        if upload is not None:
            raw = upload.read()
            fmt_value = request.form.get("format", "jpg")
            b64_image = None
        else:
            data = request.get_json(silent=True) or {}
            raw = None
            fmt_value = data.get("format") or "jpg"
            b64_image = data.get("image")
            if not isinstance(b64_image, str):
                b64_image = None

        if not raw and not (b64_image and b64_image.strip()):
            return jsonify({"error": "image is required"}), 400
        try:
            fmt = ImageFormat.parse(fmt_value)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400

        try:
            if raw:
                faces = [bytes_to_b64(face) for face in cutter.cut_faces(raw, fmt)]
            else:
                faces = cutter.cut_faces_b64(strip_data_uri(b64_image), fmt)
        except DecodeError as exc:
            return jsonify({"error": str(exc)}), 400
        except (DetectionError, EncodeError) as exc:
            logger.error("Face cutting failed: %s", exc)
            return jsonify({"error": str(exc)}), 500

        return jsonify(
            {
                "faces": faces,
                "count": len(faces),
                "format": fmt.value.lstrip("."),
                "mimeType": fmt.mime_type,
            }
        )

    return app


if __name__ == "__main__":
    config.configure_logging()
    create_app().run(host=config.HOST, port=config.PORT, debug=True)
