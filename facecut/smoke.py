"""Manual smoke test: print every face in an image file as a data URI.

Usage:
    python -m facecut.smoke path/to/photo.jpg [jpg|png|jpeg]
"""

import sys
from pathlib import Path

from .config import configure_logging
from .cutter import FaceCutter
from .detection import load_detector
from .imaging import ImageFormat, bytes_to_b64


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(__doc__, file=sys.stderr)
        return 2
    fmt = ImageFormat.parse(argv[1]) if len(argv) > 1 else ImageFormat.JPG

    configure_logging()
    cutter = FaceCutter(load_detector())
    faces = cutter.cut_faces(Path(argv[0]).read_bytes(), fmt)

    prefix = f"data:{fmt.mime_type};base64,"
    for face in faces:
        print(prefix + bytes_to_b64(face))
    return 0


if __name__ == "__main__":
    sys.exit(main())
