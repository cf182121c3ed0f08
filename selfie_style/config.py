# selfie_style/config.py
import logging
import os
from typing import List

HOST = os.getenv("SELFIE_STYLE_HOST", "0.0.0.0")
PORT = int(os.getenv("SELFIE_STYLE_PORT", "8000"))
LOG_LEVEL = os.getenv("SELFIE_STYLE_LOG_LEVEL", "info").lower()
CORS_ORIGINS: List[str] = [
    o.strip() for o in os.getenv("SELFIE_STYLE_CORS_ORIGINS", "*").split(",") if o.strip()
]
MIN_DETECTION_CONFIDENCE = float(os.getenv("SELFIE_STYLE_MIN_DETECTION_CONFIDENCE", "0.6"))
MAX_UPLOAD_BYTES = int(os.getenv("SELFIE_STYLE_MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

_configured = False


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Attach a stream handler to the package logger once."""
    global _configured
    pkg_logger = logging.getLogger("selfie_style")
    pkg_logger.setLevel(level.upper())
    if _configured:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    pkg_logger.addHandler(handler)
    _configured = True
