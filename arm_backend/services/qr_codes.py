# arm_backend/services/qr_codes.py
import base64
import io
import json
from typing import Any, Dict

import qrcode
from qrcode.constants import ERROR_CORRECT_H

DATA_URL_PREFIX = "data:image/png;base64,"


def generate_qr_data_url(payload: Dict[str, Any]) -> str:
    """Render a JSON payload as a PNG QR code and return it as a data URL."""
    qr = qrcode.QRCode(
        error_correction=ERROR_CORRECT_H,
        box_size=10,
        border=2,
    )
    qr.add_data(json.dumps(payload, separators=(",", ":")))
    qr.make(fit=True)
    image = qr.make_image(fill_color="black", back_color="white")

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return DATA_URL_PREFIX + base64.b64encode(buffer.getvalue()).decode("ascii")


def decode_data_url(data_url: str) -> bytes:
    """Return the PNG bytes held in a data URL produced by generate_qr_data_url."""
    if not data_url.startswith(DATA_URL_PREFIX):
        raise ValueError("Not a PNG data URL")
    return base64.b64decode(data_url[len(DATA_URL_PREFIX):])
