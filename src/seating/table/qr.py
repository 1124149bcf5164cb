"""QR code rendering for table links and QRIS payment codes."""

import base64
from io import BytesIO

import qrcode

QR_FILL_COLOR = "#059669"
QR_BACK_COLOR = "#ffffff"


def render_qr_png(data: str) -> bytes:
    qr = qrcode.QRCode(version=1, box_size=10, border=2)
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color=QR_FILL_COLOR, back_color=QR_BACK_COLOR)

    buffered = BytesIO()
    img.save(buffered, format="PNG")
    return buffered.getvalue()


def qr_data_url(data: str) -> str:
    encoded = base64.b64encode(render_qr_png(data)).decode()
    return f"data:image/png;base64,{encoded}"
