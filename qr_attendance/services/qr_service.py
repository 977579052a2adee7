# qr_attendance/services/qr_service.py
"""QR Code rendering service."""
import base64
import io

import qrcode


class QRService:
    """Service for QR code operations."""

    @staticmethod
    def render_data_url(text: str, box_size: int = 10, border: int = 4) -> str:
        """Encode ``text`` as a PNG QR code and return it as a data URL."""
        qr = qrcode.QRCode(
            version=None,  # Auto-determine size
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=box_size,
            border=border,
        )
        qr.add_data(text)
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")

        buffered = io.BytesIO()
        img.save(buffered, format="PNG")
        img_str = base64.b64encode(buffered.getvalue()).decode()

        return f"data:image/png;base64,{img_str}"
