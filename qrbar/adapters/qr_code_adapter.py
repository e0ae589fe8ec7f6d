"""QR code generator adapter."""

import qrcode
from qrcode.exceptions import DataOverflowError
from PIL import Image

from ..interfaces import EncodedImage, EncodeFailure, EncodeResult

ERROR_CORRECTION_LEVELS = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}

DARK = 0
LIGHT = 255


class QRCodeAdapter:
    """Adapter for QR code generation.

    Builds the bit matrix with ``qrcode`` and scales it up with
    nearest-neighbor resampling, so every module becomes a
    ``scale`` x ``scale`` block of pixels.
    """

    def __init__(
        self,
        scale: int = 10,
        error_correction: str = "M",
        border: int = 1
    ):
        if scale < 1:
            raise ValueError("scale must be >= 1")
        if error_correction not in ERROR_CORRECTION_LEVELS:
            raise ValueError(
                f"unknown error correction level: {error_correction}"
            )
        self.scale = scale
        self.error_correction = error_correction
        self.border = border

    def _matrix(self, data: bytes) -> list:
        """Build QR bit matrix (quiet zone included)."""
        qr = qrcode.QRCode(
            version=None,
            box_size=1,
            border=self.border,
            error_correction=ERROR_CORRECTION_LEVELS[self.error_correction]
        )
        qr.add_data(data)
        qr.make(fit=True)
        return qr.get_matrix()

    def _render(self, matrix: list) -> Image.Image:
        """Paint matrix at one pixel per module, then upscale."""
        size = len(matrix)
        img = Image.new("L", (size, size), LIGHT)
        img.putdata([DARK if dark else LIGHT for row in matrix for dark in row])
        return img.resize(
            (size * self.scale, size * self.scale),
            resample=Image.Resampling.NEAREST
        )

    def encode(self, text: str) -> EncodeResult:
        """Render text as QR bitmap, or report failure."""
        # Early validation
        if not text:
            return EncodeFailure("empty input")

        try:
            data = text.encode('utf-8')
        except UnicodeEncodeError as e:
            return EncodeFailure(f"utf-8 conversion failed: {e}")

        try:
            matrix = self._matrix(data)
        except (DataOverflowError, ValueError):
            # qrcode < 8 raises DataOverflowError, 8.x raises
            # ValueError("Invalid version (was 41 ...)") past version 40
            return EncodeFailure(
                f"input too long for error correction {self.error_correction}"
                f" ({len(data)} bytes)"
            )

        if not matrix:
            return EncodeFailure("encoder produced empty matrix")

        return EncodedImage(
            image=self._render(matrix),
            matrix_size=len(matrix),
            scale=self.scale
        )
