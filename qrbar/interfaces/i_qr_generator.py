"""QR code generator interface (adapter pattern)."""

import io
from dataclasses import dataclass
from typing import Protocol, Union

from PIL import Image


@dataclass(frozen=True)
class EncodedImage:
    """Rendered QR bitmap."""
    image: Image.Image
    matrix_size: int
    scale: int

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def to_png(self) -> bytes:
        """Serialize the bitmap as PNG."""
        buf = io.BytesIO()
        self.image.save(buf, format='PNG')
        return buf.getvalue()


@dataclass(frozen=True)
class EncodeFailure:
    """Encoder could not produce an image."""
    reason: str


EncodeResult = Union[EncodedImage, EncodeFailure]


class IQRGenerator(Protocol):
    """Interface for QR code generation."""

    def encode(self, text: str) -> EncodeResult:
        """Render text as a QR bitmap, or report failure."""
        ...
