# --------------------------------------------------------------
# File: camouflage.py
# Description: Representación decorativa del texto cifrado como imagen PNG.
# --------------------------------------------------------------
"""Renderizado de camuflaje: degradado arcoíris con ruido derivado del cifrado.

Es puramente visual. La imagen NO permite reconstruir el texto cifrado y
``extract_pixel_payload`` solo devuelve los bytes RGBA en bruto de la imagen,
que no descifran a nada.
"""

import base64
import io
import logging
from typing import Optional

import numpy as np
from PIL import Image

from core import config
from core.errors import ImageDecodeError
from core.models import Category

logger = logging.getLogger(__name__)

# (posición, (R, G, B)) en el eje horizontal.
RAINBOW_STOPS = (
    (0.00, (148, 0, 211)),
    (0.15, (75, 0, 130)),
    (0.30, (0, 0, 255)),
    (0.45, (0, 255, 0)),
    (0.60, (255, 255, 0)),
    (0.75, (255, 127, 0)),
    (0.90, (255, 0, 0)),
)


def rainbow_row(width: int) -> np.ndarray:
    """Calcula una fila del degradado, muestreando el centro de cada píxel."""

    positions = (np.arange(width) + 0.5) / width
    xp = [stop for stop, _ in RAINBOW_STOPS]
    channels = [
        np.interp(positions, xp, [rgb[c] for _, rgb in RAINBOW_STOPS])
        for c in range(3)
    ]
    return np.rint(np.stack(channels, axis=-1)).astype(np.int16)


def render_camouflage(
    ciphertext: str,
    width: Optional[int] = None,
    height: Optional[int] = None,
    noise_span: Optional[int] = None,
) -> Image.Image:
    """Dibuja el degradado y le suma ruido a partir de los caracteres del cifrado.

    Para el píxel ``p`` (orden por filas) el desplazamiento es
    ``codes[(4 * p) % n] % span - span // 2`` sobre R, G y B, recortado a 0..255.

    Args:
        ciphertext (str): Texto cifrado (normalmente con prefijo ``IMG``).
        width (Optional[int]): Ancho en píxeles; por defecto ``config.IMAGE_WIDTH``.
        height (Optional[int]): Alto en píxeles; por defecto ``config.IMAGE_HEIGHT``.
        noise_span (Optional[int]): Amplitud del ruido; por defecto ``config.NOISE_SPAN``.

    Returns:
        Image.Image: Imagen RGB resultante.

    """

    if not ciphertext:
        raise ValueError("No hay texto cifrado que representar.")
    width = width or config.IMAGE_WIDTH
    height = height or config.IMAGE_HEIGHT
    span = noise_span or config.NOISE_SPAN

    codes = np.fromiter((ord(ch) for ch in ciphertext), dtype=np.int64)
    pixel_index = np.arange(width * height, dtype=np.int64)
    noise = codes[(4 * pixel_index) % codes.size] % span - span // 2

    base = np.broadcast_to(rainbow_row(width), (height, width, 3))
    pixels = base + noise.reshape(height, width, 1)
    return Image.fromarray(np.clip(pixels, 0, 255).astype(np.uint8))


def render_camouflage_png(ciphertext: str) -> bytes:
    """Devuelve la imagen de camuflaje serializada como PNG."""

    buffer = io.BytesIO()
    render_camouflage(ciphertext).save(buffer, format="PNG")
    return buffer.getvalue()


def extract_pixel_payload(image_bytes: bytes) -> str:
    """Lee una imagen subida y devuelve ``IMG`` + base64 de sus píxeles RGBA.

    Args:
        image_bytes (bytes): Contenido del archivo de imagen.

    Returns:
        str: Texto con prefijo de imagen; no es un cifrado válido.

    Raises:
        ImageDecodeError: Si el contenido no es una imagen legible.

    """

    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            rgba = img.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise ImageDecodeError("El archivo no es una imagen válida.") from exc

    raw = rgba.tobytes()
    logger.debug("Imagen %dx%d leída, %d bytes de píxeles", rgba.width, rgba.height, len(raw))
    return Category.IMAGE.prefix + base64.b64encode(raw).decode("ascii")
