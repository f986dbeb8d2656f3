# --------------------------------------------------------------
# File: envelope.py
# Description: Códec de sobres AES-GCM con prefijo de categoría.
# --------------------------------------------------------------
"""Cifra texto en sobres autodescriptivos y recupera texto y categoría.

Formato del texto cifrado: ``PREFIJO`` (``IMG``, ``DNS`` o ``STR``) seguido,
sin separador, del base64 estándar con relleno de ``ciphertext || tag``. El
nonce de 96 bits viaja aparte, también en base64 estándar.
"""

import base64
import binascii
import logging
from typing import Union

from cryptography.exceptions import InvalidTag

from core.crypto_sym import (
    NONCE_SIZE,
    aes_gcm_decrypt_with_key,
    aes_gcm_encrypt_with_key,
    generate_key,
)
from core.errors import DecryptionFailure, EncryptionFailure
from core.models import (
    PREFIX_LENGTH,
    Category,
    DecryptedMessage,
    Envelope,
    SymmetricKey,
)

__all__ = ["generate_key", "encrypt", "decrypt", "detect_category"]

logger = logging.getLogger(__name__)

# Categoría asumida cuando el texto no trae ningún prefijo reconocido.
DEFAULT_CATEGORY = Category.STREAM


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _b64d(value: str) -> bytes:
    return base64.b64decode(value.encode("ascii"), validate=True)


def detect_category(ciphertext: str) -> Category:
    """Clasifica un texto cifrado por su prefijo, con ``stream`` por defecto."""

    return Category.from_prefix(ciphertext) or DEFAULT_CATEGORY


def encrypt(
    plaintext: str, key: SymmetricKey, category: Union[Category, str]
) -> Envelope:
    """Cifra texto con AES-256-GCM y devuelve el sobre etiquetado.

    Args:
        plaintext (str): Texto a cifrar; se codifica en UTF-8.
        key (SymmetricKey): Clave de 256 bits generada con ``generate_key``.
        category (Union[Category, str]): ``image``, ``dns`` o ``stream``.

    Returns:
        Envelope: Texto cifrado con prefijo y nonce, ambos en base64.

    Raises:
        EncryptionFailure: Si la categoría, la clave o la codificación fallan.

    """

    try:
        category = Category(category)
    except ValueError as exc:
        raise EncryptionFailure(f"Categoría desconocida: {category!r}") from exc

    try:
        data = plaintext.encode("utf-8")
        ct_full, nonce = aes_gcm_encrypt_with_key(key, data)
    except (UnicodeEncodeError, ValueError, TypeError, AttributeError) as exc:
        raise EncryptionFailure(f"No se ha podido cifrar: {exc}") from exc

    logger.debug(
        "Cifrado AES-GCM-256 categoria=%s claro=%d bytes ct=%d bytes",
        category.value,
        len(data),
        len(ct_full),
    )
    return Envelope(ciphertext=category.prefix + _b64(ct_full), nonce=_b64(nonce))


def decrypt(ciphertext: str, nonce: str, key: SymmetricKey) -> DecryptedMessage:
    """Descifra un sobre y devuelve el texto en claro con su categoría.

    Un prefijo ausente o desconocido se clasifica como ``stream`` y no se
    recorta nada del texto.

    Args:
        ciphertext (str): Texto cifrado con o sin prefijo de categoría.
        nonce (str): Nonce en base64 producido junto al texto cifrado.
        key (SymmetricKey): Clave con la que se cifró el sobre.

    Returns:
        DecryptedMessage: Texto en claro y categoría detectada.

    Raises:
        DecryptionFailure: Ante cualquier fallo, siempre con el mensaje genérico.

    """

    matched = Category.from_prefix(ciphertext)
    category = matched or DEFAULT_CATEGORY
    payload = ciphertext[PREFIX_LENGTH:] if matched else ciphertext

    try:
        ct_full = _b64d(payload)
        raw_nonce = _b64d(nonce)
        if len(raw_nonce) != NONCE_SIZE:
            raise ValueError(f"nonce de {len(raw_nonce)} bytes")
        plaintext = aes_gcm_decrypt_with_key(key, raw_nonce, ct_full).decode("utf-8")
    except (InvalidTag, binascii.Error, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Descifrado rechazado (%s)", type(exc).__name__)
        raise DecryptionFailure() from exc

    logger.debug("Descifrado correcto categoria=%s", category.value)
    return DecryptedMessage(plaintext=plaintext, category=category)
