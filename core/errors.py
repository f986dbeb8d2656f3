# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del códec de sobres cifrados.
# --------------------------------------------------------------
"""Excepciones que expone la capa criptográfica al resto de la aplicación."""

__all__ = [
    "CamouflageError",
    "EncryptionFailure",
    "DecryptionFailure",
    "ImageDecodeError",
    "DECRYPT_ERROR_MESSAGE",
]

# Mensaje único para cualquier fallo de descifrado; no revela la causa concreta.
DECRYPT_ERROR_MESSAGE = (
    "No se han podido descifrar los datos. Revisa el texto cifrado y el nonce."
)


class CamouflageError(Exception):
    """Excepción base de todos los fallos del proyecto."""


class EncryptionFailure(CamouflageError):
    """Fallo del cifrador o de la codificación durante el cifrado."""


class DecryptionFailure(CamouflageError):
    """Cualquier fallo al descifrar un sobre.

    El mensaje es siempre el genérico ``DECRYPT_ERROR_MESSAGE``; la causa real
    queda encadenada en ``__cause__`` solo para depuración.
    """

    def __init__(self, message: str = DECRYPT_ERROR_MESSAGE) -> None:
        super().__init__(message)


class ImageDecodeError(CamouflageError):
    """El archivo subido no es una imagen legible."""
