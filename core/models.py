# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan claves, categorías y sobres cifrados."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Categoría informativa que se antepone al texto cifrado.

    No altera el cifrado; solo indica el modo de visualización elegido.
    """

    IMAGE = "image"
    DNS = "dns"
    STREAM = "stream"

    @property
    def prefix(self) -> str:
        """Prefijo literal de 3 caracteres que identifica la categoría."""

        return _PREFIXES[self]

    @classmethod
    def from_prefix(cls, value: str) -> Optional["Category"]:
        """Devuelve la categoría cuyo prefijo abre ``value`` o ``None``."""

        for category, prefix in _PREFIXES.items():
            if value.startswith(prefix):
                return category
        return None


_PREFIXES = {
    Category.IMAGE: "IMG",
    Category.DNS: "DNS",
    Category.STREAM: "STR",
}

PREFIX_LENGTH = 3


class SymmetricKey(BaseModel):
    """Manejador opaco de una clave AES de 256 bits.

    Attributes:
        material (bytes): Bytes de la clave; nunca aparecen en ``repr``.

    """

    model_config = ConfigDict(frozen=True)

    material: bytes = Field(repr=False)

    @property
    def bit_length(self) -> int:
        return len(self.material) * 8


class Envelope(BaseModel):
    """Par intercambiable entre cifrado y descifrado.

    Attributes:
        ciphertext (str): Prefijo de categoría + base64(ciphertext || tag).
        nonce (str): Nonce de 96 bits en base64 estándar con relleno.

    """

    model_config = ConfigDict(frozen=True)

    ciphertext: str
    nonce: str

    def as_tuple(self) -> Tuple[str, str]:
        """Devuelve el par ``(ciphertext, nonce)``."""

        return self.ciphertext, self.nonce


class DecryptedMessage(BaseModel):
    """Resultado de descifrar un sobre: texto en claro y categoría detectada."""

    model_config = ConfigDict(frozen=True)

    plaintext: str
    category: Category

    def as_tuple(self) -> Tuple[str, Category]:
        return self.plaintext, self.category
