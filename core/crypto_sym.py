# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrado y descifrado simétrico seguro.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico sobre la implementación AES-GCM de `cryptography`."""

import os
from typing import Tuple

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from core.models import SymmetricKey

KEY_BITS = 256
NONCE_SIZE = 12
TAG_SIZE = 16


def generate_key() -> SymmetricKey:
    """Genera una clave AES-GCM aleatoria de 256 bits.

    Returns:
        SymmetricKey: Manejador opaco válido para cifrar y descifrar.

    """

    return SymmetricKey(material=AESGCM.generate_key(bit_length=KEY_BITS))


def aes_gcm_encrypt_with_key(
    key: SymmetricKey, plaintext: bytes
) -> Tuple[bytes, bytes]:
    """Cifra datos con AES-GCM utilizando la clave proporcionada.

    Args:
        key (SymmetricKey): Clave simétrica de 256 bits.
        plaintext (bytes): Datos a cifrar.

    Returns:
        Tuple[bytes, bytes]: Ciphertext con el tag de 128 bits al final y nonce.

    """

    nonce = os.urandom(NONCE_SIZE)
    aes = AESGCM(key.material)
    return aes.encrypt(nonce, plaintext, None), nonce


def aes_gcm_decrypt_with_key(
    key: SymmetricKey, nonce: bytes, ct_full: bytes
) -> bytes:
    """Descifra y verifica datos AES-GCM.

    Args:
        key (SymmetricKey): Clave simétrica que protege los datos.
        nonce (bytes): Vector de inicialización de 96 bits.
        ct_full (bytes): Ciphertext seguido del tag de autenticación.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        cryptography.exceptions.InvalidTag: Si la verificación del tag falla.

    """

    aes = AESGCM(key.material)
    return aes.decrypt(nonce, ct_full, None)
