# --------------------------------------------------------------
# File: test_crypto_sym.py
# Description: Pruebas del cifrado y descifrado simétrico con AES-GCM.
# --------------------------------------------------------------

import os

import pytest
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from core.crypto_sym import (
    NONCE_SIZE,
    TAG_SIZE,
    aes_gcm_decrypt_with_key,
    aes_gcm_encrypt_with_key,
    generate_key,
)


def test_generate_key_is_256_bits():
    """Comprueba el tamaño de la clave y que dos claves no coincidan.

    Returns:
        None: Las aserciones validan longitud y aleatoriedad.
    """
    k1 = generate_key()
    k2 = generate_key()
    assert k1.bit_length == 256
    assert k1.material != k2.material


def test_key_repr_hides_material():
    """Verifica que la representación de la clave no exponga sus bytes.

    Returns:
        None: La aserción busca los bytes en el repr.
    """
    key = generate_key()
    assert repr(key.material) not in repr(key)


def test_aes_gcm_roundtrip_ok(key):
    """Comprueba que un cifrado con AES-GCM pueda revertirse correctamente.

    Returns:
        None: Las aserciones evalúan la igualdad entre claro y descifrado.
    """
    plaintext = os.urandom(128)
    ct_full, nonce = aes_gcm_encrypt_with_key(key, plaintext)
    assert len(nonce) == NONCE_SIZE
    assert len(ct_full) == len(plaintext) + TAG_SIZE
    assert aes_gcm_decrypt_with_key(key, nonce, ct_full) == plaintext


def test_aes_gcm_detects_tampering_tag(key):
    """Garantiza que un tag modificado invalide el descifrado.

    Returns:
        None: Se espera InvalidTag durante la verificación.
    """
    ct_full, nonce = aes_gcm_encrypt_with_key(key, b"msg")
    bad = ct_full[:-1] + bytes([ct_full[-1] ^ 1])
    with pytest.raises(InvalidTag):
        aes_gcm_decrypt_with_key(key, nonce, bad)


def test_aes_gcm_nonce_uniqueness(key):
    """Evalúa que los nonces aleatorios generados no se repitan.

    Returns:
        None: Las aserciones verifican la unicidad dentro del muestreo.
    """
    nonces = set()
    for _ in range(200):
        _, nonce = aes_gcm_encrypt_with_key(key, b"x")
        assert nonce not in nonces
        nonces.add(nonce)


def test_aes_gcm_uses_no_associated_data(key):
    """El cifrado no vincula datos autenticados adicionales.

    Returns:
        None: Solo descifra quien tampoco usa datos adicionales.
    """
    ct_full, nonce = aes_gcm_encrypt_with_key(key, b"msg")
    aes = AESGCM(key.material)
    assert aes.decrypt(nonce, ct_full, None) == b"msg"
    with pytest.raises(InvalidTag):
        aes.decrypt(nonce, ct_full, b"extra")
