# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con claves y sobres de prueba.
# --------------------------------------------------------------

import pytest

from core.envelope import encrypt, generate_key
from core.models import Category, SymmetricKey


@pytest.fixture
def key() -> SymmetricKey:
    """Clave AES-GCM de 256 bits recién generada.

    Returns:
        SymmetricKey: Clave válida para una única prueba.
    """
    return generate_key()


@pytest.fixture
def dns_envelope(key):
    """Sobre de categoría DNS con el texto ``hello``.

    Args:
        key (SymmetricKey): Fixture de clave de la prueba.

    Returns:
        Envelope: Sobre cifrado con la clave de la prueba.
    """
    return encrypt("hello", key, Category.DNS)
