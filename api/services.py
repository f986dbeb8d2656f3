# --------------------------------------------------------------
# File: services.py
# Description: Servicios que conectan la interfaz con el códec de sobres.
# --------------------------------------------------------------
"""Funciones de la capa de servicios para cifrar, descifrar y camuflar."""

import logging
from typing import Any, Dict, MutableMapping, Optional, Tuple

from core.camouflage import extract_pixel_payload, render_camouflage_png
from core.envelope import decrypt, encrypt, generate_key
from core.errors import DecryptionFailure, EncryptionFailure, ImageDecodeError
from core.models import Category, SymmetricKey

logger = logging.getLogger(__name__)

# Claves de sesión usadas por la página de descifrado.
CIPHERTEXT_FIELD = "ciphertext_input"
UPLOAD_ID_FIELD = "last_upload_id"
UPLOAD_NOTICE_FIELD = "upload_notice"


def new_session_key() -> SymmetricKey:
    """Genera la clave de la sesión; no se persiste en ningún sitio.

    Returns:
        SymmetricKey: Clave AES-GCM de 256 bits.
    """

    key = generate_key()
    logger.info("Clave de sesión generada (%d bits)", key.bit_length)
    return key


def encrypt_message(
    key: Optional[SymmetricKey], text: str, category: str
) -> Tuple[bool, str, Dict[str, Any]]:
    """Cifra el texto del formulario.

    Args:
        key (Optional[SymmetricKey]): Clave de la sesión.
        text (str): Texto introducido por el usuario.
        category (str): Categoría elegida en la interfaz.

    Returns:
        Tuple[bool, str, Dict[str, Any]]: Indicador de éxito, mensaje para la
        interfaz y datos con `ciphertext`, `nonce` y `category`.
    """

    if key is None:
        return False, "La clave de sesión aún no está disponible.", {}
    if not text:
        return False, "Escribe un texto para cifrar.", {}

    try:
        envelope = encrypt(text, key, category)
    except EncryptionFailure as exc:
        logger.error("Fallo de cifrado: %s", exc)
        return False, str(exc), {}

    payload = {
        "ciphertext": envelope.ciphertext,
        "nonce": envelope.nonce,
        "category": Category(category).value,
    }
    return True, "Texto cifrado (AES-GCM-256).", payload


def decrypt_message(
    key: Optional[SymmetricKey], ciphertext: str, nonce: str
) -> Tuple[bool, str, Dict[str, Any]]:
    """Descifra un sobre introducido en la interfaz.

    Ante un fallo se devuelven datos vacíos para que la interfaz borre
    cualquier resultado anterior.

    Returns:
        Tuple[bool, str, Dict[str, Any]]: Indicador de éxito, mensaje y datos con
        `plaintext` y `category`.
    """

    if key is None:
        return False, "La clave de sesión aún no está disponible.", {}
    if not ciphertext or not nonce:
        return False, "Introduce el texto cifrado y el nonce.", {}

    try:
        message = decrypt(ciphertext.strip(), nonce.strip(), key)
    except DecryptionFailure as exc:
        return False, str(exc), {}

    return True, "Datos descifrados.", {
        "plaintext": message.plaintext,
        "category": message.category.value,
    }


def camouflage_png(ciphertext: str) -> Optional[bytes]:
    """Genera el PNG decorativo solo para textos con prefijo de imagen."""

    if not ciphertext or Category.from_prefix(ciphertext) is not Category.IMAGE:
        return None
    return render_camouflage_png(ciphertext)


def ciphertext_from_upload(image_bytes: bytes) -> Tuple[bool, str, str]:
    """Extrae el contenido de píxeles de una imagen subida.

    Returns:
        Tuple[bool, str, str]: Indicador de éxito, mensaje y texto con prefijo
        ``IMG`` (vacío si la imagen no es legible).
    """

    try:
        ciphertext = extract_pixel_payload(image_bytes)
    except ImageDecodeError as exc:
        logger.warning("Imagen rechazada: %s", exc)
        return False, str(exc), ""
    return True, "Imagen cargada. El camuflaje es decorativo y no reconstruye el cifrado.", ciphertext


def apply_image_upload(state: MutableMapping[str, Any], uploaded: Any) -> bool:
    """Vuelca una imagen subida en el campo editable del texto cifrado.

    Cada archivo se procesa una sola vez (por su ``file_id``); después el
    usuario puede editar o sustituir el texto libremente aunque el archivo
    siga en el selector.

    Args:
        state (MutableMapping[str, Any]): Estado de la sesión de Streamlit.
        uploaded (Any): Archivo con ``file_id`` y ``getvalue()``.

    Returns:
        bool: ``True`` si se ha procesado una subida nueva.
    """

    if uploaded is None or state.get(UPLOAD_ID_FIELD) == uploaded.file_id:
        return False

    state[UPLOAD_ID_FIELD] = uploaded.file_id
    ok, msg, ciphertext = ciphertext_from_upload(uploaded.getvalue())
    if ok:
        state[CIPHERTEXT_FIELD] = ciphertext
    state[UPLOAD_NOTICE_FIELD] = (ok, msg)
    return True
