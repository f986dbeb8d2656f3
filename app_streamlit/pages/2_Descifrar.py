# --------------------------------------------------------------
# File: 2_Descifrar.py
# Description: Recupera el texto en claro a partir del texto cifrado y el nonce.
# --------------------------------------------------------------

import streamlit as st

from api.services import (
    CIPHERTEXT_FIELD,
    UPLOAD_NOTICE_FIELD,
    apply_image_upload,
    decrypt_message,
    new_session_key,
)
from core.logs import configure_logging

configure_logging()

st.title("🔓 Descifrar")

if "session_key" not in st.session_state:
    st.session_state["session_key"] = new_session_key()

last = st.session_state.get("envelope") or {}
if CIPHERTEXT_FIELD not in st.session_state:
    st.session_state[CIPHERTEXT_FIELD] = last.get("ciphertext", "")

# La subida escribe en el estado antes de dibujar el área de texto.
uploaded = st.file_uploader("Subir imagen", type=["png", "jpg", "jpeg", "bmp", "gif"])
if apply_image_upload(st.session_state, uploaded):
    st.rerun()

notice = st.session_state.get(UPLOAD_NOTICE_FIELD)
if notice and uploaded is not None:
    ok_img, msg_img = notice
    (st.warning if ok_img else st.error)(msg_img)

ciphertext = st.text_area("Texto cifrado", key=CIPHERTEXT_FIELD)
nonce = st.text_input("Nonce (IV)", value=last.get("nonce", ""))

if st.button("Descifrar", disabled=not (ciphertext and nonce)):
    ok, msg, data = decrypt_message(st.session_state["session_key"], ciphertext, nonce)
    if ok:
        st.session_state["decrypted"] = data
    else:
        # Un error borra cualquier resultado anterior.
        st.session_state.pop("decrypted", None)
        st.error(msg)

result = st.session_state.get("decrypted")
if result:
    st.markdown("### Texto descifrado")
    st.code(result["plaintext"], language="text")
    st.write("**Tipo detectado:**", result["category"])
