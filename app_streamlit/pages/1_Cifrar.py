# --------------------------------------------------------------
# File: 1_Cifrar.py
# Description: Formulario de cifrado con selección de categoría y vista de camuflaje.
# --------------------------------------------------------------

import streamlit as st

from api.services import camouflage_png, encrypt_message, new_session_key
from core.logs import configure_logging
from core.models import Category

configure_logging()

LABELS = {
    Category.IMAGE.value: "🖼️ Imagen",
    Category.DNS.value: "🌐 DNS",
    Category.STREAM.value: "📻 Stream",
}

st.title("🔒 Cifrar")

if "session_key" not in st.session_state:
    st.session_state["session_key"] = new_session_key()

category = st.radio(
    "Tipo de codificación",
    options=list(LABELS),
    format_func=LABELS.get,
    index=2,
    horizontal=True,
)
text = st.text_area("Texto a cifrar", placeholder="Escribe el texto...")

if st.button("Cifrar", disabled=not text):
    ok, msg, data = encrypt_message(st.session_state["session_key"], text, category)
    if ok:
        st.session_state["envelope"] = data
        # Un nuevo cifrado invalida el último descifrado mostrado.
        st.session_state.pop("decrypted", None)
        st.success(msg)
    else:
        st.error(msg)

envelope = st.session_state.get("envelope")
if envelope:
    st.markdown("### Texto cifrado")
    st.code(envelope["ciphertext"], language="text")
    st.markdown("### Nonce (IV)")
    st.code(envelope["nonce"], language="text")

    # La imagen es decorativa: no permite recuperar el texto cifrado.
    png = camouflage_png(envelope["ciphertext"])
    if png is not None and envelope["category"] == Category.IMAGE.value:
        st.image(png, caption="Visualización del cifrado")
    if png is not None:
        st.download_button(
            "⬇️ Descargar imagen",
            data=png,
            file_name="encrypted-data.png",
            mime="image/png",
        )
