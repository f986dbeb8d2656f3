# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from api.services import new_session_key
from core.logs import configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Camouflage Crypto", page_icon="🔐", layout="centered")

# SECURITY: La clave vive solo en la sesión y se genera una única vez.
if "session_key" not in st.session_state:
    st.session_state["session_key"] = new_session_key()

st.title("🔐 Camouflage Crypto")
st.write(
    "Cifra texto con AES-GCM-256 y preséntalo como imagen, DNS o stream. "
    "La categoría es solo un prefijo informativo del texto cifrado."
)
st.info("Ve a **Cifrar** para generar un sobre y a **Descifrar** para recuperarlo.")
st.caption("La clave se pierde al cerrar la sesión.")
