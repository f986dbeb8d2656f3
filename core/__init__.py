# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete core.
# --------------------------------------------------------------
"""Inicializa el paquete `core` y documenta sus módulos principales."""

__all__ = [
    "camouflage",
    "config",
    "crypto_sym",
    "envelope",
    "errors",
    "logs",
    "models",
]
