# --------------------------------------------------------------
# File: logs.py
# Description: Configuración del registro de eventos de la aplicación.
# --------------------------------------------------------------
"""Inicializa `logging` para los paquetes `core` y `api`."""

import logging
from typing import Optional

from core import config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_PROJECT_LOGGERS = ("core", "api")
HANDLER_NAME = "camouflage"


def configure_logging(level: Optional[str] = None) -> None:
    """Instala un único handler de consola en los loggers del proyecto.

    Es idempotente: Streamlit re-ejecuta los scripts en cada interacción.

    Args:
        level (Optional[str]): Nivel a aplicar; por defecto ``config.LOG_LEVEL``.

    """

    resolved = logging.getLevelName((level or config.LOG_LEVEL).upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    for name in _PROJECT_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(resolved)
        if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            handler.set_name(HANDLER_NAME)
            logger.addHandler(handler)
