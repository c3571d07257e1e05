# backend/app/core/logging_config.py
"""
Configuración del logging de la aplicación.

Cada módulo obtiene su propio logger con ``logging.getLogger(__name__)``;
aquí solo se configura el logger raíz una única vez, con el nivel y el
formato definidos en ``Settings``.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from app.core.config import Settings

_configured = False


def setup_logging(settings: Settings) -> None:
    """
    Configura el logger raíz a partir de la configuración de la aplicación.

    - Handler de consola siempre activo.
    - Handler de fichero rotativo solo si ``LOG_FILE_PATH`` está definido.

    Llamadas sucesivas no añaden handlers duplicados.
    """
    global _configured
    if _configured:
        return

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.LOG_LEVEL.upper())
    formatter = logging.Formatter(settings.LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if settings.LOG_FILE_PATH:
        log_path = Path(settings.LOG_FILE_PATH)
        if not log_path.is_absolute():
            log_path = settings.BASE_DIR / log_path
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _configured = True
    logging.getLogger(__name__).debug("Logging configurado con nivel %s", settings.LOG_LEVEL)
