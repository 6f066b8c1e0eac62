"""Configuración de logging (consola)."""
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_logging_initialized = False


def setup_logging(log_level=logging.INFO):
    """Configura el logger raíz una sola vez; llamadas posteriores sólo ajustan el nivel."""
    global _logging_initialized

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    if _logging_initialized:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    _logging_initialized = True
    logging.getLogger(__name__).debug("Logging inicializado")
