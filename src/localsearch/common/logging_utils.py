import logging
from typing import Optional, Union

from localsearch.config import LOG_LEVEL, LOG_FORMAT


def configure_logging(level: Optional[Union[int, str]] = None, fmt: Optional[str] = None):
    """
    Configura o logging raiz para scripts que usam o framework.

    Args:
        level: Nível de log (int ou nome). Padrão: LOCALSEARCH_LOG_LEVEL ou INFO.
        fmt: Formato das mensagens. Padrão: config.LOG_FORMAT.
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=level, format=fmt or LOG_FORMAT)
