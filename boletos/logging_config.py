"""
Configuração de logging das interfaces (linha de comando e web).
"""

import logging
import os


def configure_logging(level=None) -> logging.Logger:
    """
    Configura o logger raiz com um handler de console.

    Args:
        level: nome do nível (ex.: "DEBUG"); padrão vem de LOG_LEVEL ou INFO

    Returns:
        O logger raiz configurado
    """
    level_name = level or os.environ.get("LOG_LEVEL", "INFO")
    log_level = getattr(logging, str(level_name).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Evita handlers duplicados quando o app é recarregado em modo debug
    for handler in root_logger.handlers[:]:
        if getattr(handler, "_validador_boleto", False):
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    console_handler._validador_boleto = True
    root_logger.addHandler(console_handler)

    logging.getLogger("boletos").setLevel(log_level)

    return root_logger
