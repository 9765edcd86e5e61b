"""
Logging do Catálogo.

Todos os módulos pedem o seu logger aqui; as mensagens vão para stdout
com o nível definido em LOG_LEVEL (INFO por omissão).
"""

import logging
import os
import sys

FORMATO_LOG = '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'

def get_logger(name: str) -> logging.Logger:
    """
    Retorna o logger do módulo, já com handler para stdout.

    Args:
        name (str): normalmente __name__ do módulo chamador.
    """
    logger = logging.getLogger(name)

    # Um único handler por logger, mesmo com várias chamadas (ex.: create_app nos testes)
    if not logger.handlers:
        logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO').upper())

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(FORMATO_LOG))
        logger.addHandler(handler)

    return logger
