"""
Ponto de Entrada da Aplicação (Runner)

Este script importa a "Application Factory" (create_app) do módulo 'src'
e inicia o servidor do Flask.

Para executar o servidor:
(Com o ambiente virtual .venv ativo)
$ python run.py
"""

from src import create_app
from src.core.logger import get_logger

# Cria a instância da aplicação usando a factory
app = create_app()
logger = get_logger(__name__)

if __name__ == "__main__":
    porta = app.config['PORT']
    logger.info(f"🚀 Servidor do Catálogo a correr em http://localhost:{porta} (modo {app.config['APP_ENV']})")
    logger.info(f"📡 API disponível em http://localhost:{porta}/api/produtos")

    # 'debug' ativa o auto-reload em desenvolvimento
    app.run(host=app.config['HOST'], port=porta, debug=app.config['DEBUG'])
