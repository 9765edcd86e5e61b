"""
Módulo da API REST (Blueprint)

Define o Blueprint do Flask para os endpoints JSON de /api/produtos.
"""

from flask import Blueprint

api_bp = Blueprint(
    'api_bp',
    __name__,
    url_prefix='/api' # Todas as rotas começarão com /api
)

# Importa as rotas no final para evitar dependência circular
from . import routes
