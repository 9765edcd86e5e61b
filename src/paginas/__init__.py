"""
Módulo das Páginas (Blueprint)

Define o Blueprint do Flask para o front-end renderizado no servidor:
listagem, detalhe, criação, edição e eliminação de produtos.
"""

from flask import Blueprint

paginas_bp = Blueprint(
    'paginas_bp',
    __name__
)

# Importa as rotas no final
from . import routes
