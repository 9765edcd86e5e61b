"""
Módulo de Configuração

Define a classe de configuração principal. Em produção segue o padrão
'Fail Fast': sem SECRET_KEY a aplicação nem inicia.
"""

import os
from dotenv import load_dotenv

# Carrega variáveis do arquivo .env
load_dotenv()


def _flag(nome: str, padrao: str) -> bool:
    return os.environ.get(nome, padrao).lower() in ('true', '1', 'yes')


class Config:
    """
    Classe de configuração base da aplicação.
    """

    # === MODO (development | production) ===
    APP_ENV = os.environ.get('APP_ENV', 'development').lower()
    PRODUCAO = APP_ENV == 'production'

    # === FLASK ===
    DEBUG = _flag('FLASK_DEBUG', 'False' if PRODUCAO else 'True')
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 3000))

    # === SEGURANÇA (Fail Fast em produção) ===
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        if PRODUCAO:
            raise ValueError("ERRO CRÍTICO: 'SECRET_KEY' não encontrada no .env. A aplicação não pode iniciar insegura.")
        SECRET_KEY = 'dev-catalogo-nao-usar-em-producao'

    # === BASE DE DADOS (ficheiro JSON) ===
    DB_FILE = os.environ.get('DB_FILE', 'db.json')

    # === EXTENSÕES ===
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    RATELIMIT_ENABLED = _flag('RATELIMIT_ENABLED', 'True')
    RATELIMIT_DEFAULT = os.environ.get('RATELIMIT_DEFAULT', '200 per day;50 per hour')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
