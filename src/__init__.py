"""
Módulo Principal da Aplicação (Application Factory)
"""

from flask import Flask, render_template
from config import Config

from .core.constants import DADOS_LOJA
from .core.extensions import cors, csrf, limiter
from .core.storage import EXTENSAO_REPOSITORIO, RepositorioProdutos

def create_app(config_class=Config, repositorio=None):
    """
    Cria e configura uma instância da aplicação Flask.

    Args:
        config_class: Classe de configuração (padrão: Config).
        repositorio: Armazenamento alternativo; por omissão, o ficheiro DB_FILE.
    """

    app = Flask(__name__,
                instance_relative_config=True,
                static_folder='static',
                template_folder='templates')

    # 1. Carrega a configuração
    app.config.from_object(config_class)

    # 2. Base de dados (ficheiro JSON injetado nos serviços)
    app.extensions[EXTENSAO_REPOSITORIO] = repositorio or RepositorioProdutos(app.config['DB_FILE'])

    # 3. Extensões
    csrf.init_app(app)
    limiter.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get('CORS_ORIGINS', '*')}})

    # Injeta 'DADOS_LOJA' em todos os templates HTML automaticamente.
    @app.context_processor
    def inject_store_data():
        return dict(DADOS_LOJA_GLOBAL=DADOS_LOJA)

    # 4. Configura os Blueprints (Módulos)

    # API REST (JSON, sem CSRF e sem limite de pedidos)
    from .api import api_bp
    csrf.exempt(api_bp)
    limiter.exempt(api_bp)
    app.register_blueprint(api_bp)

    # Páginas (tudo o que não é /api)
    from .paginas import paginas_bp
    app.register_blueprint(paginas_bp)

    # 5. Páginas de erro globais
    @app.errorhandler(404)
    def pagina_nao_encontrada(e):
        return render_template('404.html'), 404

    # 6. Rota de Health Check
    @app.route("/health")
    @limiter.exempt
    def health_check():
        return "Servidor do Catálogo no ar!", 200

    return app
