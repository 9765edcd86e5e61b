import pytest

from config import Config
from src import create_app
from src.core.storage import RepositorioProdutos


class ConfigTeste(Config):
    TESTING = True
    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "db.json"


@pytest.fixture
def app(db_path):
    """Aplicação com a base de dados num ficheiro temporário."""
    app = create_app(ConfigTeste, repositorio=RepositorioProdutos(db_path))
    app.config['DB_FILE'] = str(db_path)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def repositorio(app):
    return app.extensions['repositorio_produtos']
