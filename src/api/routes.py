"""
Rotas da API REST de Produtos

GET    /api/produtos       -> lista todos
GET    /api/produtos/<id>  -> um produto
POST   /api/produtos       -> cria (201)
PUT    /api/produtos/<id>  -> atualiza (merge raso)
DELETE /api/produtos/<id>  -> elimina
"""

from flask import jsonify, request

from . import api_bp
from . import services as produtos_services
from src.core.constants import MSG_ERRO_INTERNO, MSG_PRODUTO_ELIMINADO, MSG_PRODUTO_NAO_ENCONTRADO
from src.core.errors import ErroArmazenamento, ProdutoNaoEncontradoError
from src.core.logger import get_logger
from src.core.parser import para_json

logger = get_logger(__name__)


def _corpo_json() -> dict:
    # Corpo ausente, inválido ou que não seja objeto conta como vazio
    dados = request.get_json(silent=True)
    return dados if isinstance(dados, dict) else {}


# === TRATAMENTO DE ERROS ===

@api_bp.errorhandler(ProdutoNaoEncontradoError)
def produto_nao_encontrado(e):
    return jsonify({'erro': MSG_PRODUTO_NAO_ENCONTRADO}), 404

@api_bp.errorhandler(ErroArmazenamento)
def erro_armazenamento(e):
    logger.error(f"Erro de armazenamento em {request.method} {request.path}: {e}", exc_info=True)
    return jsonify({'erro': MSG_ERRO_INTERNO}), 500

# === ROTAS ===

@api_bp.route('/produtos', methods=['GET'])
def listar():
    return jsonify(para_json(produtos_services.listar_produtos()))

@api_bp.route('/produtos/<id_produto>', methods=['GET'])
def obter(id_produto):
    return jsonify(para_json(produtos_services.obter_produto(id_produto)))

@api_bp.route('/produtos', methods=['POST'])
def criar():
    novo_produto = produtos_services.criar_produto(_corpo_json())
    return jsonify(para_json(novo_produto)), 201

@api_bp.route('/produtos/<id_produto>', methods=['PUT'])
def atualizar(id_produto):
    return jsonify(para_json(produtos_services.atualizar_produto(id_produto, _corpo_json())))

@api_bp.route('/produtos/<id_produto>', methods=['DELETE'])
def eliminar(id_produto):
    produtos_services.eliminar_produto(id_produto)
    return jsonify({'mensagem': MSG_PRODUTO_ELIMINADO})
