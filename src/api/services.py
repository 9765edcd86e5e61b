"""
Camada de Serviço (Service Layer) dos Produtos

Implementa o CRUD sobre a coleção lida do ficheiro JSON.
Cada operação relê a coleção inteira; as mutações regravam-na por completo.
"""

from typing import Any, List, Optional, Tuple

from src.core.errors import ArmazenamentoCorrompidoError, ProdutoNaoEncontradoError
from src.core.logger import get_logger
from src.core.parser import converter_id, converter_preco
from src.core.storage import get_repositorio

# Inicializa o logger para este módulo
logger = get_logger(__name__)


def _localizar(produtos: List[dict], id_bruto: Any) -> Tuple[int, dict]:
    """
    Busca linear pelo primeiro produto com o id pedido.
    Retorna (índice, produto) ou levanta ProdutoNaoEncontradoError.
    """
    id_produto = converter_id(id_bruto)
    if id_produto is not None:
        for indice, produto in enumerate(produtos):
            if produto.get('id') == id_produto:
                return indice, produto

    logger.warning(f"Produto {id_bruto!r} não encontrado")
    raise ProdutoNaoEncontradoError(id_bruto)


def _proximo_id(produtos: List[dict]) -> int:
    # Id do ÚLTIMO elemento + 1 (não o máximo); 1 para coleção vazia.
    if not produtos:
        return 1

    ultimo_id = produtos[-1].get('id')
    if isinstance(ultimo_id, float) and ultimo_id.is_integer():
        ultimo_id = int(ultimo_id)
    if isinstance(ultimo_id, bool) or not isinstance(ultimo_id, int):
        # Um PUT pode ter gravado um id não inteiro no último produto
        raise ArmazenamentoCorrompidoError(f"Último produto tem id inválido ({ultimo_id!r}); impossível gerar novo id.")
    return ultimo_id + 1


def listar_produtos() -> List[dict]:
    repositorio = get_repositorio()
    with repositorio.bloqueio:
        return repositorio.carregar()


def obter_produto(id_bruto: Any) -> dict:
    repositorio = get_repositorio()
    with repositorio.bloqueio:
        _, produto = _localizar(repositorio.carregar(), id_bruto)
    return produto


def criar_produto(dados: Optional[dict]) -> dict:
    """
    Cria um produto a partir de {nome, preco}.

    O id é atribuído pelo sistema e o preço convertido para float;
    um preço não numérico é guardado como NaN (null no JSON).
    """
    dados = dados or {}
    repositorio = get_repositorio()

    with repositorio.bloqueio:
        produtos = repositorio.carregar()
        novo_produto = {
            'id': _proximo_id(produtos),
            'nome': dados.get('nome'),
            'preco': converter_preco(dados.get('preco')),
        }
        produtos.append(novo_produto)
        repositorio.guardar(produtos)

    logger.info(f"Produto criado com ID {novo_produto['id']}: {novo_produto['nome']!r}")
    return novo_produto


def atualizar_produto(id_bruto: Any, dados: Optional[dict]) -> dict:
    """
    Atualiza um produto mantendo os campos antigos e sobrescrevendo
    os enviados (merge raso). Um 'id' no corpo também é aplicado.
    """
    dados = dados or {}
    repositorio = get_repositorio()

    with repositorio.bloqueio:
        produtos = repositorio.carregar()
        indice, atual = _localizar(produtos, id_bruto)
        produtos[indice] = {**atual, **dados}
        repositorio.guardar(produtos)
        atualizado = produtos[indice]

    if 'id' in dados and dados['id'] != atual.get('id'):
        logger.warning(f"Produto {atual.get('id')} teve o id alterado para {dados['id']!r} pelo corpo do pedido")
    logger.info(f"Produto {atual.get('id')} atualizado (campos: {', '.join(dados) or 'nenhum'})")
    return atualizado


def eliminar_produto(id_bruto: Any) -> dict:
    """Remove exatamente um produto e retorna-o."""
    repositorio = get_repositorio()

    with repositorio.bloqueio:
        produtos = repositorio.carregar()
        indice, removido = _localizar(produtos, id_bruto)
        del produtos[indice]
        repositorio.guardar(produtos)

    logger.info(f"Produto {removido.get('id')} eliminado")
    return removido
