"""
Exceções do Catálogo.

Os serviços levantam estas exceções; os blueprints traduzem-nas
para respostas HTTP (JSON na API, páginas HTML no front-end).
"""


class ErroCatalogo(Exception):
    """Base de todos os erros da aplicação."""


class ProdutoNaoEncontradoError(ErroCatalogo):
    """O id pedido não existe na coleção (HTTP 404)."""

    def __init__(self, id_produto=None):
        self.id_produto = id_produto
        super().__init__(f"Produto não encontrado: {id_produto}")


class ErroArmazenamento(ErroCatalogo):
    """Falha no acesso ao ficheiro de dados (HTTP 500)."""


class ArmazenamentoCorrompidoError(ErroArmazenamento):
    pass


class GravacaoArmazenamentoError(ErroArmazenamento):
    pass
