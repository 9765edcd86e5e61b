"""
Constantes Globais do Sistema.
Fonte Única da Verdade para mensagens e dados da loja.
"""

MSG_PRODUTO_NAO_ENCONTRADO = "Produto não encontrado"
MSG_PRODUTO_ELIMINADO = "Produto eliminado com sucesso"
MSG_ERRO_INTERNO = "Erro interno ao aceder aos produtos"

DADOS_LOJA = {
    'nome': 'Catálogo de Produtos',
    'descricao': 'Gerencie todos os produtos da sua loja',
    'moeda': '€'
}
