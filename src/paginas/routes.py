"""
Rotas do Módulo de Páginas

Front-end renderizado no servidor. Usa a mesma camada de serviço da API,
portanto as regras de id, merge e persistência são idênticas.
"""

from flask import (
    render_template,
    redirect,
    url_for,
    flash,
    request
)

from . import paginas_bp
from .forms import ProdutoForm
from src.api import services as produtos_services
from src.core.constants import MSG_PRODUTO_ELIMINADO
from src.core.errors import ErroArmazenamento, ProdutoNaoEncontradoError
from src.core.logger import get_logger

logger = get_logger(__name__)

# === TRATAMENTO DE ERROS ===

@paginas_bp.errorhandler(ProdutoNaoEncontradoError)
def produto_nao_encontrado(e):
    return render_template('produto_nao_encontrado.html'), 404

@paginas_bp.errorhandler(ErroArmazenamento)
def erro_armazenamento(e):
    logger.error(f"Erro de armazenamento na página {request.path}: {e}", exc_info=True)
    return render_template('500.html'), 500

# === ROTAS ===

@paginas_bp.route('/')
def index():
    return render_template('index.html')

@paginas_bp.route('/produtos')
def listar_produtos():
    """ Tabela com todos os produtos e ações Ver / Editar / Eliminar. """
    produtos = produtos_services.listar_produtos()
    return render_template('produtos.html', produtos=produtos)

@paginas_bp.route('/produto/<id_produto>')
def detalhe_produto(id_produto):
    produto = produtos_services.obter_produto(id_produto)
    return render_template('produto.html', produto=produto)

@paginas_bp.route('/produtos/novo', methods=['GET', 'POST'])
def adicionar_produto():
    form = ProdutoForm()

    if form.validate_on_submit():
        novo = produtos_services.criar_produto({
            'nome': form.nome.data.strip(),
            'preco': form.preco.data
        })
        flash(f"Produto '{novo['nome']}' adicionado.", "success")
        return redirect(url_for('paginas_bp.listar_produtos'))

    return render_template('produto_form.html', form=form, titulo="Adicionar Produto")

@paginas_bp.route('/produto/<id_produto>/editar', methods=['GET', 'POST'])
def editar_produto(id_produto):
    produto = produtos_services.obter_produto(id_produto)

    # No GET o form vem preenchido com os dados atuais
    form = ProdutoForm(data=None if request.method == 'POST' else produto)

    if form.validate_on_submit():
        produtos_services.atualizar_produto(id_produto, {
            'nome': form.nome.data.strip(),
            'preco': form.preco.data
        })
        flash("Produto atualizado.", "success")
        return redirect(url_for('paginas_bp.listar_produtos'))

    return render_template('produto_form.html', form=form, produto=produto, titulo="Editar Produto")

@paginas_bp.route('/produto/<id_produto>/eliminar', methods=['POST'])
def eliminar_produto(id_produto):
    produtos_services.eliminar_produto(id_produto)
    flash(MSG_PRODUTO_ELIMINADO, "success")
    return redirect(url_for('paginas_bp.listar_produtos'))
