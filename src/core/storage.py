"""
Módulo de Armazenamento em Ficheiro JSON (Storage Layer)

Lê e grava a coleção inteira de produtos de uma só vez.
Formato do ficheiro: { "produtos": [ {id, nome, preco}, ... ] }
"""

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import List, Union

from flask import current_app

from src.core.errors import ArmazenamentoCorrompidoError, GravacaoArmazenamentoError
from src.core.logger import get_logger
from src.core.parser import para_json

logger = get_logger(__name__)

EXTENSAO_REPOSITORIO = 'repositorio_produtos'


class RepositorioProdutos:
    """
    Acesso ao ficheiro JSON que serve de base de dados.

    Os serviços seguram `bloqueio` durante todo o ciclo ler-alterar-gravar,
    o que serializa as escritas dentro do mesmo processo.
    """

    def __init__(self, caminho: Union[str, Path]):
        self.caminho = Path(caminho)
        self.bloqueio = threading.RLock()

    def carregar(self) -> List[dict]:
        """
        Lê todos os produtos. Ficheiro inexistente equivale a coleção vazia.

        Raises:
            ArmazenamentoCorrompidoError: conteúdo ilegível ou fora do formato esperado.
        """
        if not self.caminho.exists():
            return []

        try:
            conteudo = self.caminho.read_text(encoding='utf-8')
            dados = json.loads(conteudo)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ArmazenamentoCorrompidoError(f"Falha ao ler '{self.caminho}': {e}") from e

        if not isinstance(dados, dict):
            raise ArmazenamentoCorrompidoError(f"'{self.caminho}' não contém um objeto JSON.")

        produtos = dados.get('produtos') or []
        if not isinstance(produtos, list):
            raise ArmazenamentoCorrompidoError(f"'produtos' em '{self.caminho}' não é uma lista.")
        if not all(isinstance(produto, dict) for produto in produtos):
            raise ArmazenamentoCorrompidoError(f"'produtos' em '{self.caminho}' contém elementos que não são objetos.")
        return produtos

    def guardar(self, produtos: List[dict]) -> None:
        """
        Reescreve o ficheiro inteiro (temp file + rename).

        Raises:
            GravacaoArmazenamentoError: falha de I/O (permissões, disco cheio...).
        """
        texto = json.dumps({'produtos': para_json(produtos)}, ensure_ascii=False, indent=2)
        diretorio = self.caminho.parent

        caminho_tmp = None
        try:
            diretorio.mkdir(parents=True, exist_ok=True)
            fd, caminho_tmp = tempfile.mkstemp(dir=diretorio, prefix='.db-', suffix='.tmp')
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(texto)
            os.replace(caminho_tmp, self.caminho)
        except OSError as e:
            if caminho_tmp and os.path.exists(caminho_tmp):
                os.remove(caminho_tmp)
            raise GravacaoArmazenamentoError(f"Falha ao gravar '{self.caminho}': {e}") from e

        logger.debug(f"{len(produtos)} produto(s) gravado(s) em {self.caminho}")


def get_repositorio() -> RepositorioProdutos:
    return current_app.extensions[EXTENSAO_REPOSITORIO]
