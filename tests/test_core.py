
import unittest
import json
import math
import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

from src.core import parser
from src.core.errors import ArmazenamentoCorrompidoError, GravacaoArmazenamentoError
from src.core.storage import RepositorioProdutos

class TestCoreParser(unittest.TestCase):

    def test_converter_preco_texto_numerico(self):
        self.assertEqual(parser.converter_preco("9.99"), 9.99)
        self.assertEqual(parser.converter_preco("  -3.5"), -3.5)
        self.assertEqual(parser.converter_preco(".5"), 0.5)
        self.assertEqual(parser.converter_preco("1e3"), 1000.0)

    def test_converter_preco_prefixo_valido(self):
        # Lê apenas o início numérico do texto
        self.assertEqual(parser.converter_preco("9.99€"), 9.99)
        self.assertEqual(parser.converter_preco("12abc"), 12.0)
        self.assertEqual(parser.converter_preco("1e"), 1.0)

    def test_converter_preco_numeros(self):
        resultado = parser.converter_preco(5)
        self.assertIsInstance(resultado, float)
        self.assertEqual(resultado, 5.0)
        self.assertEqual(parser.converter_preco(2.5), 2.5)

    def test_converter_preco_inteiro_enorme(self):
        # Inteiro JSON fora do alcance do float
        self.assertEqual(parser.converter_preco(int("9" * 400)), math.inf)
        self.assertEqual(parser.converter_preco(-int("9" * 400)), -math.inf)

    def test_converter_preco_infinity(self):
        self.assertEqual(parser.converter_preco("Infinity"), math.inf)
        self.assertEqual(parser.converter_preco("-Infinity"), -math.inf)

    def test_converter_preco_nao_numerico_vira_nan(self):
        for valor in ["abc", "", None, True, False, [1], {"a": 1}, "inf"]:
            with self.subTest(valor=valor):
                self.assertTrue(math.isnan(parser.converter_preco(valor)))

    def test_converter_id(self):
        self.assertEqual(parser.converter_id("12"), 12)
        self.assertEqual(parser.converter_id(" 7 "), 7)
        self.assertEqual(parser.converter_id("3abc"), 3)
        self.assertEqual(parser.converter_id(4), 4)

    def test_converter_id_sem_digitos(self):
        for valor in ["abc", "", None, True, "x1", "\u0661", "\u0663\u0664"]:
            with self.subTest(valor=valor):
                self.assertIsNone(parser.converter_id(valor))

    def test_converter_id_digitos_demais(self):
        self.assertIsNone(parser.converter_id("1" * 5000))

    def test_converter_preco_ignora_digitos_nao_ascii(self):
        self.assertTrue(math.isnan(parser.converter_preco("\u0661\u0662")))

    def test_para_json_remove_nao_finitos(self):
        dados = {"preco": math.nan, "lista": [math.inf, 1.5], "nome": "Caneca"}
        self.assertEqual(
            parser.para_json(dados),
            {"preco": None, "lista": [None, 1.5], "nome": "Caneca"}
        )


class TestCoreStorage(unittest.TestCase):

    def setUp(self):
        self.diretorio = Path(tempfile.mkdtemp())
        self.caminho = self.diretorio / "db.json"
        self.repositorio = RepositorioProdutos(self.caminho)

    def tearDown(self):
        shutil.rmtree(self.diretorio, ignore_errors=True)

    def test_carregar_ficheiro_inexistente(self):
        self.assertEqual(self.repositorio.carregar(), [])

    def test_guardar_e_carregar(self):
        produtos = [{"id": 1, "nome": "Caneca", "preco": 9.99}]
        self.repositorio.guardar(produtos)

        self.assertEqual(self.repositorio.carregar(), produtos)
        conteudo = json.loads(self.caminho.read_text(encoding="utf-8"))
        self.assertEqual(conteudo, {"produtos": produtos})

    def test_guardar_mantem_acentos(self):
        self.repositorio.guardar([{"id": 1, "nome": "Pão de Açúcar", "preco": 1.0}])
        self.assertIn("Pão de Açúcar", self.caminho.read_text(encoding="utf-8"))

    def test_guardar_carregar_idempotente(self):
        self.repositorio.guardar([
            {"id": 1, "nome": "Caneca", "preco": 9.99},
            {"id": 2, "nome": "Copo", "preco": 5.0, "cor": "azul"},
        ])
        antes = self.caminho.read_bytes()

        self.repositorio.guardar(self.repositorio.carregar())

        self.assertEqual(self.caminho.read_bytes(), antes)

    def test_guardar_nan_como_null(self):
        self.repositorio.guardar([{"id": 1, "nome": "X", "preco": math.nan}])
        conteudo = json.loads(self.caminho.read_text(encoding="utf-8"))
        self.assertIsNone(conteudo["produtos"][0]["preco"])

    def test_carregar_sem_campo_produtos(self):
        self.caminho.write_text('{"outro": 1}', encoding="utf-8")
        self.assertEqual(self.repositorio.carregar(), [])

    def test_carregar_conteudo_corrompido(self):
        for conteudo in ['{invalido', '', '[]', '{"produtos": 5}', '{"produtos": [1, 2]}', '{"produtos": [{"id": 1}, null]}']:
            with self.subTest(conteudo=conteudo):
                self.caminho.write_text(conteudo, encoding="utf-8")
                with self.assertRaises(ArmazenamentoCorrompidoError):
                    self.repositorio.carregar()

    def test_guardar_falha_io(self):
        # O destino é um diretório: o rename falha
        self.caminho.mkdir()

        with self.assertRaises(GravacaoArmazenamentoError):
            self.repositorio.guardar([{"id": 1}])

        # Nenhum ficheiro temporário fica para trás
        self.assertEqual([p.name for p in self.diretorio.iterdir()], ["db.json"])

    @patch('src.core.storage.os.replace')
    def test_guardar_falha_no_rename_remove_temporario(self, mock_replace):
        mock_replace.side_effect = PermissionError("sem permissão")

        with self.assertRaises(GravacaoArmazenamentoError):
            self.repositorio.guardar([{"id": 1}])

        self.assertEqual(list(self.diretorio.iterdir()), [])

if __name__ == '__main__':
    unittest.main()
