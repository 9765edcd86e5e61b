"""
Módulo de Conversão de Entradas (Core)

Responsável por:
1. Converter o preço recebido (texto ou número) para float, sem rejeitar entradas.
2. Converter o id vindo do path para inteiro.
3. Tornar os valores seguros para JSON (NaN/Infinity -> null).
"""

import math
import re
from typing import Any, Optional

from src.core.logger import get_logger

logger = get_logger(__name__)

# Maior prefixo decimal válido: "9.99", "  -3e2kg", ".5", "Infinity"
_REGEX_DECIMAL = re.compile(r'[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)', re.ASCII)
_REGEX_INTEIRO = re.compile(r'[+-]?\d+', re.ASCII)


def converter_preco(valor: Any) -> float:
    """
    Converte o preço para float sem nunca falhar.

    Números passam direto; texto é lido até onde formar um decimal válido
    ("9.99€" -> 9.99). Qualquer outra coisa (None, booleanos, texto sem
    número, listas) vira NaN, que é guardado assim mesmo.
    """
    if isinstance(valor, bool):
        return math.nan
    if isinstance(valor, (int, float)):
        try:
            return float(valor)
        except OverflowError:
            # Inteiro grande demais para float
            return math.inf if valor > 0 else -math.inf
    if not isinstance(valor, str):
        return math.nan

    match = _REGEX_DECIMAL.match(valor.lstrip())
    if not match:
        logger.debug(f"Preço não numérico recebido: {valor!r}")
        return math.nan
    return float(match.group(0))


def converter_id(valor: Any) -> Optional[int]:
    """
    Converte o segmento do path em inteiro ("12" -> 12, "12abc" -> 12).
    Retorna None quando não há dígitos ASCII (ou são dígitos demais);
    None nunca corresponde a um produto.
    """
    if isinstance(valor, bool):
        return None
    if isinstance(valor, int):
        return valor
    if not isinstance(valor, str):
        return None

    match = _REGEX_INTEIRO.match(valor.strip())
    if not match:
        return None
    try:
        return int(match.group(0))
    except ValueError:
        # Acima do limite de dígitos do int() (sys.int_info)
        return None


def para_json(valor: Any) -> Any:
    """Substitui floats não finitos por None, recursivamente."""
    if isinstance(valor, float) and not math.isfinite(valor):
        return None
    if isinstance(valor, dict):
        return {chave: para_json(v) for chave, v in valor.items()}
    if isinstance(valor, list):
        return [para_json(v) for v in valor]
    return valor
