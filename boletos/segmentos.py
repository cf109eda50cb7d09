"""Segmentos do código de barras de arrecadação (2ª posição)."""

from typing import NamedTuple, Optional

from .base import limpar_codigo_barras


class Segmento(NamedTuple):
    codigo: str
    descricao: str
    conta_consumo: bool


PREFEITURAS = Segmento("1", "Prefeituras", False)
SANEAMENTO = Segmento("2", "Saneamento", True)
ENERGIA_ELETRICA_GAS = Segmento("3", "Energia Elétrica e Gás", True)
TELECOMUNICACOES = Segmento("4", "Telecomunicações", True)
ORGAOS_GOVERNAMENTAIS = Segmento("5", "Órgãos Governamentais", False)
CARNES_DEMAIS = Segmento(
    "6",
    "Carnes e Assemelhados ou demais. Empresas/Órgãos que serão identificadas através do CNPJ.",
    False,
)
MULTAS_TRANSITO = Segmento("7", "Multas de trânsito", False)
USO_EXCLUSIVO_BANCO = Segmento("8", "Uso exclusivo do banco", False)

SEGMENTOS = (
    PREFEITURAS,
    SANEAMENTO,
    ENERGIA_ELETRICA_GAS,
    TELECOMUNICACOES,
    ORGAOS_GOVERNAMENTAIS,
    CARNES_DEMAIS,
    MULTAS_TRANSITO,
    USO_EXCLUSIVO_BANCO,
)

_SEGMENTOS_POR_CODIGO = {s.codigo: s for s in SEGMENTOS}


def segmento_por_codigo(codigo: str) -> Optional[Segmento]:
    """
    Retorna o segmento do código informado, ou None se o código não for mapeado.
    """
    return _SEGMENTOS_POR_CODIGO.get(str(codigo))


def segmentos_consumo() -> frozenset:
    """
    Contas de consumo: saneamento, energia elétrica/gás e telecomunicações.
    """
    return frozenset(s for s in SEGMENTOS if s.conta_consumo)


def segmento_do_codigo_barras(codigo_barras: str) -> Optional[Segmento]:
    return segmento_por_codigo(limpar_codigo_barras(codigo_barras)[1])


def eh_conta_consumo(codigo_barras: str) -> bool:
    return segmento_do_codigo_barras(codigo_barras) in segmentos_consumo()
