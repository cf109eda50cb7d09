"""Validação e conversão de código de barras / linha digitável de boletos."""
from .erros import (
    ErroBoleto,
    TamanhoInvalido,
    CaractereInvalido
)

from .base import (
    BANCOS,
    ARRECADACAO,
    COBRANCA,
    limpar_numero,
    identificar_tipo,
    formatar_linha_digitavel
)

from .modulos import (
    modulo10,
    validar_modulo10,
    modulo11,
    validar_modulo11,
    modulo11_boleto,
    codigo_moeda,
    modulo_para_moeda,
    funcoes_modulo
)

from .segmentos import (
    Segmento,
    SEGMENTOS,
    segmento_por_codigo,
    segmentos_consumo,
    segmento_do_codigo_barras,
    eh_conta_consumo
)

from .arrecadacao import (
    codigo_barras_para_linha_digitavel_arrecadacao,
    validar_linha_digitavel_arrecadacao,
    linha_digitavel_para_codigo_barras_arrecadacao,
    dv_geral_arrecadacao,
    analisar_linha_digitavel_arrecadacao
)

from .cobranca import (
    codigo_barras_para_linha_digitavel_cobranca,
    validar_linha_digitavel_cobranca,
    linha_digitavel_para_codigo_barras_cobranca,
    dv_geral_cobranca,
    analisar_linha_digitavel_cobranca
)

__all__ = [
    "ErroBoleto",
    "TamanhoInvalido",
    "CaractereInvalido",
    "BANCOS",
    "ARRECADACAO",
    "COBRANCA",
    "limpar_numero",
    "identificar_tipo",
    "formatar_linha_digitavel",
    "modulo10",
    "validar_modulo10",
    "modulo11",
    "validar_modulo11",
    "modulo11_boleto",
    "codigo_moeda",
    "modulo_para_moeda",
    "funcoes_modulo",
    "Segmento",
    "SEGMENTOS",
    "segmento_por_codigo",
    "segmentos_consumo",
    "segmento_do_codigo_barras",
    "eh_conta_consumo",
    "codigo_barras_para_linha_digitavel_arrecadacao",
    "validar_linha_digitavel_arrecadacao",
    "linha_digitavel_para_codigo_barras_arrecadacao",
    "dv_geral_arrecadacao",
    "analisar_linha_digitavel_arrecadacao",
    "codigo_barras_para_linha_digitavel_cobranca",
    "validar_linha_digitavel_cobranca",
    "linha_digitavel_para_codigo_barras_cobranca",
    "dv_geral_cobranca",
    "analisar_linha_digitavel_cobranca"
]
