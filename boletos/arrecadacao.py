"""Linha digitável de arrecadação (concessionárias, tributos e convênios).

Código de barras (44 dígitos):
  posição 1      identificação do produto ('8')
  posição 2      segmento
  posição 3      identificador de valor / código da moeda (escolhe o módulo)
  posição 4      DV geral
  posições 5-15  valor
  posições 16-44 identificação da empresa/órgão e campo livre

A linha digitável (48 dígitos) são os 4 blocos de 11 dígitos do código de
barras, cada um seguido do seu DV (módulo 10 ou 11, conforme a moeda).
"""

import logging

from .base import (
    DIGITOS,
    TAMANHO_LINHA_ARRECADACAO,
    exigir_digitos,
    limpar_codigo_barras,
    limpar_linha,
    limpar_numero,
)
from .erros import TamanhoInvalido
from .modulos import codigo_moeda, funcoes_modulo, modulo_para_moeda
from .segmentos import segmento_por_codigo

logger = logging.getLogger(__name__)

TAMANHO_CAMPO = 11
TAMANHO_BLOCO = 12
# Menor linha aceita antes do preenchimento: precisa conter o código da moeda.
TAMANHO_MINIMO_LINHA = 3

# Identificadores de valor com valor efetivo em reais (6 e 8); 7 e 9 são
# valores de referência (quantidade de moeda).
IDENTIFICADORES_VALOR_EFETIVO = ("6", "8")


def codigo_barras_para_linha_digitavel_arrecadacao(codigo_barras: str) -> str:
    """
    Converte o código de barras em linha digitável de uma conta de arrecadação.
    """
    codigo_barras = limpar_codigo_barras(codigo_barras)
    calcular, _ = funcoes_modulo(codigo_moeda(codigo_barras))

    partes = []
    for inicio in range(0, 44, TAMANHO_CAMPO):
        campo = codigo_barras[inicio:inicio + TAMANHO_CAMPO]
        partes.append(campo + str(calcular(campo)))
    return "".join(partes)


def _blocos(linha):
    return [linha[i:i + TAMANHO_BLOCO] for i in range(0, TAMANHO_LINHA_ARRECADACAO, TAMANHO_BLOCO)]


def validar_linha_digitavel_arrecadacao(linha: str) -> bool:
    """
    Verifica os 4 DVs da linha digitável de arrecadação.

    Linhas com menos de 48 dígitos são completadas com zeros à direita antes
    da verificação: algumas fontes omitem os zeros finais. Linhas com mais de
    48 dígitos, ou curtas demais para ter o código da moeda, levantam
    TamanhoInvalido.
    """
    numeros = limpar_numero(linha)
    if len(numeros) > TAMANHO_LINHA_ARRECADACAO:
        raise TamanhoInvalido("linha digitável de arrecadação", TAMANHO_LINHA_ARRECADACAO, len(numeros))

    exigir_digitos(numeros)
    _, validar = funcoes_modulo(codigo_moeda(numeros))
    numeros = numeros.ljust(TAMANHO_LINHA_ARRECADACAO, "0")

    return all(validar(bloco) for bloco in _blocos(numeros))


def linha_digitavel_para_codigo_barras_arrecadacao(linha: str) -> str:
    """
    Monta o código de barras retirando o DV de cada bloco da linha digitável.
    """
    numeros = limpar_linha(linha, TAMANHO_LINHA_ARRECADACAO, "linha digitável de arrecadação")
    return "".join(bloco[:TAMANHO_CAMPO] for bloco in _blocos(numeros))


def dv_geral_arrecadacao(codigo_barras: str) -> int:
    """
    Calcula o DV geral (4ª posição) sobre os outros 43 dígitos do código de
    barras, com o mesmo módulo dos blocos.
    """
    codigo_barras = limpar_codigo_barras(codigo_barras)
    calcular, _ = funcoes_modulo(codigo_moeda(codigo_barras))
    return calcular(codigo_barras[:3] + codigo_barras[4:])


def analisar_linha_digitavel_arrecadacao(linha: str):
    """
    Valida uma linha digitável de arrecadação (48 dígitos). Linhas mais
    curtas são completadas com zeros, como em validar_linha_digitavel_arrecadacao.

    Retorna (erros, infos), onde:
      - erros: lista de mensagens de erro (DV incorreto, tamanho, etc.)
      - infos: dicionário com dados extraídos (segmento, valor, código de barras, etc.)
    """
    erros = []
    infos = {}

    numeros = limpar_numero(linha)

    if not TAMANHO_MINIMO_LINHA <= len(numeros) <= TAMANHO_LINHA_ARRECADACAO:
        erros.append(
            f"Tamanho inválido: esperado {TAMANHO_LINHA_ARRECADACAO} dígitos, recebido {len(numeros)}."
        )
        return erros, infos

    if any(ch not in DIGITOS for ch in numeros):
        erros.append("Linha digitável contém caracteres que não são dígitos 0-9.")
        return erros, infos

    numeros = numeros.ljust(TAMANHO_LINHA_ARRECADACAO, "0")

    if numeros[0] != "8":
        erros.append(
            f"Identificação do produto deve ser '8' (arrecadação), encontrado '{numeros[0]}'."
        )

    moeda = codigo_moeda(numeros)
    calcular, _ = funcoes_modulo(moeda)
    modulo = modulo_para_moeda(moeda)

    for numero_bloco, bloco in enumerate(_blocos(numeros), start=1):
        dv_calculado = calcular(bloco[:TAMANHO_CAMPO])
        dv_informado = int(bloco[TAMANHO_CAMPO])
        if dv_calculado != dv_informado:
            erros.append(
                f"Dígito verificador do Bloco {numero_bloco} inválido (módulo {modulo}). "
                f"Esperado {dv_calculado}, encontrado {dv_informado}."
            )

    codigo_barras = linha_digitavel_para_codigo_barras_arrecadacao(numeros)

    dv_geral = int(codigo_barras[3])
    dv_geral_calculado = dv_geral_arrecadacao(codigo_barras)
    if dv_geral_calculado != dv_geral:
        erros.append(
            f"Dígito verificador geral inválido. Esperado {dv_geral_calculado}, encontrado {dv_geral}."
        )

    segmento = segmento_por_codigo(codigo_barras[1])

    infos["codigo_barras"] = codigo_barras
    infos["identificador_valor"] = moeda
    infos["modulo"] = modulo
    infos["segmento"] = segmento.descricao if segmento else None
    infos["conta_consumo"] = bool(segmento and segmento.conta_consumo)

    valor_centavos = int(codigo_barras[4:15])
    infos["valor_efetivo"] = moeda in IDENTIFICADORES_VALOR_EFETIVO
    infos["valor_centavos"] = valor_centavos
    infos["valor_reais"] = valor_centavos / 100.0

    if erros:
        logger.debug("Linha de arrecadação %s com %d erro(s)", numeros, len(erros))

    return erros, infos
