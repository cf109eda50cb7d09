"""Linha digitável de boleto de cobrança (pagamento de títulos).

Código de barras (44 dígitos):
  posições 1-3    banco
  posição 4       moeda
  posição 5       DV geral (módulo 11)
  posições 6-9    fator de vencimento
  posições 10-19  valor
  posições 20-44  campo livre (uso do banco)

Linha digitável (47 dígitos):
  Campo 1:  banco + moeda + campo livre 1-5   + DV (módulo 10)
  Campo 2:  campo livre 6-15                  + DV (módulo 10)
  Campo 3:  campo livre 16-25                 + DV (módulo 10)
  Campo 4:  DV geral do código de barras
  Campo 5:  fator de vencimento + valor
"""

import logging
from datetime import datetime, timedelta

from .base import (
    BANCOS,
    DIGITOS,
    TAMANHO_LINHA_COBRANCA,
    limpar_codigo_barras,
    limpar_linha,
    limpar_numero,
)
from .modulos import modulo10, modulo11_boleto, validar_modulo10

logger = logging.getLogger(__name__)

DATA_BASE_FATOR = datetime(1997, 10, 7)


def codigo_barras_para_linha_digitavel_cobranca(codigo_barras: str) -> str:
    """
    Converte o código de barras em linha digitável de uma conta de consumo / fatura.
    O DV geral (posição 5) é repassado sem recálculo.
    """
    codigo_barras = limpar_codigo_barras(codigo_barras)

    # Campo 1: banco + moeda + início do campo livre
    campo1 = codigo_barras[0:3] + codigo_barras[3] + codigo_barras[19:24]
    campo1 += str(modulo10(campo1))

    # Campos 2 e 3: restante do campo livre
    campo2 = codigo_barras[24:34]
    campo2 += str(modulo10(campo2))

    campo3 = codigo_barras[34:44]
    campo3 += str(modulo10(campo3))

    # Campo 4: DV geral
    campo4 = codigo_barras[4]

    # Campo 5: fator de vencimento + valor
    campo5 = codigo_barras[5:19]

    return campo1 + campo2 + campo3 + campo4 + campo5


def _campos(numeros):
    return numeros[0:10], numeros[10:21], numeros[21:32]


def validar_linha_digitavel_cobranca(linha: str) -> bool:
    """
    Verifica os DVs (módulo 10) dos três primeiros campos da linha digitável.
    O DV geral e o campo de valor não são conferidos aqui.
    """
    numeros = limpar_linha(linha, TAMANHO_LINHA_COBRANCA, "linha digitável de cobrança")
    return all(validar_modulo10(campo) for campo in _campos(numeros))


def linha_digitavel_para_codigo_barras_cobranca(linha: str) -> str:
    """
    Monta o código de barras (44 dígitos) a partir da linha digitável de cobrança.
    """
    d = limpar_linha(linha, TAMANHO_LINHA_COBRANCA, "linha digitável de cobrança")
    # banco(3) + moeda(1) + DV geral(1) + fator/valor(14) + campo livre(25)
    return d[0:4] + d[32] + d[33:47] + d[4:9] + d[10:20] + d[21:31]


def dv_geral_cobranca(codigo_barras: str) -> int:
    """
    Calcula o DV geral do código de barras de cobrança (posição 5), sobre os
    outros 43 dígitos.
    """
    codigo_barras = limpar_codigo_barras(codigo_barras)
    return modulo11_boleto(codigo_barras[:4] + codigo_barras[5:])


def analisar_linha_digitavel_cobranca(linha: str):
    """
    Valida uma linha digitável de boleto bancário (47 dígitos, padrão cobrança).

    Retorna (erros, infos), onde:
      - erros: lista de mensagens de erro (DV incorreto, tamanho, etc.)
      - infos: dicionário com dados extraídos (banco, valor, vencimento, código de barras, etc.)
    """
    erros = []
    infos = {}

    numeros = limpar_numero(linha)

    if len(numeros) != TAMANHO_LINHA_COBRANCA:
        erros.append(
            f"Tamanho inválido: esperado {TAMANHO_LINHA_COBRANCA} dígitos, recebido {len(numeros)}."
        )
        return erros, infos

    if any(ch not in DIGITOS for ch in numeros):
        erros.append("Linha digitável contém caracteres que não são dígitos 0-9.")
        return erros, infos

    # 1) Validar DVs dos 3 campos com módulo 10
    for numero_campo, campo in enumerate(_campos(numeros), start=1):
        dv_calculado = modulo10(campo[:-1])
        dv_informado = int(campo[-1])
        if dv_calculado != dv_informado:
            erros.append(
                f"Dígito verificador do Campo {numero_campo} inválido. "
                f"Esperado {dv_calculado}, encontrado {dv_informado}."
            )

    # 2) Montar código de barras e conferir o DV geral
    codigo_barras = linha_digitavel_para_codigo_barras_cobranca(numeros)
    dv_geral = int(codigo_barras[4])
    dv_geral_calculado = dv_geral_cobranca(codigo_barras)
    if dv_geral_calculado != dv_geral:
        erros.append(
            f"Dígito verificador geral inválido. Esperado {dv_geral_calculado}, encontrado {dv_geral}."
        )

    banco = codigo_barras[0:3]
    infos["codigo_barras"] = codigo_barras
    infos["banco"] = banco
    infos["nome_banco"] = BANCOS.get(banco, "Banco não mapeado neste validador")
    infos["moeda"] = codigo_barras[3]

    # 3) Interpretar fator de vencimento
    fator = codigo_barras[5:9]
    if fator == "0000":
        infos["vencimento"] = "Sem data de vencimento (fator 0000)"
    else:
        dt = DATA_BASE_FATOR + timedelta(days=int(fator))
        infos["vencimento"] = dt.strftime("%d/%m/%Y")

    # 4) Interpretar valor
    valor_centavos = int(codigo_barras[9:19])
    infos["valor_centavos"] = valor_centavos
    infos["valor_reais"] = valor_centavos / 100.0

    if erros:
        logger.debug("Linha de cobrança %s com %d erro(s)", numeros, len(erros))

    return erros, infos
