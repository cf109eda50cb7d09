"""Cálculo dos dígitos verificadores (módulo 10 e módulo 11, padrão FEBRABAN)."""

import logging

from .base import exigir_digitos, limpar_numero
from .erros import TamanhoInvalido

logger = logging.getLogger(__name__)

MOEDAS_MODULO_11 = ("8", "9")


def modulo10(bloco: str) -> int:
    """
    Calcula o dígito verificador pelo módulo 10.

    Da direita para a esquerda, multiplica os dígitos alternadamente por 2 e 1;
    produtos com dois dígitos são somados (ex.: 16 -> 1 + 6). O DV é o que falta
    para a soma chegar à próxima dezena (0 se a soma já for múltipla de 10).
    """
    exigir_digitos(bloco)

    soma = 0
    for posicao, d in enumerate(reversed(bloco)):
        prod = int(d) * (2 if posicao % 2 == 0 else 1)
        if prod > 9:
            prod = (prod // 10) + (prod % 10)
        soma += prod

    proxima_dezena = (soma // 10) * 10
    if proxima_dezena < soma:
        proxima_dezena += 10
    return proxima_dezena - soma


def _soma_pesos_2_a_9(bloco: str) -> int:
    soma = 0
    peso = 2
    for d in reversed(bloco):
        soma += int(d) * peso
        peso += 1
        if peso > 9:
            peso = 2
    return soma


def modulo11(bloco: str) -> int:
    """
    Calcula o dígito verificador pelo módulo 11 usado nos blocos da linha
    digitável de arrecadação.

    Pesos de 2 a 9 (repetindo) da direita para a esquerda. Resto 0 ou 1 gera
    DV 0; nos demais casos DV = 11 - resto, sempre entre 1 e 9.
    """
    exigir_digitos(bloco)

    resto = _soma_pesos_2_a_9(bloco) % 11
    if resto < 2:
        return 0
    return 11 - resto


def modulo11_boleto(numero: str) -> int:
    """
    Calcula o dígito verificador geral do boleto de cobrança (posição 5 do
    código de barras). Resultados 0, 1, 10 e 11 viram '1'.
    """
    exigir_digitos(numero)

    dv = 11 - (_soma_pesos_2_a_9(numero) % 11)
    if dv in (0, 1, 10, 11):
        dv = 1
    return dv


def _validar_bloco(bloco, calcular):
    exigir_digitos(bloco, minimo=2)
    informado = int(bloco[-1])
    calculado = calcular(bloco[:-1])
    if informado != calculado:
        logger.debug(
            "DV do bloco %s não confere: esperado %s, encontrado %s",
            bloco, calculado, informado,
        )
        return False
    return True


def validar_modulo10(bloco: str) -> bool:
    """O último caractere do bloco é o DV informado."""
    return _validar_bloco(bloco, modulo10)


def validar_modulo11(bloco: str) -> bool:
    """O último caractere do bloco é o DV informado."""
    return _validar_bloco(bloco, modulo11)


def codigo_moeda(codigo: str) -> str:
    """
    Retorna o código da moeda (3ª posição) do código de barras ou da linha
    digitável de arrecadação. É o identificador que escolhe o módulo do DV.
    """
    numeros = limpar_numero(codigo)
    if len(numeros) < 3:
        raise TamanhoInvalido("código da moeda", 3, len(numeros))
    return numeros[2]


def modulo_para_moeda(moeda: str) -> int:
    if str(moeda) in MOEDAS_MODULO_11:
        return 11
    return 10


def funcoes_modulo(moeda: str):
    """
    Retorna o par (calcular, validar) do módulo correspondente ao código da moeda.
    """
    if modulo_para_moeda(moeda) == 11:
        return modulo11, validar_modulo11
    return modulo10, validar_modulo10
