"""Utilitario de linha de comando para o validador de boletos."""

import logging

from .arrecadacao import (
    analisar_linha_digitavel_arrecadacao,
    codigo_barras_para_linha_digitavel_arrecadacao,
)
from .base import (
    ARRECADACAO,
    TAMANHO_CODIGO_BARRAS,
    TAMANHO_LINHA_ARRECADACAO,
    TAMANHO_LINHA_COBRANCA,
    formatar_linha_digitavel,
    identificar_tipo,
    limpar_numero,
)
from .cobranca import (
    analisar_linha_digitavel_cobranca,
    codigo_barras_para_linha_digitavel_cobranca,
)
from .erros import ErroBoleto
from .logging_config import configure_logging
from .segmentos import eh_conta_consumo, segmento_do_codigo_barras

logger = logging.getLogger(__name__)


def _imprimir_conversao(codigo_barras):
    if identificar_tipo(codigo_barras) == ARRECADACAO:
        linha = codigo_barras_para_linha_digitavel_arrecadacao(codigo_barras)
        segmento = segmento_do_codigo_barras(codigo_barras)
        print("Tipo: arrecadacao (concessionarias / tributos)")
        if segmento:
            print(f"Segmento: {segmento.codigo} - {segmento.descricao}")
        else:
            print("Segmento: nao mapeado")
        print("Conta de consumo:", "sim" if eh_conta_consumo(codigo_barras) else "nao")
    else:
        linha = codigo_barras_para_linha_digitavel_cobranca(codigo_barras)
        print("Tipo: cobranca (boleto bancario)")

    print("Linha digitavel:", formatar_linha_digitavel(linha))


def _imprimir_analise(linha, tipo):
    if tipo == ARRECADACAO:
        erros, infos = analisar_linha_digitavel_arrecadacao(linha)
    else:
        erros, infos = analisar_linha_digitavel_cobranca(linha)

    if erros:
        print("Problemas na linha digitavel:")
        for erro in erros:
            print("   -", erro)
    else:
        print("OK. Linha digitavel valida.")

    if infos.get("codigo_barras"):
        print("\n=== Dados extraidos ===")
        print("Codigo de barras:", infos["codigo_barras"])
        if "nome_banco" in infos:
            print(f"Banco: {infos['banco']} - {infos['nome_banco']}")
            print("Vencimento:", infos["vencimento"])
        if "segmento" in infos:
            print("Segmento:", infos["segmento"] or "nao mapeado")
            print(f"Modulo do DV: {infos['modulo']}")
        print(f"Valor: R$ {infos['valor_reais']:.2f}")


def main():
    configure_logging()

    print("=== Validador de codigo de barras / linha digitavel de boletos ===")
    entrada = input("Informe o codigo de barras (44) ou a linha digitavel (47/48): ").strip()
    numeros = limpar_numero(entrada)

    if not numeros:
        print("Erro: nenhum digito informado.")
        return

    try:
        tipo = identificar_tipo(numeros)
        if len(numeros) == TAMANHO_CODIGO_BARRAS:
            _imprimir_conversao(numeros)
        elif tipo == ARRECADACAO and len(numeros) <= TAMANHO_LINHA_ARRECADACAO:
            # linhas de arrecadação curtas são completadas com zeros
            _imprimir_analise(numeros, tipo)
        elif len(numeros) == TAMANHO_LINHA_COBRANCA:
            _imprimir_analise(numeros, tipo)
        else:
            print(
                f"Erro: {len(numeros)} digitos informados; esperado 44 (codigo de barras), "
                "47 (cobranca) ou 48 (arrecadacao)."
            )
    except ErroBoleto as exc:
        logger.warning("Entrada rejeitada: %s", exc)
        print("Erro:", exc)


if __name__ == "__main__":
    main()
