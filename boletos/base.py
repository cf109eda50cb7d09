"""Shared utilities and helpers for boleto validators."""

from .erros import CaractereInvalido, TamanhoInvalido

DIGITOS = "0123456789"

TAMANHO_CODIGO_BARRAS = 44
TAMANHO_LINHA_COBRANCA = 47
TAMANHO_LINHA_ARRECADACAO = 48

ARRECADACAO = "arrecadacao"
COBRANCA = "cobranca"

BANCOS = {
    "001": "Banco do Brasil",
    "070": "Banco de Brasília (BRB)",
    "104": "Caixa Economica Federal",
    "208": "BTG Pactual",
    "237": "Bradesco",
    "341": "Itau Unibanco",
    "033": "Santander",
    "756": "Sicoob",
    "748": "Sicredi",
}


def limpar_numero(s: str) -> str:
    """
    Remove todos os caracteres que não são dígitos.
    """
    return "".join(ch for ch in (s or "") if ch.isdigit())


def exigir_tamanho(numeros: str, esperado: int, descricao: str) -> str:
    """
    Garante que ``numeros`` tem exatamente ``esperado`` caracteres.
    """
    if len(numeros) != esperado:
        raise TamanhoInvalido(descricao, esperado, len(numeros))
    return numeros


def exigir_digitos(bloco: str, minimo: int = 1) -> str:
    """
    Garante que o bloco tem ao menos ``minimo`` caracteres e que todos são
    dígitos ASCII. Levanta TamanhoInvalido ou CaractereInvalido.
    """
    bloco = bloco or ""
    if len(bloco) < minimo:
        raise TamanhoInvalido("bloco", minimo, len(bloco))
    for ch in bloco:
        if ch not in DIGITOS:
            raise CaractereInvalido(bloco, ch)
    return bloco


def limpar_linha(linha: str, tamanho: int, descricao: str) -> str:
    """
    Remove a formatação e exige exatamente ``tamanho`` dígitos ASCII. Dígitos
    de outros alfabetos (ex.: '²') passam pelo isdigit e levantam
    CaractereInvalido aqui.
    """
    numeros = exigir_tamanho(limpar_numero(linha), tamanho, descricao)
    return exigir_digitos(numeros)


def limpar_codigo_barras(codigo_barras: str) -> str:
    return limpar_linha(codigo_barras, TAMANHO_CODIGO_BARRAS, "código de barras")


def identificar_tipo(codigo: str) -> str:
    """
    Código de barras ou linha digitável iniciado por '8' é de arrecadação
    (concessionárias / tributos); o resto é cobrança.
    """
    numeros = limpar_numero(codigo)
    if not numeros:
        raise TamanhoInvalido("código", 1, 0)
    return ARRECADACAO if numeros[0] == "8" else COBRANCA


def formatar_linha_digitavel(linha: str) -> str:
    """
    Formata a linha digitável para exibição:

      47 dígitos: AAAAA.AAAAA BBBBB.BBBBBB CCCCC.CCCCCC D EEEEEEEEEEEEEE
      48 dígitos: XXXXXXXXXXX-X XXXXXXXXXXX-X XXXXXXXXXXX-X XXXXXXXXXXX-X
    """
    d = limpar_numero(linha)

    if len(d) == TAMANHO_LINHA_COBRANCA:
        return (
            f"{d[0:5]}.{d[5:10]} {d[10:15]}.{d[15:21]} "
            f"{d[21:26]}.{d[26:32]} {d[32]} {d[33:47]}"
        )
    if len(d) == TAMANHO_LINHA_ARRECADACAO:
        return " ".join(f"{d[i:i + 11]}-{d[i + 11]}" for i in range(0, 48, 12))

    raise TamanhoInvalido(
        "linha digitável",
        f"{TAMANHO_LINHA_COBRANCA} ou {TAMANHO_LINHA_ARRECADACAO}",
        len(d),
    )
