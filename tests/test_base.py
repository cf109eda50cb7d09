import pytest

from boletos.base import (
    ARRECADACAO,
    COBRANCA,
    exigir_digitos,
    formatar_linha_digitavel,
    identificar_tipo,
    limpar_codigo_barras,
    limpar_linha,
    limpar_numero,
)
from boletos.erros import CaractereInvalido, ErroBoleto, TamanhoInvalido


@pytest.mark.parametrize(
    "valor, esperado",
    [
        ("00190.00009 01234", "001900000901234"),
        ("836-2", "8362"),
        ("", ""),
        (None, ""),
    ],
)
def test_limpar_numero(valor, esperado):
    assert limpar_numero(valor) == esperado


def test_exigir_digitos():
    assert exigir_digitos("0123") == "0123"
    with pytest.raises(TamanhoInvalido):
        exigir_digitos("1", minimo=2)
    with pytest.raises(CaractereInvalido) as exc:
        exigir_digitos("12-3")
    assert exc.value.caractere == "-"


def test_hierarquia_de_erros():
    assert issubclass(TamanhoInvalido, ErroBoleto)
    assert issubclass(CaractereInvalido, ErroBoleto)
    assert issubclass(ErroBoleto, ValueError)


def test_mensagem_tamanho_invalido():
    erro = TamanhoInvalido("código de barras", 44, 10)
    assert str(erro) == "Tamanho inválido para código de barras: esperado 44 dígitos, recebido 10."
    assert erro.esperado == 44
    assert erro.recebido == 10


@pytest.mark.parametrize(
    "codigo, esperado",
    [
        ("8" * 44, ARRECADACAO),
        ("836-2", ARRECADACAO),
        ("0019" + "0" * 40, COBRANCA),
        ("23793.38128", COBRANCA),
    ],
)
def test_identificar_tipo(codigo, esperado):
    assert identificar_tipo(codigo) == esperado


def test_identificar_tipo_vazio():
    with pytest.raises(TamanhoInvalido):
        identificar_tipo(" - ")


def test_formatar_linha_cobranca():
    linha = "0019000009" + "00000000000" + "00000000018" + "1" + "10000000010000"
    assert formatar_linha_digitavel(linha) == (
        "00190.00009 00000.000000 00000.000018 1 10000000010000"
    )


def test_formatar_linha_arrecadacao():
    linha = ("8" * 11 + "5") * 4
    assert formatar_linha_digitavel(linha) == " ".join(["88888888888-5"] * 4)


def test_formatar_linha_tamanho_invalido():
    with pytest.raises(TamanhoInvalido):
        formatar_linha_digitavel("123")


def test_limpar_linha():
    assert limpar_linha("816-9", 4, "linha") == "8169"
    with pytest.raises(TamanhoInvalido):
        limpar_linha("816", 4, "linha")
    with pytest.raises(CaractereInvalido) as exc:
        limpar_linha("81²9", 4, "linha")
    assert exc.value.caractere == "²"


def test_limpar_codigo_barras_rejeita_digito_nao_ascii():
    with pytest.raises(CaractereInvalido):
        limpar_codigo_barras("0019" + "１" + "0" * 39)
