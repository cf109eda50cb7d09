import pytest

from app import create_app

LINHA_COBRANCA = "0019000009" + "00000000000" + "00000000018" + "1" + "10000000010000"
CODIGO_COBRANCA = "0019" + "1" + "1000" + "0000010000" + "0" * 24 + "1"
LINHA_ARRECADACAO = "816900000000" + "0" * 36


@pytest.fixture
def client():
    app = create_app({"TESTING": True, "LOG_LEVEL": "DEBUG"})
    with app.test_client() as client:
        yield client


def test_index(client):
    resposta = client.get("/")
    assert resposta.status_code == 200
    assert "Linha digitável" in resposta.get_data(as_text=True)


def test_boleto_get(client):
    assert client.get("/boleto").status_code == 200


def test_boleto_linha_valida(client):
    resposta = client.post("/boleto", data={"linha_digitavel": LINHA_COBRANCA})
    html = resposta.get_data(as_text=True)
    assert resposta.status_code == 200
    assert "Linha digitável válida." in html
    assert "Banco do Brasil" in html
    assert "03/07/2000" in html
    assert "R$ 100.00" in html


def test_boleto_linha_arrecadacao(client):
    resposta = client.post("/boleto", data={"linha_digitavel": LINHA_ARRECADACAO})
    html = resposta.get_data(as_text=True)
    assert "Linha digitável válida." in html
    assert "Prefeituras" in html


def test_boleto_linha_invalida(client):
    linha = LINHA_COBRANCA[:9] + "0" + LINHA_COBRANCA[10:]
    resposta = client.post("/boleto", data={"linha_digitavel": linha})
    html = resposta.get_data(as_text=True)
    assert "Problemas na linha digitável" in html
    assert "Campo 1" in html


def test_codigo_barras(client):
    resposta = client.post("/codigo-barras", data={"codigo_barras": CODIGO_COBRANCA})
    html = resposta.get_data(as_text=True)
    assert resposta.status_code == 200
    assert "00190.00009 00000.000000 00000.000018 1 10000000010000" in html


def test_codigo_barras_consumo(client):
    resposta = client.post("/codigo-barras", data={"codigo_barras": "826" + "0" * 41})
    html = resposta.get_data(as_text=True)
    assert "Saneamento" in html
    assert "sim" in html


def test_codigo_barras_tamanho_invalido(client):
    resposta = client.post("/codigo-barras", data={"codigo_barras": "0019"})
    assert resposta.status_code == 400
    assert "Tamanho inválido" in resposta.get_data(as_text=True)


def test_api_linha_digitavel(client):
    resposta = client.get(f"/api/linha-digitavel/{LINHA_COBRANCA}")
    dados = resposta.get_json()
    assert resposta.status_code == 200
    assert dados["valida"] is True
    assert dados["erros"] == []
    assert dados["infos"]["codigo_barras"] == CODIGO_COBRANCA


def test_api_linha_digitavel_arrecadacao(client):
    dados = client.get(f"/api/linha-digitavel/{LINHA_ARRECADACAO}").get_json()
    assert dados["valida"] is True
    assert dados["infos"]["modulo"] == 10


def test_api_linha_digitavel_tamanho_invalido(client):
    resposta = client.get("/api/linha-digitavel/123")
    assert resposta.status_code == 400
    assert "Tamanho inválido" in resposta.get_json()["erro"]


def test_api_codigo_barras(client):
    dados = client.get("/api/codigo-barras/" + "8" * 44).get_json()
    assert dados["tipo"] == "arrecadacao"
    assert dados["linha_digitavel"] == ("8" * 11 + "5") * 4
    assert dados["segmento"] == "Uso exclusivo do banco"
    assert dados["conta_consumo"] is False


def test_api_codigo_barras_tamanho_invalido(client):
    resposta = client.get("/api/codigo-barras/8888")
    assert resposta.status_code == 400


def test_api_linha_arrecadacao_curta(client):
    resposta = client.get("/api/linha-digitavel/816900000000")
    dados = resposta.get_json()
    assert resposta.status_code == 200
    assert dados["valida"] is True
    assert dados["erros"] == []
    assert dados["infos"]["codigo_barras"] == "8169" + "0" * 40


def test_boleto_linha_arrecadacao_curta(client):
    resposta = client.post("/boleto", data={"linha_digitavel": "81690000000-0"})
    html = resposta.get_data(as_text=True)
    assert "Linha digitável válida." in html
    assert "Prefeituras" in html


def test_api_linha_com_digito_nao_ascii(client):
    linha = LINHA_COBRANCA[:40] + "²" + LINHA_COBRANCA[41:]
    resposta = client.get(f"/api/linha-digitavel/{linha}")
    assert resposta.status_code == 400
    assert "Caractere não numérico" in resposta.get_json()["erro"]
