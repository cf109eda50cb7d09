import logging
import os

from flask import Flask, jsonify, render_template, request

from validador_boleto import (
    ARRECADACAO,
    ErroBoleto,
    analisar_linha_digitavel_arrecadacao,
    analisar_linha_digitavel_cobranca,
    codigo_barras_para_linha_digitavel_arrecadacao,
    codigo_barras_para_linha_digitavel_cobranca,
    formatar_linha_digitavel,
    identificar_tipo,
    limpar_numero,
    segmento_do_codigo_barras,
    validar_linha_digitavel_arrecadacao,
    validar_linha_digitavel_cobranca,
)
from boletos.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _eh_arrecadacao(numeros):
    return bool(numeros) and identificar_tipo(numeros) == ARRECADACAO


def analisar_linha_digitavel(linha):
    """
    Escolhe a análise pelo primeiro dígito: '8' é arrecadação (que aceita linhas
    curtas, completadas com zeros), o resto é cobrança.
    """
    if _eh_arrecadacao(limpar_numero(linha)):
        return analisar_linha_digitavel_arrecadacao(linha)
    return analisar_linha_digitavel_cobranca(linha)


def converter_codigo_barras(codigo_barras):
    """
    Converte o código de barras na linha digitável da família correspondente.
    Retorna um dicionário com o tipo, a linha e a linha formatada.
    """
    tipo = identificar_tipo(codigo_barras)
    if tipo == ARRECADACAO:
        linha = codigo_barras_para_linha_digitavel_arrecadacao(codigo_barras)
        segmento = segmento_do_codigo_barras(codigo_barras)
    else:
        linha = codigo_barras_para_linha_digitavel_cobranca(codigo_barras)
        segmento = None

    return {
        "tipo": tipo,
        "linha_digitavel": linha,
        "linha_formatada": formatar_linha_digitavel(linha),
        "segmento": segmento.descricao if segmento else None,
        "conta_consumo": bool(segmento and segmento.conta_consumo),
    }


def create_app(test_config=None):
    """
    Cria a aplicação Flask.

    Args:
        test_config: dicionário opcional com configurações para testes
    """
    app = Flask(__name__)

    app.config.update(
        SECRET_KEY=os.environ.get("SECRET_KEY", "dev"),
        DEBUG=os.environ.get("FLASK_ENV", "development") == "development",
        LOG_LEVEL=os.environ.get("LOG_LEVEL", "INFO"),
    )
    if test_config:
        app.config.update(test_config)

    configure_logging(app.config["LOG_LEVEL"])

    @app.route("/")
    def index():
        """
        Página inicial: formulários de linha digitável e de código de barras.
        """
        return render_template("index.html")

    @app.route("/boleto", methods=["GET", "POST"])
    def boleto():
        """
        Página para validação da linha digitável de boleto.
        """
        erros = []
        infos = {}
        linha_digitavel = ""

        if request.method == "POST":
            linha_digitavel = (request.form.get("linha_digitavel") or "").strip()
            erros, infos = analisar_linha_digitavel(linha_digitavel)

        return render_template(
            "boleto.html",
            erros=erros,
            infos=infos,
            linha_digitavel=linha_digitavel,
        )

    @app.route("/codigo-barras", methods=["POST"])
    def codigo_barras():
        """
        Converte o código de barras informado em linha digitável.
        """
        codigo = (request.form.get("codigo_barras") or "").strip()
        try:
            resultado = converter_codigo_barras(codigo)
        except ErroBoleto as exc:
            logger.warning("Código de barras rejeitado: %s", exc)
            return render_template("codigo_barras.html", codigo_barras=codigo, erro=str(exc)), 400

        return render_template(
            "codigo_barras.html", codigo_barras=codigo, resultado=resultado, erro=None
        )

    @app.route("/api/linha-digitavel/<linha>")
    def api_linha_digitavel(linha):
        numeros = limpar_numero(linha)
        try:
            if _eh_arrecadacao(numeros):
                valida = validar_linha_digitavel_arrecadacao(numeros)
            else:
                valida = validar_linha_digitavel_cobranca(numeros)
        except ErroBoleto as exc:
            logger.warning("Linha digitável rejeitada: %s", exc)
            return jsonify({"erro": str(exc)}), 400

        erros, infos = analisar_linha_digitavel(numeros)
        return jsonify({"valida": valida, "erros": erros, "infos": infos})

    @app.route("/api/codigo-barras/<codigo>")
    def api_codigo_barras(codigo):
        try:
            return jsonify(converter_codigo_barras(codigo))
        except ErroBoleto as exc:
            logger.warning("Código de barras rejeitado: %s", exc)
            return jsonify({"erro": str(exc)}), 400

    return app


app = create_app()


if __name__ == "__main__":
    # debug=True é útil durante o desenvolvimento
    app.run(debug=app.config["DEBUG"])
