"""Erros levantados pelas rotinas de boleto."""


class ErroBoleto(ValueError):
    """Entrada estruturalmente inválida (não é uma falha de dígito verificador)."""


class TamanhoInvalido(ErroBoleto):
    def __init__(self, descricao, esperado, recebido):
        self.esperado = esperado
        self.recebido = recebido
        super().__init__(
            f"Tamanho inválido para {descricao}: esperado {esperado} dígitos, recebido {recebido}."
        )


class CaractereInvalido(ErroBoleto):
    def __init__(self, bloco, caractere):
        self.bloco = bloco
        self.caractere = caractere
        super().__init__(f"Caractere não numérico {caractere!r} no bloco '{bloco}'.")
