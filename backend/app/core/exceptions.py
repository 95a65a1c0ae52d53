"""
Erros de domínio da alocação de SKU

Code Deriver e Formatter nunca levantam erro (funções totais com sentinelas).
Apenas o Sequence Store falha, e a falha sobe até a rota sem ser convertida
em um número inventado.
"""


class SequenceError(Exception):
    """Base para falhas do Sequence Store"""

    def __init__(self, prefix: str, message: str):
        self.prefix = prefix
        super().__init__(message)


class StorageUnavailable(SequenceError):
    """
    Banco indisponível durante a alocação (conexão recusada, caiu, timeout)
    Transitório: o chamador pode tentar novamente com backoff
    """

    def __init__(self, prefix: str, detail: str = None):
        message = f"Sequence storage unavailable for prefix {prefix}"
        if detail:
            message += f": {detail}"
        super().__init__(prefix, message)


class InvariantViolation(SequenceError):
    """
    Contador corrompido (last_value negativo ou não inteiro)
    Fatal para o prefixo: nunca corrigir automaticamente
    """

    def __init__(self, prefix: str, value=None):
        self.value = value
        message = f"Sequence counter for prefix {prefix} is corrupted (last_value={value!r})"
        super().__init__(prefix, message)
