"""
Error Helpers - Converte erros de domínio em HTTPException
"""
from fastapi import HTTPException
from app.core.exceptions import SequenceError, StorageUnavailable


def sequence_error_to_http(e: SequenceError) -> HTTPException:
    """
    Converte falha do Sequence Store em resposta HTTP.

    StorageUnavailable -> 503 (transitório, cliente pode tentar de novo)
    InvariantViolation -> 500 (contador corrompido, exige intervenção)

    Usage:
        try:
            generated = generate_sku(store, brand, model)
        except SequenceError as e:
            raise sequence_error_to_http(e)
    """
    if isinstance(e, StorageUnavailable):
        return HTTPException(status_code=503, detail=str(e))
    return HTTPException(status_code=500, detail=str(e))
