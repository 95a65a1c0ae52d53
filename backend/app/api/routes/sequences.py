"""
Rotas de Sequências - consulta (somente leitura) dos contadores de SKU
"""
from fastapi import APIRouter, Depends, HTTPException
from app.api.deps import get_sequence_store
from app.api.utils import sequence_error_to_http
from app.core.exceptions import SequenceError
from app.services.sequence_store import SequenceStore

router = APIRouter()


@router.get("/{prefix}")
def obter_sequencia(
    prefix: str,
    store: SequenceStore = Depends(get_sequence_store)
):
    """Último número alocado para o prefixo (ex: LV-SPD)"""
    try:
        last_value = store.current(prefix)
    except SequenceError as e:
        raise sequence_error_to_http(e)

    if last_value is None:
        raise HTTPException(status_code=404, detail=f"No sequence for prefix {prefix}")
    return {"prefix": prefix, "lastValue": last_value}
