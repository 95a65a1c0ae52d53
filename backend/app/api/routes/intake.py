"""
Rotas de Intake - geração de SKU e save do formulário
"""
import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.api.deps import get_db, get_sequence_store
from app.api.utils import validate_unique, sequence_error_to_http
from app.core.exceptions import SequenceError
from app.models.inventory_item import InventoryItem
from app.schemas.intake import GenerateSkuRequest, IntakeSaveRequest, IntakeSaveResponse
from app.services.sequence_store import SequenceStore
from app.services.sku_service import generate_sku, assign_item_number, claim_item_number

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate-sku")
def gerar_sku(
    payload: GenerateSkuRequest,
    store: SequenceStore = Depends(get_sequence_store)
):
    """Gerar próximo SKU para marca/modelo"""
    try:
        generated = generate_sku(store, payload.brand, payload.model)
    except SequenceError as e:
        raise sequence_error_to_http(e)
    return generated.as_response()


@router.post("/save", response_model=IntakeSaveResponse)
def salvar_intake(
    payload: IntakeSaveRequest,
    db: Session = Depends(get_db),
    store: SequenceStore = Depends(get_sequence_store)
):
    """
    Salvar item do formulário de intake (upsert por itemNumber)

    itemNumber do generate-sku ainda sem item: cria o item com esse número.
    Re-salvar o mesmo SKU atualiza o item; o número travado nunca muda.
    """
    data = payload.model_dump(exclude={"item_number"})
    claim_number = None

    item = None
    if payload.item_number:
        item = db.query(InventoryItem).filter(
            InventoryItem.item_number == payload.item_number
        ).first()
        if not item:
            # Primeiro save de um número vindo do generate-sku
            claim_number = payload.item_number
    if item is None:
        item = InventoryItem()

    if payload.full_slug:
        validate_unique(db, InventoryItem, "full_slug", payload.full_slug, exclude_id=item.id, display_name="full_slug")

    for field, value in data.items():
        # slug vazio não apaga o slug gerado
        if field in ("slug", "full_slug") and not value:
            continue
        setattr(item, field, value)

    try:
        if claim_number:
            if not claim_item_number(store, item, claim_number):
                # Número não emitido por este backend: não aceitar
                raise HTTPException(
                    status_code=400,
                    detail=f"Unknown item number {claim_number}; generate a SKU first"
                )
        elif not item.item_number_locked:
            assign_item_number(store, item)
    except SequenceError as e:
        db.rollback()
        raise sequence_error_to_http(e)

    if item.id is None:
        db.add(item)
    db.commit()
    db.refresh(item)

    logger.info("[INTAKE] Item %s salvo (%s)", item.id, item.item_number)
    return {
        "ok": True,
        "id": item.id,
        "itemNumber": item.item_number,
        "slug": item.slug,
        "fullSlug": item.full_slug,
    }
