"""
Rotas de Itens de Inventário
"""
import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from app.api.deps import get_db, get_sequence_store
from app.api.utils import (
    get_by_id, get_by_field, validate_unique,
    paginate_query, apply_search_filter, update_entity, sequence_error_to_http
)
from app.core.exceptions import SequenceError
from app.models.inventory_item import InventoryItem, ItemStatus
from app.schemas.item import ItemCreate, ItemUpdate, ItemResponse, ItemListResponse
from app.services.sequence_store import SequenceStore
from app.services.sku_service import assign_item_number

logger = logging.getLogger(__name__)

router = APIRouter()

# Campos do SKU só mudam via assign_item_number
LOCKED_FIELDS = ["item_number", "item_number_locked", "brand_code", "model_code", "sequence"]


@router.post("/", response_model=ItemResponse, status_code=201)
def criar_item(
    item: ItemCreate,
    db: Session = Depends(get_db),
    store: SequenceStore = Depends(get_sequence_store)
):
    """Criar item e alocar item_number (travado)"""
    if item.full_slug:
        validate_unique(db, InventoryItem, "full_slug", item.full_slug, display_name="full_slug")

    db_item = InventoryItem(**item.model_dump())
    try:
        assign_item_number(store, db_item)
    except SequenceError as e:
        raise sequence_error_to_http(e)

    db.add(db_item)
    db.commit()
    db.refresh(db_item)
    return db_item


@router.get("/", response_model=ItemListResponse)
def listar_itens(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    busca: Optional[str] = Query(None, description="Buscar por item number, marca ou modelo"),
    status: Optional[ItemStatus] = Query(None),
    brand_code: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """Listar itens com paginação e filtros"""
    query = db.query(InventoryItem)

    if busca:
        query = apply_search_filter(query, busca, InventoryItem.item_number, InventoryItem.brand, InventoryItem.model)
    if status is not None:
        query = query.filter(InventoryItem.status == status)
    if brand_code:
        query = query.filter(InventoryItem.brand_code == brand_code.upper())

    items, total = paginate_query(query, page, page_size, (InventoryItem.created_at.desc(), InventoryItem.id.desc()))
    return {"items": items, "total": total, "page": page, "page_size": page_size}


@router.get("/by-slug/{full_slug}", response_model=ItemResponse)
def obter_item_por_slug(
    full_slug: str,
    db: Session = Depends(get_db)
):
    """Buscar item pelo slug público"""
    return get_by_field(db, InventoryItem, "full_slug", full_slug, error_message=f"Item not found: {full_slug}")


@router.get("/{item_id}", response_model=ItemResponse)
def obter_item(
    item_id: int,
    db: Session = Depends(get_db)
):
    """Obter detalhes de um item"""
    return get_by_id(db, InventoryItem, item_id, error_message="Item not found")


@router.put("/{item_id}", response_model=ItemResponse)
def atualizar_item(
    item_id: int,
    item_update: ItemUpdate,
    db: Session = Depends(get_db)
):
    """
    Atualizar item existente

    Marca/modelo podem mudar livremente: o item_number travado permanece.
    """
    item = get_by_id(db, InventoryItem, item_id, error_message="Item not found")

    if item_update.full_slug and item_update.full_slug != item.full_slug:
        validate_unique(db, InventoryItem, "full_slug", item_update.full_slug, exclude_id=item_id, display_name="full_slug")

    return update_entity(db, item, item_update, exclude_fields=LOCKED_FIELDS)


@router.post("/{item_id}/reset-item-number", response_model=ItemResponse)
def resetar_item_number(
    item_id: int,
    db: Session = Depends(get_db),
    store: SequenceStore = Depends(get_sequence_store)
):
    """
    Reset explícito: gera novo item_number a partir da marca/modelo atuais
    O número anterior não é reaproveitado (o contador nunca volta)
    """
    item = get_by_id(db, InventoryItem, item_id, error_message="Item not found")

    try:
        assign_item_number(store, item, reset=True)
    except SequenceError as e:
        raise sequence_error_to_http(e)

    db.commit()
    db.refresh(item)
    return item


@router.delete("/{item_id}", status_code=204)
def deletar_item(
    item_id: int,
    db: Session = Depends(get_db)
):
    """Deletar item (o contador do prefixo não é alterado)"""
    item = get_by_id(db, InventoryItem, item_id, error_message="Item not found")
    db.delete(item)
    db.commit()
    return None
