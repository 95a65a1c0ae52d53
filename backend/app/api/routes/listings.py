"""
Rotas de Anúncios - promove item de intake para anúncio
"""
import logging
from datetime import datetime
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.api.deps import get_db
from app.api.utils import get_by_field
from app.models.inventory_item import InventoryItem
from app.models.listing import Listing
from app.schemas.listing import ListingCreateRequest, ListingResponse

logger = logging.getLogger(__name__)

router = APIRouter()


# ============ FUNCOES AUXILIARES ============

def _money(value):
    """Numeric -> float para guardar em coluna JSON"""
    return float(value) if value is not None else None


def build_listing_fields(item: InventoryItem) -> dict:
    """Monta os campos do anúncio a partir do item de intake"""
    seo = item.seo or {}
    title = seo.get("meta_title") or seo.get("title") or f"{item.brand} {item.model}".strip()

    return {
        "sku": item.item_number,
        "inventory_item_id": item.id,
        "title": title,
        "full_slug": item.full_slug,
        "brand": item.brand,
        "model": item.model,
        "style": item.style,
        "color": item.color,
        "material": item.material,
        "condition": item.condition_grade.value if item.condition_grade else None,
        "condition_notes": item.condition_notes,
        "dimensions": item.dimensions or {
            "length": None,
            "height": None,
            "depth": None,
            "strap_drop": None,
        },
        "identity": item.identity,
        "seo": item.seo,
        "search_keywords": item.search_keywords,
        "currency": item.currency or "USD",
        "listing_price": item.list_price,
        "pricing": {
            "retail_price": _money(item.retail_price),
            "comp_low": _money(item.comp_low),
            "comp_high": _money(item.comp_high),
            "list_price": _money(item.list_price),
        },
        "notes": item.notes,
        "images": item.images,
    }


# ============ ROTAS ============

@router.post("/", response_model=ListingResponse)
def criar_ou_atualizar_anuncio(
    payload: ListingCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Criar anúncio para o SKU (ou atualizar o existente)
    Estado inicial: ready / não público
    """
    item = get_by_field(
        db, InventoryItem, "item_number", payload.item_number,
        error_message=f"No inventory item found for item_number={payload.item_number}"
    )

    fields = build_listing_fields(item)
    listing = db.query(Listing).filter(Listing.sku == item.item_number).first()

    if listing:
        for field, value in fields.items():
            setattr(listing, field, value)
        listing.updated_at = datetime.utcnow()
        logger.info("[LISTING] Anúncio %s atualizado", listing.sku)
    else:
        listing = Listing(**fields, status="ready", is_public=False)
        db.add(listing)
        logger.info("[LISTING] Anúncio %s criado", item.item_number)

    db.commit()
    db.refresh(listing)
    return listing


@router.get("/{sku}", response_model=ListingResponse)
def obter_anuncio(
    sku: str,
    db: Session = Depends(get_db)
):
    """Obter anúncio pelo SKU"""
    return get_by_field(db, Listing, "sku", sku, error_message="Listing not found")
