from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List
from datetime import datetime
from decimal import Decimal


class ListingCreateRequest(BaseModel):
    """Promove um item de intake para anúncio"""
    item_number: str = Field(..., min_length=1, max_length=60, alias="itemNumber")

    class Config:
        populate_by_name = True


class ListingResponse(BaseModel):
    """Schema para resposta da API"""
    id: int
    sku: str
    inventory_item_id: Optional[int] = None
    title: Optional[str] = None
    full_slug: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    style: Optional[str] = None
    color: Optional[str] = None
    material: Optional[str] = None
    condition: Optional[str] = None
    condition_notes: Optional[str] = None
    dimensions: Optional[Dict[str, Any]] = None
    identity: Optional[Dict[str, Any]] = None
    seo: Optional[Dict[str, Any]] = None
    search_keywords: Optional[List[str]] = None
    currency: str
    listing_price: Optional[Decimal] = None
    pricing: Optional[Dict[str, Any]] = None
    notes: Optional[str] = None
    images: Optional[Dict[str, Any]] = None
    status: str
    is_public: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
