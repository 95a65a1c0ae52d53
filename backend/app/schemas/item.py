from pydantic import BaseModel, Field, field_validator
from typing import Optional, Dict, Any, List
from datetime import datetime
from decimal import Decimal
from app.models.inventory_item import ConditionGrade, ItemStatus


def _strip_required(v: str) -> str:
    v = v.strip() if v is not None else v
    if not v:
        raise ValueError("must not be blank")
    return v


def _normalize_keywords(v):
    """Lista de strings sem vazios (texto separado por vírgula também é aceito)"""
    if v is None:
        return []
    if isinstance(v, str):
        v = v.split(",")
    return [str(k).strip() for k in v if str(k).strip()]


class ItemBase(BaseModel):
    """Schema base para InventoryItem"""
    brand: str = Field(..., min_length=1, max_length=120, description="Marca (texto livre)")
    model: str = Field(..., min_length=1, max_length=120, description="Modelo (texto livre)")
    submodel: Optional[str] = Field(None, max_length=120)
    variant: Optional[str] = Field(None, max_length=120)
    category: Optional[str] = Field(None, max_length=60, description="bag, wallet, accessory, other")
    style: Optional[str] = Field(None, max_length=120)
    color: Optional[str] = Field(None, max_length=80)
    material: Optional[str] = Field(None, max_length=120)
    size: Optional[str] = Field(None, max_length=40)

    condition_grade: ConditionGrade = Field(ConditionGrade.B, description="S, SA, A, AB, B, C, U")
    condition_notes: Optional[str] = None
    status: ItemStatus = Field(ItemStatus.INTAKE)

    acquisition_source: Optional[str] = Field(None, max_length=120)
    acquisition_cost: Optional[Decimal] = Field(None, ge=0)
    list_price: Optional[Decimal] = Field(None, ge=0)
    retail_price: Optional[Decimal] = Field(None, ge=0)
    comp_low: Optional[Decimal] = Field(None, ge=0)
    comp_high: Optional[Decimal] = Field(None, ge=0)
    currency: str = Field("USD", min_length=3, max_length=3)

    identity: Dict[str, Any] = Field(default_factory=dict, description="Identidade estruturada (JSON)")
    seo: Dict[str, Any] = Field(default_factory=dict, description="title, subtitle, bullets, description...")
    search_keywords: List[str] = Field(default_factory=list)
    images: Optional[Dict[str, Any]] = Field(None, description="{main: url, details: [urls]}")
    dimensions: Optional[Dict[str, Any]] = None
    notes: Optional[str] = None

    slug: Optional[str] = Field(None, max_length=255)
    full_slug: Optional[str] = Field(None, max_length=255)

    @field_validator('brand', 'model')
    @classmethod
    def validar_obrigatorio(cls, v):
        return _strip_required(v)

    @field_validator('search_keywords', mode='before')
    @classmethod
    def normalizar_keywords(cls, v):
        return _normalize_keywords(v)

    @field_validator('comp_high')
    @classmethod
    def validar_comp_high(cls, v, info):
        """Faixa de comparáveis: máximo deve ser >= mínimo"""
        low = info.data.get('comp_low')
        if v is not None and low is not None and v < low:
            raise ValueError('comp_high must be greater than or equal to comp_low')
        return v


class ItemCreate(ItemBase):
    """Schema para criação de item (item_number é sempre gerado pelo backend)"""
    pass


class ItemUpdate(BaseModel):
    """Schema para atualização de item (campos opcionais)"""
    brand: Optional[str] = Field(None, min_length=1, max_length=120)
    model: Optional[str] = Field(None, min_length=1, max_length=120)
    submodel: Optional[str] = Field(None, max_length=120)
    variant: Optional[str] = Field(None, max_length=120)
    category: Optional[str] = Field(None, max_length=60)
    style: Optional[str] = Field(None, max_length=120)
    color: Optional[str] = Field(None, max_length=80)
    material: Optional[str] = Field(None, max_length=120)
    size: Optional[str] = Field(None, max_length=40)
    condition_grade: Optional[ConditionGrade] = None
    condition_notes: Optional[str] = None
    status: Optional[ItemStatus] = None
    acquisition_source: Optional[str] = Field(None, max_length=120)
    acquisition_cost: Optional[Decimal] = Field(None, ge=0)
    list_price: Optional[Decimal] = Field(None, ge=0)
    retail_price: Optional[Decimal] = Field(None, ge=0)
    comp_low: Optional[Decimal] = Field(None, ge=0)
    comp_high: Optional[Decimal] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    identity: Optional[Dict[str, Any]] = None
    seo: Optional[Dict[str, Any]] = None
    search_keywords: Optional[List[str]] = None
    images: Optional[Dict[str, Any]] = None
    dimensions: Optional[Dict[str, Any]] = None
    notes: Optional[str] = None
    slug: Optional[str] = Field(None, max_length=255)
    full_slug: Optional[str] = Field(None, max_length=255)

    @field_validator('brand', 'model')
    @classmethod
    def validar_obrigatorio(cls, v):
        # Omitir o campo mantém o valor; null explícito não é permitido
        if v is None:
            raise ValueError("must not be null")
        return _strip_required(v)

    @field_validator('condition_grade', 'status', 'currency')
    @classmethod
    def validar_nao_nulo(cls, v):
        """Colunas NOT NULL: null explícito vira 422, não erro de banco"""
        if v is None:
            raise ValueError("must not be null")
        return v

    @field_validator('search_keywords', mode='before')
    @classmethod
    def normalizar_keywords(cls, v):
        if v is None:
            return v
        return _normalize_keywords(v)


class ItemResponse(ItemBase):
    """Schema para resposta da API"""
    id: int
    item_number: Optional[str] = None
    item_number_locked: bool
    brand_code: Optional[str] = None
    model_code: Optional[str] = None
    sequence: Optional[int] = None
    identity: Optional[Dict[str, Any]] = None
    seo: Optional[Dict[str, Any]] = None
    search_keywords: Optional[List[str]] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ItemListResponse(BaseModel):
    """Schema para listagem paginada"""
    total: int
    page: int
    page_size: int
    items: list[ItemResponse]
