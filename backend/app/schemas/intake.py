from pydantic import BaseModel, Field, field_validator
from typing import Optional
from app.models.inventory_item import ConditionGrade
from app.schemas.item import ItemBase, _strip_required


class GenerateSkuRequest(BaseModel):
    """Entrada do gerador de SKU: marca e modelo em texto livre"""
    brand: str = Field(..., min_length=1, max_length=120)
    model: str = Field(..., min_length=1, max_length=120)

    @field_validator('brand', 'model')
    @classmethod
    def validar_obrigatorio(cls, v):
        return _strip_required(v)


class IntakeSaveRequest(ItemBase):
    """
    Payload do formulário de intake

    itemNumber ausente: item novo, o backend aloca e trava o número.
    itemNumber presente: atualiza o item existente, sem mudar o número.
    """
    item_number: Optional[str] = Field(None, alias="itemNumber", max_length=60)
    condition_grade: ConditionGrade = Field(ConditionGrade.B, alias="grade")

    @field_validator('item_number')
    @classmethod
    def limpar_item_number(cls, v):
        if v is None:
            return v
        return v.strip() or None

    class Config:
        populate_by_name = True


class IntakeSaveResponse(BaseModel):
    ok: bool = True
    id: int
    itemNumber: str
    slug: Optional[str] = None
    fullSlug: Optional[str] = None
