from sqlalchemy import Column, Integer, String, Text, Numeric, Boolean, JSON, Index, Enum as SQLEnum
from app.models.base import Base, TimestampMixin
import enum


class ConditionGrade(str, enum.Enum):
    S = "S"    # Brand New
    SA = "SA"  # Unused
    A = "A"    # Excellent
    AB = "AB"  # Good
    B = "B"    # Average
    C = "C"    # Damaged
    U = "U"    # Contemporary Brand


class ItemStatus(str, enum.Enum):
    INTAKE = "intake"
    AVAILABLE = "available"
    LISTED = "listed"
    SOLD = "sold"
    ARCHIVED = "archived"


class InventoryItem(Base, TimestampMixin):
    """
    Item fotografado e catalogado na entrada (intake)

    O item_number é alocado no primeiro save e fica travado
    (item_number_locked=True). Edições posteriores de marca/modelo
    NÃO alteram o número; apenas um reset explícito gera outro.
    """
    __tablename__ = "inventory_items"

    id = Column(Integer, primary_key=True, index=True)

    # Identificador (SKU): LV-SPD-EMZ-007
    item_number = Column(String(60), nullable=True, unique=True)
    item_number_locked = Column(Boolean, default=False, nullable=False)
    brand_code = Column(String(10), nullable=True)
    model_code = Column(String(10), nullable=True)
    sequence = Column(Integer, nullable=True)

    # Rotas públicas
    slug = Column(String(255), nullable=True)
    full_slug = Column(String(255), nullable=True, unique=True)

    # Identidade
    brand = Column(String(120), nullable=False)
    model = Column(String(120), nullable=False)
    submodel = Column(String(120), nullable=True)
    variant = Column(String(120), nullable=True)
    category = Column(String(60), nullable=True)
    style = Column(String(120), nullable=True)
    color = Column(String(80), nullable=True)
    material = Column(String(120), nullable=True)
    size = Column(String(40), nullable=True)

    # Condição (a nota é sempre do usuário, nunca da IA)
    condition_grade = Column(SQLEnum(ConditionGrade), default=ConditionGrade.B, nullable=False)
    condition_notes = Column(Text, nullable=True)

    status = Column(SQLEnum(ItemStatus), default=ItemStatus.INTAKE, nullable=False)

    # Negócio
    acquisition_source = Column(String(120), nullable=True)
    acquisition_cost = Column(Numeric(10, 2), nullable=True)
    list_price = Column(Numeric(10, 2), nullable=True)
    retail_price = Column(Numeric(10, 2), nullable=True)
    comp_low = Column(Numeric(10, 2), nullable=True)
    comp_high = Column(Numeric(10, 2), nullable=True)
    currency = Column(String(3), nullable=False, default="USD")

    # Dados estruturados (catalogação assistida / SEO)
    identity = Column(JSON, nullable=True)
    seo = Column(JSON, nullable=True)
    search_keywords = Column(JSON, nullable=True)
    images = Column(JSON, nullable=True)
    dimensions = Column(JSON, nullable=True)
    # Exemplo: {
    #   "length": "10 in",
    #   "height": "6.5 in",
    #   "depth": "3 in",
    #   "strap_drop": "21 in"
    # }

    # Observações internas
    notes = Column(Text, nullable=True)

    def __repr__(self):
        return f"<InventoryItem {self.item_number} - {self.brand} {self.model}>"

    __table_args__ = (
        Index('idx_inventory_items_brand_code', 'brand_code', 'model_code'),
        Index('idx_inventory_items_status', 'status'),
    )
