from sqlalchemy import Column, Integer, String, Text, Numeric, Boolean, ForeignKey, JSON
from sqlalchemy.orm import relationship
from app.models.base import Base, TimestampMixin


class Listing(Base, TimestampMixin):
    """
    Anúncio gerado a partir de um item de intake

    Um anúncio por SKU: promover o mesmo item de novo atualiza o
    anúncio existente em vez de duplicar.
    """
    __tablename__ = "listings"

    id = Column(Integer, primary_key=True, index=True)
    sku = Column(String(60), nullable=False, unique=True)
    inventory_item_id = Column(Integer, ForeignKey('inventory_items.id', ondelete="SET NULL"), nullable=True)

    # Identidade e rota
    title = Column(String(255), nullable=True)
    full_slug = Column(String(255), nullable=True)
    brand = Column(String(120), nullable=True)
    model = Column(String(120), nullable=True)
    style = Column(String(120), nullable=True)
    color = Column(String(80), nullable=True)
    material = Column(String(120), nullable=True)

    # Condição
    condition = Column(String(4), nullable=True)
    condition_notes = Column(Text, nullable=True)

    dimensions = Column(JSON, nullable=True)
    identity = Column(JSON, nullable=True)
    seo = Column(JSON, nullable=True)
    search_keywords = Column(JSON, nullable=True)

    # Preço
    currency = Column(String(3), nullable=False, default="USD")
    listing_price = Column(Numeric(10, 2), nullable=True)
    pricing = Column(JSON, nullable=True)

    notes = Column(Text, nullable=True)
    images = Column(JSON, nullable=True)

    # Estado do anúncio
    status = Column(String(20), nullable=False, default="ready")
    is_public = Column(Boolean, nullable=False, default=False)

    inventory_item = relationship("InventoryItem")

    def __repr__(self):
        return f"<Listing {self.sku}>"
