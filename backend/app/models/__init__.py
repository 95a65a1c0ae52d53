"""
Models do sistema de intake

IMPORTANTE: sequence_counters é a única fonte de verdade para números de SKU
"""

from app.models.base import Base, TimestampMixin
from app.models.sequence_counter import SequenceCounter
from app.models.inventory_item import InventoryItem, ConditionGrade, ItemStatus
from app.models.listing import Listing

__all__ = [
    "Base",
    "TimestampMixin",
    "SequenceCounter",
    "InventoryItem",
    "ConditionGrade",
    "ItemStatus",
    "Listing",
]
