"""
Modelo para controle dos contadores de SKU
Um registro por prefixo composto {brandCode}-{modelCode}
"""
from sqlalchemy import Column, Integer, String, CheckConstraint
from app.models.base import Base


class SequenceCounter(Base):
    """
    Armazena o último número alocado para cada prefixo.
    Esta tabela NUNCA deve ser limpa: números não podem ser reutilizados.

    Só é alterada através de SequenceStore.allocate (upsert atômico).
    """
    __tablename__ = "sequence_counters"

    id = Column(Integer, primary_key=True, index=True)
    prefix = Column(String(40), nullable=False, unique=True)  # LV-SPD, BR-GEN-GEN, etc
    last_value = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint('last_value >= 0', name='ck_sequence_counters_last_value'),
    )

    def __repr__(self):
        return f"<SequenceCounter {self.prefix}={self.last_value}>"
