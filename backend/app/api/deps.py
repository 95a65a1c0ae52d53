from app.database import SessionLocal
from app.services.sequence_store import SequenceStore


def get_db():
    """
    Dependency para obter sessão do banco de dados
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_sequence_store() -> SequenceStore:
    """
    Dependency do alocador de SKU
    Usa sessões próprias (commit imediato), separadas da sessão da request
    """
    return SequenceStore(SessionLocal)
