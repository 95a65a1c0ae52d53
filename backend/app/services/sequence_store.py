"""
Sequence Store - Alocação atômica de números por prefixo

IMPORTANTE: o incremento acontece em UM único comando no banco
(INSERT ... ON CONFLICT DO UPDATE ... RETURNING). Nunca ler o último número
e gravar +1 em passos separados: duas sessões de intake simultâneas
receberiam o mesmo SKU.

Cada alocação roda na sua própria sessão e faz commit na hora, liberando o
lock da linha. Se falhar antes do commit, nenhum número é consumido.
"""
import logging
from typing import Callable, Optional

from sqlalchemy import and_, func, select, text
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import InterfaceError, OperationalError, TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from app.core.exceptions import InvariantViolation, StorageUnavailable
from app.models.sequence_counter import SequenceCounter

logger = logging.getLogger(__name__)

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SequenceStore:
    """
    Contador persistente por prefixo composto

    Usage:
        store = SequenceStore(SessionLocal)
        store.allocate("LV-SPD")  # 1, 2, 3, ...
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def _upsert_statement(self, dialect_name: str, prefix: str):
        insert = _INSERT_BY_DIALECT.get(dialect_name)
        if insert is None:
            raise RuntimeError(f"Dialect {dialect_name} não suporta upsert atômico")

        table = SequenceCounter.__table__
        stmt = insert(table).values(prefix=prefix, last_value=1)

        # O WHERE impede que um contador corrompido seja incrementado:
        # nesse caso o RETURNING volta vazio e a alocação falha sem alterar nada
        valid = table.c.last_value >= 0
        if dialect_name == "sqlite":
            # SQLite aceita texto em coluna INTEGER ('abc' + 1 = 1)
            valid = and_(valid, func.typeof(table.c.last_value) == "integer")

        return stmt.on_conflict_do_update(
            index_elements=[table.c.prefix],
            set_={"last_value": table.c.last_value + 1},
            where=valid,
        ).returning(table.c.last_value)

    def allocate(self, prefix: str) -> int:
        """
        Aloca o próximo número para o prefixo.

        Args:
            prefix: Prefixo composto (ex: "LV-SPD")

        Returns:
            Número alocado (1 na primeira chamada do prefixo)

        Raises:
            StorageUnavailable: banco inacessível (transitório)
            InvariantViolation: contador com valor negativo ou não inteiro
        """
        if not prefix:
            raise ValueError("prefix é obrigatório")

        db = self._session_factory()
        try:
            stmt = self._upsert_statement(db.get_bind().dialect.name, prefix)
            value = db.execute(stmt).scalar_one_or_none()

            if value is None or isinstance(value, bool) or not isinstance(value, int) or value < 1:
                db.rollback()
                # Leitura crua (sem conversão de tipo) só para a mensagem de erro
                current = db.execute(
                    text("SELECT last_value FROM sequence_counters WHERE prefix = :prefix"),
                    {"prefix": prefix}
                ).scalar_one_or_none()
                logger.error("[SKU] Contador corrompido para %s: last_value=%r", prefix, current)
                raise InvariantViolation(prefix, current)

            db.commit()
        except (OperationalError, InterfaceError, PoolTimeoutError) as e:
            db.rollback()
            # TimeoutError do pool não tem .orig
            cause = getattr(e, "orig", None) or e
            logger.warning("[SKU] Banco indisponível ao alocar %s: %s", prefix, cause)
            raise StorageUnavailable(prefix, str(cause)) from e
        finally:
            db.close()

        logger.info("[SKU] Alocado %s -> %d", prefix, value)
        return value

    def current(self, prefix: str) -> Optional[int]:
        """
        Último valor alocado (somente leitura, para diagnóstico).
        NUNCA usar para calcular o próximo número.
        """
        db = self._session_factory()
        try:
            return db.execute(
                select(SequenceCounter.last_value).where(SequenceCounter.prefix == prefix)
            ).scalar_one_or_none()
        except (OperationalError, InterfaceError, PoolTimeoutError) as e:
            raise StorageUnavailable(prefix, str(getattr(e, "orig", None) or e)) from e
        finally:
            db.close()
