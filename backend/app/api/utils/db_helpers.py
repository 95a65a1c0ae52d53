"""
Database Helpers - Funções utilitárias para operações de banco de dados
Elimina duplicação de código em todas as rotas
"""
from typing import Type, TypeVar, Optional, Any
from sqlalchemy.orm import Session
from fastapi import HTTPException

T = TypeVar('T')


def get_by_id(
    db: Session,
    model: Type[T],
    entity_id: int,
    raise_not_found: bool = True,
    error_message: str = None
) -> Optional[T]:
    """
    Busca entidade por ID com validação automática.

    Args:
        db: Sessão do banco de dados
        model: Classe do modelo SQLAlchemy
        entity_id: ID da entidade
        raise_not_found: Se True, levanta HTTPException 404 quando não encontrado
        error_message: Mensagem customizada de erro (opcional)

    Returns:
        Entidade encontrada ou None

    Raises:
        HTTPException 404 se raise_not_found=True e entidade não existir

    Usage:
        item = get_by_id(db, InventoryItem, item_id, error_message="Item not found")
    """
    entity = db.query(model).filter(model.id == entity_id).first()

    if not entity and raise_not_found:
        msg = error_message or f"{model.__name__} not found"
        raise HTTPException(status_code=404, detail=msg)

    return entity


def get_by_field(
    db: Session,
    model: Type[T],
    field_name: str,
    field_value: Any,
    raise_not_found: bool = True,
    error_message: str = None
) -> Optional[T]:
    """
    Busca entidade por um campo único (item_number, full_slug, sku...).

    Usage:
        item = get_by_field(db, InventoryItem, "full_slug", full_slug)
    """
    field = getattr(model, field_name)
    entity = db.query(model).filter(field == field_value).first()

    if not entity and raise_not_found:
        msg = error_message or f"{model.__name__} not found"
        raise HTTPException(status_code=404, detail=msg)

    return entity


def validate_unique(
    db: Session,
    model: Type[T],
    field_name: str,
    field_value: Any,
    exclude_id: int = None,
    display_name: str = None
) -> None:
    """
    Valida unicidade de campo.

    Args:
        db: Sessão do banco de dados
        model: Classe do modelo
        field_name: Nome do campo a validar
        field_value: Valor do campo
        exclude_id: ID a excluir da validação (para updates)
        display_name: Nome do campo para exibição na mensagem

    Raises:
        HTTPException 400 se valor já existir

    Usage:
        validate_unique(db, InventoryItem, "full_slug", full_slug, exclude_id=item.id)
    """
    field = getattr(model, field_name)
    query = db.query(model).filter(field == field_value)

    if exclude_id:
        query = query.filter(model.id != exclude_id)

    if query.first():
        name = display_name or field_name
        raise HTTPException(status_code=400, detail=f"{name} already exists")
