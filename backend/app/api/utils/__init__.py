# API Utilities - DRY Helpers
from app.api.utils.db_helpers import get_by_id, get_by_field, validate_unique
from app.api.utils.errors import sequence_error_to_http
from app.api.utils.pagination import paginate_query, apply_search_filter
from app.api.utils.updates import update_entity

__all__ = [
    # db_helpers
    "get_by_id",
    "get_by_field",
    "validate_unique",
    # errors
    "sequence_error_to_http",
    # pagination
    "paginate_query",
    "apply_search_filter",
    # updates
    "update_entity",
]
