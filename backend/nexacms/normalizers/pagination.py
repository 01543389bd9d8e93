from typing import Callable, Any, Dict


def normalize_pagination(
    pagination: Any,
    normalize_fn: Callable[[Any], Dict[str, Any]],
) -> Dict[str, Any]:
    """
    Normalize a Flask-SQLAlchemy `Pagination` into the list envelope:

        {"items": [...], "pagination": {"page", "per_page", "total", "total_pages"}}
    """
    per_page = pagination.per_page
    total = pagination.total or 0

    return {
        "items": [normalize_fn(item) for item in pagination.items],
        "pagination": {
            "page": pagination.page,
            "per_page": per_page,
            "total": total,
            "total_pages": (total + per_page - 1) // per_page if per_page else 0,
        },
    }
