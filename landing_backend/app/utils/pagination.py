"""
Offset pagination for list endpoints: {items, meta}.
"""
import math

from sqlalchemy.orm import Query

from landing_backend.app.core.config import DEFAULT_LIMIT, DEFAULT_PAGE


def build_page_meta(total_items: int, page: int, limit: int) -> dict:
    total_pages = math.ceil(total_items / limit) if limit else 0
    return {
        "current_page": page,
        "items_per_page": limit,
        "total_items": total_items,
        "total_pages": total_pages,
        "has_next_page": page < total_pages,
        "has_previous_page": page > 1,
    }


def paginate(query: Query, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> dict:
    """Count the filtered query, then fetch one page of it. `query` must already be ordered."""
    page = max(page or DEFAULT_PAGE, 1)
    limit = max(limit or DEFAULT_LIMIT, 1)
    total = query.order_by(None).count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    return {"items": items, "meta": build_page_meta(total, page, limit)}
