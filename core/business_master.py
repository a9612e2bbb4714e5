"""
Business Master Data

Small categorised lookup lists (agent types, policy types, user types,
regions, departments, statuses, priorities) that the other screens use for
their dropdowns.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import text

from core.db import get_conn, like_pattern

logger = logging.getLogger(__name__)

BUSINESS_CATEGORIES = {
    "agent-types": "Agent Types",
    "policy-types": "Policy Types",
    "user-types": "User Types",
    "regions": "Regions",
    "departments": "Departments",
    "statuses": "Statuses",
    "priorities": "Priorities",
}

DEFAULT_CATEGORY = "agent-types"

_UPDATABLE_FIELDS = ("name", "code", "description", "is_active")


def _row_to_dict(row) -> dict:
    data = dict(row._mapping)
    data["is_active"] = bool(data["is_active"])
    return data


def list_business_entities(category: str = DEFAULT_CATEGORY, search: str = None) -> dict:
    """
    List a category, optionally filtered by name, code or description.

    Unknown categories return an empty list rather than an error.
    """
    params = {"category": category or DEFAULT_CATEGORY}
    search_clause = ""
    if search:
        search_clause = """
            AND (LOWER(name) LIKE :search ESCAPE '\\'
                 OR LOWER(code) LIKE :search ESCAPE '\\'
                 OR LOWER(COALESCE(description, '')) LIKE :search ESCAPE '\\')
        """
        params["search"] = like_pattern(search)

    with get_conn() as conn:
        result = conn.execute(text(f"""
            SELECT id, category, name, code, description, is_active, created_at, updated_at
            FROM business_entities
            WHERE category = :category
            {search_clause}
            ORDER BY created_at, name
        """), params)
        data = [_row_to_dict(row) for row in result.fetchall()]

    return {"data": data, "total": len(data)}


def get_business_entity(entity_id: str) -> Optional[dict]:
    with get_conn() as conn:
        row = conn.execute(text("""
            SELECT id, category, name, code, description, is_active, created_at, updated_at
            FROM business_entities
            WHERE id = :id
        """), {"id": entity_id}).fetchone()
        return _row_to_dict(row) if row else None


def create_business_entity(
    category: str,
    name: str,
    code: str,
    description: str = None,
    is_active: bool = True,
) -> dict:
    """Create an entry in a business category. Returns the stored row."""
    if not category or not name or not code:
        raise ValueError("Missing required fields")

    now = datetime.now(timezone.utc).isoformat()
    entity_id = str(uuid.uuid4())
    with get_conn() as conn:
        conn.execute(text("""
            INSERT INTO business_entities (
                id, category, name, code, description, is_active, created_at, updated_at
            ) VALUES (:id, :category, :name, :code, :description, :is_active, :now, :now)
        """), {
            "id": entity_id,
            "category": category,
            "name": name,
            "code": code,
            "description": description,
            "is_active": is_active is not False,
            "now": now,
        })

    logger.info("Created %s entry %s (%s)", category, code, entity_id)
    return get_business_entity(entity_id)


def update_business_entity(entity_id: str, category: str, **fields) -> Optional[dict]:
    """
    Update name / code / description / is_active of an entry.

    Returns None if no entry with that id exists in the category.
    """
    if not entity_id or not category:
        raise ValueError("ID and type are required")

    updates = {k: v for k, v in fields.items() if k in _UPDATABLE_FIELDS and v is not None}
    if any(k in ("name", "code") and not str(v).strip() for k, v in updates.items()):
        raise ValueError("Missing required fields")
    updates["updated_at"] = datetime.now(timezone.utc).isoformat()
    set_clause = ", ".join(f"{k} = :{k}" for k in updates)

    with get_conn() as conn:
        result = conn.execute(text(f"""
            UPDATE business_entities SET {set_clause}
            WHERE id = :id AND category = :category
        """), {**updates, "id": entity_id, "category": category})
        if result.rowcount == 0:
            return None

    logger.info("Updated %s entry %s", category, entity_id)
    return get_business_entity(entity_id)


def delete_business_entity(entity_id: str, category: str) -> bool:
    if not entity_id or not category:
        raise ValueError("ID and type are required")

    with get_conn() as conn:
        result = conn.execute(text("""
            DELETE FROM business_entities WHERE id = :id AND category = :category
        """), {"id": entity_id, "category": category})
        deleted = result.rowcount > 0

    if deleted:
        logger.info("Deleted %s entry %s", category, entity_id)
    return deleted
