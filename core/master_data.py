"""
Master Data Module

CRUD for the reference tables edited from the console: IRDAI motor zones,
NCB slabs, vehicle depreciation slabs, states and pincodes.

Every table is described once in MASTER_TABLES (columns, searchable columns,
allowed filters, validator). The list/get/create/update/delete functions are
shared and take the table key as their first argument.
"""

from __future__ import annotations

import logging
import math
import uuid
from datetime import date, datetime, timezone
from typing import Callable, Optional

from sqlalchemy import text

from core.db import get_conn, like_pattern
from core import reference_data

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

STATUS_OPTIONS = ("ALL", "ACTIVE", "INACTIVE")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# ─────────────────────────────────────────────────────────────
# Field helpers
# ─────────────────────────────────────────────────────────────

def _clean(value):
    """Strip strings and turn blanks into None."""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _require(record: dict, field: str, message: str):
    value = _clean(record.get(field))
    if value is None:
        raise ValueError(message)
    return value


def _non_negative(record: dict, field: str, label: str) -> float:
    value = record.get(field)
    if value is None or value == "":
        raise ValueError(f"{label} is required")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{label} must be a number")
    if not math.isfinite(number):
        raise ValueError(f"{label} must be a number")
    if number < 0:
        raise ValueError(f"{label} must be non-negative")
    return number


def _parse_date(value: Optional[str], label: str) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        raise ValueError(f"{label} must be a date (YYYY-MM-DD)")


def check_date_range(start: Optional[str], end: Optional[str], start_label: str, end_label: str):
    """Raise if `end` is set and falls before `start`."""
    start_date = _parse_date(start, start_label)
    end_date = _parse_date(end, end_label)
    if start_date and end_date and end_date < start_date:
        raise ValueError(f"{end_label} cannot be before {start_label.lower()}")


# ─────────────────────────────────────────────────────────────
# Validators
#
# Each takes the full record (existing row merged with the incoming
# changes) and returns the normalised column values to write.
# ─────────────────────────────────────────────────────────────

def _validate_zone(record: dict) -> dict:
    segment_id = _require(record, "motor_segment_id", "Motor segment is required")
    segment = reference_data.get_motor_segment(segment_id)
    if segment is None:
        raise ValueError(f"Unknown motor segment: {segment_id}")

    active_from = _require(record, "active_from_date", "Active from date is required")
    active_to = _clean(record.get("active_to_date"))
    check_date_range(active_from, active_to, "Active from date", "Active to date")

    return {
        "motor_segment_id": segment["id"],
        "motor_segment_name": segment["name"],
        "zone_name": _require(record, "zone_name", "Zone name is required"),
        "zone_description": _require(record, "zone_description", "Description is required"),
        "active_from_date": active_from,
        "active_to_date": active_to,
    }


def _slab_validator(id_col: str, from_col: str, to_col: str, rate_col: str, desc_col: str,
                    label: str) -> Callable[[dict], dict]:
    def validate(record: dict) -> dict:
        slab_id = _require(record, id_col, f"{label} Slab ID is required")
        slab_from = _non_negative(record, from_col, f"{label} Slab From")
        slab_to = _non_negative(record, to_col, f"{label} Slab To")
        rate = _non_negative(record, rate_col, f"{label} Slab Rate")
        if slab_from > slab_to:
            raise ValueError(f"{label} Slab From cannot be greater than {label} Slab To")
        if rate > 100:
            raise ValueError(f"{label} Slab Rate cannot exceed 100")

        active_from = _require(record, "active_from_date", "Active From Date is required")
        active_to = _clean(record.get("active_to_date"))
        check_date_range(active_from, active_to, "Active From Date", "Active To Date")

        return {
            id_col: slab_id,
            from_col: int(slab_from),
            to_col: int(slab_to),
            rate_col: rate,
            desc_col: _clean(record.get(desc_col)),
            "active_from_date": active_from,
            "active_to_date": active_to,
        }
    return validate


def _validate_state(record: dict) -> dict:
    name = _require(record, "name", "State name is required")
    code = _require(record, "code", "State code is required")
    if not 2 <= len(code) <= 3:
        raise ValueError("State code must be 2-3 characters")

    country_id = _require(record, "country_id", "Country is required")
    country = reference_data.get_country(country_id)
    if country is None:
        raise ValueError(f"Unknown country: {country_id}")

    return {
        "name": name,
        "code": code.upper(),
        "country_id": country["id"],
        "country_name": country["name"],
    }


def _validate_pincode(record: dict) -> dict:
    pincode = _require(record, "pincode", "Pincode is required")
    city_id = _require(record, "city_id", "City is required")
    city = reference_data.get_city(city_id)
    if city is None:
        raise ValueError(f"Unknown city: {city_id}")

    return {
        "pincode": pincode,
        "city_id": city["id"],
        "city_name": city["name"],
        "state_id": city["state_id"],
        "state_name": city["state_name"],
        "country_id": city["country_id"],
        "country_name": city["country_name"],
        "area": _clean(record.get("area")),
    }


# ─────────────────────────────────────────────────────────────
# Table registry
# ─────────────────────────────────────────────────────────────

# "proc" tables carry created_by/created_date/created_proc_name/updated_by/updated_date,
# "timestamps" tables carry created_at/updated_at.
MASTER_TABLES = {
    "zones": {
        "label": "Zone",
        "columns": ["motor_segment_id", "motor_segment_name", "zone_name", "zone_description",
                    "active_from_date", "active_to_date"],
        "search": ["zone_name", "zone_description", "motor_segment_name"],
        "filters": ["motor_segment_id"],
        "order_by": "motor_segment_id, zone_name",
        "audit": "proc",
        "proc_name": "SP_CREATE_ZONE_MASTER",
        "validate": _validate_zone,
    },
    "ncb_slabs": {
        "label": "NCB",
        "columns": ["ncb_slab_id", "ncb_slab_from", "ncb_slab_to", "ncb_slab_rate",
                    "ncb_slab_description", "active_from_date", "active_to_date"],
        "search": ["ncb_slab_id", "ncb_slab_description", "ncb_slab_rate"],
        "filters": [],
        "order_by": "ncb_slab_from, ncb_slab_id",
        "audit": "proc",
        "proc_name": "PROC_NCB_INSERT",
        "validate": _slab_validator("ncb_slab_id", "ncb_slab_from", "ncb_slab_to", "ncb_slab_rate",
                                    "ncb_slab_description", "NCB"),
    },
    "depreciation_slabs": {
        "label": "Depreciation Slab",
        "columns": ["depreciation_slab_id", "depreciation_from", "depreciation_to", "depreciation_rate",
                    "depreciation_slab_description", "active_from_date", "active_to_date"],
        "search": ["depreciation_slab_id", "depreciation_slab_description", "depreciation_rate"],
        "filters": [],
        "order_by": "depreciation_from, depreciation_slab_id",
        "audit": "proc",
        "proc_name": "PROC_DEPRECIATION_SLAB_INSERT",
        "validate": _slab_validator("depreciation_slab_id", "depreciation_from", "depreciation_to",
                                    "depreciation_rate", "depreciation_slab_description", "Depreciation"),
    },
    "states": {
        "label": "State",
        "columns": ["name", "code", "country_id", "country_name"],
        "search": ["name", "code", "country_name"],
        "filters": ["country_id"],
        "order_by": "country_id, name",
        "audit": "timestamps",
        "validate": _validate_state,
    },
    "pincodes": {
        "label": "Pincode",
        "columns": ["pincode", "city_id", "city_name", "state_id", "state_name",
                    "country_id", "country_name", "area"],
        "search": ["pincode", "city_name", "state_name", "country_name", "area"],
        "filters": ["city_id", "state_id", "country_id"],
        "order_by": "country_id, city_name, pincode",
        "audit": "timestamps",
        "validate": _validate_pincode,
    },
}


def get_table_config(table: str) -> dict:
    config = MASTER_TABLES.get(table)
    if config is None:
        raise ValueError(f"Unknown master table: {table}")
    return config


def _row_to_dict(row) -> dict:
    data = dict(row._mapping)
    if "is_active" in data:
        data["is_active"] = bool(data["is_active"])
    return data


def _select_columns(config: dict) -> str:
    audit = (["created_by", "created_date", "created_proc_name", "updated_by", "updated_date"]
             if config["audit"] == "proc" else ["created_at", "updated_at"])
    return ", ".join(["id", *config["columns"], "is_active", *audit])


def _build_where(config: dict, search: Optional[str], status: str,
                 filters: Optional[dict]) -> tuple[str, dict]:
    conditions = []
    params = {}

    if search and search.strip():
        clauses = [
            f"LOWER(COALESCE(CAST({col} AS TEXT), '')) LIKE :search ESCAPE '\\'"
            for col in config["search"]
        ]
        conditions.append("(" + " OR ".join(clauses) + ")")
        params["search"] = like_pattern(search.strip())

    status = (status or "ALL").upper()
    if status not in STATUS_OPTIONS:
        raise ValueError(f"Invalid status filter: {status}")
    if status == "ACTIVE":
        conditions.append("is_active = TRUE")
    elif status == "INACTIVE":
        conditions.append("is_active = FALSE")

    for column, value in (filters or {}).items():
        if column not in config["filters"]:
            raise ValueError(f"Cannot filter {config['label']} by {column}")
        if value in (None, "") or str(value).upper() == "ALL":
            continue
        conditions.append(f"{column} = :f_{column}")
        params[f"f_{column}"] = str(value)

    where_clause = " AND ".join(conditions) if conditions else "1 = 1"
    return where_clause, params


def list_entries(
    table: str,
    search: str = None,
    status: str = "ALL",
    filters: dict = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> dict:
    """
    Search, filter and paginate a master table.

    Args:
        table: Key into MASTER_TABLES
        search: Case-insensitive substring matched against the searchable columns
        status: ALL, ACTIVE or INACTIVE
        filters: Exact-match filters on the table's filter columns ("ALL" is ignored)
        page: 1-based page number
        page_size: Rows per page

    Returns:
        {"items": [...], "total": int, "page": int, "page_size": int, "total_pages": int}
    """
    config = get_table_config(table)
    if page < 1:
        raise ValueError("Page must be 1 or greater")
    if page_size < 1 or page_size > MAX_PAGE_SIZE:
        raise ValueError(f"Page size must be between 1 and {MAX_PAGE_SIZE}")

    where_clause, params = _build_where(config, search, status, filters)

    with get_conn() as conn:
        total = conn.execute(text(f"SELECT COUNT(*) FROM {table} WHERE {where_clause}"), params).scalar()
        result = conn.execute(text(f"""
            SELECT {_select_columns(config)}
            FROM {table}
            WHERE {where_clause}
            ORDER BY {config['order_by']}
            LIMIT :limit OFFSET :offset
        """), {**params, "limit": page_size, "offset": (page - 1) * page_size})
        items = [_row_to_dict(row) for row in result.fetchall()]

    return {
        "items": items,
        "total": total,
        "page": page,
        "page_size": page_size,
        "total_pages": math.ceil(total / page_size) if total else 0,
    }


def get_entry(table: str, entry_id: str) -> Optional[dict]:
    """Get a single master row by ID."""
    config = get_table_config(table)
    with get_conn() as conn:
        result = conn.execute(text(f"""
            SELECT {_select_columns(config)}
            FROM {table}
            WHERE id = :entry_id
        """), {"entry_id": entry_id})
        row = result.fetchone()
        return _row_to_dict(row) if row else None


def create_entry(table: str, data: dict, created_by: str = "system") -> dict:
    """
    Validate and insert a master row.

    Returns:
        The stored row
    """
    config = get_table_config(table)
    values = config["validate"](data)
    values["is_active"] = data.get("is_active") is not False
    values["id"] = str(uuid.uuid4())

    now = _now()
    if config["audit"] == "proc":
        values.update({
            "created_by": created_by,
            "created_date": now,
            "created_proc_name": config["proc_name"],
            "updated_by": None,
            "updated_date": None,
        })
    else:
        values.update({"created_at": now, "updated_at": now})

    columns = list(values.keys())
    with get_conn() as conn:
        conn.execute(text(f"""
            INSERT INTO {table} ({", ".join(columns)})
            VALUES ({", ".join(f":{c}" for c in columns)})
        """), values)

    logger.info("Created %s %s", config["label"], values["id"])
    return get_entry(table, values["id"])


def update_entry(table: str, entry_id: str, data: dict, updated_by: str = "system") -> Optional[dict]:
    """
    Apply a partial update to a master row.

    Fields not present in `data` keep their stored value. The merged row is
    validated as a whole, so derived columns stay consistent.

    Returns:
        The updated row, or None if the row does not exist
    """
    config = get_table_config(table)
    existing = get_entry(table, entry_id)
    if existing is None:
        return None

    changes = {k: v for k, v in data.items() if k in config["columns"] or k == "is_active"}
    # null is_active keeps the stored flag
    if changes.get("is_active") is None:
        changes.pop("is_active", None)
    merged = {**existing, **changes}
    values = config["validate"](merged)
    values["is_active"] = bool(merged["is_active"])

    now = _now()
    if config["audit"] == "proc":
        values.update({"updated_by": updated_by, "updated_date": now})
    else:
        values["updated_at"] = now

    set_clause = ", ".join(f"{column} = :{column}" for column in values)
    with get_conn() as conn:
        conn.execute(text(f"UPDATE {table} SET {set_clause} WHERE id = :entry_id"),
                     {**values, "entry_id": entry_id})

    logger.info("Updated %s %s", config["label"], entry_id)
    return get_entry(table, entry_id)


def delete_entry(table: str, entry_id: str) -> bool:
    """Delete a master row. Returns False if nothing was deleted."""
    config = get_table_config(table)
    with get_conn() as conn:
        result = conn.execute(text(f"DELETE FROM {table} WHERE id = :entry_id"), {"entry_id": entry_id})
        deleted = result.rowcount > 0

    if deleted:
        logger.info("Deleted %s %s", config["label"], entry_id)
    return deleted


def get_summary(table: str) -> dict:
    """Counts shown on the summary cards above each master table."""
    get_table_config(table)
    with get_conn() as conn:
        row = conn.execute(text(f"""
            SELECT
                COUNT(*) AS total,
                COALESCE(SUM(CASE WHEN is_active THEN 1 ELSE 0 END), 0) AS active
            FROM {table}
        """)).fetchone()

    total = row[0] or 0
    active = int(row[1] or 0)
    return {"total": total, "active": active, "inactive": total - active}
