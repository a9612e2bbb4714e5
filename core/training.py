"""
LMS Module

Training modules (the topic syllabus agents must complete per agent type and
policy type) and the certificates issued once the exam is passed.
"""

from __future__ import annotations

import json
import logging
import math
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import text

from core.db import get_conn, like_pattern
from core import reference_data
from core.master_data import check_date_range

logger = logging.getLogger(__name__)

MIN_TOPIC_DURATION = 0.1  # hours
CERTIFICATE_STATUSES = ("ACTIVE", "EXPIRED", "REVOKED")

_MODULE_COLUMNS = """
    id, agent_type_id, agent_type_name, policy_type_ids, policy_type_names,
    module_name, topics, total_duration, validity_from, validity_to,
    is_active, created_at, updated_at
"""

_CERTIFICATE_COLUMNS = """
    id, agent_id, agent_name, agent_type, exam_name, policy_type, score, percentage,
    issued_date, expiry_date, certificate_number, status, download_count, last_downloaded
"""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def calculate_total_duration(topics: list[dict]) -> float:
    """Sum of topic durations in hours; a topic without a duration counts as 0."""
    return round(sum(float(topic.get("duration") or 0) for topic in topics), 2)


# ─────────────────────────────────────────────────────────────
# Training modules
# ─────────────────────────────────────────────────────────────

def _module_to_dict(row) -> dict:
    data = dict(row._mapping)
    for field in ("policy_type_ids", "policy_type_names", "topics"):
        data[field] = json.loads(data[field] or "[]")
    data["is_active"] = bool(data["is_active"])
    return data


def _validate_module(data: dict) -> dict:
    agent_type = reference_data.get_agent_type(data.get("agent_type_id"))
    if agent_type is None:
        raise ValueError("Agent type is required")

    policy_type_ids = [str(pid) for pid in data.get("policy_type_ids") or []]
    if not policy_type_ids:
        raise ValueError("At least one policy type is required")
    policy_type_names = []
    for pid in policy_type_ids:
        policy_type = reference_data.get_policy_type(pid)
        if policy_type is None:
            raise ValueError(f"Unknown policy type: {pid}")
        policy_type_names.append(policy_type["name"])

    module_name = (data.get("module_name") or "").strip()
    if not module_name:
        raise ValueError("Module name is required")

    topics = []
    for topic in data.get("topics") or []:
        name = (topic.get("name") or "").strip()
        if not name:
            raise ValueError("Topic name is required")
        try:
            duration = float(topic.get("duration") or 0)
        except (TypeError, ValueError):
            raise ValueError("Duration must be a number")
        if not math.isfinite(duration) or duration < MIN_TOPIC_DURATION:
            raise ValueError("Duration must be at least 0.1 hours")
        topics.append({"name": name, "duration": duration})
    if not topics:
        raise ValueError("At least one topic is required")

    validity_from = data.get("validity_from")
    validity_to = data.get("validity_to")
    if not validity_from:
        raise ValueError("Validity from date is required")
    if not validity_to:
        raise ValueError("Validity to date is required")
    check_date_range(validity_from, validity_to, "Validity from date", "Validity to date")

    return {
        "agent_type_id": agent_type["id"],
        "agent_type_name": agent_type["name"],
        "policy_type_ids": json.dumps(policy_type_ids),
        "policy_type_names": json.dumps(policy_type_names),
        "module_name": module_name,
        "topics": json.dumps(topics),
        "total_duration": calculate_total_duration(topics),
        "validity_from": str(validity_from),
        "validity_to": str(validity_to),
        "is_active": data.get("is_active", True) is not False,
    }


def list_training_modules(search: str = None, agent_type_id: str = None, status: str = "ALL") -> list[dict]:
    """
    Training modules, filtered like the LMS masters screen.

    search matches module name, agent type name and any policy type name.
    """
    conditions = []
    params = {}

    if search:
        conditions.append("""
            (LOWER(module_name) LIKE :search ESCAPE '\\'
             OR LOWER(agent_type_name) LIKE :search ESCAPE '\\'
             OR LOWER(policy_type_names) LIKE :search ESCAPE '\\')
        """)
        params["search"] = like_pattern(search)
    if agent_type_id and agent_type_id != "ALL":
        conditions.append("agent_type_id = :agent_type_id")
        params["agent_type_id"] = str(agent_type_id)
    status = (status or "ALL").upper()
    if status == "ACTIVE":
        conditions.append("is_active = TRUE")
    elif status == "INACTIVE":
        conditions.append("is_active = FALSE")

    where_clause = " AND ".join(conditions) if conditions else "1 = 1"
    with get_conn() as conn:
        result = conn.execute(text(f"""
            SELECT {_MODULE_COLUMNS}
            FROM training_modules
            WHERE {where_clause}
            ORDER BY module_name
        """), params)
        return [_module_to_dict(row) for row in result.fetchall()]


def get_training_module(module_id: str) -> Optional[dict]:
    with get_conn() as conn:
        row = conn.execute(text(f"SELECT {_MODULE_COLUMNS} FROM training_modules WHERE id = :id"),
                           {"id": module_id}).fetchone()
        return _module_to_dict(row) if row else None


def create_training_module(data: dict) -> dict:
    """Validate and store a training module. total_duration is derived from the topics."""
    values = _validate_module(data)
    now = _now()
    values.update({"id": str(uuid.uuid4()), "created_at": now, "updated_at": now})

    columns = list(values.keys())
    with get_conn() as conn:
        conn.execute(text(f"""
            INSERT INTO training_modules ({", ".join(columns)})
            VALUES ({", ".join(f":{c}" for c in columns)})
        """), values)

    logger.info("Created training module %s (%s)", values["module_name"], values["id"])
    return get_training_module(values["id"])


def update_training_module(module_id: str, data: dict) -> Optional[dict]:
    existing = get_training_module(module_id)
    if existing is None:
        return None

    merged = {**existing, **{k: v for k, v in data.items() if not (k == "is_active" and v is None)}}
    values = _validate_module(merged)
    values["updated_at"] = _now()

    set_clause = ", ".join(f"{column} = :{column}" for column in values)
    with get_conn() as conn:
        conn.execute(text(f"UPDATE training_modules SET {set_clause} WHERE id = :id"),
                     {**values, "id": module_id})

    logger.info("Updated training module %s", module_id)
    return get_training_module(module_id)


def delete_training_module(module_id: str) -> bool:
    with get_conn() as conn:
        result = conn.execute(text("DELETE FROM training_modules WHERE id = :id"), {"id": module_id})
        deleted = result.rowcount > 0
    if deleted:
        logger.info("Deleted training module %s", module_id)
    return deleted


# ─────────────────────────────────────────────────────────────
# Issued certificates
# ─────────────────────────────────────────────────────────────

def list_certificates(
    search: str = None,
    agent_type: str = None,
    policy_type: str = None,
    status: str = None,
) -> list[dict]:
    conditions = []
    params = {}

    if search:
        conditions.append("""
            (LOWER(agent_name) LIKE :search ESCAPE '\\'
             OR LOWER(agent_id) LIKE :search ESCAPE '\\'
             OR LOWER(certificate_number) LIKE :search ESCAPE '\\'
             OR LOWER(exam_name) LIKE :search ESCAPE '\\')
        """)
        params["search"] = like_pattern(search)
    for column, value in (("agent_type", agent_type), ("policy_type", policy_type), ("status", status)):
        if value and value.upper() != "ALL":
            conditions.append(f"{column} = :{column}")
            params[column] = value

    where_clause = " AND ".join(conditions) if conditions else "1 = 1"
    with get_conn() as conn:
        result = conn.execute(text(f"""
            SELECT {_CERTIFICATE_COLUMNS}
            FROM issued_certificates
            WHERE {where_clause}
            ORDER BY issued_date DESC
        """), params)
        return [dict(row._mapping) for row in result.fetchall()]


def get_certificate(certificate_id: str) -> Optional[dict]:
    with get_conn() as conn:
        row = conn.execute(text(f"SELECT {_CERTIFICATE_COLUMNS} FROM issued_certificates WHERE id = :id"),
                           {"id": certificate_id}).fetchone()
        return dict(row._mapping) if row else None


def certificate_summary(rows: list[dict]) -> dict:
    counts = {status: 0 for status in CERTIFICATE_STATUSES}
    for row in rows:
        if row["status"] in counts:
            counts[row["status"]] += 1
    return {
        "total": len(rows),
        "active": counts["ACTIVE"],
        "expired": counts["EXPIRED"],
        "revoked": counts["REVOKED"],
        "total_downloads": sum(int(row["download_count"] or 0) for row in rows),
    }


def record_certificate_download(certificate_id: str) -> Optional[dict]:
    """Bump the download counter. Revoked certificates cannot be downloaded."""
    certificate = get_certificate(certificate_id)
    if certificate is None:
        return None
    if certificate["status"] == "REVOKED":
        raise ValueError("Certificate has been revoked")

    with get_conn() as conn:
        conn.execute(text("""
            UPDATE issued_certificates
            SET download_count = download_count + 1, last_downloaded = :today
            WHERE id = :id
        """), {"id": certificate_id, "today": datetime.now(timezone.utc).date().isoformat()})

    return get_certificate(certificate_id)


def revoke_certificate(certificate_id: str) -> Optional[dict]:
    with get_conn() as conn:
        result = conn.execute(text("""
            UPDATE issued_certificates SET status = 'REVOKED' WHERE id = :id
        """), {"id": certificate_id})
        if result.rowcount == 0:
            return None

    logger.info("Revoked certificate %s", certificate_id)
    return get_certificate(certificate_id)
