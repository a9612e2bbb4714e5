"""
Initialize Database
===================
Creates the back-office tables and loads the seed records.

    python -m db_setup.init_db           # create missing tables, seed empty ones
    python -m db_setup.init_db --reset   # drop everything and start over
"""

import argparse
import json
import logging
import uuid

from sqlalchemy import text

from core.db import get_conn
from core.training import calculate_total_duration
from core import reference_data
from db_setup import seed_data

logger = logging.getLogger(__name__)


_AUDIT_COLUMNS = """
    is_active BOOLEAN NOT NULL DEFAULT TRUE,
    active_from_date TEXT NOT NULL,
    active_to_date TEXT,
    created_by TEXT NOT NULL,
    created_date TEXT NOT NULL,
    created_proc_name TEXT NOT NULL,
    updated_by TEXT,
    updated_date TEXT
"""

TABLES = {
    "zones": f"""
        CREATE TABLE IF NOT EXISTS zones (
            id TEXT PRIMARY KEY,
            motor_segment_id TEXT NOT NULL,
            motor_segment_name TEXT NOT NULL,
            zone_name TEXT NOT NULL,
            zone_description TEXT NOT NULL,
            {_AUDIT_COLUMNS}
        )
    """,
    "ncb_slabs": f"""
        CREATE TABLE IF NOT EXISTS ncb_slabs (
            id TEXT PRIMARY KEY,
            ncb_slab_id TEXT NOT NULL,
            ncb_slab_from INTEGER NOT NULL,
            ncb_slab_to INTEGER NOT NULL,
            ncb_slab_rate REAL NOT NULL,
            ncb_slab_description TEXT,
            {_AUDIT_COLUMNS}
        )
    """,
    "depreciation_slabs": f"""
        CREATE TABLE IF NOT EXISTS depreciation_slabs (
            id TEXT PRIMARY KEY,
            depreciation_slab_id TEXT NOT NULL,
            depreciation_from INTEGER NOT NULL,
            depreciation_to INTEGER NOT NULL,
            depreciation_rate REAL NOT NULL,
            depreciation_slab_description TEXT,
            {_AUDIT_COLUMNS}
        )
    """,
    "states": """
        CREATE TABLE IF NOT EXISTS states (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            code TEXT NOT NULL,
            country_id TEXT NOT NULL,
            country_name TEXT NOT NULL,
            is_active BOOLEAN NOT NULL DEFAULT TRUE,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
    """,
    "pincodes": """
        CREATE TABLE IF NOT EXISTS pincodes (
            id TEXT PRIMARY KEY,
            pincode TEXT NOT NULL,
            city_id TEXT NOT NULL,
            city_name TEXT NOT NULL,
            state_id TEXT NOT NULL,
            state_name TEXT NOT NULL,
            country_id TEXT NOT NULL,
            country_name TEXT NOT NULL,
            area TEXT,
            is_active BOOLEAN NOT NULL DEFAULT TRUE,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
    """,
    "business_entities": """
        CREATE TABLE IF NOT EXISTS business_entities (
            id TEXT PRIMARY KEY,
            category TEXT NOT NULL,
            name TEXT NOT NULL,
            code TEXT NOT NULL,
            description TEXT,
            is_active BOOLEAN NOT NULL DEFAULT TRUE,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
    """,
    "commission_payouts": """
        CREATE TABLE IF NOT EXISTS commission_payouts (
            id TEXT PRIMARY KEY,
            agent_name TEXT NOT NULL,
            product TEXT NOT NULL,
            region TEXT NOT NULL,
            premium REAL NOT NULL,
            commission_rate REAL NOT NULL,
            commission REAL NOT NULL,
            payout_date TEXT NOT NULL,
            status TEXT NOT NULL,
            policy_count INTEGER NOT NULL,
            month TEXT
        )
    """,
    "retention_records": """
        CREATE TABLE IF NOT EXISTS retention_records (
            id TEXT PRIMARY KEY,
            customer_name TEXT NOT NULL,
            agent_name TEXT NOT NULL,
            policy_type TEXT NOT NULL,
            join_date TEXT NOT NULL,
            last_renewal_date TEXT,
            status TEXT NOT NULL,
            region TEXT NOT NULL,
            premium REAL NOT NULL,
            retention_rate REAL NOT NULL,
            years_with_company INTEGER NOT NULL
        )
    """,
    "training_modules": """
        CREATE TABLE IF NOT EXISTS training_modules (
            id TEXT PRIMARY KEY,
            agent_type_id TEXT NOT NULL,
            agent_type_name TEXT NOT NULL,
            policy_type_ids TEXT NOT NULL,
            policy_type_names TEXT NOT NULL,
            module_name TEXT NOT NULL,
            topics TEXT NOT NULL,
            total_duration REAL NOT NULL,
            validity_from TEXT NOT NULL,
            validity_to TEXT NOT NULL,
            is_active BOOLEAN NOT NULL DEFAULT TRUE,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
    """,
    "issued_certificates": """
        CREATE TABLE IF NOT EXISTS issued_certificates (
            id TEXT PRIMARY KEY,
            agent_id TEXT NOT NULL,
            agent_name TEXT NOT NULL,
            agent_type TEXT NOT NULL,
            exam_name TEXT NOT NULL,
            policy_type TEXT NOT NULL,
            score REAL NOT NULL,
            percentage REAL NOT NULL,
            issued_date TEXT NOT NULL,
            expiry_date TEXT NOT NULL,
            certificate_number TEXT NOT NULL,
            status TEXT NOT NULL,
            download_count INTEGER NOT NULL DEFAULT 0,
            last_downloaded TEXT
        )
    """,
    "bulk_uploads": """
        CREATE TABLE IF NOT EXISTS bulk_uploads (
            id TEXT PRIMARY KEY,
            upload_type TEXT NOT NULL,
            filename TEXT NOT NULL,
            file_size INTEGER NOT NULL,
            records_processed INTEGER NOT NULL,
            records_successful INTEGER NOT NULL,
            records_failed INTEGER NOT NULL,
            errors TEXT NOT NULL,
            created_at TEXT NOT NULL
        )
    """,
}


def _new_id() -> str:
    return str(uuid.uuid4())


def create_tables():
    """Create any missing tables."""
    with get_conn() as conn:
        for ddl in TABLES.values():
            conn.execute(text(ddl))
    logger.info("Ensured %d tables", len(TABLES))


def drop_tables():
    with get_conn() as conn:
        for name in TABLES:
            conn.execute(text(f"DROP TABLE IF EXISTS {name}"))


def _is_empty(conn, table: str) -> bool:
    return conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar() == 0


# (slab id, from, to, rate, description) column names per slab table
SLAB_COLUMNS = {
    "ncb_slabs": ("ncb_slab_id", "ncb_slab_from", "ncb_slab_to", "ncb_slab_rate", "ncb_slab_description"),
    "depreciation_slabs": ("depreciation_slab_id", "depreciation_from", "depreciation_to",
                           "depreciation_rate", "depreciation_slab_description"),
}


def _seed_slabs(conn, table: str, rows: list, proc_name: str):
    columns = ", ".join(SLAB_COLUMNS[table])
    for slab_id, slab_from, slab_to, rate, description in rows:
        conn.execute(text(f"""
            INSERT INTO {table} (
                id, {columns}, is_active, active_from_date, active_to_date,
                created_by, created_date, created_proc_name, updated_by, updated_date
            ) VALUES (
                :id, :slab_id, :slab_from, :slab_to, :rate, :description, TRUE,
                '2024-01-01', '2025-12-31', 'Admin', '2024-01-01', :proc_name, 'Admin', '2024-01-15'
            )
        """), {
            "id": _new_id(), "slab_id": slab_id, "slab_from": slab_from, "slab_to": slab_to,
            "rate": rate, "description": description, "proc_name": proc_name,
        })


def seed_database():
    """Load seed records into tables that are still empty."""
    ts = seed_data.SEED_TIMESTAMP

    with get_conn() as conn:
        if _is_empty(conn, "zones"):
            for segment_id, name, description in seed_data.ZONES:
                segment = reference_data.get_motor_segment(segment_id)
                conn.execute(text("""
                    INSERT INTO zones (
                        id, motor_segment_id, motor_segment_name, zone_name, zone_description,
                        is_active, active_from_date, active_to_date,
                        created_by, created_date, created_proc_name, updated_by, updated_date
                    ) VALUES (
                        :id, :segment_id, :segment_name, :name, :description,
                        TRUE, '2024-01-01', '2024-12-31',
                        'Admin', '2024-01-15T00:00:00Z', 'SP_CREATE_ZONE_MASTER', 'Admin', '2024-01-20T00:00:00Z'
                    )
                """), {
                    "id": _new_id(), "segment_id": segment_id, "segment_name": segment["name"],
                    "name": name, "description": description,
                })

        if _is_empty(conn, "ncb_slabs"):
            _seed_slabs(conn, "ncb_slabs", seed_data.NCB_SLABS, "PROC_NCB_INSERT")

        if _is_empty(conn, "depreciation_slabs"):
            _seed_slabs(conn, "depreciation_slabs", seed_data.DEPRECIATION_SLABS,
                        "PROC_DEPRECIATION_SLAB_INSERT")

        if _is_empty(conn, "states"):
            for name, code, country_id in seed_data.STATES:
                country = reference_data.get_country(country_id)
                conn.execute(text("""
                    INSERT INTO states (id, name, code, country_id, country_name, is_active, created_at, updated_at)
                    VALUES (:id, :name, :code, :country_id, :country_name, TRUE, :ts, :ts)
                """), {
                    "id": _new_id(), "name": name, "code": code, "country_id": country_id,
                    "country_name": country["name"], "ts": ts,
                })

        if _is_empty(conn, "pincodes"):
            for pincode, city_id, area in seed_data.PINCODES:
                city = reference_data.get_city(city_id)
                conn.execute(text("""
                    INSERT INTO pincodes (
                        id, pincode, city_id, city_name, state_id, state_name,
                        country_id, country_name, area, is_active, created_at, updated_at
                    ) VALUES (
                        :id, :pincode, :city_id, :city_name, :state_id, :state_name,
                        :country_id, :country_name, :area, TRUE, :ts, :ts
                    )
                """), {
                    "id": _new_id(), "pincode": pincode, "city_id": city_id, "city_name": city["name"],
                    "state_id": city["state_id"], "state_name": city["state_name"],
                    "country_id": city["country_id"], "country_name": city["country_name"],
                    "area": area, "ts": ts,
                })

        if _is_empty(conn, "business_entities"):
            for category, entries in seed_data.BUSINESS_ENTITIES.items():
                for name, code, description in entries:
                    conn.execute(text("""
                        INSERT INTO business_entities (
                            id, category, name, code, description, is_active, created_at, updated_at
                        ) VALUES (:id, :category, :name, :code, :description, TRUE, :ts, :ts)
                    """), {
                        "id": _new_id(), "category": category, "name": name, "code": code,
                        "description": description, "ts": "2024-01-01T00:00:00Z",
                    })

        if _is_empty(conn, "commission_payouts"):
            for row in seed_data.COMMISSION_PAYOUTS:
                conn.execute(text("""
                    INSERT INTO commission_payouts (
                        id, agent_name, product, region, premium, commission_rate, commission,
                        payout_date, status, policy_count, month
                    ) VALUES (
                        :id, :agent_name, :product, :region, :premium, :commission_rate, :commission,
                        :payout_date, :status, :policy_count, :month
                    )
                """), {"id": _new_id(), **dict(zip(
                    ("agent_name", "product", "region", "premium", "commission_rate", "commission",
                     "payout_date", "status", "policy_count", "month"), row))})

        if _is_empty(conn, "retention_records"):
            for row in seed_data.RETENTION_RECORDS:
                conn.execute(text("""
                    INSERT INTO retention_records (
                        id, customer_name, agent_name, policy_type, join_date, last_renewal_date,
                        status, region, premium, retention_rate, years_with_company
                    ) VALUES (
                        :id, :customer_name, :agent_name, :policy_type, :join_date, :last_renewal_date,
                        :status, :region, :premium, :retention_rate, :years_with_company
                    )
                """), {"id": _new_id(), **dict(zip(
                    ("customer_name", "agent_name", "policy_type", "join_date", "last_renewal_date",
                     "status", "region", "premium", "retention_rate", "years_with_company"), row))})

        if _is_empty(conn, "training_modules"):
            for module in seed_data.TRAINING_MODULES:
                agent_type = reference_data.get_agent_type(module["agent_type_id"])
                policy_names = [reference_data.get_policy_type(pid)["name"] for pid in module["policy_type_ids"]]
                conn.execute(text("""
                    INSERT INTO training_modules (
                        id, agent_type_id, agent_type_name, policy_type_ids, policy_type_names,
                        module_name, topics, total_duration, validity_from, validity_to,
                        is_active, created_at, updated_at
                    ) VALUES (
                        :id, :agent_type_id, :agent_type_name, :policy_type_ids, :policy_type_names,
                        :module_name, :topics, :total_duration, :validity_from, :validity_to,
                        TRUE, :ts, :ts
                    )
                """), {
                    "id": _new_id(),
                    "agent_type_id": module["agent_type_id"],
                    "agent_type_name": agent_type["name"],
                    "policy_type_ids": json.dumps(module["policy_type_ids"]),
                    "policy_type_names": json.dumps(policy_names),
                    "module_name": module["module_name"],
                    "topics": json.dumps(module["topics"]),
                    "total_duration": calculate_total_duration(module["topics"]),
                    "validity_from": module["validity_from"],
                    "validity_to": module["validity_to"],
                    "ts": ts,
                })

        if _is_empty(conn, "issued_certificates"):
            for row in seed_data.ISSUED_CERTIFICATES:
                conn.execute(text("""
                    INSERT INTO issued_certificates (
                        id, agent_id, agent_name, agent_type, exam_name, policy_type, score, percentage,
                        issued_date, expiry_date, certificate_number, status, download_count, last_downloaded
                    ) VALUES (
                        :id, :agent_id, :agent_name, :agent_type, :exam_name, :policy_type, :score, :percentage,
                        :issued_date, :expiry_date, :certificate_number, :status, :download_count, :last_downloaded
                    )
                """), {"id": _new_id(), **dict(zip(
                    ("agent_id", "agent_name", "agent_type", "exam_name", "policy_type", "score", "percentage",
                     "issued_date", "expiry_date", "certificate_number", "status", "download_count",
                     "last_downloaded"), row))})

    logger.info("Seed data loaded")


def init_database():
    create_tables()
    seed_database()


def reset_database():
    """Drop, recreate and reseed every table."""
    drop_tables()
    init_database()


def main():
    parser = argparse.ArgumentParser(description="Create and seed the back-office database")
    parser.add_argument("--reset", action="store_true", help="drop all tables before creating them")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    if args.reset:
        reset_database()
    else:
        init_database()
    print("✅ Tables created successfully.")


if __name__ == "__main__":
    main()
