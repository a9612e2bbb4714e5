"""
Tests for the motor and geography master tables
"""
import pytest

from core import master_data


def _zone(**overrides):
    data = {
        "motor_segment_id": "1",
        "zone_name": "Zone C",
        "zone_description": "Private vehicle zone C - Rural areas",
        "is_active": True,
        "active_from_date": "2024-02-01",
    }
    data.update(overrides)
    return data


def _ncb(**overrides):
    data = {
        "ncb_slab_id": "NCB007",
        "ncb_slab_from": 6,
        "ncb_slab_to": 10,
        "ncb_slab_rate": 55,
        "active_from_date": "2024-02-01",
    }
    data.update(overrides)
    return data


def test_seeded_counts():
    assert master_data.list_entries("zones")["total"] == 5
    assert master_data.list_entries("ncb_slabs")["total"] == 6
    assert master_data.list_entries("depreciation_slabs")["total"] == 5
    assert master_data.list_entries("states")["total"] == 64
    assert master_data.list_entries("pincodes")["total"] == 27


def test_search_is_case_insensitive():
    result = master_data.list_entries("states", search="PRADESH")
    assert result["total"] == 5
    assert all("pradesh" in item["name"].lower() for item in result["items"])


def test_pagination():
    first = master_data.list_entries("states", page=1)
    assert len(first["items"]) == master_data.DEFAULT_PAGE_SIZE
    assert first["total_pages"] == 7

    last = master_data.list_entries("states", page=7)
    assert len(last["items"]) == 4

    beyond = master_data.list_entries("states", page=8)
    assert beyond["items"] == []
    assert beyond["total"] == 64


def test_invalid_paging_rejected():
    with pytest.raises(ValueError):
        master_data.list_entries("zones", page=0)
    with pytest.raises(ValueError):
        master_data.list_entries("zones", page_size=master_data.MAX_PAGE_SIZE + 1)


def test_filters():
    india = master_data.list_entries("states", filters={"country_id": "1"}, page_size=100)
    assert india["total"] == 30
    assert {item["country_name"] for item in india["items"]} == {"India"}

    mumbai = master_data.list_entries("pincodes", filters={"city_id": "1", "state_id": "ALL"})
    assert mumbai["total"] == 3

    with pytest.raises(ValueError):
        master_data.list_entries("zones", filters={"zone_name": "Zone A"})


def test_lowercase_all_disables_filter():
    assert master_data.list_entries("states", filters={"country_id": "all"})["total"] == 64


def test_search_treats_wildcards_literally():
    assert master_data.list_entries("states", search="_")["total"] == 0
    assert master_data.list_entries("states", search="%")["total"] == 0
    assert master_data.list_entries("pincodes", search="400_01")["total"] == 0
    assert master_data.list_entries("ncb_slabs", search="0%")["total"] == 2


def test_status_filter():
    zone = master_data.create_entry("zones", _zone(is_active=False))
    inactive = master_data.list_entries("zones", status="INACTIVE")
    assert [item["id"] for item in inactive["items"]] == [zone["id"]]
    assert master_data.list_entries("zones", status="active")["total"] == 5
    assert master_data.get_summary("zones") == {"total": 6, "active": 5, "inactive": 1}


def test_zone_create_derives_segment_name():
    zone = master_data.create_entry("zones", _zone(motor_segment_id="2"))
    assert zone["motor_segment_name"] == "Commercial"
    assert zone["created_proc_name"] == "SP_CREATE_ZONE_MASTER"
    assert zone["created_by"] == "system"


def test_zone_end_date_before_start_rejected():
    with pytest.raises(ValueError, match="Active to date"):
        master_data.create_entry("zones", _zone(active_to_date="2024-01-01"))


def test_ncb_from_greater_than_to_rejected():
    with pytest.raises(ValueError, match="NCB Slab From cannot be greater than NCB Slab To"):
        master_data.create_entry("ncb_slabs", _ncb(ncb_slab_from=10, ncb_slab_to=6))


def test_slab_rate_capped_at_100():
    with pytest.raises(ValueError, match="cannot exceed 100"):
        master_data.create_entry("ncb_slabs", _ncb(ncb_slab_rate=120))


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_slab_rate_must_be_finite(value):
    with pytest.raises(ValueError, match="must be a number"):
        master_data.create_entry("ncb_slabs", _ncb(ncb_slab_rate=value))


def test_state_code_validation():
    with pytest.raises(ValueError, match="2-3 characters"):
        master_data.create_entry("states", {"name": "Ladakh", "code": "LADK", "country_id": "1"})

    state = master_data.create_entry("states", {"name": "Ladakh", "code": "la", "country_id": "1"})
    assert state["code"] == "LA"
    assert state["country_name"] == "India"


def test_pincode_derives_location_names():
    pincode = master_data.create_entry("pincodes", {"pincode": "560002", "city_id": "4", "area": "Shantinagar"})
    assert pincode["city_name"] == "Bangalore"
    assert pincode["state_name"] == "Karnataka"
    assert pincode["country_name"] == "India"


def test_update_is_partial_and_revalidated():
    slab = master_data.create_entry("ncb_slabs", _ncb())
    updated = master_data.update_entry("ncb_slabs", slab["id"], {"ncb_slab_rate": 60})
    assert updated["ncb_slab_rate"] == 60
    assert updated["ncb_slab_from"] == 6

    with pytest.raises(ValueError):
        master_data.update_entry("ncb_slabs", slab["id"], {"ncb_slab_from": 20})

    assert master_data.update_entry("ncb_slabs", "missing", {"ncb_slab_rate": 1}) is None


def test_null_is_active_keeps_stored_flag():
    zone = master_data.create_entry("zones", _zone(is_active=False))
    updated = master_data.update_entry("zones", zone["id"], {"zone_name": "Zone E", "is_active": None})
    assert updated["is_active"] is False
    assert updated["zone_name"] == "Zone E"

    # omitted on create means active
    data = _zone()
    del data["is_active"]
    assert master_data.create_entry("zones", data)["is_active"] is True


def test_delete():
    zone = master_data.create_entry("zones", _zone())
    assert master_data.delete_entry("zones", zone["id"]) is True
    assert master_data.get_entry("zones", zone["id"]) is None
    assert master_data.delete_entry("zones", zone["id"]) is False


# ─────────────────────────────────────────────────────────────
# API
# ─────────────────────────────────────────────────────────────

def test_api_list_with_filter(client):
    response = client.get("/api/master-data/zones", params={"motor_segment_id": "2"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["total"] == 3


def test_api_crud(client):
    response = client.post("/api/master-data/zones", json=_zone())
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Zone created successfully"
    zone_id = body["data"]["id"]

    response = client.put(f"/api/master-data/zones/{zone_id}", json={"zone_name": "Zone D"})
    assert response.status_code == 200
    assert response.json()["data"]["zone_name"] == "Zone D"

    assert client.get(f"/api/master-data/zones/{zone_id}").json()["data"]["zone_name"] == "Zone D"

    response = client.delete(f"/api/master-data/zones/{zone_id}")
    assert response.json() == {"success": True, "message": "Zone deleted successfully"}

    response = client.get(f"/api/master-data/zones/{zone_id}")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Zone not found"}


def test_api_business_rule_error(client):
    response = client.post("/api/master-data/ncb_slabs", json=_ncb(ncb_slab_from=9, ncb_slab_to=1))
    assert response.status_code == 400
    assert response.json()["error"] == "NCB Slab From cannot be greater than NCB Slab To"


def test_api_field_validation_errors(client):
    response = client.post("/api/master-data/zones", json={"motor_segment_id": "1"})
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation failed"
    assert "zone_name" in body["errors"]
    assert "active_from_date" in body["errors"]


def test_api_unknown_table(client):
    response = client.get("/api/master-data/planets")
    assert response.status_code == 404
    assert response.json()["success"] is False


def test_api_tables(client):
    keys = [t["key"] for t in client.get("/api/master-data/tables").json()["data"]]
    assert keys == ["zones", "ncb_slabs", "depreciation_slabs", "states", "pincodes"]


def test_api_null_is_active_keeps_row_active(client):
    zone_id = client.post("/api/master-data/zones", json=_zone()).json()["data"]["id"]

    response = client.put(f"/api/master-data/zones/{zone_id}", json={"is_active": None})
    assert response.status_code == 200
    assert response.json()["data"]["is_active"] is True
    assert client.get("/api/master-data/zones", params={"status": "INACTIVE"}).json()["total"] == 0


def test_api_lookups(client):
    body = client.get("/api/master-data/lookups/countries").json()
    assert body["success"] is True
    assert body["total"] == 13

    assert client.get("/api/master-data/lookups/motor-segments").json()["total"] == 2

    cities = client.get("/api/master-data/lookups/cities", params={"country_id": "2"}).json()["data"]
    assert [c["name"] for c in cities] == ["Los Angeles", "New York City", "Houston"]
    assert {c["country_name"] for c in cities} == {"United States"}

    cities = client.get("/api/master-data/lookups/cities", params={"state_id": "1"}).json()["data"]
    assert [c["name"] for c in cities] == ["Mumbai", "Pune"]

    cities = client.get("/api/master-data/lookups/cities", params={"search": "new"}).json()["data"]
    assert [c["name"] for c in cities] == ["New Delhi", "New York City"]


def test_api_unknown_lookup(client):
    response = client.get("/api/master-data/lookups/planets")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Unknown lookup: planets"}
