"""
Tests for the business master categories
"""
import pytest

from core import business_master


def test_seeded_categories():
    for category in business_master.BUSINESS_CATEGORIES:
        assert business_master.list_business_entities(category)["total"] > 0
    assert business_master.list_business_entities("agent-types")["total"] == 6


def test_default_and_unknown_category():
    assert business_master.list_business_entities()["total"] == 6
    assert business_master.list_business_entities("planets") == {"data": [], "total": 0}


def test_search_matches_name_code_and_description():
    assert business_master.list_business_entities("regions", search="north")["total"] == 1
    assert business_master.list_business_entities("departments", search="OPS")["total"] == 1
    assert business_master.list_business_entities("agent-types", search="micro")["total"] == 1


def test_search_treats_wildcards_literally():
    assert business_master.list_business_entities("agent-types", search="%")["total"] == 0
    # underscores only match the POSP_* codes
    assert business_master.list_business_entities("agent-types", search="_")["total"] == 3

    business_master.create_business_entity("regions", "Central", "CENTRAL_1", "50% of branches")
    assert business_master.list_business_entities("regions", search="50%")["total"] == 1
    assert business_master.list_business_entities("regions", search="l_1")["total"] == 1


def test_create_requires_name_code_and_category():
    with pytest.raises(ValueError, match="Missing required fields"):
        business_master.create_business_entity("regions", "Central", "")


def test_update_and_delete():
    entry = business_master.create_business_entity("regions", "Central", "CENTRAL", "Central Region")
    assert entry["is_active"] is True

    updated = business_master.update_business_entity(entry["id"], "regions", is_active=False)
    assert updated["is_active"] is False
    assert updated["name"] == "Central"

    # id must belong to the given category
    assert business_master.update_business_entity(entry["id"], "departments", name="X") is None

    with pytest.raises(ValueError, match="Missing required fields"):
        business_master.update_business_entity(entry["id"], "regions", name="  ")

    assert business_master.delete_business_entity(entry["id"], "regions") is True
    assert business_master.get_business_entity(entry["id"]) is None


def test_api_flow(client):
    response = client.post("/api/master-data/business", json={
        "type": "priorities", "name": "Urgent", "code": "URGENT", "description": "Drop everything",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "priorities created successfully"
    entry_id = body["data"]["id"]

    listing = client.get("/api/master-data/business", params={"type": "priorities", "search": "urg"}).json()
    assert listing["success"] is True
    assert listing["total"] == 1

    response = client.put("/api/master-data/business", json={
        "id": entry_id, "type": "priorities", "name": "Immediate",
    })
    assert response.json()["data"]["name"] == "Immediate"

    response = client.delete("/api/master-data/business", params={"id": entry_id, "type": "priorities"})
    assert response.json() == {"success": True, "message": "priorities deleted successfully"}


def test_api_errors(client):
    response = client.post("/api/master-data/business", json={"type": "regions", "name": "Central"})
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Missing required fields"}

    response = client.put("/api/master-data/business", json={"name": "Central"})
    assert response.status_code == 400
    assert response.json()["error"] == "ID and type are required"

    response = client.put("/api/master-data/business", json={"id": "missing", "type": "regions", "name": "X"})
    assert response.status_code == 404


def test_api_default_category(client):
    body = client.get("/api/master-data/business").json()
    assert body["total"] == 6
    assert {row["category"] for row in body["data"]} == {"agent-types"}
