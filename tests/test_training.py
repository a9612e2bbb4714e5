"""
Tests for LMS training modules and issued certificates
"""
import pytest

from core import training


def _module(**overrides):
    data = {
        "agent_type_id": "4",
        "policy_type_ids": ["5"],
        "module_name": "Motor Claims Handling",
        "topics": [
            {"name": "Survey and Assessment", "duration": 1.5},
            {"name": "Settlement", "duration": 0.75},
        ],
        "validity_from": "2024-04-01",
        "validity_to": "2025-03-31",
    }
    data.update(overrides)
    return data


def test_seeded_module_durations():
    durations = {m["module_name"]: m["total_duration"] for m in training.list_training_modules()}
    assert durations == {
        "General Insurance Basics": 7.0,
        "Health Insurance Specialization": 7.0,
        "Life Insurance Fundamentals": 9.0,
    }


def test_calculate_total_duration():
    assert training.calculate_total_duration([]) == 0
    assert training.calculate_total_duration([{"duration": 0.1}, {"duration": 0.2}]) == 0.3


def test_create_derives_names_and_duration():
    module = training.create_training_module(_module(total_duration=99))
    assert module["total_duration"] == 2.25
    assert module["agent_type_name"] == "PoSP – Motor"
    assert module["policy_type_names"] == ["Motor Insurance"]
    assert module["is_active"] is True


@pytest.mark.parametrize("overrides, message", [
    ({"agent_type_id": None}, "Agent type is required"),
    ({"policy_type_ids": []}, "At least one policy type is required"),
    ({"module_name": "  "}, "Module name is required"),
    ({"topics": []}, "At least one topic is required"),
    ({"topics": [{"name": "", "duration": 1}]}, "Topic name is required"),
    ({"topics": [{"name": "Intro", "duration": 0.05}]}, "Duration must be at least 0.1 hours"),
    ({"topics": [{"name": "Intro", "duration": float("nan")}]}, "Duration must be at least 0.1 hours"),
    ({"topics": [{"name": "Intro", "duration": float("inf")}]}, "Duration must be at least 0.1 hours"),
    ({"topics": [{"name": "Intro", "duration": "long"}]}, "Duration must be a number"),
    ({"validity_to": "2024-01-01"}, "cannot be before"),
])
def test_module_validation(overrides, message):
    with pytest.raises(ValueError, match=message):
        training.create_training_module(_module(**overrides))


def test_update_recomputes_duration():
    module = training.create_training_module(_module())
    updated = training.update_training_module(module["id"], {
        "topics": [{"name": "Everything", "duration": 4}],
    })
    assert updated["total_duration"] == 4
    assert updated["module_name"] == "Motor Claims Handling"
    assert training.update_training_module("missing", {"module_name": "X"}) is None


def test_update_with_null_is_active_keeps_flag():
    module = training.create_training_module(_module(is_active=False))
    updated = training.update_training_module(module["id"], {"module_name": "Renamed", "is_active": None})
    assert updated["is_active"] is False


def test_module_search_and_filters():
    assert len(training.list_training_modules(search="health")) == 1
    assert len(training.list_training_modules(search="fire insurance")) == 1
    assert len(training.list_training_modules(agent_type_id="1")) == 1

    module = training.create_training_module(_module(is_active=False))
    inactive = training.list_training_modules(status="inactive")
    assert [m["id"] for m in inactive] == [module["id"]]


def test_delete_module():
    module = training.create_training_module(_module())
    assert training.delete_training_module(module["id"]) is True
    assert training.get_training_module(module["id"]) is None


def test_certificate_summary():
    summary = training.certificate_summary(training.list_certificates())
    assert summary == {"total": 4, "active": 3, "expired": 1, "revoked": 0, "total_downloads": 6}


def test_certificate_filters():
    assert len(training.list_certificates(search="cert-2023")) == 1
    assert len(training.list_certificates(policy_type="Health Insurance")) == 2
    assert len(training.list_certificates(status="all")) == 4


def test_search_treats_wildcards_literally():
    assert training.list_training_modules(search="%") == []
    assert training.list_training_modules(search="_") == []
    assert training.list_certificates(search="%") == []


def test_download_and_revoke():
    certificate = training.list_certificates(search="Emily")[0]

    downloaded = training.record_certificate_download(certificate["id"])
    assert downloaded["download_count"] == 1
    assert downloaded["last_downloaded"] is not None

    revoked = training.revoke_certificate(certificate["id"])
    assert revoked["status"] == "REVOKED"
    with pytest.raises(ValueError, match="revoked"):
        training.record_certificate_download(certificate["id"])

    assert training.record_certificate_download("missing") is None
    assert training.revoke_certificate("missing") is None


def test_api_modules(client):
    response = client.post("/api/training/modules", json=_module())
    assert response.status_code == 201
    module_id = response.json()["data"]["id"]

    response = client.put(f"/api/training/modules/{module_id}", json={"module_name": "Motor Claims 101"})
    assert response.json()["data"]["module_name"] == "Motor Claims 101"

    body = client.get("/api/training/modules").json()
    assert body["total"] == 4

    assert client.delete(f"/api/training/modules/{module_id}").status_code == 200
    assert client.get(f"/api/training/modules/{module_id}").status_code == 404


def test_api_rejects_short_topic(client):
    response = client.post("/api/training/modules", json=_module(topics=[{"name": "Intro", "duration": 0}]))
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_api_certificates(client):
    body = client.get("/api/training/certificates", params={"status": "EXPIRED"}).json()
    assert body["summary"]["total"] == 1
    certificate_id = body["data"][0]["id"]

    response = client.post(f"/api/training/certificates/{certificate_id}/revoke")
    assert response.json()["data"]["status"] == "REVOKED"

    response = client.post(f"/api/training/certificates/{certificate_id}/download")
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Certificate has been revoked"}

    assert client.post("/api/training/certificates/missing/download").status_code == 404
