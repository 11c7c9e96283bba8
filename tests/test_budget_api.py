from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.records import MANAGEMENT_FIRM_BUDGET, build_reference, coerce_number, merge_update
from api.storage import InMemoryRepository
from core.errors import InvalidPayloadError

BUDGETS = "/api/budgets/management-firm"
MASTER = "/api/budgets/master"


@pytest.fixture()
def client() -> Iterator[TestClient]:
    with TestClient(create_app()) as test_client:
        yield test_client


def _create(client: TestClient, path: str = BUDGETS, **payload: object) -> dict:
    response = client.post(path, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_with_empty_body_fills_defaults(client: TestClient) -> None:
    created = _create(client)

    record = created["data"]
    assert created["id"] == record["id"]
    assert created["referenceCode"] == f"BUD-{record['id'][:8].upper()}"
    assert record["totalCost"] == 0
    assert record["vatAmount"] == 0
    assert record["serviceName"] == ""
    assert record["budgetPeriodFrom"] is None
    assert record["documents"] == []
    assert record["createdAt"] == record["updatedAt"]
    assert record["createdAt"].endswith("Z")


def test_create_coerces_numeric_strings(client: TestClient) -> None:
    record = _create(client, totalCost="150", vatAmount="1,250.50", serviceName="Guarding")["data"]

    assert record["totalCost"] == 150
    assert record["vatAmount"] == 1250.5
    assert record["serviceName"] == "Guarding"
    assert record["managementFirmGroupId"] == ""


def test_create_stores_numeric_text_fields_as_strings(client: TestClient) -> None:
    record = _create(client, managementFirmGroupId=5, budgetPeriodCode=2025)["data"]

    assert record["managementFirmGroupId"] == "5"
    assert record["budgetPeriodCode"] == "2025"


def test_create_ignores_client_supplied_identity(client: TestClient) -> None:
    record = _create(client, id="chosen", createdAt="2000-01-01T00:00:00Z", documents=["x"])["data"]

    assert record["id"] != "chosen"
    assert record["createdAt"] != "2000-01-01T00:00:00Z"
    assert record["documents"] == []


def test_create_rejects_non_numeric_amounts(client: TestClient) -> None:
    response = client.post(BUDGETS, json={"totalCost": "lots"})

    assert response.status_code == 422
    assert response.json() == {"message": "totalCost must be a number"}


def test_create_rejects_non_object_body(client: TestClient) -> None:
    response = client.post(BUDGETS, json=[1, 2, 3])

    assert response.status_code == 422
    assert response.json()["message"].startswith("Invalid request body")


def test_get_and_list_records(client: TestClient) -> None:
    first = _create(client, serviceName="One")
    second = _create(client, serviceName="Two")

    fetched = client.get(f"{BUDGETS}/{first['id']}")
    listed = client.get(BUDGETS)

    assert fetched.status_code == 200
    assert fetched.json() == {"budget": first["data"]}
    assert [record["serviceName"] for record in listed.json()["budgets"]] == ["One", "Two"]
    assert listed.json()["budgets"][1]["id"] == second["id"]


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_unknown_id_returns_404(client: TestClient, method: str) -> None:
    kwargs = {"json": {"serviceName": "x"}} if method == "put" else {}

    response = getattr(client, method)(f"{BUDGETS}/missing", **kwargs)

    assert response.status_code == 404
    assert response.json() == {"message": "Budget not found"}


def test_update_merges_and_keeps_identity(client: TestClient) -> None:
    created = _create(client, serviceName="Guarding", totalCost=100)["data"]

    response = client.put(
        f"{BUDGETS}/{created['id']}",
        json={"serviceName": "Night Guarding", "vatAmount": "5", "id": "other", "createdAt": "never", "note": "x"},
    )

    assert response.status_code == 200
    updated = response.json()["budget"]
    assert updated["id"] == created["id"]
    assert updated["createdAt"] == created["createdAt"]
    assert updated["updatedAt"] >= created["updatedAt"]
    assert updated["serviceName"] == "Night Guarding"
    assert updated["totalCost"] == 100
    assert updated["vatAmount"] == 5
    assert updated["note"] == "x"
    assert client.get(f"{BUDGETS}/{created['id']}").json()["budget"] == updated


def test_update_rejects_non_numeric_amount(client: TestClient) -> None:
    created = _create(client, totalCost=100)["data"]

    response = client.put(f"{BUDGETS}/{created['id']}", json={"totalCost": "abc"})

    assert response.status_code == 422
    assert response.json() == {"message": "totalCost must be a number"}
    assert client.get(f"{BUDGETS}/{created['id']}").json()["budget"]["totalCost"] == 100


def test_update_with_null_period_keeps_stored_period(client: TestClient) -> None:
    created = _create(client, budgetPeriodFrom="2025-01-01", budgetPeriodTo="2025-12-31")["data"]

    response = client.put(
        f"{BUDGETS}/{created['id']}",
        json={"budgetPeriodFrom": None, "budgetPeriodTo": "2026-06-30"},
    )

    assert response.status_code == 200
    updated = response.json()["budget"]
    assert updated["budgetPeriodFrom"] == "2025-01-01"
    assert updated["budgetPeriodTo"] == "2026-06-30"


def test_delete_removes_record(client: TestClient) -> None:
    created = _create(client)

    response = client.delete(f"{BUDGETS}/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get(f"{BUDGETS}/{created['id']}").status_code == 404
    assert client.delete(f"{BUDGETS}/{created['id']}").status_code == 404


def test_master_budget_resource(client: TestClient) -> None:
    created = _create(client, MASTER, chargeTypeId="12", chargeType="Service Charge")

    assert created["referenceCode"].startswith("MBUD-")
    assert created["data"]["chargeTypeId"] == 12
    missing = client.get(f"{MASTER}/missing")
    assert missing.json() == {"message": "Master Budget not found"}
    assert client.get(BUDGETS).json() == {"budgets": []}


def test_form_options(client: TestClient) -> None:
    master = client.get(f"{MASTER}/form-options").json()["options"]
    budgets = client.get(f"{BUDGETS}/form-options").json()["options"]

    assert master["chargeTypes"][0] == {"id": "1", "label": "Service Charge", "description": "Regular service charges"}
    assert {"categories", "groupNames", "services"} <= set(master)
    assert budgets["budgetPeriods"][1]["code"] == "2025"


def test_injected_repository_is_used() -> None:
    repository = InMemoryRepository()

    with TestClient(create_app({"master_budget": repository})) as client:
        created = _create(client, MASTER, chargeTypeId=7)

    assert len(repository) == 1
    assert repository.get(created["id"])["chargeTypeId"] == 7


def test_repository_returns_copies() -> None:
    repository = InMemoryRepository()
    stored = repository.put("a", {"documents": []})

    stored["documents"].append("mutated")

    assert repository.get("a") == {"documents": []}
    assert repository.delete("a")
    assert not repository.delete("a")


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, 0), ("", 0), ("  ", 0), ("1,000", 1000), (12.5, 12.5), ("3.0", 3)],
)
def test_coerce_number(value: object, expected: float) -> None:
    assert coerce_number("totalCost", value) == expected


@pytest.mark.parametrize("value", ["abc", True, ["1"], "nan"])
def test_coerce_number_rejects(value: object) -> None:
    with pytest.raises(InvalidPayloadError):
        coerce_number("totalCost", value)


def test_merge_update_keeps_existing_numbers_when_omitted() -> None:
    existing = {"id": "a", "createdAt": "t0", "updatedAt": "t0", "totalCost": 10, "vatAmount": 1}

    merged = merge_update(MANAGEMENT_FIRM_BUDGET, existing, {"totalCost": None}, now="t1")

    assert merged == {"id": "a", "createdAt": "t0", "updatedAt": "t1", "totalCost": 10, "vatAmount": 1}


def test_merge_update_keeps_existing_period_when_body_sends_null() -> None:
    existing = {"id": "a", "createdAt": "t0", "updatedAt": "t0", "budgetPeriodFrom": "2025-01-01"}

    merged = merge_update(MANAGEMENT_FIRM_BUDGET, existing, {"budgetPeriodFrom": None, "budgetPeriodTo": None}, now="t1")

    assert merged["budgetPeriodFrom"] == "2025-01-01"
    assert merged["budgetPeriodTo"] is None


def test_build_reference() -> None:
    assert build_reference("BUD", "1a2b3c4d-aaaa") == "BUD-1A2B3C4D"
