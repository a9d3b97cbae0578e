"""Employee Routes — HTTP status codes, payload shapes and caller scoping.

Invariants:
    - Caller identity travels in the X-Caller-Principal header
    - Domain errors come back in the {"error": {...}} envelope

Design Decisions:
    - Tests drive the real app with get_db overridden (see conftest)
"""

P1 = {"X-Caller-Principal": "principal-one"}
P2 = {"X-Caller-Principal": "principal-two"}
BASE = "/api/v1/employees"


async def _create(client, headers=P1, name="A", email="a@x"):
    res = await client.post(BASE, json={"name": name, "email": email}, headers=headers)
    assert res.status_code == 201
    return res.json()


async def test_create_returns_201_with_record(client):
    body = await _create(client)
    assert body["id"] == 1
    assert body["employer_id"] == "principal-one"
    assert body["rating"] is None
    assert body["transferable"] is False
    assert body["created_at"] is not None


async def test_missing_caller_header_is_401(client):
    res = await client.get(BASE)
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHENTICATED"


async def test_blank_caller_header_is_401(client):
    res = await client.get(BASE, headers={"X-Caller-Principal": "   "})
    assert res.status_code == 401


async def test_overlong_caller_header_is_401_and_allocates_nothing(client):
    res = await client.post(
        BASE, json={"name": "A", "email": "a@x"},
        headers={"X-Caller-Principal": "p" * 201},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHENTICATED"
    assert (await _create(client))["id"] == 1


async def test_caller_header_at_column_width_is_accepted(client):
    principal = "p" * 200
    body = await _create(client, headers={"X-Caller-Principal": principal})
    assert body["employer_id"] == principal


async def test_create_empty_name_is_invalid_input(client):
    res = await client.post(BASE, json={"name": "", "email": "a@x"}, headers=P1)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_INPUT"


async def test_create_whitespace_name_is_accepted(client):
    res = await client.post(BASE, json={"name": "   ", "email": "a@x"}, headers=P1)
    assert res.status_code == 201
    assert res.json()["name"] == "   "


async def test_create_missing_field_is_validation_error(client):
    res = await client.post(BASE, json={"name": "A"}, headers=P1)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_validation_error_shares_the_domain_envelope(client):
    res = await client.post(BASE, json={"name": "A"}, headers=P1)
    error = res.json()["error"]
    assert error["category"] == "validation"
    assert error["timestamp"]
    assert error["context"] == {"employee_id": None, "operation": None}
    assert [d["field"] for d in error["details"]] == ["body.email"]


async def test_list_empty_is_404(client):
    res = await client.get(BASE, headers=P1)
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "No employee records found"


async def test_list_returns_only_own_records(client):
    await _create(client, P1, name="A")
    await _create(client, P2, name="B")
    res = await client.get(BASE, headers=P1)
    assert res.status_code == 200
    assert [e["name"] for e in res.json()] == ["A"]


async def test_get_foreign_record_is_404(client):
    created = await _create(client)
    res = await client.get(f"{BASE}/{created['id']}", headers=P2)
    assert res.status_code == 404
    assert res.json()["error"]["context"]["employee_id"] == created["id"]


async def test_negative_id_is_validation_error(client):
    res = await client.get(f"{BASE}/-1", headers=P1)
    assert res.status_code == 400


async def test_set_rating(client):
    created = await _create(client)
    res = await client.put(
        f"{BASE}/{created['id']}/rating", json={"rating": "good"}, headers=P1,
    )
    assert res.status_code == 200
    assert res.json()["rating"] == "good"


async def test_set_rating_invalid_type(client):
    created = await _create(client)
    res = await client.put(
        f"{BASE}/{created['id']}/rating", json={"rating": "stellar"}, headers=P1,
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_TYPE"


async def test_toggle_by_non_owner_is_403(client):
    created = await _create(client)
    res = await client.post(f"{BASE}/{created['id']}/transferable", headers=P2)
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "FORBIDDEN"


async def test_transfer_and_delete_flow(client):
    created = await _create(client)
    employee_url = f"{BASE}/{created['id']}"

    res = await client.post(f"{employee_url}/claim", headers=P2)
    assert res.status_code == 403

    res = await client.post(f"{employee_url}/transferable", headers=P1)
    assert res.json() == {
        "message": "Employee with ID: 1 has transferable toggled to: true",
    }

    res = await client.post(f"{employee_url}/claim", headers=P2)
    assert res.status_code == 200
    assert res.json()["message"] == "Employee with ID: 1 has been added to your employ"

    assert (await client.get(employee_url, headers=P1)).status_code == 404
    assert (await client.delete(employee_url, headers=P1)).status_code == 403

    res = await client.delete(employee_url, headers=P2)
    assert res.status_code == 200
    assert res.json()["message"] == "Employee with ID: 1 has been deleted"
    assert (await client.get(employee_url, headers=P2)).status_code == 404


async def test_id_beyond_bigint_is_validation_error(client):
    res = await client.get(f"{BASE}/{2**63}", headers=P1)
    assert res.status_code == 400
