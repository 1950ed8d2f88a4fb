"""Invoice Routes — list, page count, views and form mutations over HTTP.

Tests cover:
    - List returns rows and pagination; garbage page values mean page 1
    - A mutation invalidates the cached list so the next read sees it
    - Create/update answer 303 to the list; invalid forms answer 400 with field errors
    - Edit view is 404 for missing or malformed ids
    - Delete answers 204 and repeating it is still 204
"""

from uuid import uuid4


async def test_list_invoices(client):
    res = await client.get("/dashboard/invoices")
    assert res.status_code == 200
    body = res.json()
    assert body["query"] == ""
    assert len(body["invoices"]) == 5
    assert body["pagination"] == {"current_page": 1, "total_pages": 1, "labels": [1]}


async def test_list_invoices_search_and_bad_page(client):
    res = await client.get("/dashboard/invoices", params={"query": "lee", "page": "abc"})
    body = res.json()
    assert body["pagination"]["current_page"] == 1
    assert {row["name"] for row in body["invoices"]} == {"Lee Robinson"}


async def test_page_count_route(client):
    res = await client.get("/dashboard/invoices/pages", params={"query": "pending"})
    assert res.json() == {"query": "pending", "total_pages": 1}


async def test_create_view_lists_customers(client):
    res = await client.get("/dashboard/invoices/create")
    assert res.status_code == 200
    assert [c["name"] for c in res.json()["customers"]][0] == "Amy Burns"


async def test_create_redirects_and_refreshes_list(client, seeded):
    # Prime the cache
    before = await client.get("/dashboard/invoices")
    assert len(before.json()["invoices"]) == 5

    res = await client.post("/dashboard/invoices", json={
        "customerId": str(seeded["customers"]["amy"]),
        "amount": "19.99",
        "status": "pending",
    })
    assert res.status_code == 303
    assert res.headers["location"] == "/dashboard/invoices"

    after = await client.get("/dashboard/invoices")
    assert len(after.json()["invoices"]) == 6
    assert any(row["amount"] == 1999 for row in after.json()["invoices"])


async def test_create_invalid_form_is_400_with_field_errors(client, seeded):
    res = await client.post("/dashboard/invoices", json={
        "customerId": str(seeded["customers"]["amy"]),
        "amount": "0",
        "status": "pending",
    })
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["message"] == "Missing Fields. Failed to Create Invoice."
    assert error["errors"] == {"amount": ["Please enter an amount greater than $0."]}
    assert error["values"]["amount"] == "0"


async def test_edit_view(client, seeded):
    invoice_id = seeded["invoices"]["delba_pending"]
    res = await client.get(f"/dashboard/invoices/{invoice_id}/edit")
    assert res.status_code == 200
    body = res.json()
    assert body["invoice"]["amount"] == 157.95
    assert body["invoice"]["status"] == "pending"
    assert len(body["customers"]) == 4


async def test_edit_view_missing_is_404(client):
    res = await client.get(f"/dashboard/invoices/{uuid4()}/edit")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_edit_view_malformed_id_is_404(client):
    res = await client.get("/dashboard/invoices/not-a-uuid/edit")
    assert res.status_code == 404


async def test_update_redirects(client, seeded):
    invoice_id = seeded["invoices"]["delba_pending"]
    res = await client.put(f"/dashboard/invoices/{invoice_id}", json={
        "customerId": str(seeded["customers"]["delba"]),
        "amount": "100",
        "status": "paid",
    })
    assert res.status_code == 303
    assert res.headers["location"] == "/dashboard/invoices"

    edit = await client.get(f"/dashboard/invoices/{invoice_id}/edit")
    assert edit.json()["invoice"]["amount"] == 100.0
    assert edit.json()["invoice"]["status"] == "paid"


async def test_update_invalid_form_is_400(client, seeded):
    invoice_id = seeded["invoices"]["delba_pending"]
    res = await client.put(f"/dashboard/invoices/{invoice_id}", json={"amount": "5"})
    assert res.status_code == 400
    errors = res.json()["error"]["errors"]
    assert set(errors) == {"customerId", "status"}


async def test_delete_is_204_and_idempotent(client, seeded):
    invoice_id = seeded["invoices"]["evil_paid"]
    first = await client.delete(f"/dashboard/invoices/{invoice_id}")
    second = await client.delete(f"/dashboard/invoices/{invoice_id}")
    assert first.status_code == 204
    assert second.status_code == 204

    listing = await client.get("/dashboard/invoices")
    assert str(invoice_id) not in {row["id"] for row in listing.json()["invoices"]}
