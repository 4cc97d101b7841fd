import asyncio

import pytest

from sales_console.controllers.listing import ListController, SalesController, SalespeopleController
from sales_console.core.gateway import GatewayError
from sales_console.schemas.records import Sale

pytestmark = pytest.mark.anyio

async def test_refresh_maps_snake_case_to_model(gateway, service):
    service.salespeople = [
        {"id": 1, "first_name": "Jo", "last_name": "Ng", "department": "Sales", "hire_date": "2020-01-01", "salary": 50000},
    ]
    controller = SalespeopleController(gateway)
    assert controller.records == ()

    await controller.refresh()
    assert [s.view() for s in controller.records] == [
        {"id": 1, "firstName": "Jo", "lastName": "Ng", "department": "Sales", "hireDate": "2020-01-01", "salary": 50000},
    ]

async def test_refresh_sales_keeps_server_order(gateway, service):
    service.sales.reverse()
    controller = SalesController(gateway)
    await controller.refresh()
    assert [s.id for s in controller.records] == [2, 1]
    first = controller.records[0].view()
    assert first["customerFirstName"] == "Bob"
    assert first["salespersonId"] == 2
    assert first["total"] == 250.0

async def test_empty_list_replaces_sequence(gateway, service):
    controller = SalesController(gateway)
    await controller.refresh()
    service.sales.clear()
    await controller.refresh()
    assert controller.records == ()

async def test_failed_refresh_leaves_list_unchanged(gateway, service):
    controller = SalespeopleController(gateway)
    await controller.refresh()
    before = controller.records

    service.fail["GET /salesperson"] = 500
    await controller.refresh()
    assert controller.records == before
    assert isinstance(controller.last_error, GatewayError)
    assert controller.last_error.status_code == 500

    del service.fail["GET /salesperson"]
    await controller.refresh()
    assert controller.last_error is None

async def test_malformed_body_is_a_failed_refresh(gateway, service):
    controller = SalespeopleController(gateway)
    await controller.refresh()
    service.salespeople = [{"id": "not-a-number", "salary": -5}]
    await controller.refresh()
    assert len(controller.records) == 2
    assert controller.last_error is not None

@pytest.mark.parametrize("fail", [False, True])
async def test_create_then_exactly_one_refetch(gateway, service, fail):
    if fail:
        service.fail["POST /sale"] = 500
    controller = SalesController(gateway)
    draft = Sale(customer_first_name="Dee", customer_last_name="Fox", date="2024-02-02", total=75, salesperson_id=2)

    await controller.create(draft)
    assert service.count("POST", "/sale") == 1
    assert service.count("GET", "/sale") == 1
    assert len(controller.records) == (2 if fail else 3)

@pytest.mark.parametrize("fail", [False, True])
async def test_update_then_exactly_one_refetch(gateway, service, fail):
    if fail:
        service.fail["PUT /sale/1"] = 409
    controller = SalesController(gateway)
    await controller.refresh()
    draft = controller.records[0].model_copy(update={"total": 9999.0})

    await controller.update(1, draft)
    assert service.count("PUT", "/sale/1") == 1
    assert service.count("GET", "/sale") == 2
    assert controller.records[0].total == (1000.5 if fail else 9999.0)

async def test_delete_unknown_still_refetches(gateway, service):
    controller = SalesController(gateway)
    await controller.delete(404404)
    assert service.count("DELETE", "/sale/404404") == 1
    assert service.count("GET", "/sale") == 1
    assert len(controller.records) == 2

async def test_delete_salesperson_refetches(gateway, service):
    controller = SalespeopleController(gateway)
    await controller.refresh()
    await controller.delete(1)
    assert service.count("GET", "/salesperson") == 2
    assert [s.id for s in controller.records] == [2]

async def test_mutation_does_not_touch_list_locally(gateway, service):
    controller = SalesController(gateway)
    await controller.refresh()
    # Both the delete and the refetch fail: the list must stay exactly as it was
    service.fail["DELETE /sale/1"] = 500
    service.fail["GET /sale"] = 503
    await controller.delete(1)
    assert [s.id for s in controller.records] == [1, 2]

async def test_superseded_refresh_cannot_overwrite_newer_data(gateway, service):
    controller = SalespeopleController(gateway)
    service.delays = [0.2, 0.0]

    slow = controller.refresh()
    await asyncio.sleep(0.05)  # slow request has read the old list server-side
    service.salespeople.append(
        {"id": 3, "first_name": "Cy", "last_name": "Do", "department": "Ops", "hire_date": "2022-03-03", "salary": 40000}
    )
    fast = controller.refresh()

    await fast
    assert [s.id for s in controller.records] == [1, 2, 3]
    await slow
    assert [s.id for s in controller.records] == [1, 2, 3]

async def test_records_is_a_read_only_snapshot(gateway):
    controller = SalespeopleController(gateway)
    await controller.refresh()
    snapshot = controller.records
    assert isinstance(snapshot, tuple)
    with pytest.raises(AttributeError):
        snapshot.append(None)

async def test_unbuildable_request_still_refetches(gateway, service):
    controller = SalesController(gateway)
    await controller.delete("1\x00")
    assert service.count("GET", "/sale") == 1
    assert len(controller.records) == 2

async def test_superseded_refresh_failing_late_leaves_state_alone(gateway, service):
    controller = SalespeopleController(gateway)
    service.delays = [(0.2, 500), 0.0]

    slow = controller.refresh()
    await asyncio.sleep(0.05)
    fast = controller.refresh()

    await fast
    assert [s.id for s in controller.records] == [1, 2]
    assert controller.last_error is None
    await slow
    assert [s.id for s in controller.records] == [1, 2]
    assert controller.last_error is None

async def test_list_controller_needs_a_list_call(gateway):
    with pytest.raises(TypeError):
        ListController(gateway)
