"""
Console Demo API - Employee Registry Tests
===========================================

What we test:
    ✅ GET /employee appends and returns the whole registry + message
    ✅ N appends yield N records in insertion order
    ✅ POST /employee always answers "Saved Successfully"
    ✅ GET /employees lists without mutating
    ✅ Non-object bodies are rejected before reaching the registry
    ✅ Concurrent appends lose nothing (HTTP level and raw threads)
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from console_demo.schemas.employee import Employee
from console_demo.services.employee_registry import employee_registry


class TestEmployeeRegistry:
    """Unit tests for EmployeeRegistry."""

    def test_starts_empty(self, registry):
        assert len(registry) == 0
        assert registry.snapshot() == []

    def test_append_returns_size(self, registry):
        assert registry.append(Employee(name="A")) == 1
        assert registry.append(Employee(name="B")) == 2

    def test_append_and_snapshot_includes_new_record(self, registry):
        registry.append(Employee(name="A"))
        snapshot = registry.append_and_snapshot(Employee(name="B"))

        assert [e.model_dump() for e in snapshot] == [{"name": "A"}, {"name": "B"}]

    def test_snapshot_is_a_copy(self, registry):
        registry.append(Employee(name="A"))
        snapshot = registry.snapshot()
        registry.append(Employee(name="B"))

        assert len(snapshot) == 1
        assert len(registry) == 2

    def test_duplicates_are_kept(self, registry):
        registry.append(Employee(name="A"))
        registry.append(Employee(name="A"))

        assert len(registry) == 2

    def test_concurrent_threads_lose_no_appends(self, registry):
        def worker(start):
            for i in range(200):
                registry.append(Employee(n=start + i))

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(worker, range(0, 1600, 200)))

        values = sorted(e.model_dump()["n"] for e in registry.snapshot())
        assert values == list(range(1600))

    def test_reset(self, registry):
        registry.append(Employee(name="A"))
        registry.reset()
        assert len(registry) == 0


class TestEmployeeSchema:

    def test_arbitrary_fields_are_kept(self):
        payload = {"name": "Alice", "age": 30, "tags": ["x"], "address": {"city": "Pune"}}
        assert Employee.model_validate(payload).model_dump() == payload

    def test_empty_object_is_accepted(self):
        assert Employee.model_validate({}).model_dump() == {}


class TestAddEmployeeAndList:
    """GET /employee (append + list)."""

    @pytest.mark.asyncio
    async def test_alice_scenario(self, test_client):
        response = await test_client.request("GET", "/employee", json={"name": "Alice"})

        assert response.status_code == 200
        assert response.json() == {
            "data": [{"name": "Alice"}],
            "message": "Employee added successfully",
        }

    @pytest.mark.asyncio
    async def test_n_appends_preserve_order(self, test_client):
        payloads = [{"name": f"emp-{i}", "index": i} for i in range(10)]

        for n, payload in enumerate(payloads, start=1):
            response = await test_client.request("GET", "/employee", json=payload)
            data = response.json()["data"]
            assert len(data) == n
            assert data == payloads[:n]

    @pytest.mark.asyncio
    async def test_sees_records_from_post(self, test_client):
        await test_client.post("/employee", json={"name": "Bob"})

        response = await test_client.request("GET", "/employee", json={"name": "Carol"})

        assert response.json()["data"] == [{"name": "Bob"}, {"name": "Carol"}]


class TestPostEmployee:
    """POST /employee."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [{"name": "Alice"}, {}, {"status": 401, "message": "not an envelope"}],
    )
    async def test_always_saved_successfully(self, test_client, payload):
        response = await test_client.post("/employee", json=payload)

        assert response.status_code == 200
        assert response.text == "Saved Successfully"
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_appends_to_registry(self, test_client):
        await test_client.post("/employee", json={"name": "Alice"})
        await test_client.post("/employee", json={"name": "Bob"})

        assert [e.model_dump() for e in employee_registry.snapshot()] == [
            {"name": "Alice"},
            {"name": "Bob"},
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ['"just a string"', "[1, 2, 3]", "not json"])
    async def test_non_object_body_rejected(self, test_client, body):
        response = await test_client.post(
            "/employee",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert len(employee_registry) == 0

    @pytest.mark.asyncio
    async def test_concurrent_posts_all_recorded(self, test_client):
        responses = await asyncio.gather(
            *(test_client.post("/employee", json={"n": i}) for i in range(50))
        )

        accepted = [r for r in responses if r.status_code == 200]
        assert len(accepted) == 50
        assert len(employee_registry) == len(accepted)
        assert sorted(e.model_dump()["n"] for e in employee_registry.snapshot()) == list(range(50))


class TestListEmployees:

    @pytest.mark.asyncio
    async def test_empty(self, test_client):
        response = await test_client.get("/employees")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_lists_without_mutating(self, test_client):
        await test_client.post("/employee", json={"name": "Alice"})

        first = await test_client.get("/employees")
        second = await test_client.get("/employees")

        assert first.json() == [{"name": "Alice"}]
        assert second.json() == [{"name": "Alice"}]
        assert len(employee_registry) == 1
