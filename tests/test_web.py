"""Tests for the FastAPI adapter."""

import pytest
from fastapi.testclient import TestClient

from marie import ins
from web.app import app


@pytest.fixture
def client():
    return TestClient(app)


class TestRunEndpoint:
    """POST /api/run."""

    def test_run_ok(self, client):
        response = client.post(
            "/api/run",
            json={
                "program": [ins.LOAD(10), ins.ADD(11), ins.STORE(12)],
                "initial_memory": {"10": 5, "11": 7},
                "watch": [12],
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "halted"
        assert data["registers"]["AC"] == 12
        assert data["memory"] == {"12": 12}
        assert data["cycles"] == 4

    def test_run_with_inputs(self, client):
        response = client.post(
            "/api/run",
            json={
                "program": [ins.INPUT(), ins.OUTPUT()],
                "inputs": [255],
                "options": {"parse_to": "binary"},
            },
        )
        data = response.json()
        assert data["outputs"] == [255]
        assert data["trace"][-1] == "Output: AC = 11111111"

    def test_faulted_run(self, client):
        response = client.post(
            "/api/run",
            json={
                "program": [ins.LOAD(200)],
                "options": {"memory_size": 16, "error_logging": True},
            },
        )
        data = response.json()
        assert data["status"] == "faulted"
        assert data["error"]["type"] == "AddressingFault"

    def test_cycle_limit(self, client):
        # Word 0 is a no-op, so an all-zero store never reaches HALT
        program = [0] * 50 + [ins.HALT()]
        response = client.post(
            "/api/run",
            json={"program": program, "options": {"max_cycles": 10}},
        )
        data = response.json()
        assert data["status"] == "error"
        assert data["error"]["type"] == "CycleLimitExceeded"
        assert data["cycles"] == 10

    def test_halt_at_cycle_limit_is_not_an_error(self, client):
        response = client.post(
            "/api/run",
            json={"program": [ins.LOAD(9)], "options": {"max_cycles": 2}},
        )
        assert response.json()["status"] == "halted"

    def test_non_numeric_accumulator_serializes(self, client):
        response = client.post(
            "/api/run",
            json={"program": [ins.INPUT()], "inputs": ["abc"]},
        )
        data = response.json()
        assert data["status"] == "halted"
        assert data["registers"]["AC"] is None

    def test_invalid_memory_key(self, client):
        response = client.post(
            "/api/run",
            json={"program": [], "initial_memory": {"abc": 1}},
        )
        assert response.status_code == 400

    def test_memory_key_out_of_range(self, client):
        response = client.post(
            "/api/run",
            json={"program": [], "initial_memory": {"20": 1}, "options": {"memory_size": 16}},
        )
        assert response.status_code == 400

    def test_invalid_options(self, client):
        response = client.post(
            "/api/run",
            json={"program": [], "options": {"parse_to": "roman"}},
        )
        assert response.status_code == 422


class TestAssembleEndpoint:
    """POST /api/assemble and GET /api/opcodes."""

    def test_assemble(self, client):
        response = client.post(
            "/api/assemble",
            json={"instructions": [{"mnemonic": "LOAD", "address": 10}, {"mnemonic": "halt"}]},
        )
        assert response.status_code == 200
        assert response.json() == {"words": [ins.LOAD(10), 3840]}

    def test_assemble_unknown(self, client):
        response = client.post(
            "/api/assemble",
            json={"instructions": [{"mnemonic": "JUMP", "address": 1}]},
        )
        assert response.status_code == 400

    def test_opcodes(self, client):
        response = client.get("/api/opcodes")
        assert response.status_code == 200
        mnemonics = [row["mnemonic"] for row in response.json()]
        assert mnemonics == ["LOAD", "STORE", "ADD", "SUBTRACT", "INPUT", "OUTPUT", "HALT"]
