"""Tests for api.py: endpoints, error statuses, config management."""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    from api import app
    with TestClient(app) as c:
        yield c


class TestHealthEndpoint:
    def test_health_ok(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestFormatsEndpoint:
    def test_lists_formats(self, client):
        resp = client.get("/formats")
        assert resp.status_code == 200
        assert resp.json() == [
            {"extension": "json", "file_type": "JSON"},
            {"extension": "csv", "file_type": "CSV"},
            {"extension": "xml", "file_type": "XML"},
        ]


class TestInspectEndpoint:
    def test_inspect_success(self, client, sample_json):
        resp = client.post("/inspect", json={"path": sample_json})
        assert resp.status_code == 200
        data = resp.json()
        assert data["file_type"] == "JSON"
        assert data["ok"] is True
        assert data["output"].startswith('{\n  "name": "Ada"')

    def test_inspect_parse_error_is_200(self, client, write_file):
        resp = client.post("/inspect", json={"path": write_file("bad.json", '{"a":}')})
        assert resp.status_code == 200
        data = resp.json()
        assert data["ok"] is False
        assert data["output"].startswith("JSON Parse Error:")

    def test_missing_file_404(self, client, tmp_path):
        resp = client.post("/inspect", json={"path": str(tmp_path / "nope.json")})
        assert resp.status_code == 404

    def test_no_extension_400(self, client, write_file):
        resp = client.post("/inspect", json={"path": write_file("LICENSE", "MIT")})
        assert resp.status_code == 400

    def test_unsupported_415(self, client, write_file):
        resp = client.post("/inspect", json={"path": write_file("a.txt", "hi")})
        assert resp.status_code == 415
        assert "txt" in resp.json()["detail"]

    def test_empty_file_422(self, client, write_file):
        resp = client.post("/inspect", json={"path": write_file("a.csv", "")})
        assert resp.status_code == 422

    def test_blank_path_rejected(self, client):
        resp = client.post("/inspect", json={"path": "   "})
        assert resp.status_code == 422

    def test_unexpected_error_hides_details(self, client, sample_json):
        with patch("api.inspect_file", side_effect=RuntimeError("secret internals")):
            resp = client.post("/inspect", json={"path": sample_json})
        assert resp.status_code == 500
        assert "secret" not in resp.json()["detail"]


class TestRenderEndpoint:
    def test_render_csv(self, client):
        resp = client.post("/render", json={"format": "CSV", "content": "a,b\n1,2\n"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["file_type"] == "CSV"
        assert "Row   1: [1] | [2]" in data["output"]

    def test_render_accepts_leading_dot(self, client):
        resp = client.post("/render", json={"format": ".xml", "content": "<a/>"})
        assert resp.status_code == 200
        assert resp.json()["file_type"] == "XML"

    def test_render_unsupported(self, client):
        resp = client.post("/render", json={"format": "yaml", "content": "a: 1"})
        assert resp.status_code == 415

    def test_render_empty_content(self, client):
        resp = client.post("/render", json={"format": "json", "content": ""})
        assert resp.status_code == 422


class TestConfigEndpoints:
    def test_get_config(self, client):
        resp = client.get("/config")
        assert resp.status_code == 200
        assert resp.json()["config"]["CSV_MAX_ROWS"] == 10

    def test_update_config(self, client):
        resp = client.put("/config", json={"CSV_MAX_ROWS": 3})
        assert resp.status_code == 200
        assert resp.json()["config"]["CSV_MAX_ROWS"] == 3

        resp = client.post("/render", json={"format": "csv", "content": "a\n1\n2\n3\n4\n"})
        assert "... (+1 more rows)" in resp.json()["output"]

    def test_update_unknown_key(self, client):
        resp = client.put("/config", json={"NOPE": 1})
        assert resp.status_code == 400

    def test_update_wrong_type(self, client):
        resp = client.put("/config", json={"CSV_MAX_ROWS": "ten"})
        assert resp.status_code == 400

    def test_save_config(self, client):
        with patch("api.save_config") as mock_save:
            resp = client.post("/config/save")
        assert resp.status_code == 200
        mock_save.assert_called_once()

    def test_load_config_missing_file(self, client):
        with patch("api.load_config", side_effect=FileNotFoundError):
            resp = client.post("/config/load")
        assert resp.status_code == 404
