from fastapi.testclient import TestClient

from doc_analysis.application.api.main import analysis_service_dep, app, settings_dep


def client_for(settings, service) -> TestClient:
    app.dependency_overrides[settings_dep] = lambda: settings
    app.dependency_overrides[analysis_service_dep] = lambda: service
    return TestClient(app)


def teardown_function():
    app.dependency_overrides.clear()


def test_root(settings, service):
    resp = client_for(settings, service).get("/")
    assert resp.status_code == 200
    assert resp.json()["ok"] is True


def test_analyze_with_defaults(settings, service):
    resp = client_for(settings, service).post("/analyze", json={})
    assert resp.status_code == 200
    body = resp.json()
    assert body["target_word"] == "war"
    assert body["documents_with_word"] == 2
    assert abs(body["term_frequency"] - 0.6) < 1e-9


def test_analyze_failure_is_422(settings, service):
    resp = client_for(settings, service).post(
        "/analyze", json={"sources": ["https://example.test/a"], "target_word": "war"}
    )
    assert resp.status_code == 422
    assert "InvalidArgumentError" in resp.json()["detail"]


def test_analyze_empty_sources_is_422(settings, service):
    resp = client_for(settings, service).post("/analyze", json={"sources": []})
    assert resp.status_code == 422
    assert "InvalidArgumentError" in resp.json()["detail"]
