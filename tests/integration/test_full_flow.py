from fastapi.testclient import TestClient

from apps.generate.main import app as generate_app

client = TestClient(generate_app)


def test_full_flow_without_plugins():
    response = client.post("/eiffel3", params={"msgType": "EiffelActivityStartedEvent"}, json={})
    assert response.status_code == 503
    assert response.json()["result"] == "FAIL"


def test_versions_always_available():
    response = client.get("/versions")
    assert response.status_code == 200
    assert set(response.json()) == {"serviceVersion", "endpointVersions"}
