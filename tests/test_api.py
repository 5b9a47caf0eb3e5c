"""HTTP API tests using FastAPI's TestClient.

The catalog, session store and settings are overridden in conftest so the
analysis delay is zero and lookups run against the small test table.
"""

from paint_analyzer.core.config import get_settings


def _new_session(client) -> str:
    resp = client.post("/api/sessions")
    assert resp.status_code == 201
    return resp.json()["session_id"]


class TestReferenceEndpoints:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"

    def test_options(self, client):
        data = client.get("/api/options").json()
        assert [p["id"] for p in data["parking_types"]] == [
            "garage",
            "covered",
            "uncovered",
            "street",
        ]
        assert {"id": "waterSpots", "label": "Water Spots"} in data["damage_types"]
        assert {"id": "rarely", "label": "Rarely"} in data["wash_frequencies"]

    def test_makes_models_years(self, client):
        assert client.get("/api/vehicles/makes").json()["makes"][:2] == ["BMW", "Buick"]
        assert client.get("/api/vehicles/models", params={"make": "BMW"}).json() == {
            "models": ["3 Series", "X5"]
        }
        years = client.get(
            "/api/vehicles/years", params={"make": "BMW", "model": "3 Series"}
        ).json()
        assert years == {"years": ["2018", "2020"]}


class TestStatelessAnalyze:
    def test_worked_example(self, client):
        resp = client.post(
            "/api/analyze",
            json={
                "car_make": "Nope",
                "car_model": "Phantom",
                "car_year": "1999",
                "parking_type": "street",
                "wash_frequency": "rarely",
                "current_damage": ["scratches"],
            },
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["risk_score"] == 70
        assert data["urgency_level"] == "High"
        assert round(data["monthly_loss"]) == 70
        assert data["vehicle_size"] == "Sedan"

    def test_invalid_enum_rejected(self, client):
        resp = client.post("/api/analyze", json={"parking_type": "driveway"})
        assert resp.status_code == 422

    def test_rate_limit_returns_429(self, client, monkeypatch):
        limited = get_settings().model_copy(update={"rate_limit_analysis": "1/minute"})
        monkeypatch.setattr(
            "paint_analyzer.core.dependencies.get_settings", lambda: limited
        )
        assert client.post("/api/analyze", json={}).status_code == 200
        resp = client.post("/api/analyze", json={})
        assert resp.status_code == 429
        assert resp.json()["detail"] == "Rate limit exceeded. Try again later."


class TestWizardFlow:
    def test_full_wizard(self, client):
        sid = _new_session(client)

        # Step 1: vehicle via autocomplete
        resp = client.post(f"/api/sessions/{sid}/fields/make/input", json={"value": "B"})
        assert resp.json()["suggestions"]["make"]["candidates"] == ["BMW", "Buick"]

        resp = client.post(f"/api/sessions/{sid}/fields/make/input", json={"value": "Bm"})
        state = resp.json()
        assert state["form"]["car_make"] == "BMW"
        assert state["suggestions"]["make"]["visible"] is False

        client.post(f"/api/sessions/{sid}/fields/model/focus")
        resp = client.post(
            f"/api/sessions/{sid}/fields/model/select", json={"value": "3 Series"}
        )
        assert resp.json()["accepted"] is True

        client.post(f"/api/sessions/{sid}/fields/year/focus")
        resp = client.post(f"/api/sessions/{sid}/fields/year/select", json={"value": "2018"})
        assert resp.json()["form"]["car_year"] == "2018"

        resp = client.post(f"/api/sessions/{sid}/step", json={})
        assert resp.json()["step"] == 2

        # Step 2: environment
        resp = client.put(
            f"/api/sessions/{sid}/environment",
            json={"parking_type": "garage", "wash_frequency": "weekly"},
        )
        assert resp.json()["form"]["parking_type"] == "garage"
        client.post(f"/api/sessions/{sid}/step", json={})

        # Step 3: condition
        resp = client.post(f"/api/sessions/{sid}/damage/oxidation")
        assert resp.json()["form"]["current_damage"] == ["oxidation"]
        assert resp.json()["step"] == 3

        resp = client.post(f"/api/sessions/{sid}/report")
        assert resp.status_code == 200
        report = resp.json()
        # 30 + 12 + 5 + 5 + 5
        assert report["risk_score"] == 57
        assert report["vehicle_found"] is True
        assert report["additional_notes"].startswith("Oxidation can spread quickly")

        state = client.get(f"/api/sessions/{sid}").json()
        assert state["analysis"]["risk_score"] == 57
        assert state["loading"] is False

    def test_select_rejected_when_list_hidden(self, client):
        sid = _new_session(client)
        resp = client.post(f"/api/sessions/{sid}/fields/make/select", json={"value": "BMW"})
        assert resp.status_code == 200
        assert resp.json()["accepted"] is False
        assert resp.json()["form"]["car_make"] == ""

    def test_blur_keeps_list_during_grace_period(self, client):
        sid = _new_session(client)
        client.post(f"/api/sessions/{sid}/fields/make/focus")
        resp = client.post(f"/api/sessions/{sid}/fields/make/blur")
        assert resp.json()["suggestions"]["make"]["visible"] is True

    def test_unknown_field_rejected(self, client):
        sid = _new_session(client)
        resp = client.post(f"/api/sessions/{sid}/fields/trim/focus")
        assert resp.status_code == 422

    def test_unknown_session_404(self, client):
        resp = client.get("/api/sessions/does-not-exist")
        assert resp.status_code == 404

    def test_delete_session(self, client):
        sid = _new_session(client)
        assert client.delete(f"/api/sessions/{sid}").status_code == 204
        assert client.get(f"/api/sessions/{sid}").status_code == 404
