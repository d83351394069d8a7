from datetime import date

from conftest import auth_headers

from plantcare_social.modules.plant_management.domain.models.plant import CareSchedule, DailyEntry, Plant
from plantcare_social.shared.core.dependencies import get_ai_client


class FakeAIClient:
    api_key = "gsk-test-key"
    is_configured = True

    def __init__(self):
        self.calls = []

    async def complete(self, messages, max_tokens):
        self.calls.append((messages, max_tokens))
        return "Move it closer to the window."


def _add_plant(client, token, name="Monty", plant_type="Monstera"):
    response = client.post("/plants/add", headers=auth_headers(token), json={"plantName": name, "plantType": plant_type})
    assert response.status_code == 201, response.text
    return response.json()["plant"]


class TestPlantTracking:

    def test_new_plant_has_default_schedule(self, client, alice):
        plant = _add_plant(client, alice)

        assert plant["userEmail"] == "alice@plants.io"
        assert plant["dailyEntries"] == []
        assert plant["careSchedule"]["wateringFrequency"] == 3
        assert plant["careSchedule"]["fertilizingFrequency"] == 14

    def test_name_and_type_are_required(self, client, alice):
        response = client.post("/plants/add", headers=auth_headers(alice), json={"plantName": "Monty"})
        assert response.status_code == 400

    def test_plants_are_private_to_owner(self, client, alice, bob):
        plant = _add_plant(client, alice)

        assert client.get(f"/plants/{plant['id']}", headers=auth_headers(bob)).status_code == 403
        assert client.delete(f"/plants/{plant['id']}", headers=auth_headers(bob)).status_code == 403
        assert client.get("/plants", headers=auth_headers(bob)).json()["plants"] == []
        assert client.get("/plants/unknown-id", headers=auth_headers(alice)).status_code == 404

    def test_one_entry_per_day(self, client, alice):
        plant = _add_plant(client, alice)
        headers = auth_headers(alice)

        client.post(f"/plants/{plant['id']}/entry", headers=headers, json={"watered": True, "sunlightHours": 4})
        updated = client.post(
            f"/plants/{plant['id']}/entry", headers=headers, json={"fertilized": True, "healthStatus": "excellent"}
        ).json()["plant"]

        assert len(updated["dailyEntries"]) == 1
        assert updated["dailyEntries"][0]["healthStatus"] == "excellent"
        assert updated["careSchedule"]["lastWatered"] is not None
        assert updated["careSchedule"]["lastFertilized"] == updated["dailyEntries"][0]["date"]

    def test_update_details_and_schedule(self, client, alice):
        plant = _add_plant(client, alice)
        headers = auth_headers(alice)

        renamed = client.put(f"/plants/{plant['id']}", headers=headers, json={"plantName": "Monty II", "notes": "repotted"})
        assert renamed.json()["plant"]["plantName"] == "Monty II"
        assert renamed.json()["plant"]["plantType"] == "Monstera"

        schedule = client.put(f"/plants/{plant['id']}/schedule", headers=headers, json={"wateringFrequency": 7})
        assert schedule.json()["plant"]["careSchedule"]["wateringFrequency"] == 7
        assert schedule.json()["plant"]["careSchedule"]["fertilizingFrequency"] == 14

    def test_recommendations_use_tracking_summary(self, app, client, alice):
        fake = FakeAIClient()
        app.dependency_overrides[get_ai_client] = lambda: fake
        plant = _add_plant(client, alice)
        client.post(f"/plants/{plant['id']}/entry", headers=auth_headers(alice), json={"watered": True, "sunlightHours": 5})

        response = client.post(f"/plants/{plant['id']}/recommendations", headers=auth_headers(alice))

        assert response.status_code == 200
        body = response.json()
        assert body["recommendations"] == "Move it closer to the window."
        assert "Days Tracked: 1" in body["plantData"]
        assert "Average Sunlight Hours (last 7 days): 5.0 hours" in body["plantData"]
        assert fake.calls[0][1] == 800


class TestTrackingSummary:

    def test_summary_without_entries(self):
        plant = Plant(user_email="alice@plants.io", plant_name="Monty", plant_type="Monstera")
        summary = plant.tracking_summary(today=date(2026, 5, 10))

        assert "Days Tracked: 0" in summary
        assert "Current Health Status: good" in summary
        assert "Days since last watering: Not recorded" in summary
        assert "Recent Notes: None" in summary

    def test_summary_uses_latest_week(self):
        plant = Plant(
            user_email="alice@plants.io",
            plant_name="Monty",
            plant_type="Monstera",
            care_schedule=CareSchedule(last_watered=date(2026, 5, 8)),
        )
        for day in range(1, 10):
            plant.record_entry(DailyEntry(entry_date=date(2026, 5, day), sunlight_hours=day, notes=f"day {day}"))

        summary = plant.tracking_summary(today=date(2026, 5, 10))

        # Days 3..9 are the latest seven entries
        assert "Average Sunlight Hours (last 7 days): 6.0 hours" in summary
        assert "Days Tracked: 9" in summary
        assert "Days since last watering: 2" in summary
        assert "Recent Notes: day 9" in summary
