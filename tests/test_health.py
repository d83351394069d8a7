class TestHealth:

    def test_health_reports_database_and_live_channels(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["components"]["database"]["status"] == "healthy"
        assert body["components"]["realtime"] == {"connections": 0, "identities": 0}

    def test_root_describes_service(self, client):
        body = client.get("/").json()

        assert body["live_channel"] == "/ws"
        assert body["health_check"] == "/health"
