"""Integration tests for the analytics endpoints.

Run with: pytest tests/test_analytics_api.py -v
"""

import pytest

SECRET = "dashboard-secret"


@pytest.fixture(autouse=True)
def analytics_secret(settings):
    settings.ANALYTICS_SECRET = SECRET


def dashboard(api_client) -> dict:
    response = api_client.get("/api/analytics/dashboard", {"key": SECRET})
    assert response.status_code == 200
    return response.json()


class TestTracking:
    """Tests for the ingestion endpoints."""

    def test_page_views_per_event(self, api_client):
        for session in ("s1", "s2"):
            response = api_client.post(
                "/api/analytics/pageview",
                {"page": "/evento/E1", "eventId": "E1", "sessionId": session},
                format="json",
                HTTP_USER_AGENT="pytest",
            )
            assert response.json() == {"success": True}

        body = dashboard(api_client)

        event = body["events"][0]
        assert event["eventId"] == "E1"
        assert event["views"] == 2
        assert event["uniqueViews"] == 2
        assert body["summary"]["totalPageViews"] == 2
        assert body["summary"]["uniqueSessions"] == 2
        assert body["pages"] == {"/evento/E1": 2}

    def test_clicks_are_counted_by_action(self, api_client):
        for action in ("ingressos", "info", "info", "unknown"):
            api_client.post(
                "/api/analytics/click",
                {"eventId": "E1", "action": action, "sessionId": "s1"},
                format="json",
            )

        clicks = dashboard(api_client)["events"][0]["clicks"]

        assert clicks == {"ingressos": 1, "info": 2, "local": 0, "pdv": 0, "checkout": 0}

    def test_ticket_select_accepts_payload(self, api_client):
        response = api_client.post(
            "/api/analytics/click",
            {
                "eventId": "E1",
                "action": "ticket_select",
                "sessionId": "s1",
                "data": {"ticketType": "VIP", "quantity": 2},
            },
            format="json",
        )
        assert response.status_code == 200

    def test_click_data_must_be_an_object(self, api_client):
        response = api_client.post(
            "/api/analytics/click",
            {"eventId": "E1", "action": "ticket_select", "sessionId": "s1", "data": "VIP"},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_checkout_then_conversion(self, api_client):
        api_client.post(
            "/api/analytics/checkout",
            {"eventId": "E1", "sessionId": "s1", "items": [{"title": "VIP"}], "total": 200},
            format="json",
        )
        api_client.post(
            "/api/analytics/checkout",
            {"eventId": "E1", "sessionId": "s2", "items": [], "total": 80},
            format="json",
        )
        api_client.post(
            "/api/analytics/conversion",
            {"eventId": "E1", "orderId": "order-1", "sessionId": "s1", "total": 200},
            format="json",
        )

        body = dashboard(api_client)

        summary = body["summary"]
        assert summary["totalCheckouts"] == 1
        assert summary["totalConversions"] == 1
        assert summary["conversionRate"] == "100.00%"
        assert summary["totalRevenue"] == 200
        event = body["events"][0]
        assert event["checkouts"] == 2
        assert event["conversions"] == 1
        assert event["revenue"] == 200
        assert event["conversionRate"] == "50.00"
        recent = body["recentConversions"]
        assert len(recent) == 1
        assert recent[0]["orderId"] == "order-1"
        assert recent[0]["status"] == "completed"
        assert recent[0]["items"] == [{"title": "VIP"}]

    def test_oversized_total_is_rejected_without_counting(self, api_client):
        checkout = api_client.post(
            "/api/analytics/checkout",
            {"eventId": "E1", "sessionId": "s1", "total": 10**13},
            format="json",
        )
        conversion = api_client.post(
            "/api/analytics/conversion",
            {"eventId": "E1", "orderId": "o1", "sessionId": "s1", "total": 10**13},
            format="json",
        )

        assert checkout.status_code == 400
        assert conversion.status_code == 400
        assert conversion.json()["code"] == "INVALID_AMOUNT"
        summary = dashboard(api_client)["summary"]
        assert summary["totalCheckouts"] == 0
        assert summary["totalRevenue"] == 0

    def test_revenue_beyond_single_amount_limit_renders(self, api_client):
        for session in ("s1", "s2"):
            api_client.post(
                "/api/analytics/checkout",
                {"eventId": "E1", "sessionId": session, "total": "999999999999.99"},
                format="json",
            )
            api_client.post(
                "/api/analytics/conversion",
                {
                    "eventId": "E1",
                    "orderId": session,
                    "sessionId": session,
                    "total": "999999999999.99",
                },
                format="json",
            )

        body = dashboard(api_client)

        assert body["summary"]["totalRevenue"] == 1999999999999.98
        assert body["events"][0]["revenue"] == 1999999999999.98

    def test_event_without_checkouts_rates_zero(self, api_client):
        api_client.post(
            "/api/analytics/pageview",
            {"page": "/evento/E1", "eventId": "E1", "sessionId": "s1"},
            format="json",
        )

        assert dashboard(api_client)["events"][0]["conversionRate"] == 0


class TestDashboard:
    """Tests for GET /api/analytics/dashboard"""

    def test_wrong_key(self, api_client):
        response = api_client.get("/api/analytics/dashboard", {"key": "guess"})

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "error": "Invalid access key",
            "code": "UNAUTHORIZED",
        }

    def test_missing_key(self, api_client):
        assert api_client.get("/api/analytics/dashboard").status_code == 401

    def test_empty_dashboard_shape(self, api_client):
        body = dashboard(api_client)

        assert body["success"] is True
        assert body["summary"] == {
            "totalPageViews": 0,
            "uniqueSessions": 0,
            "totalOrders": 0,
            "totalCheckouts": 0,
            "totalConversions": 0,
            "conversionRate": "0%",
            "totalRevenue": 0,
        }
        assert body["events"] == []
        assert body["pages"] == {}
        assert body["recentConversions"] == []
        assert len(body["trafficByHour"]) == 24
        assert "timestamp" in body

    def test_total_orders_counts_payment_orders(self, api_client, settings, customer, items):
        settings.PIX_SEED_KEYS = [{"key": "pix@example.com", "type": "email", "name": "Box"}]
        api_client.post("/api/payment", {"customer": customer, "items": items}, format="json")

        assert dashboard(api_client)["summary"]["totalOrders"] == 1

    def test_recent_page_view_lands_in_current_hour(self, api_client):
        api_client.post("/api/analytics/pageview", {"page": "/"}, format="json")

        traffic = dashboard(api_client)["trafficByHour"]

        assert traffic[-1]["views"] == 1
        assert sum(bucket["views"] for bucket in traffic) == 1


class TestReset:
    """Tests for POST /api/analytics/reset"""

    def test_reset_with_wrong_key(self, api_client):
        api_client.post("/api/analytics/pageview", {"page": "/"}, format="json")

        response = api_client.post("/api/analytics/reset", {"key": "nope"}, format="json")

        assert response.status_code == 401
        assert dashboard(api_client)["summary"]["totalPageViews"] == 1

    def test_reset_clears_analytics(self, api_client):
        api_client.post(
            "/api/analytics/pageview",
            {"page": "/evento/E1", "eventId": "E1", "sessionId": "s1"},
            format="json",
        )

        response = api_client.post("/api/analytics/reset", {"key": SECRET}, format="json")

        assert response.status_code == 200
        assert response.json()["success"] is True
        body = dashboard(api_client)
        assert body["summary"]["totalPageViews"] == 0
        assert body["events"] == []
