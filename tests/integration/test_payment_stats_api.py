"""Integration tests for payment intents and admin statistics."""

from bazaar.payments import get_gateway


class TestPaymentIntentEndpoint:
    def test_returns_client_secret(self, client, auth):
        response = client.post("/create-payment-intent", json={"total_amount": 2000}, headers=auth("buyer@x.com"))
        assert response.status_code == 200
        assert "_secret_" in response.json()["client_secret"]
        assert get_gateway().calls == [{"method": "create_payment_intent", "amount": 2000, "currency": "usd"}]

    def test_provider_failure(self, client, auth):
        get_gateway().configure(should_succeed=False, failure_reason="Card network down")
        response = client.post("/create-payment-intent", json={"total_amount": 2000}, headers=auth("buyer@x.com"))
        assert response.status_code == 502
        assert response.json()["detail"] == "Card network down"

    def test_amount_must_be_positive(self, client, auth):
        response = client.post("/create-payment-intent", json={"total_amount": 0}, headers=auth("buyer@x.com"))
        assert response.status_code == 422

    def test_requires_session(self, client):
        assert client.post("/create-payment-intent", json={"total_amount": 2000}).status_code == 401


class TestAdminStatsEndpoint:
    def test_admin_reads_stats(self, client, auth, make_account):
        make_account("boss@x.com", role="admin")
        make_account("a@x.com")
        client.post("/orders", json={"price": 5.0, "quantity": 1}, headers=auth("a@x.com"))

        response = client.get("/admin/stats", headers=auth("boss@x.com"))
        assert response.status_code == 200
        assert response.json() == {
            "total_users": 2,
            "total_orders": 1,
            "pending_orders": 1,
            "delivered_orders": 0,
            "total_payment": 0.0,
        }

    def test_chef_forbidden(self, client, auth, make_account):
        make_account("c@x.com", role="chef")
        assert client.get("/admin/stats", headers=auth("c@x.com")).status_code == 403
