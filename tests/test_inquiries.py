"""Buyer inquiries"""

from app.db.database import SessionLocal
from app.infrastructure.orm.inquiry_model import InquiryModel

from .helpers import create_listing, register


def inquiry_count() -> int:
    db = SessionLocal()
    try:
        return db.query(InquiryModel).count()
    finally:
        db.close()


def submit(client, listing_id, **overrides):
    payload = {
        "listing_id": listing_id,
        "buyer_name": "Bob Buyer",
        "buyer_email": "Bob@Example.com",
        "message": "Is the traffic mostly organic?",
    }
    payload.update(overrides)
    return client.post("/inquiries", json=payload)


def seller_with_listing(client, **overrides):
    register(client)
    listing = create_listing(client, **overrides)
    return listing


class TestSubmit:

    def test_inquiry_is_stored_and_seller_notified(self, client, email_service):
        listing = seller_with_listing(client)
        client.cookies.clear()

        response = submit(client, listing["id"])
        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert inquiry_count() == 1

        sent = email_service.sent[-1]
        assert sent["to"] == "alice@example.com"
        assert sent["reply_to"] == "bob@example.com"
        assert "Acme Shop" in sent["subject"]
        assert f"/listings/{listing['slug']}" in sent["text"]

    def test_message_is_escaped_in_html(self, client, email_service):
        listing = seller_with_listing(client)
        submit(client, listing["id"], message="<script>alert('hi')</script>")
        assert "<script>" not in email_service.sent[-1]["html"]

    def test_honeypot_pretends_success(self, client, email_service):
        listing = seller_with_listing(client)
        response = submit(client, listing["id"], honeypot="http://spam.example.com")

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert inquiry_count() == 0
        assert email_service.sent == []

    def test_missing_fields(self, client):
        listing = seller_with_listing(client)
        response = submit(client, listing["id"], buyer_name="  ")
        assert response.status_code == 400
        assert response.json() == {"error": "All fields are required."}

    def test_short_message(self, client):
        listing = seller_with_listing(client)
        response = submit(client, listing["id"], message="hi there")
        assert response.status_code == 400
        assert "at least 10" in response.json()["error"]

    def test_unknown_listing(self, client):
        register(client)
        assert submit(client, 999).status_code == 404

    def test_out_of_range_listing_id(self, client):
        register(client)
        assert submit(client, 10**20).status_code == 404
        assert submit(client, -5).status_code == 404

    def test_inactive_listing(self, client):
        listing = seller_with_listing(client)
        client.patch(f"/listings/{listing['id']}", json={"status": "unpublished"})
        assert submit(client, listing["id"]).status_code == 404

    def test_rate_limited_per_ip(self, client):
        listing = seller_with_listing(client)
        headers = {"X-Forwarded-For": "203.0.113.7, 10.0.0.1"}

        for _ in range(3):
            assert client.post("/inquiries", headers=headers, json={
                "listing_id": listing["id"], "buyer_name": "Bob",
                "buyer_email": "bob@example.com", "message": "Still available?",
            }).status_code == 200

        blocked = client.post("/inquiries", headers=headers, json={
            "listing_id": listing["id"], "buyer_name": "Bob",
            "buyer_email": "bob@example.com", "message": "Still available?",
        })
        assert blocked.status_code == 429
        assert blocked.headers["retry-after"] == "3600"
        assert inquiry_count() == 3

        # A different client address has its own budget
        other = client.post("/inquiries", headers={"X-Forwarded-For": "198.51.100.2"}, json={
            "listing_id": listing["id"], "buyer_name": "Carol",
            "buyer_email": "carol@example.com", "message": "Still available?",
        })
        assert other.status_code == 200

    def test_honeypot_submissions_count_towards_the_limit(self, client):
        listing = seller_with_listing(client)
        for _ in range(3):
            submit(client, listing["id"], honeypot="x")
        assert submit(client, listing["id"]).status_code == 429


class TestSellerInbox:

    def test_list_and_mark_read(self, client):
        listing = seller_with_listing(client)
        submit(client, listing["id"], message="First question here")
        submit(client, listing["id"], message="Second question here")

        inbox = client.get("/inquiries").json()
        assert [item["message"] for item in inbox] == ["Second question here", "First question here"]
        assert inbox[0]["listing_title"] == "Acme Shop"
        assert inbox[0]["is_read"] is False

        response = client.patch(f"/inquiries/{inbox[0]['id']}/read")
        assert response.status_code == 200
        assert client.get("/inquiries").json()[0]["is_read"] is True

    def test_other_sellers_cannot_see_or_mark(self, client):
        listing = seller_with_listing(client)
        submit(client, listing["id"])
        inquiry_id = client.get("/inquiries").json()[0]["id"]

        client.cookies.clear()
        register(client, email="bob@example.com", username="bob")
        assert client.get("/inquiries").json() == []
        assert client.patch(f"/inquiries/{inquiry_id}/read").status_code == 404

    def test_requires_session(self, client):
        assert client.get("/inquiries").status_code == 401
