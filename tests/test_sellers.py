"""Seller-facing data: public profile, seller name on listings, dashboard counts"""

from .helpers import create_listing, register


def submit_inquiry(client, listing_id):
    response = client.post("/inquiries", json={
        "listing_id": listing_id,
        "buyer_name": "Bob Buyer",
        "buyer_email": "bob@example.com",
        "message": "Is the traffic mostly organic?",
    })
    assert response.status_code == 200


class TestSellerProfile:

    def test_profile_lists_active_listings_oldest_first(self, client):
        register(client)
        first = create_listing(client, title="First Site")
        second = create_listing(client, title="Second Site")
        hidden = create_listing(client, title="Hidden Site")
        client.patch(f"/listings/{hidden['id']}", json={"status": "unpublished"})
        client.cookies.clear()

        response = client.get("/sellers/alice")
        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "alice"
        assert body["member_since"]
        assert [listing["id"] for listing in body["listings"]] == [first["id"], second["id"]]

    def test_lookup_is_case_insensitive(self, client):
        register(client)
        assert client.get("/sellers/ALICE").json()["username"] == "alice"

    def test_unknown_seller(self, client):
        response = client.get("/sellers/nobody")
        assert response.status_code == 404
        assert response.json() == {"error": "Seller not found."}

    def test_malformed_username_is_not_found(self, client):
        assert client.get("/sellers/a b!").status_code == 404


class TestSellerOnListings:

    def test_created_listing_names_its_seller(self, client):
        register(client)
        listing = create_listing(client)
        assert listing["seller_username"] == "alice"
        assert listing["seller_member_since"]

    def test_browse_and_detail_name_the_seller(self, client):
        register(client)
        listing = create_listing(client)
        client.cookies.clear()

        browsed = client.get("/listings").json()
        assert [row["seller_username"] for row in browsed] == ["alice"]
        detail = client.get(f"/listings/{listing['slug']}").json()
        assert detail["seller_username"] == "alice"


class TestDashboardCounts:

    def test_mine_includes_inquiry_count(self, client):
        register(client)
        popular = create_listing(client, title="Popular Site")
        quiet = create_listing(client, title="Quiet Site")
        submit_inquiry(client, popular["id"])
        submit_inquiry(client, popular["id"])

        counts = {row["id"]: row["inquiry_count"] for row in client.get("/listings/mine").json()}
        assert counts == {popular["id"]: 2, quiet["id"]: 0}
