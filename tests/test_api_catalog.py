"""
API tests for browsing: artists, artworks, users and collector summaries.
"""

from app.domains.artwork.schemas import ArtworkCreate
from app.domains.submissions.models import SubmissionStatus
from app.domains.submissions.schemas import NftSubmissionRequest
from app.domains.submissions.service import SubmissionService


class TestArtistsApi:
    def test_list_artists(self, seeded_client):
        resp = seeded_client.get("/api/artists")
        assert resp.status_code == 200, resp.text
        data = resp.json()
        assert [a["name"] for a in data] == [
            "Elena Kroft",
            "Michael Chen",
            "Sarah Lee",
            "James Wilson",
        ]
        assert data[0]["walletAddress"] == "0x1234567890abcdef1234567890abcdef12345678"
        assert data[0]["artworkCount"] == 1
        assert data[0]["likesCount"] == 0
        assert "profileImage" in data[0]

    def test_list_artists_limit(self, seeded_client):
        resp = seeded_client.get("/api/artists", params={"limit": 2})
        assert resp.status_code == 200
        assert [a["id"] for a in resp.json()] == [1, 2]

    def test_list_artists_bad_limit(self, seeded_client):
        for limit in ("0", "-1", "abc"):
            resp = seeded_client.get("/api/artists", params={"limit": limit})
            assert resp.status_code == 400, limit
            assert resp.json()["success"] is False

    def test_get_artist(self, seeded_client):
        resp = seeded_client.get("/api/artists/2")
        assert resp.status_code == 200
        assert resp.json()["name"] == "Michael Chen"

    def test_get_artist_not_found(self, seeded_client):
        resp = seeded_client.get("/api/artists/999")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Artist not found"

    def test_non_integer_id_is_validation_error(self, seeded_client):
        resp = seeded_client.get("/api/artists/abc")
        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert body["errors"][0]["loc"] == ["path", "artist_id"]

    def test_get_artist_by_wallet(self, seeded_client):
        resp = seeded_client.get(
            "/api/artists/by-wallet/0x7890abcdef1234567890abcdef1234567890abcd"
        )
        assert resp.status_code == 200
        assert resp.json()["name"] == "Sarah Lee"

        resp = seeded_client.get("/api/artists/by-wallet/0xnobody")
        assert resp.status_code == 404

    def test_artist_artworks_include_unapproved(self, seeded_client, seeded_store):
        seeded_store.create_artwork(
            ArtworkCreate(
                title="Draft",
                image_url="https://example.com/draft.png",
                category="abstract",
                artist_id=1,
                is_approved=False,
            )
        )
        resp = seeded_client.get("/api/artists/1/artworks")
        assert resp.status_code == 200
        titles = [a["title"] for a in resp.json()]
        assert titles == ["Transcendent Shapes", "Draft"]

        listed = seeded_client.get("/api/artworks").json()
        assert "Draft" not in [a["title"] for a in listed]

    def test_unknown_artist_has_no_artworks(self, seeded_client):
        resp = seeded_client.get("/api/artists/999/artworks")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_list_artists_store_failure(self, seeded_client, seeded_store, monkeypatch):
        def boom(limit=None):
            raise RuntimeError("secret internals")

        monkeypatch.setattr(seeded_store, "get_artists", boom)
        resp = seeded_client.get("/api/artists")
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Failed to fetch artists"
        assert "secret" not in resp.text


class TestArtworksApi:
    def test_list_artworks(self, seeded_client):
        resp = seeded_client.get("/api/artworks")
        assert resp.status_code == 200
        data = resp.json()
        assert [a["title"] for a in data] == [
            "Transcendent Shapes",
            "Digital Horizon",
            "Neon Dreams",
        ]
        first = data[0]
        assert first["imageUrl"].startswith("https://")
        assert first["tokenId"] == "34829"
        assert first["price"] == 3.5
        assert first["artistId"] == 1
        assert first["isApproved"] is True
        assert "createdAt" in first

    def test_list_artworks_limit(self, seeded_client):
        resp = seeded_client.get("/api/artworks?limit=1")
        assert resp.status_code == 200
        assert len(resp.json()) == 1

    def test_get_artwork(self, seeded_client):
        resp = seeded_client.get("/api/artworks/3")
        assert resp.status_code == 200
        assert resp.json()["title"] == "Neon Dreams"

    def test_get_artwork_not_found(self, seeded_client):
        resp = seeded_client.get("/api/artworks/999")
        assert resp.status_code == 404

    def test_non_integer_id_is_validation_error(self, seeded_client):
        resp = seeded_client.get("/api/artworks/abc")
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["loc"] == ["path", "artwork_id"]

    def test_get_artwork_detail_joins_artist(self, seeded_client):
        resp = seeded_client.get("/api/artworks/2/detail")
        assert resp.status_code == 200
        data = resp.json()
        assert data["artwork"]["title"] == "Digital Horizon"
        assert data["artist"]["name"] == "Michael Chen"

    def test_get_artwork_detail_dangling_artist(self, client, store):
        artwork = store.create_artwork(
            ArtworkCreate(
                title="Orphan",
                image_url="https://example.com/o.png",
                category="abstract",
                artist_id=77,
            )
        )
        resp = client.get(f"/api/artworks/{artwork.id}/detail")
        assert resp.status_code == 200
        assert resp.json()["artist"] is None

    def test_get_artwork_detail_not_found(self, client):
        resp = client.get("/api/artworks/1/detail")
        assert resp.status_code == 404


class TestUsersApi:
    def test_create_and_fetch_user(self, client):
        resp = client.post("/api/users", json={"username": "ann", "walletAddress": "0xann"})
        assert resp.status_code == 201, resp.text
        user = resp.json()
        assert user == {"id": 1, "username": "ann", "walletAddress": "0xann"}

        assert client.get("/api/users/1").json() == user
        assert client.get("/api/users/username/ann").json() == user
        assert client.get("/api/users").json() == [user]

    def test_duplicate_username_conflicts(self, client):
        assert client.post("/api/users", json={"username": "ann"}).status_code == 201
        resp = client.post("/api/users", json={"username": "ann"})
        assert resp.status_code == 409
        assert len(client.get("/api/users").json()) == 1

    def test_create_user_requires_username(self, client):
        resp = client.post("/api/users", json={"username": ""})
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["loc"] == ["body", "username"]

    def test_user_not_found(self, client):
        assert client.get("/api/users/5").status_code == 404
        assert client.get("/api/users/username/nobody").status_code == 404

    def test_resolve_wallet_creates_once(self, client):
        first = client.get("/api/users/by-wallet/0xw1")
        assert first.status_code == 200
        assert first.json()["username"] == "User1"

        second = client.get("/api/users/by-wallet/0xw1")
        assert second.json() == first.json()
        assert len(client.get("/api/users").json()) == 1

    def test_resolved_wallet_does_not_reuse_taken_username(self, client):
        assert client.post("/api/users", json={"username": "User2"}).status_code == 201

        resp = client.get("/api/users/by-wallet/0xw")
        assert resp.status_code == 200
        assert resp.json()["id"] == 2
        assert resp.json()["username"] == "User3"

        names = [u["username"] for u in client.get("/api/users").json()]
        assert names == ["User2", "User3"]

    def test_logged_in_wallets(self, client):
        client.get("/api/users/by-wallet/0xw1")
        client.get("/api/users/by-wallet/0xw2")
        client.get("/api/users/by-wallet/0xw1")
        resp = client.get("/api/users/wallets/logged-in")
        assert resp.status_code == 200
        assert resp.json() == ["0xw1", "0xw2"]

    def test_list_users_limit(self, client):
        for name in ("a", "b", "c"):
            client.post("/api/users", json={"username": name})
        resp = client.get("/api/users?limit=2")
        assert [u["username"] for u in resp.json()] == ["a", "b"]


class TestCollectorApi:
    def test_unseen_wallet_has_empty_summary(self, client):
        resp = client.get("/api/collectors/0xnew")
        assert resp.status_code == 200
        assert resp.json() == {
            "walletAddress": "0xnew",
            "userId": None,
            "artistId": None,
            "nftSubmissions": {"pending": 0, "approved": 0, "rejected": 0},
            "verifiedNfts": 0,
        }
        # Read-only: no user was created
        assert client.get("/api/users").json() == []

    def test_summary_counts_by_status(self, seeded_client, seeded_store):
        wallet = "0x1234567890abcdef1234567890abcdef12345678"
        service = SubmissionService(seeded_store)
        ids = [
            service.submit_nft(
                NftSubmissionRequest(
                    kind="nft",
                    world_of_v_link=f"https://worldofv.art/nft/{i}",
                    wallet_address=wallet,
                )
            ).id
            for i in range(3)
        ]
        service.update_nft_submission_status(ids[0], SubmissionStatus.APPROVED)
        service.update_nft_submission_status(ids[1], SubmissionStatus.REJECTED)
        seeded_client.get(f"/api/users/by-wallet/{wallet}")

        data = seeded_client.get(f"/api/collectors/{wallet}").json()
        assert data["artistId"] == 1
        assert data["userId"] == 1
        assert data["nftSubmissions"] == {"pending": 1, "approved": 1, "rejected": 1}
        assert data["verifiedNfts"] == 1
