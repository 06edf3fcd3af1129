from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to ArtVerse"}


def test_health_reports_store_counts(seeded_client):
    response = seeded_client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["store"]["artists"] == 4
    assert data["store"]["artworks"] == 3


def test_create_app_seeds_by_default():
    client = TestClient(create_app(settings=Settings(log_level="WARNING")))
    assert len(client.get("/api/artists").json()) == 4


def test_create_app_without_seed():
    settings = Settings(seed_sample_data=False, log_level="WARNING")
    client = TestClient(create_app(settings=settings))
    assert client.get("/api/artists").json() == []
    assert client.get("/api/artworks").json() == []


def test_auto_approve_setting():
    settings = Settings(artwork_auto_approve=False, log_level="WARNING")
    app = create_app(settings=settings)
    assert app.state.store.default_artwork_approved is False
    # Seeded artworks are explicitly approved
    assert len(TestClient(app).get("/api/artworks").json()) == 3


def test_apps_do_not_share_stores():
    settings = Settings(seed_sample_data=False, log_level="WARNING")
    first = TestClient(create_app(settings=settings))
    second = TestClient(create_app(settings=settings))

    first.post("/api/users", json={"username": "ann"})
    assert second.get("/api/users").json() == []
