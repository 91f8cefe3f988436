import io
import zipfile

import pytest
from fastapi.testclient import TestClient

from site_builder import web
from site_builder.web import app

PAYLOAD = {
    "name": "Green Valley Cafe",
    "description": "Organic coffee and handcrafted pastries.",
    "phoneDisplay": "+91 98765 43210",
    "whatsappNumber": "+91 98765 43210",
    "address": "123 Garden Street, Bangalore",
    "services": "Coffee, Bakery",
    "themeId": "midnight",
    "themeColor": "#16a34a",
    "serviceColumns": "2",
}


@pytest.fixture
def client():
    return TestClient(app)


def test_index(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "Site Builder" in resp.text


def test_themes(client):
    data = client.get("/api/themes").json()
    assert data["default"] == "modern"
    assert [t["id"] for t in data["themes"]][:2] == ["modern", "midnight"]
    assert len(data["themes"]) == 10


def test_default_profile(client):
    data = client.get("/api/default-profile").json()
    assert data["name"] == "Green Valley Cafe"
    assert len(data["services"]) == 4


def test_preview(client):
    resp = client.post("/api/preview", json=PAYLOAD)
    assert resp.status_code == 200
    assert "https://wa.me/919876543210" in resp.text
    assert resp.text.count('class="service-card') == 2


def test_generate(client):
    data = client.post("/api/generate", json=PAYLOAD).json()
    assert set(data) == {"markup", "stylesheet", "behaviorScript"}
    assert "#16a34a" in data["stylesheet"]


def test_preview_rejects_missing_name(client):
    resp = client.post("/api/preview", json={"description": "x"})
    assert resp.status_code == 400


def test_preview_rejects_non_object(client):
    resp = client.post("/api/preview", json=["x"])
    assert resp.status_code == 400


def test_validate(client):
    assert client.post("/api/validate", json=PAYLOAD).json() == {"valid": True, "errors": {}}
    data = client.post("/api/validate", json={"name": "GV"}).json()
    assert data["valid"] is False
    assert "name" in data["errors"]


def test_download(client):
    resp = client.post("/api/download", json=PAYLOAD)
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/zip"
    assert 'filename="green-valley-cafe-website.zip"' in resp.headers["content-disposition"]
    with zipfile.ZipFile(io.BytesIO(resp.content)) as zf:
        assert zf.namelist() == ["index.html", "style.css", "script.js"]


def test_download_requires_valid_profile(client):
    resp = client.post("/api/download", json={"name": "GV"})
    assert resp.status_code == 422
    assert "services" in resp.json()["errors"]


def test_refine(client, monkeypatch):
    monkeypatch.setattr(web, "refine_description", lambda name, desc: f"{name}: polished")
    resp = client.post("/api/refine", json={"name": "Cafe", "description": "draft"})
    assert resp.json() == {"description": "Cafe: polished"}


def test_refine_without_key(client, monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    resp = client.post("/api/refine", json={"name": "Cafe", "description": "draft text"})
    assert resp.status_code == 503


@pytest.mark.parametrize("services", [5, True, {"title": "Tea"}])
def test_preview_rejects_bad_services(client, services):
    resp = client.post("/api/preview", json={"name": "Cafe", "services": services})
    assert resp.status_code == 400
    assert "services" in resp.json()["detail"]


def test_preview_uses_uploaded_images(client):
    logo = "data:image/png;base64,TE9HTw=="
    hero = "data:image/png;base64,SEVSTw=="
    about = "data:image/png;base64,QUJPVVQ="
    payload = dict(PAYLOAD, logoImage=logo, heroImage=hero, aboutImage=about)
    html = client.post("/api/preview", json=payload).text
    assert f'src="{logo}"' in html
    assert f'src="{hero}"' in html
    assert f'src="{about}"' in html
    assert "images.unsplash.com" not in html


def test_index_has_image_uploads(client):
    html = client.get("/").text
    for field in ("logoImage", "heroImage", "aboutImage"):
        assert f'data-image="{field}"' in html
    assert "readAsDataURL" in html
