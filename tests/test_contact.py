API = "/api/v1/contact"


def _lead(**overrides):
    lead = {
        "name": "Carlos Pérez",
        "email": "carlos@autosamsa.com.mx",
        "phone": "55 1234 5678",
        "message": "Quisiera agendar una prueba de manejo.",
    }
    lead.update(overrides)
    return lead


def test_submit_contact(client):
    response = client.post(API, json=_lead(carId="3"))
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "new"
    assert data["carId"] == "3"


def test_submit_contact_drops_unknown_vehicle_reference(client):
    data = client.post(API, json=_lead(carId="ghost")).json()["data"]
    assert data["carId"] is None


def test_submit_contact_reports_every_invalid_field(client):
    response = client.post(API, json=_lead(name="", email="not-an-email", message="hola"))
    assert response.status_code == 422
    assert {"name", "email", "message"} <= set(response.json()["error"]["fields"])


def test_contact_context(client):
    car = client.get(f"{API}/context", params={"auto": "7"}).json()["data"]["car"]
    assert car == {"id": "7", "brand": "Honda", "model": "CR-V", "year": 2022}

    assert client.get(f"{API}/context", params={"auto": "nope"}).json()["data"]["car"] is None
    assert client.get(f"{API}/context").json()["data"]["car"] is None


def test_admin_submissions_flow(client, admin_headers):
    first = client.post(API, json=_lead()).json()["data"]
    client.post(API, json=_lead(email="ana@autosamsa.com.mx"))

    assert client.get(f"{API}/submissions/new-count", headers=admin_headers).json()["data"]["count"] == 2

    read = client.patch(f"{API}/submissions/{first['id']}/read", headers=admin_headers)
    assert read.json()["data"]["status"] == "read"

    assert client.get(f"{API}/submissions/new-count", headers=admin_headers).json()["data"]["count"] == 1
    unread = client.get(f"{API}/submissions", params={"status": "new"}, headers=admin_headers).json()
    assert [s["email"] for s in unread["data"]] == ["ana@autosamsa.com.mx"]
    assert client.get(f"{API}/submissions", headers=admin_headers).json()["meta"]["total"] == 2


def test_mark_read_unknown_submission(client, admin_headers):
    response = client.patch(f"{API}/submissions/999/read", headers=admin_headers)
    assert response.status_code == 404


def test_submissions_require_admin(client):
    assert client.get(f"{API}/submissions").status_code == 401
