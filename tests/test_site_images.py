API = "/api/v1/site-images"


def _add(client, headers, section, url):
    return client.post(API, json={"section": section, "url": url, "title": "Showroom"}, headers=headers)


def test_add_appends_to_the_end_of_its_section(client, admin_headers):
    first = _add(client, admin_headers, "gallery", "https://cdn/g1.jpg").json()["data"]
    second = _add(client, admin_headers, "gallery", "https://cdn/g2.jpg").json()["data"]
    other = _add(client, admin_headers, "hero", "https://cdn/h1.jpg").json()["data"]

    assert (first["order"], second["order"], other["order"]) == (0, 1, 0)
    assert first["isActive"] is True


def test_public_listing_only_shows_active_images(client, admin_headers):
    image = _add(client, admin_headers, "about", "https://cdn/a.jpg").json()["data"]
    _add(client, admin_headers, "about", "https://cdn/b.jpg")

    toggled = client.patch(f"{API}/{image['id']}/toggle", headers=admin_headers).json()["data"]
    assert toggled["isActive"] is False

    public = client.get(API, params={"section": "about"}).json()["data"]
    assert [img["url"] for img in public] == ["https://cdn/b.jpg"]


def test_admin_listing_is_grouped_by_section(client, admin_headers):
    _add(client, admin_headers, "hero", "https://cdn/h.jpg")
    _add(client, admin_headers, "services", "https://cdn/s.jpg")

    grouped = client.get(f"{API}/admin", headers=admin_headers).json()["data"]
    assert set(grouped) == {"hero", "services"}
    assert grouped["hero"][0]["url"] == "https://cdn/h.jpg"


def test_delete_site_image(client, admin_headers):
    image = _add(client, admin_headers, "hero", "https://cdn/h.jpg").json()["data"]
    assert client.delete(f"{API}/{image['id']}", headers=admin_headers).status_code == 200
    assert client.delete(f"{API}/{image['id']}", headers=admin_headers).status_code == 404


def test_invalid_section_is_rejected(client, admin_headers):
    response = _add(client, admin_headers, "footer", "https://cdn/f.jpg")
    assert response.status_code == 422
    assert "section" in response.json()["error"]["fields"]


def test_site_image_writes_require_admin(client):
    assert client.post(API, json={"section": "hero", "url": "x"}).status_code == 401
