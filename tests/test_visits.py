from fastapi.testclient import TestClient

from links_app.models.visit import Visit


class TestVisits:
    """GET /links/{id}/visits and GET /links/{id}/visits/{visitId}"""

    def test_visits_count_matches_redirects(self, client: TestClient, create_link):
        link = create_link(url="https://example.com", slug="counted").json()
        for _ in range(3):
            client.get("/counted", follow_redirects=False)

        response = client.get(f"/links/{link['id']}/visits")

        assert response.status_code == 200
        visits = response.json()
        assert len(visits) == 3
        assert all(visit["linkId"] == link["id"] for visit in visits)

    def test_visits_are_per_link(self, client: TestClient, create_link):
        first = create_link(url="https://one.com", slug="one").json()
        create_link(url="https://two.com", slug="two")
        client.get("/one", follow_redirects=False)
        client.get("/two", follow_redirects=False)
        client.get("/two", follow_redirects=False)

        response = client.get(f"/links/{first['id']}/visits")
        assert len(response.json()) == 1

    def test_no_visits(self, client: TestClient, create_link):
        link = create_link(url="https://example.com").json()

        response = client.get(f"/links/{link['id']}/visits")

        assert response.status_code == 200
        assert response.json() == []

    def test_visits_of_unknown_link(self, client: TestClient):
        response = client.get("/links/non-existent-id/visits")

        assert response.status_code == 404
        assert response.json()["error"] == "Link not found"

    def test_get_single_visit(self, client: TestClient, create_link):
        link = create_link(url="https://example.com", slug="single").json()
        client.get("/single", follow_redirects=False)
        visit = client.get(f"/links/{link['id']}/visits").json()[0]

        response = client.get(f"/links/{link['id']}/visits/{visit['id']}")

        assert response.status_code == 200
        assert response.json() == visit

    def test_get_unknown_visit(self, client: TestClient, create_link):
        link = create_link(url="https://example.com").json()

        response = client.get(f"/links/{link['id']}/visits/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "Visit not found"

    def test_get_visit_of_unknown_link(self, client: TestClient):
        response = client.get("/links/non-existent-id/visits/anything")

        assert response.status_code == 404
        assert response.json()["error"] == "Link not found"

    def test_visit_lookup_ignores_owning_link(self, client: TestClient, create_link):
        """A visit id resolves under any existing link"""
        first = create_link(url="https://one.com", slug="one").json()
        second = create_link(url="https://two.com", slug="two").json()
        client.get("/one", follow_redirects=False)
        visit = client.get(f"/links/{first['id']}/visits").json()[0]

        response = client.get(f"/links/{second['id']}/visits/{visit['id']}")

        assert response.status_code == 200
        assert response.json()["linkId"] == first["id"]

    def test_visits_survive_link_deletion(self, client, create_link, db_session):
        link = create_link(url="https://example.com", slug="kept").json()
        client.get("/kept", follow_redirects=False)

        client.delete(f"/links/{link['id']}")

        assert db_session.query(Visit).filter(Visit.link_id == link["id"]).count() == 1
        assert client.get(f"/links/{link['id']}/visits").status_code == 404
