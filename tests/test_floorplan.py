"""
Tests für Büro-Struktur, Plätze und Mitarbeiter.

Testet:
- POST/GET /offices/, /areas/, /rows/
- POST/GET /seats/
- POST/GET /employees/
"""
from uuid import uuid4

from tests.conftest import auth_header


class TestOffices:

    def test_create_office_area_row(self, client, anna_token):
        office = client.post("/offices/", json={"number": 7, "name": "Nebengebäude"}, headers=auth_header(anna_token))
        assert office.status_code == 200

        area = client.post(
            "/areas/",
            json={"number": 1, "office_id": office.json()["id"]},
            headers=auth_header(anna_token)
        )
        assert area.status_code == 200

        row = client.post(
            "/rows/",
            json={"number": 3, "area_id": area.json()["id"]},
            headers=auth_header(anna_token)
        )
        assert row.status_code == 200
        assert row.json()["area_id"] == area.json()["id"]

    def test_duplicate_office_number(self, client, anna_token, office):
        response = client.post("/offices/", json={"number": 1}, headers=auth_header(anna_token))
        assert response.status_code == 400

    def test_area_unknown_office(self, client, anna_token):
        response = client.post(
            "/areas/",
            json={"number": 1, "office_id": str(uuid4())},
            headers=auth_header(anna_token)
        )
        assert response.status_code == 404

    def test_get_office_not_found(self, client):
        response = client.get(f"/offices/{uuid4()}")
        assert response.status_code == 404

    def test_list_rows_by_area(self, client, row):
        response = client.get("/rows/", params={"area_id": str(row.area_id)})

        assert response.status_code == 200
        assert [r["id"] for r in response.json()] == [str(row.id)]


class TestSeats:

    def test_create_seat(self, client, anna_token, row):
        response = client.post(
            "/seats/",
            json={"number": 201, "row_id": str(row.id), "description": "Ecke"},
            headers=auth_header(anna_token)
        )

        assert response.status_code == 200
        assert response.json()["number"] == 201

    def test_create_seat_duplicate_in_row(self, client, anna_token, seat_101):
        response = client.post(
            "/seats/",
            json={"number": 101, "row_id": str(seat_101.row_id)},
            headers=auth_header(anna_token)
        )
        assert response.status_code == 400

    def test_create_seat_without_auth(self, client, row):
        response = client.post("/seats/", json={"number": 201, "row_id": str(row.id)})
        assert response.status_code == 401

    def test_filter_by_number(self, client, seat_101, seat_102):
        response = client.get("/seats/", params={"number": 102})

        assert response.status_code == 200
        assert [s["id"] for s in response.json()] == [str(seat_102.id)]

    def test_get_seat(self, client, seat_101):
        response = client.get(f"/seats/{seat_101.id}")
        assert response.status_code == 200
        assert response.json()["description"] == "Fensterplatz"


class TestEmployees:

    def test_create_employee(self, client):
        response = client.post("/employees/", json={
            "first_name": "Clara",
            "last_name": "Fischer",
            "email": "clara@test.com"
        })

        assert response.status_code == 200
        assert response.json()["email"] == "clara@test.com"

    def test_create_employee_duplicate_email(self, client, employee_anna):
        response = client.post("/employees/", json={
            "first_name": "Anna",
            "last_name": "Andere",
            "email": "anna@test.com"
        })
        assert response.status_code == 400

    def test_search_by_name(self, client, employee_anna, employee_ben):
        response = client.get("/employees/", params={"name": "web"})

        assert response.status_code == 200
        assert [e["email"] for e in response.json()] == ["ben@test.com"]

    def test_get_employee_not_found(self, client):
        response = client.get(f"/employees/{uuid4()}")
        assert response.status_code == 404
