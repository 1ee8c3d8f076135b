from datetime import date

from fambul_tik.services.age import compute_age


def _member(**overrides):
    payload = {
        "first_name": "Kadiatu",
        "last_name": "Sesay",
        "date_of_birth": "1950-01-01",
        "is_alive": True,
    }
    payload.update(overrides)
    return payload


def test_member_crud(client):
    create_response = client.post("/api/members", json=_member(middle_name="Fatmata"))
    assert create_response.status_code == 201
    member = create_response.json()
    member_id = member["id"]
    assert member["full_name"] == "Kadiatu Fatmata Sesay"
    assert member["date_of_death"] is None
    assert member["age"] == compute_age(date(1950, 1, 1))

    list_response = client.get("/api/members")
    assert list_response.status_code == 200
    assert [item["id"] for item in list_response.json()] == [member_id]

    get_response = client.get(f"/api/members/{member_id}")
    assert get_response.status_code == 200
    assert get_response.json()["first_name"] == "Kadiatu"

    update_response = client.put(
        f"/api/members/{member_id}",
        json=_member(is_alive=False, date_of_death="2020-05-04"),
    )
    assert update_response.status_code == 200
    updated = update_response.json()
    assert updated["id"] == member_id
    assert updated["is_alive"] is False
    assert updated["date_of_death"] == "2020-05-04"
    assert updated["age"] == 70
    # Full replacement: the middle name was not sent again.
    assert updated["middle_name"] is None

    delete_response = client.delete(f"/api/members/{member_id}")
    assert delete_response.status_code == 200
    assert delete_response.json()["deleted_relationships"] == 0

    assert client.get(f"/api/members/{member_id}").status_code == 404
    assert client.get("/api/members").json() == []


def test_member_accepts_dob_and_dod_aliases(client):
    response = client.post(
        "/api/members",
        json={"first_name": "Sorie", "last_name": "Kamara", "dob": "1931-03-02", "is_alive": False, "dod": "1999-03-01"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["date_of_birth"] == "1931-03-02"
    assert body["date_of_death"] == "1999-03-01"
    assert body["age"] == 67
    assert "dob" not in body
    assert "dod" not in body


def test_blank_date_of_death_is_treated_as_absent(client):
    response = client.post("/api/members", json=_member(date_of_death=""))
    assert response.status_code == 201
    assert response.json()["date_of_death"] is None


def test_create_member_requires_names_and_birth_date(client):
    response = client.post("/api/members", json=_member(first_name="  "))
    assert response.status_code == 400
    assert response.json()["field"] == "first_name"

    response = client.post("/api/members", json={"first_name": "Musa", "date_of_birth": "1980-01-01"})
    assert response.status_code == 400
    assert response.json()["field"] == "last_name"

    response = client.post("/api/members", json={"first_name": "Musa", "last_name": "Bangura"})
    assert response.status_code == 400
    assert response.json()["field"] == "date_of_birth"

    assert client.get("/api/members").json() == []


def test_living_member_cannot_have_date_of_death(client):
    response = client.post("/api/members", json=_member(date_of_death="2001-01-01"))
    assert response.status_code == 400
    assert response.json()["field"] == "date_of_death"
    assert "living" in response.json()["detail"]


def test_deceased_member_requires_date_of_death(client):
    response = client.post("/api/members", json=_member(is_alive=False))
    assert response.status_code == 400
    assert response.json()["field"] == "date_of_death"


def test_date_of_death_cannot_precede_birth(client):
    response = client.post("/api/members", json=_member(is_alive=False, date_of_death="1949-12-31"))
    assert response.status_code == 400
    assert response.json()["field"] == "date_of_death"

    same_day = client.post("/api/members", json=_member(is_alive=False, date_of_death="1950-01-01"))
    assert same_day.status_code == 201
    assert same_day.json()["age"] == 0


def test_malformed_date_is_rejected_before_the_store(client):
    response = client.post("/api/members", json=_member(date_of_birth="not-a-date"))
    assert response.status_code == 422


def test_failed_update_leaves_member_unchanged(client):
    member_id = client.post("/api/members", json=_member(middle_name="Fatmata")).json()["id"]
    before = client.get(f"/api/members/{member_id}").json()

    response = client.put(
        f"/api/members/{member_id}",
        json=_member(first_name="Changed", is_alive=True, date_of_death="2010-01-01"),
    )
    assert response.status_code == 400

    after = client.get(f"/api/members/{member_id}").json()
    assert after == before


def test_update_and_delete_unknown_member(client):
    assert client.put("/api/members/999", json=_member()).status_code == 404
    response = client.delete("/api/members/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "member 999 not found"
