# tests/test_crud.py
import pytest


def test_create_then_get_round_trip(client, create):
    city = create("/cities", {"name": "Darkhan"})

    assert city["name"] == "Darkhan"
    assert isinstance(city["id"], int)
    assert "createdAt" in city and "updatedAt" in city

    response = client.get(f"/cities/{city['id']}")
    assert response.status_code == 200
    assert response.json() == city


def test_update_then_get_reflects_change(client, create):
    center = create("/educenters", {"name": "Old Name", "description": "keep me"})

    response = client.put(f"/educenters/{center['id']}", json={"name": "New Name"})
    assert response.status_code == 200
    assert response.json()["name"] == "New Name"

    fetched = client.get(f"/educenters/{center['id']}").json()
    assert fetched["name"] == "New Name"
    # Fields missing from the body are left alone
    assert fetched["description"] == "keep me"


def test_delete_then_get_returns_404(client, create):
    faq = create("/faqs", {"question": "Open on Sunday?", "answer": "No"})

    response = client.delete(f"/faqs/{faq['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": f"FAQ with id {faq['id']} was deleted successfully!"}

    response = client.get(f"/faqs/{faq['id']}")
    assert response.status_code == 404
    assert response.json()["detail"] == f"Not found FAQ with id {faq['id']}."


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_missing_record_is_404(client, method):
    kwargs = {"json": {"name": "x"}} if method == "put" else {}
    response = getattr(client, method)("/cities/9999", **kwargs)

    assert response.status_code == 404
    assert response.json()["detail"] == "Not found City with id 9999."


def test_list_returns_records_in_id_order(client, create):
    names = ["Erdenet", "Choibalsan", "Khovd"]
    for name in names:
        create("/cities", {"name": name})

    response = client.get("/cities")
    assert response.status_code == 200
    assert [city["name"] for city in response.json()] == names


def test_list_paging(client, create):
    for i in range(5):
        create("/courseTags", {"tagName": f"tag-{i}"})

    response = client.get("/courseTags", params={"limit": 2, "offset": 1})
    assert response.status_code == 200
    assert [tag["tagName"] for tag in response.json()] == ["tag-1", "tag-2"]


def test_list_filters_by_foreign_key(client, create):
    first = create("/cities", {"name": "A"})
    second = create("/cities", {"name": "B"})
    create("/districts", {"cityId": first["id"], "name": "A-1"})
    create("/districts", {"cityId": second["id"], "name": "B-1"})
    create("/districts", {"cityId": first["id"], "name": "A-2"})

    response = client.get("/districts", params={"cityId": first["id"]})
    assert response.status_code == 200
    assert [district["name"] for district in response.json()] == ["A-1", "A-2"]


def test_list_filters_by_boolean(client, create, user):
    create("/notifications", {"userId": user["id"], "content": "Welcome"})
    create("/notifications", {"userId": user["id"], "content": "Read", "seen": True})

    unseen = client.get("/notifications", params={"userId": user["id"], "seen": "false"}).json()
    assert [n["content"] for n in unseen] == ["Welcome"]
    assert unseen[0]["seen"] is False


def test_unparseable_filter_is_422(client):
    response = client.get("/districts", params={"cityId": "abc"})

    assert response.status_code == 422
    assert "cityId" in response.json()["detail"]


def test_unknown_query_parameters_are_ignored(client, create):
    create("/cities", {"name": "Zuunmod"})

    response = client.get("/cities", params={"colour": "blue"})
    assert response.status_code == 200
    assert len(response.json()) == 1


def test_create_requires_mandatory_fields(client):
    response = client.post("/districts", json={"name": "No city"})

    assert response.status_code == 422


def test_snake_case_keys_are_accepted(client, create):
    city = create("/cities", {"name": "Baganuur"})

    district = create("/districts", {"city_id": city["id"], "name": "Snake"})
    assert district["cityId"] == city["id"]


def test_foreign_key_violation_surfaces_as_500(client):
    response = client.post("/districts", json={"cityId": 424242, "name": "Orphan"})

    assert response.status_code == 500
    assert "FOREIGN KEY constraint failed" in response.json()["detail"]


def test_session_recovers_after_database_error(client, create):
    client.post("/districts", json={"cityId": 424242, "name": "Orphan"})

    city = create("/cities", {"name": "Still works"})
    assert client.get(f"/cities/{city['id']}").status_code == 200


def test_review_rating_must_be_between_one_and_five(client, user, branch):
    payload = {"userId": user["id"], "branchId": branch["id"], "rating": 6, "description": "!"}
    assert client.post("/reviews", json=payload).status_code == 422

    payload["rating"] = 5
    response = client.post("/reviews", json=payload)
    assert response.status_code == 201
    assert response.json()["rating"] == 5


def test_branch_coordinates_are_range_checked(client, center, geography):
    response = client.post(
        "/branches",
        json={
            "educationCenterId": center["id"],
            "name": "Nowhere",
            "subdistrictId": geography["subdistrict"]["id"],
            "latitude": 123.0,
        },
    )
    assert response.status_code == 422


def test_course_end_date_cannot_precede_start_date(client, branch):
    response = client.post(
        "/courses",
        json={
            "branchId": branch["id"],
            "name": "Backwards",
            "startDate": "2024-12-01T00:00:00",
            "endDate": "2024-09-01T00:00:00",
        },
    )
    assert response.status_code == 422


def test_course_defaults_current_students_to_zero(course):
    assert course["currentStudents"] == 0
    assert course["maxStudents"] == 20
    assert course["startDate"] == "2024-09-01T00:00:00"


def test_payment_amount_cannot_be_negative(client, user, course):
    contract = client.post(
        "/contracts",
        json={"userId": user["id"], "courseId": course["id"], "content": "Terms", "status": "pending"},
    ).json()

    response = client.post(
        "/payments",
        json={
            "userId": user["id"],
            "contractId": contract["id"],
            "amount": -10,
            "status": "paid",
            "method": "cash",
        },
    )
    assert response.status_code == 422


def test_search_history_has_no_updated_at(create, user):
    entry = create("/searchHistories", {"userId": user["id"], "query": "math tutor"})

    assert entry["query"] == "math tutor"
    assert "updatedAt" not in entry


def test_update_rejects_null_for_required_columns(client, create, user, geography, role):
    notification = create("/notifications", {"userId": user["id"], "content": "Hello"})
    cases = [
        (f"/cities/{geography['city']['id']}", {"name": None}),
        (f"/districts/{geography['district']['id']}", {"cityId": None}),
        (f"/subdistricts/{geography['subdistrict']['id']}", {"districtId": None}),
        (f"/notifications/{notification['id']}", {"seen": None}),
        (f"/users/{user['id']}", {"userRoleId": None}),
        (f"/userRoles/{role['id']}", {"roleName": None}),
    ]

    for path, body in cases:
        response = client.put(path, json=body)
        assert response.status_code == 422, path

    assert client.get(f"/cities/{geography['city']['id']}").json()["name"] == "Ulaanbaatar"


def test_update_accepts_null_for_optional_columns(client, branch):
    response = client.put(f"/branches/{branch['id']}", json={"latitude": None, "subdistrictId": None})

    assert response.status_code == 200
    assert response.json()["latitude"] is None
    assert response.json()["subdistrictId"] is None
