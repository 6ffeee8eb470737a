from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from sms.app.db.base import Base
from sms.app.db.session import engine
from sms.app.main import app


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def create_course(client: TestClient, name: str = "Mathematics") -> dict:
    resp = client.post("/courses", json={"course_name": name})
    assert resp.status_code == 201
    return resp.json()


def create_student(client: TestClient, **overrides):
    payload = {"name": "Ada Lovelace", "email": "ada@example.com", "phone": "555-1234"}
    payload.update(overrides)
    return client.post("/students", json=payload)


def test_create_student_basic():
    client = TestClient(app)
    resp = create_student(client)
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"] is not None
    assert data["name"] == "Ada Lovelace"
    assert data["email"] == "ada@example.com"
    assert data["phone"] == "555-1234"
    assert data["course"] is None
    assert Decimal(str(data["balance"])) == Decimal("0")
    assert data["enrollment_date"] == date.today().isoformat()


def test_create_student_with_course():
    client = TestClient(app)
    course = create_course(client)
    resp = create_student(client, course_id=course["id"])
    assert resp.status_code == 201
    assert resp.json()["course"]["course_name"] == "Mathematics"


def test_create_student_unknown_course_returns_404():
    client = TestClient(app)
    resp = create_student(client, course_id=999)
    assert resp.status_code == 404


def test_create_student_duplicate_email_returns_409():
    client = TestClient(app)
    assert create_student(client).status_code == 201
    resp = create_student(client, name="Someone Else")
    assert resp.status_code == 409


def test_create_student_invalid_email_returns_422():
    client = TestClient(app)
    resp = create_student(client, email="not-an-email")
    assert resp.status_code == 422


def test_create_student_phone_too_long_returns_422():
    client = TestClient(app)
    resp = create_student(client, phone="1" * 16)
    assert resp.status_code == 422


def test_create_student_blank_name_returns_422():
    client = TestClient(app)
    resp = create_student(client, name="  ")
    assert resp.status_code == 422


def test_create_student_with_balance_and_date():
    client = TestClient(app)
    resp = create_student(client, balance="150.25", enrollment_date="2024-09-01")
    assert resp.status_code == 201
    data = resp.json()
    assert Decimal(str(data["balance"])) == Decimal("150.25")
    assert data["enrollment_date"] == "2024-09-01"


def test_create_student_huge_balance_returns_422():
    client = TestClient(app)
    resp = create_student(client, balance="1e30")
    assert resp.status_code == 422


def test_list_students_empty_returns_200():
    client = TestClient(app)
    resp = client.get("/students")
    assert resp.status_code == 200
    assert resp.json() == []


def test_list_students():
    client = TestClient(app)
    create_student(client)
    create_student(client, name="Grace Hopper", email="grace@example.com")
    resp = client.get("/students")
    assert resp.status_code == 200
    assert [s["name"] for s in resp.json()] == ["Ada Lovelace", "Grace Hopper"]


def test_get_student():
    client = TestClient(app)
    student_id = create_student(client).json()["id"]
    resp = client.get(f"/students/{student_id}")
    assert resp.status_code == 200
    assert resp.json()["email"] == "ada@example.com"


def test_get_missing_student_returns_404():
    client = TestClient(app)
    resp = client.get("/students/999")
    assert resp.status_code == 404


def test_get_student_by_email():
    client = TestClient(app)
    student_id = create_student(client).json()["id"]
    resp = client.get("/students/by-email", params={"email": "ada@example.com"})
    assert resp.status_code == 200
    assert resp.json()["id"] == student_id

    missing = client.get("/students/by-email", params={"email": "nobody@example.com"})
    assert missing.status_code == 404


def test_update_student_partial():
    client = TestClient(app)
    course = create_course(client)
    student_id = create_student(client).json()["id"]

    resp = client.put(f"/students/{student_id}", json={"phone": "555-0000", "course_id": course["id"]})

    assert resp.status_code == 200
    data = resp.json()
    assert data["phone"] == "555-0000"
    assert data["name"] == "Ada Lovelace"
    assert data["course"]["id"] == course["id"]


def test_update_student_clears_course():
    client = TestClient(app)
    course = create_course(client)
    student_id = create_student(client, course_id=course["id"]).json()["id"]

    resp = client.put(f"/students/{student_id}", json={"course_id": None})

    assert resp.status_code == 200
    assert resp.json()["course"] is None


def test_update_student_to_taken_email_returns_409():
    client = TestClient(app)
    create_student(client)
    other_id = create_student(client, name="Grace", email="grace@example.com").json()["id"]
    resp = client.put(f"/students/{other_id}", json={"email": "ada@example.com"})
    assert resp.status_code == 409


def test_update_missing_student_returns_404():
    client = TestClient(app)
    resp = client.put("/students/999", json={"name": "Nobody"})
    assert resp.status_code == 404


def test_delete_student():
    client = TestClient(app)
    student_id = create_student(client).json()["id"]
    resp = client.delete(f"/students/{student_id}")
    assert resp.status_code == 204
    assert client.get(f"/students/{student_id}").status_code == 404


def test_delete_missing_student_returns_404():
    client = TestClient(app)
    resp = client.delete("/students/999")
    assert resp.status_code == 404
