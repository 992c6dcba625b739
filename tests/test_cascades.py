"""
Foreign-key actions observed through the HTTP surface.
"""

from __future__ import annotations


def test_seed_scenario_delete_happy_kids_daycare(client):
    resp = client.get("/get_daycare/1")
    assert resp.status_code == 200
    assert resp.json()["data"][0]["name"] == "Happy Kids Daycare"

    assert client.delete("/delete_daycare/1").status_code == 200

    assert client.get("/get_daycare/1").status_code == 404
    classrooms = client.get("/get_classrooms").json()["data"]
    assert classrooms
    assert all(row["daycare_id"] != 1 for row in classrooms)


def test_daycare_delete_cascades_to_classrooms_and_children(client, database):
    client.delete("/delete_daycare/1")

    assert database.scalar("SELECT COUNT(*) FROM classroom WHERE daycare_id = 1") == 0
    assert database.scalar("SELECT COUNT(*) FROM child WHERE daycare_id = 1") == 0
    children = client.get("/get_children").json()
    assert children["children_count"] == 2
    assert {row["name"] for row in children["data"]} == {"Olivia Lee", "Noah Brown"}


def test_daycare_delete_removes_enrollments_of_its_children(client):
    client.delete("/delete_daycare/1")

    enrollments = client.get("/get_enrollments").json()
    assert {row["child_id"] for row in enrollments["data"]} == {3, 4}


def test_classroom_delete_nulls_children_classroom(client, database):
    assert client.delete("/delete_classroom/2").status_code == 200

    liam = client.get("/get_child/2").json()["data"][0]
    sophia = client.get("/get_child/5").json()["data"][0]
    assert liam["classroom_id"] is None
    assert sophia["classroom_id"] is None
    assert liam["daycare_id"] == 1
    assert database.scalar("SELECT COUNT(*) FROM child") == 5


def test_parent_delete_cascades_to_enrollments(client):
    assert client.delete("/delete_parent/2").status_code == 200

    enrollments = client.get("/get_enrollments").json()
    assert enrollments["enrollments_count"] == 3
    assert all(row["parent_id"] != 2 for row in enrollments["data"])
    # children survive their parent's removal
    assert client.get("/get_child/2").status_code == 200


def test_duplicate_enrollment_pairs_are_allowed(client, database):
    resp = client.put("/update_enrollment/1", json={"child_id": 2, "parent_id": 2})

    assert resp.status_code == 200
    assert database.scalar(
        "SELECT COUNT(*) FROM enrollment WHERE child_id = 2 AND parent_id = 2"
    ) == 2
