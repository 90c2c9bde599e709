"""Tests for the projects API."""
from datetime import timedelta

from conftest import bearer, make_session_token, make_user
from shipwrecked.models import HackatimeProjectLink, Project


def create(client, headers, **body):
    body.setdefault("name", "Raft")
    return client.post("/api/projects", json=body, headers=headers)


class TestCreateProject:

    def test_requires_session(self, client):
        response = client.post("/api/projects", json={"name": "Raft"})

        assert response.status_code == 401

    def test_expired_session(self, client, db, user):
        token = make_session_token(db, user.id, expires_in=timedelta(seconds=-5))

        response = create(client, bearer(token))

        assert response.status_code == 401

    def test_create_uses_session_owner(self, client, db, user, user_headers):
        other = make_user(db)

        response = create(client, user_headers, userId=other.id, codeUrl="https://git.example/raft")

        assert response.status_code == 200
        data = response.json()
        assert data["userId"] == user.id
        assert data["projectID"]
        assert data["submitted"] is False
        assert data["codeUrl"] == "https://git.example/raft"
        assert data["playableUrl"] == ""

    def test_null_fields_become_empty(self, client, user_headers):
        response = create(client, user_headers, description=None, screenshot=None)

        assert response.status_code == 200
        assert response.json()["description"] == ""
        assert response.json()["screenshot"] == ""

    def test_submitted_cannot_be_set(self, client, user_headers):
        response = create(client, user_headers, submitted=True)

        assert response.status_code == 200
        assert response.json()["submitted"] is False

    def test_links_hackatime_projects(self, client, db, user_headers):
        response = create(
            client,
            user_headers,
            hackatimeName="raft-game",
            hackatimeProjects=["raft-game", "raft-site"],
        )

        assert response.status_code == 200
        names = sorted(link["hackatimeName"] for link in response.json()["hackatimeLinks"])
        assert names == ["raft-game", "raft-site"]
        assert db.query(HackatimeProjectLink).count() == 2

    def test_session_for_deleted_user(self, client, db):
        token = make_session_token(db, "gone-user")

        response = create(client, bearer(token))

        assert response.status_code == 404
        assert db.query(Project).count() == 0


class TestListProjects:

    def test_lists_own_projects_with_hours(self, client, db, user, user_headers):
        project_id = create(client, user_headers, hackatimeProjects=["raft"]).json()["projectID"]
        link = db.query(HackatimeProjectLink).filter_by(project_id=project_id).one()
        link.raw_hours = 6.5
        db.commit()

        other = make_user(db)
        create(client, bearer(make_session_token(db, other.id)), name="Not mine")

        response = client.get("/api/projects", headers=user_headers)

        assert response.status_code == 200
        projects = response.json()
        assert [p["name"] for p in projects] == ["Raft"]
        assert projects[0]["hours"] == 6.5
        assert projects[0]["rawHours"] == 6.5


class TestUpdateProject:

    def test_partial_update(self, client, user_headers):
        project = create(client, user_headers, description="Floats").json()

        response = client.patch(
            f"/api/projects/{project['projectID']}",
            json={"name": "X"},
            headers=user_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "X"
        assert data["description"] == "Floats"

    def test_identity_fields_are_ignored(self, client, db, user, user_headers):
        project = create(client, user_headers).json()
        other = make_user(db)

        response = client.patch(
            f"/api/projects/{project['projectID']}",
            json={"userId": other.id, "projectID": "new-id", "submitted": True},
            headers=user_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["userId"] == user.id
        assert data["projectID"] == project["projectID"]
        assert data["submitted"] is False

    def test_other_users_project_is_not_found(self, client, db, user_headers):
        project = create(client, user_headers).json()
        other_headers = bearer(make_session_token(db, make_user(db).id))

        response = client.patch(
            f"/api/projects/{project['projectID']}",
            json={"name": "Stolen"},
            headers=other_headers,
        )

        assert response.status_code == 404


class TestDeleteProject:

    def test_delete(self, client, db, user_headers):
        project = create(client, user_headers).json()

        response = client.delete(f"/api/projects/{project['projectID']}", headers=user_headers)

        assert response.status_code == 200
        assert db.query(Project).count() == 0

    def test_delete_other_users_project(self, client, db, user_headers):
        project = create(client, user_headers).json()
        other_headers = bearer(make_session_token(db, make_user(db).id))

        response = client.delete(f"/api/projects/{project['projectID']}", headers=other_headers)

        assert response.status_code == 404
        assert db.query(Project).count() == 1
