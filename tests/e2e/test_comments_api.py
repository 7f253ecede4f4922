"""End-to-end tests for comments on posts and projects."""

import pytest

from club.adapter.cloudinary import MockImageHost
from club.domain.value import UserRole
from tests.e2e.helpers import login_as, seed_tags
from tests.harness import create_app_fixture

# E2E test fixture - app over mocked infrastructure
e2e_env = create_app_fixture()


async def create_project(env, headers, title="Line follower"):
    response = await env.client.post(
        "/projects",
        data={
            "title": title,
            "body": "Follows black tape on the floor.",
            "tags": ["robotics"],
            "main_tag": "robotics",
        },
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


async def create_post(env, headers):
    response = await env.client.post(
        "/posts",
        data={
            "title": "Open day",
            "body": "Bring your robots on Saturday.",
            "tags": ["events"],
            "main_tag": "events",
        },
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


class TestComments:
    @pytest.mark.asyncio
    async def test_comment_lifecycle(self, e2e_env):
        await seed_tags(e2e_env)
        _, member = await login_as(e2e_env, username="ada")
        project = await create_project(e2e_env, member)
        base = f"/projects/{project['id']}/comments"

        created = await e2e_env.client.post(base, json={"content": "Nice PID tuning"}, headers=member)
        comment = created.json()
        edited = await e2e_env.client.patch(
            f"{base}/{comment['id']}", json={"content": "Great PID tuning"}, headers=member
        )
        listed = await e2e_env.client.get(base, headers=member)
        deleted = await e2e_env.client.delete(f"{base}/{comment['id']}", headers=member)

        assert created.status_code == 201
        assert comment["parent_kind"] == "Project"
        assert comment["author_username"] == "ada"
        assert edited.json()["content"] == "Great PID tuning"
        assert listed.json()["total"] == 1
        assert deleted.json() == {"id": comment["id"], "deleted": True}
        assert (await e2e_env.client.get(base, headers=member)).json()["total"] == 0

    @pytest.mark.asyncio
    async def test_comment_cannot_be_reached_through_another_parent(self, e2e_env):
        """A comment on a post must not be editable through a project route."""
        await seed_tags(e2e_env)
        _, admin = await login_as(e2e_env, UserRole.ADMIN)
        post = await create_post(e2e_env, admin)
        project = await create_project(e2e_env, admin)
        comment = (
            await e2e_env.client.post(
                f"/posts/{post['id']}/comments", json={"content": "On the post"}, headers=admin
            )
        ).json()

        response = await e2e_env.client.patch(
            f"/projects/{project['id']}/comments/{comment['id']}",
            json={"content": "Hijacked"},
            headers=admin,
        )

        assert response.status_code == 403
        assert response.json()["code"] == "ParentMismatch"
        listed = await e2e_env.client.get(f"/posts/{post['id']}/comments", headers=admin)
        assert listed.json()["items"][0]["content"] == "On the post"

    @pytest.mark.asyncio
    async def test_invalid_parent_type(self, e2e_env):
        _, member = await login_as(e2e_env)

        response = await e2e_env.client.get(
            "/users/3fa85f64-5717-4562-b3fc-2c963f66afa6/comments", headers=member
        )

        assert response.status_code == 400
        assert response.json()["code"] == "InvalidParentType"

    @pytest.mark.asyncio
    async def test_pending_user_cannot_comment(self, e2e_env):
        await seed_tags(e2e_env)
        _, member = await login_as(e2e_env)
        _, pending = await login_as(e2e_env, UserRole.USER)
        project = await create_project(e2e_env, member)

        response = await e2e_env.client.post(
            f"/projects/{project['id']}/comments", json={"content": "Hi"}, headers=pending
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_deleting_project_removes_comments(self, e2e_env):
        await seed_tags(e2e_env)
        _, member = await login_as(e2e_env)
        project = await create_project(e2e_env, member)
        base = f"/projects/{project['id']}/comments"
        await e2e_env.client.post(base, json={"content": "one"}, headers=member)
        await e2e_env.client.post(base, json={"content": "two"}, headers=member)

        deleted = await e2e_env.client.delete(f"/projects/{project['id']}", headers=member)

        assert deleted.json()["comments_deleted"] == 2
        assert (await e2e_env.client.get(base, headers=member)).status_code == 404

    @pytest.mark.asyncio
    async def test_project_delete_completes_when_image_host_is_down(self, e2e_env):
        await seed_tags(e2e_env)
        _, member = await login_as(e2e_env)
        created = await e2e_env.client.post(
            "/projects",
            data={
                "title": "Rover",
                "body": "Six wheels and a rocker bogie.",
                "tags": ["robotics"],
                "main_tag": "robotics",
            },
            files={"image": ("rover.png", b"\x89PNG\r\n\x1a\n" + b"\x00" * 16, "image/png")},
            headers=member,
        )
        project = created.json()
        base = f"/projects/{project['id']}/comments"
        await e2e_env.client.post(base, json={"content": "Nice rover"}, headers=member)
        async with e2e_env.request_scope() as scope:
            (await scope.get(MockImageHost)).fail_deletes = True

        deleted = await e2e_env.client.delete(f"/projects/{project['id']}", headers=member)

        assert deleted.status_code == 200
        assert deleted.json()["comments_deleted"] == 1
        gone = await e2e_env.client.get(f"/projects/{project['id']}", headers=member)
        assert gone.status_code == 404
        assert (await e2e_env.client.get(base, headers=member)).status_code == 404
