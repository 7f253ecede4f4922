"""End-to-end tests for the posts and projects collections."""

from uuid import uuid4

import pytest

from club.adapter.cloudinary import MockImageHost
from club.domain.repository import PostRepository, TagRepository
from club.domain.value import TagKind, TagName, UserRole
from tests.e2e.helpers import login_as, seed_tags
from tests.harness import create_app_fixture

# E2E test fixture - app over mocked infrastructure
e2e_env = create_app_fixture()

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def project_form(**overrides):
    form = {
        "title": "Robot arm",
        "body": "A six axis arm driven by servos.",
        "main_tag": "robotics",
        "tags": ["servo", "robotics"],
    }
    form.update(overrides)
    return form


class TestCreatePost:
    @pytest.mark.asyncio
    async def test_admin_creates_post_with_new_user_tag(self, e2e_env):
        """Should create USER tag "react" and anchor the post on SYSTEM "robotics"."""
        await seed_tags(e2e_env)
        _, headers = await login_as(e2e_env, UserRole.ADMIN)

        response = await e2e_env.client.post(
            "/posts",
            data={
                "title": "Web dashboard",
                "body": "We built a dashboard for the rover.",
                "tags": ["react", "robotics"],
                "main_tag": "robotics",
            },
            headers=headers,
        )

        assert response.status_code == 201
        post = response.json()
        assert {t["name"] for t in post["tags"]} == {"react", "robotics"}
        assert post["main_tag"]["name"] == "robotics"
        assert post["main_tag"]["kind"] == "SYSTEM"
        assert post["image_url"] == "https://picsum.photos/seed/robotics/800/450"

        async with e2e_env.request_scope() as scope:
            tags = await scope.get(TagRepository)
            react = await tags.find_by_name(TagName("react"))
        assert react.kind == TagKind.USER

    @pytest.mark.asyncio
    async def test_invalid_main_tag_persists_nothing(self, e2e_env):
        await seed_tags(e2e_env)
        _, headers = await login_as(e2e_env, UserRole.ADMIN)

        response = await e2e_env.client.post(
            "/posts",
            data={
                "title": "Broken",
                "body": "This post should never exist.",
                "tags": ["brand-new"],
                "main_tag": "nonexistent",
            },
            headers=headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "InvalidMainTag"
        async with e2e_env.request_scope() as scope:
            assert await (await scope.get(PostRepository)).count() == 0
            tags = await scope.get(TagRepository)
            assert await tags.find_by_name(TagName("brand-new")) is None

    @pytest.mark.asyncio
    async def test_member_cannot_create_post(self, e2e_env):
        await seed_tags(e2e_env)
        _, headers = await login_as(e2e_env, UserRole.MEMBER)

        response = await e2e_env.client.post(
            "/posts", data=project_form(), headers=headers
        )

        assert response.status_code == 403
        assert response.json()["code"] == "Forbidden"

    @pytest.mark.asyncio
    async def test_short_title_is_validation_error(self, e2e_env):
        await seed_tags(e2e_env)
        _, headers = await login_as(e2e_env, UserRole.ADMIN)

        response = await e2e_env.client.post(
            "/posts", data=project_form(title="Hi"), headers=headers
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "title"

    @pytest.mark.asyncio
    async def test_blank_title_is_validation_error(self, e2e_env):
        await seed_tags(e2e_env)
        _, headers = await login_as(e2e_env, UserRole.ADMIN)

        response = await e2e_env.client.post(
            "/posts", data=project_form(title="   "), headers=headers
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "title"
        async with e2e_env.request_scope() as scope:
            assert await (await scope.get(PostRepository)).count() == 0


class TestProjects:
    @pytest.mark.asyncio
    async def test_create_with_image_and_read_back(self, e2e_env):
        await seed_tags(e2e_env)
        _, headers = await login_as(e2e_env)

        created = await e2e_env.client.post(
            "/projects",
            data=project_form(),
            files={"image": ("arm.png", PNG, "image/png")},
            headers=headers,
        )

        assert created.status_code == 201
        project = created.json()
        assert project["image_url"].startswith(
            f"https://images.test/projects/{project['id']}/"
        )
        fetched = await e2e_env.client.get(f"/projects/{project['id']}", headers=headers)
        assert fetched.status_code == 200
        assert fetched.json()["title"] == "Robot arm"

    @pytest.mark.asyncio
    async def test_ownership_boundary(self, e2e_env):
        """Only the author or an admin may update or delete a project."""
        await seed_tags(e2e_env)
        _, author = await login_as(e2e_env)
        _, other = await login_as(e2e_env)
        _, admin = await login_as(e2e_env, UserRole.ADMIN)
        project = (
            await e2e_env.client.post("/projects", data=project_form(), headers=author)
        ).json()
        url = f"/projects/{project['id']}"

        assert (await e2e_env.client.put(url, data={"title": "Mine"}, headers=other)).status_code == 403
        assert (await e2e_env.client.delete(url, headers=other)).status_code == 403

        own = await e2e_env.client.put(url, data={"title": "Robot arm v2"}, headers=author)
        assert own.status_code == 200
        assert own.json()["title"] == "Robot arm v2"

        deleted = await e2e_env.client.delete(url, headers=admin)
        assert deleted.status_code == 200
        assert deleted.json()["deleted"] is True
        assert (await e2e_env.client.get(url, headers=author)).status_code == 404

    @pytest.mark.asyncio
    async def test_update_tags_requires_main_tag(self, e2e_env):
        await seed_tags(e2e_env)
        _, headers = await login_as(e2e_env)
        project = (
            await e2e_env.client.post("/projects", data=project_form(), headers=headers)
        ).json()

        response = await e2e_env.client.put(
            f"/projects/{project['id']}", data={"tags": ["lidar"]}, headers=headers
        )

        assert response.status_code == 400
        unchanged = await e2e_env.client.get(f"/projects/{project['id']}", headers=headers)
        assert unchanged.json()["tags"] == project["tags"]

    @pytest.mark.asyncio
    async def test_list_filters_by_tag(self, e2e_env):
        await seed_tags(e2e_env)
        _, headers = await login_as(e2e_env)
        await e2e_env.client.post("/projects", data=project_form(), headers=headers)
        await e2e_env.client.post(
            "/projects",
            data=project_form(
                title="Soldering station",
                body="Temperature controlled iron.",
                tags=["electronics"],
                main_tag="electronics",
            ),
            headers=headers,
        )

        response = await e2e_env.client.get(
            "/projects", params={"tag": "Servo"}, headers=headers
        )

        assert response.status_code == 200
        body = response.json()
        assert [p["title"] for p in body["items"]] == ["Robot arm"]
        assert body["pagination"] == {"page": 1, "limit": 10, "total": 1, "total_pages": 1}

    @pytest.mark.asyncio
    async def test_overlong_tag_filter_matches_nothing(self, e2e_env):
        await seed_tags(e2e_env)
        _, headers = await login_as(e2e_env)
        await e2e_env.client.post("/projects", data=project_form(), headers=headers)

        response = await e2e_env.client.get(
            "/projects", params={"tag": "x" * 51}, headers=headers
        )

        assert response.status_code == 200
        assert response.json()["items"] == []
        assert response.json()["pagination"]["total"] == 0

    @pytest.mark.asyncio
    async def test_blank_title_update_rejected(self, e2e_env):
        await seed_tags(e2e_env)
        _, headers = await login_as(e2e_env)
        project = (
            await e2e_env.client.post("/projects", data=project_form(), headers=headers)
        ).json()
        url = f"/projects/{project['id']}"

        response = await e2e_env.client.put(url, data={"title": "   "}, headers=headers)

        assert response.status_code == 400
        assert (await e2e_env.client.get(url, headers=headers)).json()["title"] == "Robot arm"

    @pytest.mark.asyncio
    async def test_replace_and_remove_image(self, e2e_env):
        await seed_tags(e2e_env)
        _, headers = await login_as(e2e_env)
        project = (
            await e2e_env.client.post("/projects", data=project_form(), headers=headers)
        ).json()
        url = f"/projects/{project['id']}/image"

        uploaded = await e2e_env.client.post(
            url, files={"image": ("arm.png", PNG, "image/png")}, headers=headers
        )
        removed = await e2e_env.client.delete(url, headers=headers)
        missing = await e2e_env.client.delete(url, headers=headers)

        assert uploaded.status_code == 200
        assert uploaded.json()["image_url"].startswith("https://images.test/")
        assert removed.status_code == 200
        assert missing.status_code == 404
        async with e2e_env.request_scope() as scope:
            host = await scope.get(MockImageHost)
        assert host.assets == {}

    @pytest.mark.asyncio
    async def test_non_image_upload_rejected(self, e2e_env):
        await seed_tags(e2e_env)
        _, headers = await login_as(e2e_env)

        response = await e2e_env.client.post(
            "/projects",
            data=project_form(),
            files={"image": ("notes.txt", b"hello", "text/plain")},
            headers=headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_image_host_outage_is_500(self, e2e_env):
        await seed_tags(e2e_env)
        _, headers = await login_as(e2e_env)
        async with e2e_env.request_scope() as scope:
            (await scope.get(MockImageHost)).fail_uploads = True

        response = await e2e_env.client.post(
            "/projects",
            data=project_form(),
            files={"image": ("arm.png", PNG, "image/png")},
            headers=headers,
        )

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}


class TestMissingContent:
    """A missing item is 404 for everyone, before any ownership check."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("collection", ["projects", "posts"])
    async def test_non_author_gets_not_found(self, e2e_env, collection):
        await seed_tags(e2e_env)
        _, headers = await login_as(e2e_env)
        url = f"/{collection}/{uuid4()}"

        updated = await e2e_env.client.put(url, data={"title": "Anything"}, headers=headers)
        deleted = await e2e_env.client.delete(url, headers=headers)

        assert updated.status_code == 404
        assert updated.json()["code"] == "NotFound"
        assert deleted.status_code == 404
        assert deleted.json()["code"] == "NotFound"
