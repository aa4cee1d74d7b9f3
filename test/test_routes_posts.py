"""
Tests for post and translation routes

Drives the full application over HTTP with the test database.
"""

import pytest

from blog.config import settings

API = settings.api_prefix


def post_payload(**overrides) -> dict:
    payload = {
        "title": "Hi There",
        "slug": "hi-there",
        "content": "<p>Hello</p>",
        "category_ids": [1],
        "tag_names": ["demo"],
    }
    payload.update(overrides)
    return payload


def translation_payload(**overrides) -> dict:
    payload = {"locale": "en", "title": "Hi", "content": "<p>Hello</p>", "slug": "hi-there-en"}
    payload.update(overrides)
    return payload


@pytest.fixture
async def created_post(client, auth_headers, tech_category) -> dict:
    response = await client.post(
        f"{API}/posts", json=post_payload(category_ids=[tech_category.id]), headers=auth_headers
    )
    assert response.status_code == 201
    return response.json()


class TestCreatePost:
    """Test POST /api/posts"""

    async def test_create_returns_draft(self, client, auth_headers, tech_category, test_user):
        response = await client.post(
            f"{API}/posts", json=post_payload(category_ids=[tech_category.id]), headers=auth_headers
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "DRAFT"
        assert body["published_at"] is None
        assert body["author_id"] == test_user.id
        assert body["categories"][0]["slug"] == "tech"
        assert body["tags"][0]["slug"] == "demo"
        assert body["translations"] == []

    async def test_requires_authentication(self, client, tech_category):
        response = await client.post(f"{API}/posts", json=post_payload(category_ids=[tech_category.id]))

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    async def test_rejects_invalid_token(self, client, tech_category):
        response = await client.post(
            f"{API}/posts",
            json=post_payload(category_ids=[tech_category.id]),
            headers={"Authorization": "Bearer not-a-jwt"},
        )
        assert response.status_code == 401

    async def test_duplicate_slug_is_bad_request(self, client, auth_headers, created_post, tech_category):
        response = await client.post(
            f"{API}/posts", json=post_payload(category_ids=[tech_category.id]), headers=auth_headers
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["error_code"] == "CONFLICT_SLUG"
        assert error["message"] == "Post with slug 'hi-there' already exists"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"title": "Hi"},
            {"title": "<b></b>"},
            {"category_ids": []},
            {"category_ids": ["abc"]},
            {"tag_names": ["dup", "dup"]},
        ],
    )
    async def test_validation_errors(self, client, auth_headers, tech_category, overrides):
        payload = post_payload(category_ids=[tech_category.id])
        payload.update(overrides)

        response = await client.post(f"{API}/posts", json=payload, headers=auth_headers)

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["error_code"] == "VALIDATION_FAILED"
        assert error["details"]["validation_errors"]

    async def test_unknown_category_is_not_found(self, client, auth_headers):
        response = await client.post(f"{API}/posts", json=post_payload(category_ids=[999]), headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["error"]["error_code"] == "RESOURCE_CATEGORY_NOT_FOUND"

    async def test_script_tags_are_stripped(self, client, auth_headers, tech_category):
        response = await client.post(
            f"{API}/posts",
            json=post_payload(category_ids=[tech_category.id], content="<p>Safe</p><script>alert(1)</script>"),
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert "<script>" not in response.json()["content"]


class TestPostLifecycle:
    """Test get/update/publish/delete of a post"""

    async def test_get_by_id(self, client, created_post):
        response = await client.get(f"{API}/posts/id/{created_post['id']}")

        assert response.status_code == 200
        assert response.json()["slug"] == "hi-there"

    async def test_get_missing_post(self, client):
        response = await client.get(f"{API}/posts/id/999")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["error_code"] == "RESOURCE_POST_NOT_FOUND"
        assert error["path"] == f"{API}/posts/id/999"

    async def test_update_replaces_categories(self, client, created_post, news_category):
        response = await client.put(
            f"{API}/posts/{created_post['id']}",
            json={"category_ids": [news_category.id], "excerpt": "Updated"},
        )

        assert response.status_code == 200
        body = response.json()
        assert [c["slug"] for c in body["categories"]] == ["news"]
        assert body["excerpt"] == "Updated"
        assert body["title"] == "Hi There"

    async def test_update_rejects_unknown_status(self, client, created_post):
        response = await client.put(f"{API}/posts/{created_post['id']}", json={"status": "ARCHIVED"})
        assert response.status_code == 422

    async def test_update_rejects_null_title(self, client, created_post):
        response = await client.put(f"{API}/posts/{created_post['id']}", json={"title": None})
        assert response.status_code == 422

    async def test_publish_twice(self, client, created_post):
        first = await client.put(f"{API}/posts/{created_post['id']}/publish")
        second = await client.put(f"{API}/posts/{created_post['id']}/publish")

        assert first.status_code == 200
        assert second.status_code == 200
        assert first.json()["status"] == "PUBLISHED"
        assert first.json()["published_at"] is not None
        assert second.json()["published_at"] == first.json()["published_at"]

    async def test_delete_post(self, client, created_post):
        post_id = created_post["id"]
        await client.post(
            f"{API}/posts/{post_id}/translation",
            json=translation_payload(seo_data={"meta_title": "Hi"}),
        )

        response = await client.delete(f"{API}/posts/{post_id}")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert (await client.get(f"{API}/posts/id/{post_id}")).status_code == 404
        assert (await client.get(f"{API}/posts/hi-there-en/en")).status_code == 404

    async def test_delete_missing_post(self, client):
        response = await client.delete(f"{API}/posts/12")
        assert response.status_code == 404


class TestTranslationRoutes:
    """Test translation endpoints"""

    async def test_create_translation(self, client, created_post):
        response = await client.post(
            f"{API}/posts/{created_post['id']}/translation",
            json=translation_payload(
                locale="ar",
                slug="marhaba",
                seo_data={"meta_title": "Marhaba", "event_start_date": "2025-05-01T18:00:00Z"},
            ),
        )

        assert response.status_code == 201
        body = response.json()
        assert body["locale"] == "ar"
        assert body["is_rtl"] is True
        assert body["seo"]["meta_title"] == "Marhaba"
        assert body["seo"]["event_start_date"].startswith("2025-05-01T18:00:00")

    async def test_duplicate_locale_is_bad_request(self, client, created_post):
        url = f"{API}/posts/{created_post['id']}/translation"
        await client.post(url, json=translation_payload())

        response = await client.post(url, json=translation_payload(slug="other"))

        assert response.status_code == 400
        assert response.json()["error"]["error_code"] == "CONFLICT_LOCALE"

    async def test_invalid_locale(self, client, created_post):
        response = await client.post(
            f"{API}/posts/{created_post['id']}/translation",
            json=translation_payload(locale="english!"),
        )
        assert response.status_code == 422

    async def test_invalid_event_date(self, client, created_post):
        response = await client.post(
            f"{API}/posts/{created_post['id']}/translation",
            json=translation_payload(seo_data={"event_start_date": "next tuesday"}),
        )
        assert response.status_code == 422

    async def test_unsafe_seo_url(self, client, created_post):
        response = await client.post(
            f"{API}/posts/{created_post['id']}/translation",
            json=translation_payload(seo_data={"canonical_url": "javascript:alert(1)"}),
        )
        assert response.status_code == 422

    async def test_unknown_seo_field(self, client, created_post):
        response = await client.post(
            f"{API}/posts/{created_post['id']}/translation",
            json=translation_payload(seo_data={"keywords": "a,b"}),
        )
        assert response.status_code == 422

    async def test_translation_for_missing_post(self, client):
        response = await client.post(f"{API}/posts/404/translation", json=translation_payload())
        assert response.status_code == 404

    async def test_get_by_slug_and_locale(self, client, created_post):
        await client.post(f"{API}/posts/{created_post['id']}/translation", json=translation_payload())

        response = await client.get(f"{API}/posts/hi-there-en/en")

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Hi"
        assert body["post"]["id"] == created_post["id"]
        assert body["post"]["categories"][0]["slug"] == "tech"

    async def test_get_by_slug_wrong_locale(self, client, created_post):
        await client.post(f"{API}/posts/{created_post['id']}/translation", json=translation_payload())

        response = await client.get(f"{API}/posts/hi-there-en/fr")

        assert response.status_code == 404
        assert response.json()["error"]["error_code"] == "RESOURCE_TRANSLATION_NOT_FOUND"

    async def test_update_translation(self, client, created_post):
        url = f"{API}/posts/{created_post['id']}/translation"
        await client.post(url, json=translation_payload(seo_data={"meta_title": "Hi"}))

        response = await client.put(f"{url}/en", json={"excerpt": "Short", "seo_data": {"robots": "noindex"}})

        assert response.status_code == 200
        body = response.json()
        assert body["excerpt"] == "Short"
        assert body["seo"]["meta_title"] == "Hi"
        assert body["seo"]["robots"] == "noindex"

    async def test_delete_translation(self, client, created_post):
        url = f"{API}/posts/{created_post['id']}/translation"
        await client.post(url, json=translation_payload(seo_data={"meta_title": "Hi"}))

        response = await client.delete(f"{url}/en")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert (await client.get(f"{API}/posts/hi-there-en/en")).status_code == 404

    async def test_list_translations(self, client, created_post):
        url = f"{API}/posts/{created_post['id']}/translation"
        await client.post(url, json=translation_payload(locale="fr", slug="salut"))
        await client.post(url, json=translation_payload())

        response = await client.get(f"{API}/posts/{created_post['id']}/translations")

        assert response.status_code == 200
        assert [t["locale"] for t in response.json()] == ["en", "fr"]


class TestPublishedListing:
    """Test GET /api/posts/published/{locale}"""

    async def test_publish_scenario(self, client, auth_headers):
        category = await client.post(f"{API}/categories", json={"name": "Tech", "slug": "tech"})
        assert category.status_code == 201

        created = await client.post(
            f"{API}/posts",
            json={
                "title": "Hi There",
                "slug": "hi-there",
                "content": "...",
                "category_ids": [category.json()["id"]],
                "tag_names": ["demo"],
            },
            headers=auth_headers,
        )
        post_id = created.json()["id"]
        assert created.json()["status"] == "DRAFT"

        published = await client.put(f"{API}/posts/{post_id}/publish")
        assert published.json()["status"] == "PUBLISHED"
        assert published.json()["published_at"] is not None

        empty = await client.get(f"{API}/posts/published/en")
        assert empty.json() == []

        await client.post(
            f"{API}/posts/{post_id}/translation",
            json={"locale": "en", "title": "Hi", "content": "...", "slug": "hi-there-en"},
        )

        listed = await client.get(f"{API}/posts/published/en")
        assert listed.status_code == 200
        assert [t["slug"] for t in listed.json()] == ["hi-there-en"]
        assert listed.json()[0]["post"]["tags"][0]["name"] == "demo"

    async def test_drafts_are_hidden(self, client, created_post):
        await client.post(f"{API}/posts/{created_post['id']}/translation", json=translation_payload())

        response = await client.get(f"{API}/posts/published/en")

        assert response.status_code == 200
        assert response.json() == []
