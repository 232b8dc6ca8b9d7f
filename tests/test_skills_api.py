"""
Skill API tests - CRUD, ownership, soft delete, filtering and search.
"""

import pytest
from httpx import AsyncClient

from tests.helpers import GUITAR_SKILL, create_skill, send_request


@pytest.mark.asyncio
async def test_list_skills_empty(client: AsyncClient):
    response = await client.get("/api/skills")
    assert response.status_code == 200
    assert response.json() == {"success": True, "count": 0, "skills": []}


@pytest.mark.asyncio
async def test_create_skill_requires_auth(client: AsyncClient):
    response = await client.post("/api/skills", json=GUITAR_SKILL)
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_skill(client: AsyncClient, alice):
    response = await client.post("/api/skills", headers=alice["headers"], json=GUITAR_SKILL)
    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Skill created successfully"
    skill = data["skill"]
    assert skill["title"] == "Guitar Lessons"
    assert skill["experienceLevel"] == "Intermediate"
    assert skill["isActive"] is True
    assert skill["availability"] == {"days": ["Monday", "Thursday"], "timeSlots": ["18:00-20:00"]}
    assert skill["userId"] == alice["id"]
    assert skill["user"]["name"] == "Alice"
    assert "bio" not in skill["user"]


@pytest.mark.asyncio
async def test_create_skill_without_availability(client: AsyncClient, alice):
    payload = {k: v for k, v in GUITAR_SKILL.items() if k != "availability"}
    response = await client.post("/api/skills", headers=alice["headers"], json=payload)
    assert response.status_code == 201
    assert response.json()["skill"]["availability"] == {"days": [], "timeSlots": []}


@pytest.mark.asyncio
async def test_create_skill_validation(client: AsyncClient, alice):
    response = await client.post(
        "/api/skills",
        headers=alice["headers"],
        json={"category": "", "title": "Gu", "description": "short", "experienceLevel": "Guru"},
    )
    assert response.status_code == 400
    errors = {e["field"]: e["message"] for e in response.json()["errors"]}
    assert errors == {
        "category": "Category is required",
        "title": "Title must be at least 3 characters",
        "description": "Description must be at least 10 characters",
        "experienceLevel": "Invalid experience level",
    }


@pytest.mark.asyncio
async def test_get_skill_includes_owner_bio(client: AsyncClient, alice):
    await client.put("/api/auth/profile", headers=alice["headers"], json={"bio": "Guitarist for 10 years"})
    skill = await create_skill(client, alice["headers"])
    response = await client.get(f"/api/skills/{skill['id']}")
    assert response.status_code == 200
    assert response.json()["skill"]["user"]["bio"] == "Guitarist for 10 years"


@pytest.mark.asyncio
async def test_get_skill_not_found_and_malformed_id(client: AsyncClient):
    response = await client.get("/api/skills/00000000-0000-0000-0000-000000000000")
    assert response.status_code == 404
    assert response.json()["message"] == "Skill not found"

    response = await client.get("/api/skills/not-an-id")
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid skill ID"


@pytest.mark.asyncio
async def test_list_filters_and_newest_first(client: AsyncClient, alice, bob):
    first = await create_skill(client, alice["headers"])
    second = await create_skill(
        client, bob["headers"], category="Languages", title="Spanish Conversation", experienceLevel="Expert"
    )
    response = await client.get("/api/skills")
    assert [s["id"] for s in response.json()["skills"]] == [second["id"], first["id"]]

    response = await client.get("/api/skills", params={"category": "Music"})
    assert [s["id"] for s in response.json()["skills"]] == [first["id"]]

    response = await client.get("/api/skills", params={"experienceLevel": "Expert"})
    assert response.json()["count"] == 1
    assert response.json()["skills"][0]["id"] == second["id"]


@pytest.mark.asyncio
async def test_list_by_user(client: AsyncClient, alice, bob):
    await create_skill(client, alice["headers"])
    await create_skill(client, bob["headers"], title="Piano Basics")
    response = await client.get(f"/api/skills/user/{alice['id']}")
    assert response.status_code == 200
    assert response.json()["count"] == 1
    assert response.json()["skills"][0]["user"]["id"] == alice["id"]


@pytest.mark.asyncio
async def test_update_skill_partial(client: AsyncClient, alice):
    skill = await create_skill(client, alice["headers"])
    response = await client.put(
        f"/api/skills/{skill['id']}", headers=alice["headers"], json={"experienceLevel": "Expert"}
    )
    assert response.status_code == 200
    updated = response.json()["skill"]
    assert updated["experienceLevel"] == "Expert"
    assert updated["title"] == "Guitar Lessons"


@pytest.mark.asyncio
async def test_update_skill_null_availability_resets_it(client: AsyncClient, alice):
    skill = await create_skill(client, alice["headers"])
    response = await client.put(
        f"/api/skills/{skill['id']}", headers=alice["headers"], json={"availability": None, "title": None}
    )
    assert response.status_code == 200
    updated = response.json()["skill"]
    assert updated["availability"] == {"days": [], "timeSlots": []}
    assert updated["title"] == "Guitar Lessons"


@pytest.mark.asyncio
async def test_update_skill_revalidates(client: AsyncClient, alice):
    skill = await create_skill(client, alice["headers"])
    response = await client.put(f"/api/skills/{skill['id']}", headers=alice["headers"], json={"title": "Hi"})
    assert response.status_code == 400
    assert response.json()["errors"][0]["message"] == "Title must be at least 3 characters"


@pytest.mark.asyncio
async def test_update_skill_forbidden_for_non_owner(client: AsyncClient, alice, bob):
    skill = await create_skill(client, alice["headers"])
    response = await client.put(f"/api/skills/{skill['id']}", headers=bob["headers"], json={"title": "Stolen"})
    assert response.status_code == 403
    assert response.json()["message"] == "You are not authorized to update this skill"

    response = await client.get(f"/api/skills/{skill['id']}")
    assert response.json()["skill"]["title"] == "Guitar Lessons"


@pytest.mark.asyncio
async def test_delete_skill_forbidden_and_missing(client: AsyncClient, alice, bob):
    skill = await create_skill(client, alice["headers"])
    response = await client.delete(f"/api/skills/{skill['id']}", headers=bob["headers"])
    assert response.status_code == 403

    response = await client.delete(
        "/api/skills/00000000-0000-0000-0000-000000000000", headers=alice["headers"]
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_soft_deleted_skill_hidden_but_still_resolves_in_requests(client: AsyncClient, alice, bob):
    skill = await create_skill(client, alice["headers"])
    request = await send_request(client, bob["headers"], skill["id"])

    response = await client.delete(f"/api/skills/{skill['id']}", headers=alice["headers"])
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Skill deleted successfully"}

    assert (await client.get(f"/api/skills/{skill['id']}")).status_code == 404
    assert (await client.get("/api/skills")).json()["count"] == 0
    assert (await client.get(f"/api/skills/user/{alice['id']}")).json()["count"] == 0
    assert (await client.get("/api/skills/search", params={"query": "guitar"})).json()["count"] == 0

    response = await client.get(f"/api/requests/{request['id']}", headers=bob["headers"])
    assert response.status_code == 200
    resolved = response.json()["request"]["skill"]
    assert resolved["title"] == "Guitar Lessons"
    assert resolved["isActive"] is False


@pytest.mark.asyncio
async def test_search_matches_title_description_category(client: AsyncClient, alice):
    guitar = await create_skill(client, alice["headers"])
    yoga = await create_skill(
        client,
        alice["headers"],
        category="Fitness",
        title="Yoga Flow",
        description="Morning routines focused on mobility.",
    )

    by_title = await client.get("/api/skills/search", params={"query": "GUITAR"})
    assert [s["id"] for s in by_title.json()["skills"]] == [guitar["id"]]

    by_description = await client.get("/api/skills/search", params={"query": "mobility"})
    assert [s["id"] for s in by_description.json()["skills"]] == [yoga["id"]]

    by_category = await client.get("/api/skills/search", params={"query": "fitn"})
    assert by_category.json()["count"] == 1


@pytest.mark.asyncio
async def test_search_treats_wildcards_literally(client: AsyncClient, alice):
    await create_skill(client, alice["headers"])
    response = await client.get("/api/skills/search", params={"query": "%"})
    assert response.status_code == 200
    assert response.json()["count"] == 0


@pytest.mark.asyncio
async def test_search_requires_query(client: AsyncClient):
    response = await client.get("/api/skills/search")
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Search query is required"}
