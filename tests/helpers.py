"""API helpers shared by the test modules."""

from httpx import AsyncClient

GUITAR_SKILL = {
    "category": "Music",
    "title": "Guitar Lessons",
    "description": "Acoustic guitar from first chords to full songs.",
    "experienceLevel": "Intermediate",
    "availability": {"days": ["Monday", "Thursday"], "timeSlots": ["18:00-20:00"]},
}


async def register(
    client: AsyncClient, name: str, email: str, phone: str, password: str = "secret123"
) -> dict:
    """Register through the API; returns {"id", "token", "headers"}."""
    response = await client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "phone": phone, "password": password},
    )
    assert response.status_code == 201, response.text
    body = response.json()
    return {
        "id": body["user"]["id"],
        "token": body["token"],
        "headers": {"Authorization": f"Bearer {body['token']}"},
    }


async def create_skill(client: AsyncClient, headers: dict, **overrides) -> dict:
    response = await client.post("/api/skills", headers=headers, json={**GUITAR_SKILL, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["skill"]


async def send_request(client: AsyncClient, headers: dict, skill_id: str, message: str = "Keen to learn!") -> dict:
    response = await client.post(
        "/api/requests", headers=headers, json={"skillId": skill_id, "message": message}
    )
    assert response.status_code == 201, response.text
    return response.json()["request"]


async def set_status(client: AsyncClient, headers: dict, request_id: str, status: str):
    return await client.patch(
        f"/api/requests/{request_id}/status", headers=headers, json={"status": status}
    )
