from httpx import AsyncClient


async def register(client: AsyncClient, email: str, password: str = "pw123456", name=None):
    response = await client.post(
        "/auth/register", json={"email": email, "password": password, "name": name}
    )
    assert response.status_code == 201, response.text
    return response.json()


def bearer(auth: dict) -> dict:
    return {"Authorization": f"Bearer {auth['access_token']}"}
