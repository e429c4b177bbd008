"""Tests for the contact form, admin inquiries and company info."""

from httpx import AsyncClient

from tests.conftest import ADMIN_ID, STUDENT_ID, auth_headers

FORM = {
    "name": "홍길동",
    "email": "hong@example.com",
    "phone": "010-1111-2222",
    "subject": "단체 레슨 문의",
    "message": "10명 정도 단체 레슨이 가능한가요?",
}


async def test_contact_form(client: AsyncClient) -> None:
    response = await client.post("/api/v1/contact", json=FORM)
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["inquiry"]["resolved"] is False


async def test_contact_form_validation(client: AsyncClient) -> None:
    response = await client.post("/api/v1/contact", json={**FORM, "email": "hong"})
    assert response.status_code == 422


async def test_admin_inquiries(client: AsyncClient) -> None:
    inquiry = (await client.post("/api/v1/contact", json=FORM)).json()["inquiry"]

    response = await client.get("/api/v1/admin/inquiries", headers=auth_headers(STUDENT_ID))
    assert response.status_code == 403

    response = await client.get("/api/v1/admin/inquiries", headers=auth_headers(ADMIN_ID))
    assert [i["id"] for i in response.json()] == [inquiry["id"]]

    response = await client.put(
        f"/api/v1/admin/inquiries/{inquiry['id']}/resolve", headers=auth_headers(ADMIN_ID)
    )
    assert response.json()["resolved"] is True

    response = await client.get(
        "/api/v1/admin/inquiries", params={"resolved": "false"}, headers=auth_headers(ADMIN_ID)
    )
    assert response.json() == []

    response = await client.put("/api/v1/admin/inquiries/99/resolve", headers=auth_headers(ADMIN_ID))
    assert response.status_code == 404


async def test_company_info(client: AsyncClient) -> None:
    response = await client.get("/api/v1/company-info", params={"section": "vision"})
    assert [i["title"] for i in response.json()] == ["비전 및 미션"]

    payload = {"section": "values", "title": "핵심 가치", "content": "신뢰, 성장, 즐거움을 중요하게 생각합니다."}
    response = await client.post("/api/v1/company-info", json=payload, headers=auth_headers(STUDENT_ID))
    assert response.status_code == 403

    response = await client.post("/api/v1/company-info", json=payload, headers=auth_headers(ADMIN_ID))
    assert response.status_code == 201
    info_id = response.json()["id"]

    response = await client.put(
        f"/api/v1/company-info/{info_id}", json={"title": "우리의 가치"}, headers=auth_headers(ADMIN_ID)
    )
    assert response.json()["title"] == "우리의 가치"
    assert response.json()["section"] == "values"

    assert (await client.get(f"/api/v1/company-info/{info_id}")).status_code == 200
    assert (await client.get("/api/v1/company-info/99")).status_code == 404
