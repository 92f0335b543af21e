from certifica.api.v1.endpoints.dashboard import get_dashboard_service
from certifica.main import app
from certifica.services.dashboard_service import DashboardService


async def test_bootstrap_loads_everything(client, auth_headers, create_course, create_student):
    course = await create_course()
    await create_student(course["id"])

    resp = await client.get("/api/v1/dashboard/bootstrap", headers=auth_headers)

    assert resp.status_code == 200
    body = resp.json()
    assert [c["id"] for c in body["courses"]] == [course["id"]]
    assert len(body["students"]) == 1
    assert body["settings"]["themes"]


async def test_summary_orders_courses_by_issued_count(client, auth_headers, create_course, create_student, issue):
    a = await create_course(name="A")
    b = await create_course(name="B")
    await create_course(name="C")

    for i in range(1, 3):
        await issue((await create_student(a["id"], name=f"a{i}", cpf=f"1000000000{i}"))["id"])
    for i in range(1, 4):
        await issue((await create_student(b["id"], name=f"b{i}", cpf=f"2000000000{i}"))["id"])
    await create_student(a["id"], name="pendente", cpf="30000000001")

    resp = await client.get("/api/v1/dashboard/summary", headers=auth_headers)

    assert resp.status_code == 200
    body = resp.json()
    assert body["total_courses"] == 3
    assert body["total_students"] == 6
    assert body["total_issued"] == 5
    assert [(s["course_name"], s["count"]) for s in body["course_stats"]] == [("B", 3), ("A", 2), ("C", 0)]


class _BrokenSessionFactory:
    def __call__(self):
        raise ConnectionError("connection refused")


async def test_bootstrap_failure_is_503(client, auth_headers):
    app.dependency_overrides[get_dashboard_service] = lambda: DashboardService(_BrokenSessionFactory())
    try:
        resp = await client.get("/api/v1/dashboard/bootstrap", headers=auth_headers)
    finally:
        app.dependency_overrides.pop(get_dashboard_service, None)

    assert resp.status_code == 503
    assert resp.json()["error_type"] == "SERVICE_UNAVAILABLE"
