from certifica.repositories.course_repository import CourseRepository


async def test_create_course_normalizes_and_fills_defaults(client, auth_headers, create_course):
    # Seeds default settings and themes
    await client.get("/api/v1/settings/", headers=auth_headers)

    course = await create_course(name="  operador de empilhadeira ", duration="40 horas",
                                 syllabus=["Normas", "  ", "Prática"])

    assert course["name"] == "OPERADOR DE EMPILHADEIRA"
    assert course["duration"] == "40 HORAS"
    assert course["syllabus"] == ["Normas", "Prática"]
    assert course["instructor"] == "LOURIVAL G. MELO"
    assert course["theme_id"] == "blue-gold"


async def test_list_courses_in_insertion_order(client, auth_headers, create_course):
    for name in ("Primeiro", "Segundo", "Terceiro"):
        await create_course(name=name)

    resp = await client.get("/api/v1/courses/", headers=auth_headers)

    assert resp.status_code == 200
    assert [c["name"] for c in resp.json()] == ["PRIMEIRO", "SEGUNDO", "TERCEIRO"]


async def test_update_course(client, auth_headers, create_course):
    course = await create_course()

    resp = await client.put(f"/api/v1/courses/{course['id']}", headers=auth_headers,
                            json={"duration": "60 horas", "theme_id": "green-gold"})

    assert resp.status_code == 200
    assert resp.json()["duration"] == "60 HORAS"
    assert resp.json()["theme_id"] == "green-gold"
    assert resp.json()["name"] == course["name"]


async def test_get_missing_course(client, auth_headers):
    resp = await client.get("/api/v1/courses/6f1c2a52-0000-4000-8000-000000000000", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["error_type"] == "COURSE_NOT_FOUND"


async def test_delete_course_removes_its_students(client, auth_headers, create_course, create_student):
    c1 = await create_course(name="C1")
    c2 = await create_course(name="C2")
    s1 = await create_student(c1["id"], name="S1", cpf="11111111111")
    s2 = await create_student(c1["id"], name="S2", cpf="22222222222")
    s3 = await create_student(c2["id"], name="S3", cpf="33333333333")

    resp = await client.delete(f"/api/v1/courses/{c1['id']}?confirm=true", headers=auth_headers)

    assert resp.status_code == 200
    assert resp.json()["removed_students"] == 2

    courses = (await client.get("/api/v1/courses/", headers=auth_headers)).json()
    students = (await client.get("/api/v1/students/", headers=auth_headers)).json()
    assert [c["id"] for c in courses] == [c2["id"]]
    assert [s["id"] for s in students] == [s3["id"]]
    assert s1["id"] not in {s["id"] for s in students}
    assert s2["id"] not in {s["id"] for s in students}


async def test_delete_course_requires_confirmation(client, auth_headers, create_course):
    course = await create_course()

    resp = await client.delete(f"/api/v1/courses/{course['id']}", headers=auth_headers)

    assert resp.status_code == 400
    assert resp.json()["error_type"] == "CONFIRMATION_REQUIRED"
    still_there = await client.get(f"/api/v1/courses/{course['id']}", headers=auth_headers)
    assert still_there.status_code == 200


async def test_create_course_rejects_blank_name(client, auth_headers):
    resp = await client.post("/api/v1/courses/", headers=auth_headers, json={"name": "   ", "duration": "8h"})
    assert resp.status_code == 422


async def test_update_course_rejects_null_for_required_fields(client, auth_headers, create_course):
    course = await create_course()

    for payload in ({"name": None}, {"duration": None}, {"description": None, "syllabus": None},
                    {"instructor": None}):
        resp = await client.put(f"/api/v1/courses/{course['id']}", headers=auth_headers, json=payload)
        assert resp.status_code == 422, payload
        assert resp.json()["error_type"] == "VALIDATION_ERROR"

    stored = (await client.get(f"/api/v1/courses/{course['id']}", headers=auth_headers)).json()
    assert stored["name"] == course["name"]
    assert stored["syllabus"] == course["syllabus"]


async def test_update_course_allows_null_theme(client, auth_headers, create_course):
    course = await create_course(theme_id="green-gold")

    resp = await client.put(f"/api/v1/courses/{course['id']}", headers=auth_headers, json={"theme_id": None})

    assert resp.status_code == 200
    assert resp.json()["theme_id"] is None


async def test_failed_course_delete_keeps_course_and_students(client, auth_headers, create_course,
                                                             create_student, monkeypatch):
    course = await create_course()
    s1 = await create_student(course["id"], name="S1", cpf="11111111111")
    s2 = await create_student(course["id"], name="S2", cpf="22222222222")

    async def failing_delete(self, course_id, commit=True):
        raise RuntimeError("disk I/O error")

    # Students are deleted first, then the course delete fails
    monkeypatch.setattr(CourseRepository, "delete", failing_delete)

    resp = await client.delete(f"/api/v1/courses/{course['id']}?confirm=true", headers=auth_headers)

    assert resp.status_code == 500
    assert resp.json()["error_type"] == "DATABASE_ERROR"

    still_there = await client.get(f"/api/v1/courses/{course['id']}", headers=auth_headers)
    assert still_there.status_code == 200
    students = (await client.get("/api/v1/students/", headers=auth_headers)).json()
    assert {s["id"] for s in students} == {s1["id"], s2["id"]}
