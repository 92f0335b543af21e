from datetime import date


async def test_create_student_starts_pending(client, auth_headers, create_course, create_student):
    course = await create_course()

    student = await create_student(course["id"], name="ana silva", cpf="123.456.789-09")

    assert student["name"] == "ANA SILVA"
    assert student["cpf"] == "123.456.789-09"
    assert student["status"] == "PENDENTE"
    assert student["verification_code"] is None
    assert student["issued_at"] is None
    assert student["registration_date"] == date.today().strftime("%d/%m/%Y")


async def test_cpf_is_masked(create_course, create_student):
    course = await create_course()
    student = await create_student(course["id"], cpf="98765432100")
    assert student["cpf"] == "987.654.321-00"


async def test_create_student_for_unknown_course(client, auth_headers):
    resp = await client.post("/api/v1/students/", headers=auth_headers, json={
        "name": "Fulano",
        "cpf": "12345678901",
        "course_id": "6f1c2a52-0000-4000-8000-000000000000"
    })
    assert resp.status_code == 404
    assert resp.json()["error_type"] == "COURSE_NOT_FOUND"


async def test_invalid_completion_date(client, auth_headers, create_course):
    course = await create_course()
    resp = await client.post("/api/v1/students/", headers=auth_headers, json={
        "name": "Fulano",
        "cpf": "12345678901",
        "course_id": course["id"],
        "completion_date": "15/03/2024"
    })
    assert resp.status_code == 422


async def test_search_students(client, auth_headers, create_course, create_student):
    basic = await create_course(name="Curso Básico")
    advanced = await create_course(name="Curso Silva Avançado")
    ana = await create_student(basic["id"], name="Ana Silva", cpf="11111111111")
    await create_student(basic["id"], name="João Pereira", cpf="22222222222")
    carla = await create_student(advanced["id"], name="Carla Dias", cpf="33333333333")

    resp = await client.get("/api/v1/students/", params={"search": "silva"}, headers=auth_headers)

    assert resp.status_code == 200
    assert [s["id"] for s in resp.json()] == [ana["id"], carla["id"]]


async def test_search_by_cpf(client, auth_headers, create_course, create_student):
    course = await create_course()
    target = await create_student(course["id"], name="Alvo", cpf="12345678909")
    await create_student(course["id"], name="Outro", cpf="99988877766")

    resp = await client.get("/api/v1/students/", params={"search": "456.789"}, headers=auth_headers)

    assert [s["id"] for s in resp.json()] == [target["id"]]


async def test_update_student_keeps_issuance(client, auth_headers, create_course, create_student, issue):
    course = await create_course()
    student = await create_student(course["id"])
    doc = await issue(student["id"])

    resp = await client.put(f"/api/v1/students/{student['id']}", headers=auth_headers,
                            json={"name": "maria souza lima"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "MARIA SOUZA LIMA"
    assert body["status"] == "EMITIDO"
    assert body["verification_code"] == doc["verification_code"]


async def test_delete_student(client, auth_headers, create_course, create_student):
    course = await create_course()
    student = await create_student(course["id"])

    unconfirmed = await client.delete(f"/api/v1/students/{student['id']}", headers=auth_headers)
    assert unconfirmed.status_code == 400

    resp = await client.delete(f"/api/v1/students/{student['id']}?confirm=true", headers=auth_headers)
    assert resp.status_code == 200

    missing = await client.get(f"/api/v1/students/{student['id']}", headers=auth_headers)
    assert missing.status_code == 404
