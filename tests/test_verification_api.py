from sqlalchemy import update

from certifica.database.models.student import Student


async def test_verify_issued_certificate(client, create_course, create_student, issue):
    course = await create_course(name="Eletricista Predial", duration="80 horas")
    student = await create_student(course["id"], name="Ana Silva", cpf="12345678909")
    code = (await issue(student["id"]))["verification_code"]

    resp = await client.get(f"/api/v1/verification/{code}")

    assert resp.status_code == 200
    body = resp.json()
    assert body["valid"] is True
    assert body["student_name"] == "ANA SILVA"
    assert body["student_cpf"] == "123.456.789-09"
    assert body["course_name"] == "ELETRICISTA PREDIAL"
    assert body["course_duration"] == "80 HORAS"
    assert body["completion_date"] == "15/03/2024"


async def test_verify_is_case_insensitive_and_trims(client, create_course, create_student, issue):
    course = await create_course()
    student = await create_student(course["id"])
    code = (await issue(student["id"]))["verification_code"]

    resp = await client.get(f"/api/v1/verification/%20{code.lower()}%20")

    assert resp.status_code == 200
    assert resp.json()["verification_code"] == code


async def test_verify_from_public_link_returns_clean_url(client, create_course, create_student, issue):
    course = await create_course()
    student = await create_student(course["id"])
    code = (await issue(student["id"]))["verification_code"]

    resp = await client.get("/api/v1/verification/", params={"verify": code})

    assert resp.status_code == 200
    assert resp.json()["clean_url"] == "https://certifica.example.com/verificar"


async def test_unknown_and_unissued_codes_fail_alike(client, db_session, create_course, create_student, issue):
    course = await create_course()
    student = await create_student(course["id"])
    code = (await issue(student["id"]))["verification_code"]

    # Move the student away from EMITIDO while keeping the code
    await db_session.execute(update(Student).where(Student.verification_code == code).values(status="PENDENTE"))
    await db_session.commit()

    unissued = await client.get(f"/api/v1/verification/{code}")
    unknown = await client.get("/api/v1/verification/ZZZZ9999")
    empty = await client.get("/api/v1/verification/", params={"verify": "  "})

    assert unissued.status_code == unknown.status_code == empty.status_code == 404
    assert unissued.json() == unknown.json() == empty.json()


async def test_verify_fails_once_course_is_deleted(client, auth_headers, create_course, create_student, issue):
    course = await create_course()
    student = await create_student(course["id"])
    code = (await issue(student["id"]))["verification_code"]

    await client.delete(f"/api/v1/courses/{course['id']}?confirm=true", headers=auth_headers)

    resp = await client.get(f"/api/v1/verification/{code}")
    assert resp.status_code == 404


async def test_verification_needs_no_token(client, database):
    resp = await client.get("/api/v1/verification/ABCD2345")
    assert resp.status_code == 404
    assert resp.json()["error_type"] == "CERTIFICATE_NOT_FOUND"
