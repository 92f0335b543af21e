from datetime import date

from certifica.services import certificate_service
from certifica.services.verification_service import VERIFICATION_ALPHABET


async def test_issue_assigns_code_and_marks_issued(client, auth_headers, create_course, create_student, issue):
    course = await create_course()
    student = await create_student(course["id"])

    doc = await issue(student["id"])

    code = doc["verification_code"]
    assert len(code) == 8 and set(code) <= set(VERIFICATION_ALPHABET)
    assert doc["status"] == "EMITIDO"
    assert doc["display_date"] == "15/03/2024"
    assert doc["verification_url"] == f"https://certifica.example.com/verificar?verify={code}"

    stored = (await client.get(f"/api/v1/students/{student['id']}", headers=auth_headers)).json()
    assert stored["status"] == "EMITIDO"
    assert stored["verification_code"] == code
    assert stored["issued_at"] == date.today().strftime("%d/%m/%Y")


async def test_reissue_keeps_code(create_course, create_student, issue):
    course = await create_course()
    student = await create_student(course["id"])

    first = await issue(student["id"])
    second = await issue(student["id"])

    assert second["verification_code"] == first["verification_code"]


async def test_each_student_gets_its_own_code(create_course, create_student, issue):
    course = await create_course()
    a = await create_student(course["id"], name="A", cpf="11111111111")
    b = await create_student(course["id"], name="B", cpf="22222222222")

    assert (await issue(a["id"]))["verification_code"] != (await issue(b["id"]))["verification_code"]


async def test_view_certificate_does_not_issue(client, auth_headers, create_course, create_student):
    course = await create_course()
    student = await create_student(course["id"])

    resp = await client.get(f"/api/v1/certificates/{student['id']}", headers=auth_headers)

    assert resp.status_code == 200
    assert resp.json()["status"] == "PENDENTE"
    assert resp.json()["verification_code"] is None
    assert resp.json()["qr_code_url"] is None


async def test_certificate_uses_first_theme_when_course_theme_deleted(client, auth_headers, create_course,
                                                                     create_student):
    await client.get("/api/v1/settings/", headers=auth_headers)
    course = await create_course(theme_id="green-gold")
    student = await create_student(course["id"])

    deleted = await client.delete("/api/v1/themes/green-gold?confirm=true", headers=auth_headers)
    assert deleted.status_code == 200

    doc = (await client.get(f"/api/v1/certificates/{student['id']}", headers=auth_headers)).json()
    assert doc["theme"]["theme_id"] == "blue-gold"
    assert doc["theme"]["primary"] == "#0f172a"


async def test_issue_unknown_student(client, auth_headers):
    resp = await client.post("/api/v1/certificates/6f1c2a52-0000-4000-8000-000000000000/issue",
                             headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["error_type"] == "STUDENT_NOT_FOUND"


async def test_scale_endpoint(client, auth_headers):
    wide = await client.get("/api/v1/certificates/scale", params={"viewport_width": 1920}, headers=auth_headers)
    narrow = await client.get("/api/v1/certificates/scale", params={"viewport_width": 643}, headers=auth_headers)
    printing = await client.get("/api/v1/certificates/scale", params={"viewport_width": 643, "printing": True},
                                headers=auth_headers)

    assert wide.json()["scale"] == 1.0
    assert 0 < narrow.json()["scale"] < 1
    assert printing.json()["scale"] == 1.0


async def test_issue_redraws_code_already_in_use(client, auth_headers, create_course, create_student,
                                                 issue, monkeypatch):
    course = await create_course()
    first = await create_student(course["id"], name="A", cpf="11111111111")
    second = await create_student(course["id"], name="B", cpf="22222222222")
    taken = (await issue(first["id"]))["verification_code"]

    draws = iter([taken, "FRESH234"])
    monkeypatch.setattr(certificate_service, "generate_verification_code", lambda: next(draws))

    doc = await issue(second["id"])

    assert doc["verification_code"] == "FRESH234"


async def test_issue_fails_when_every_draw_collides(client, auth_headers, create_course, create_student,
                                                    issue, monkeypatch):
    course = await create_course()
    first = await create_student(course["id"], name="A", cpf="11111111111")
    second = await create_student(course["id"], name="B", cpf="22222222222")
    taken = (await issue(first["id"]))["verification_code"]

    calls = []

    def always_taken():
        calls.append(1)
        return taken

    monkeypatch.setattr(certificate_service, "generate_verification_code", always_taken)

    resp = await client.post(f"/api/v1/certificates/{second['id']}/issue", headers=auth_headers)

    assert resp.status_code == 503
    assert resp.json()["error_type"] == "VERIFICATION_CODE_EXHAUSTED"
    assert len(calls) == certificate_service.settings.VERIFICATION_CODE_MAX_ATTEMPTS

    stored = (await client.get(f"/api/v1/students/{second['id']}", headers=auth_headers)).json()
    assert stored["status"] == "PENDENTE"
    assert stored["verification_code"] is None
