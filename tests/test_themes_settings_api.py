THEME = {"name": "Vinho", "primary_color": "#7F1D1D", "accent_color": "#b45309", "ribbon_color": "#f59e0b"}


async def test_first_read_persists_defaults(client, auth_headers):
    resp = await client.get("/api/v1/settings/", headers=auth_headers)

    assert resp.status_code == 200
    body = resp.json()
    assert body["school_name"] == "MELO & MELO CURSOS E TREINAMENTOS"
    assert body["show_cnpj"] is True
    assert body["show_instructor_cpf"] is False
    assert [t["id"] for t in body["themes"]] == ["blue-gold", "green-gold", "office-blue"]

    again = await client.get("/api/v1/settings/", headers=auth_headers)
    assert again.json() == body


async def test_save_settings(client, auth_headers):
    resp = await client.put("/api/v1/settings/", headers=auth_headers, json={
        "school_name": "escola nova",
        "cnpj": "11222333000181",
        "show_cnpj": False,
        "instructor_name": "fulano de tal",
        "instructor_cpf": "12345678909",
        "show_instructor_cpf": True,
        "instructor_title": "Instrutor"
    })

    assert resp.status_code == 200
    body = resp.json()
    assert body["school_name"] == "ESCOLA NOVA"
    assert body["cnpj"] == "11.222.333/0001-81"
    assert body["instructor_cpf"] == "123.456.789-09"
    assert body["show_cnpj"] is False

    stored = (await client.get("/api/v1/settings/", headers=auth_headers)).json()
    assert stored["school_name"] == "ESCOLA NOVA"


async def test_save_settings_rejects_non_image_signature(client, auth_headers):
    resp = await client.put("/api/v1/settings/", headers=auth_headers, json={
        "school_name": "Escola",
        "instructor_name": "Instrutor",
        "signature_image": "https://example.com/assinatura.png"
    })
    assert resp.status_code == 422


async def test_create_update_delete_theme(client, auth_headers):
    await client.get("/api/v1/settings/", headers=auth_headers)

    created = await client.post("/api/v1/themes/", headers=auth_headers, json=THEME)
    assert created.status_code == 201
    theme = created.json()
    assert theme["primary_color"] == "#7f1d1d"
    assert theme["id"]

    updated = await client.put(f"/api/v1/themes/{theme['id']}", headers=auth_headers, json={"name": "Bordô"})
    assert updated.status_code == 200
    assert updated.json()["name"] == "Bordô"
    assert updated.json()["primary_color"] == "#7f1d1d"

    deleted = await client.delete(f"/api/v1/themes/{theme['id']}?confirm=true", headers=auth_headers)
    assert deleted.status_code == 200

    themes = (await client.get("/api/v1/themes/", headers=auth_headers)).json()
    assert theme["id"] not in [t["id"] for t in themes]


async def test_invalid_theme_color(client, auth_headers):
    resp = await client.post("/api/v1/themes/", headers=auth_headers, json={**THEME, "accent_color": "orange"})
    assert resp.status_code == 422


async def test_replace_themes(client, auth_headers):
    await client.get("/api/v1/settings/", headers=auth_headers)

    resp = await client.put("/api/v1/themes/", headers=auth_headers, json=[
        {"id": "blue-gold", "name": "Azul", "primary_color": "#000080",
         "accent_color": "#e67e00", "ribbon_color": "#f59e0b"},
        {**THEME, "id": "vinho"},
    ])

    assert resp.status_code == 200
    themes = resp.json()
    assert [t["id"] for t in themes] == ["blue-gold", "vinho"]
    assert themes[0]["primary_color"] == "#000080"


async def test_cannot_remove_last_theme(client, auth_headers):
    await client.put("/api/v1/themes/", headers=auth_headers, json=[{**THEME, "id": "unico"}])

    resp = await client.delete("/api/v1/themes/unico?confirm=true", headers=auth_headers)
    assert resp.status_code == 409
    assert resp.json()["error_type"] == "LAST_THEME"

    empty = await client.put("/api/v1/themes/", headers=auth_headers, json=[])
    assert empty.status_code == 409

    themes = (await client.get("/api/v1/themes/", headers=auth_headers)).json()
    assert [t["id"] for t in themes] == ["unico"]


async def test_settings_save_can_replace_themes(client, auth_headers):
    resp = await client.put("/api/v1/settings/", headers=auth_headers, json={
        "school_name": "Escola",
        "instructor_name": "Instrutor",
        "themes": [{**THEME, "id": "vinho"}]
    })

    assert resp.status_code == 200
    assert [t["id"] for t in resp.json()["themes"]] == ["vinho"]


async def test_update_theme_rejects_blank_name(client, auth_headers):
    await client.get("/api/v1/settings/", headers=auth_headers)

    resp = await client.put("/api/v1/themes/blue-gold", headers=auth_headers, json={"name": "   "})
    assert resp.status_code == 422

    trimmed = await client.put("/api/v1/themes/blue-gold", headers=auth_headers, json={"name": "  Azul  "})
    assert trimmed.status_code == 200
    assert trimmed.json()["name"] == "Azul"
