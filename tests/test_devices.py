DEVICE = {"name": "Fridge", "type": "appliance", "consumption": 1.2}


def create_device(client, headers, **overrides):
    response = client.post("/api/devices", json={**DEVICE, **overrides}, headers=headers)
    assert response.status_code == 201
    return response.json()


def test_create_device_defaults(client, make_user):
    user = make_user()
    device = create_device(client, user["headers"])
    assert device["userId"] == user["id"]
    assert device["name"] == "Fridge"
    assert device["consumption"] == 1.2
    assert device["isActive"] is True


def test_create_device_requires_name_and_type(client, auth_headers):
    response = client.post("/api/devices", json={"consumption": 3}, headers=auth_headers)
    assert response.status_code == 400
    assert set(response.json()["errors"]) == {"name", "type"}


def test_list_only_own_devices(client, make_user):
    alice = make_user()
    bob = make_user()
    create_device(client, alice["headers"], name="Heater")
    create_device(client, bob["headers"], name="Oven")

    response = client.get("/api/devices", headers=alice["headers"])

    assert response.status_code == 200
    assert [d["name"] for d in response.json()] == ["Heater"]


def test_get_device(client, auth_headers):
    device = create_device(client, auth_headers)
    response = client.get(f"/api/devices/{device['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == device["id"]


def test_other_users_device_is_not_found(client, make_user):
    alice = make_user()
    bob = make_user()
    device = create_device(client, alice["headers"])

    for method in ("get", "put", "delete"):
        kwargs = {"json": {"name": "Stolen"}} if method == "put" else {}
        response = getattr(client, method)(
            f"/api/devices/{device['id']}", headers=bob["headers"], **kwargs
        )
        assert response.status_code == 404
        assert response.json() == {"message": "Device not found"}


def test_update_is_partial(client, auth_headers):
    device = create_device(client, auth_headers)

    response = client.put(
        f"/api/devices/{device['id']}",
        json={"isActive": False, "consumption": 0, "name": ""},
        headers=auth_headers,
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["name"] == "Fridge"
    assert updated["type"] == "appliance"
    assert updated["consumption"] == 0
    assert updated["isActive"] is False


def test_delete_device(client, auth_headers):
    device = create_device(client, auth_headers)

    response = client.delete(f"/api/devices/{device['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Device deleted"}

    assert client.get(f"/api/devices/{device['id']}", headers=auth_headers).status_code == 404


def test_rejects_non_finite_consumption(client, auth_headers):
    device = create_device(client, auth_headers)
    headers = {**auth_headers, "Content-Type": "application/json"}

    created = client.post(
        "/api/devices", content='{"name": "Kettle", "type": "appliance", "consumption": NaN}', headers=headers
    )
    updated = client.put(f"/api/devices/{device['id']}", content='{"consumption": Infinity}', headers=headers)

    assert created.status_code == 400
    assert updated.status_code == 400
    assert "consumption" in updated.json()["errors"]
