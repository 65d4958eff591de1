def test_register_for_event(client, make_event, register):
    event = make_event()
    response = register(event["id"], email="Ada@Example.com")

    assert response.status_code == 201
    body = response.get_json()
    assert body["message"] == "Registration successful"
    registration = body["data"]
    assert registration["event_id"] == event["id"]
    assert registration["email"] == "ada@example.com"
    assert registration["status"] == "confirmed"
    assert registration["registered_at"] is not None

    event_after = client.get(f"/api/events/{event['id']}").get_json()["data"]
    assert event_after["confirmed_count"] == 1
    assert event_after["registration_count"] == 1


def test_register_validation(client, make_event):
    event = make_event()
    response = client.post(
        f"/api/events/{event['id']}/register",
        json={"name": "A", "email": "bad", "phone": "12"},
    )
    assert response.status_code == 400
    assert response.get_json()["errors"] == {
        "name": "Name must be at least 2 characters",
        "email": "Please enter a valid email address",
        "phone": "Please enter a valid 10-digit phone number",
    }


def test_register_for_missing_event(register):
    response = register("missing")
    assert response.status_code == 404
    assert response.get_json()["error"] == "Event not found"


def test_duplicate_registration_returns_existing(client, make_event, register):
    event = make_event()
    first = register(event["id"]).get_json()["data"]

    response = register(event["id"], email="ADA@example.com", name="Someone Else")

    assert response.status_code == 409
    body = response.get_json()
    assert body["success"] is False
    assert body["error"] == "You are already registered for this event"
    assert body["data"]["id"] == first["id"]
    assert len(client.get(f"/api/events/{event['id']}/registrations").get_json()["data"]) == 1


def test_capacity_scenario(client, make_event, register):
    event = make_event(capacity=1)

    a = register(event["id"], email="a@x.com")
    assert a.status_code == 201
    assert a.get_json()["data"]["status"] == "confirmed"

    b = register(event["id"], email="b@x.com")
    assert b.status_code == 400
    assert b.get_json() == {"success": False, "error": "Event is at full capacity"}
    assert len(client.get(f"/api/events/{event['id']}/registrations").get_json()["data"]) == 1

    rejected = client.patch(
        f"/api/registrations/{a.get_json()['data']['id']}/status", json={"status": "rejected"}
    )
    assert rejected.status_code == 200
    assert rejected.get_json()["message"] == "Registration status updated"
    assert rejected.get_json()["data"]["status"] == "rejected"
    assert rejected.get_json()["data"]["updated_at"] is not None

    b_again = register(event["id"], email="b@x.com")
    assert b_again.status_code == 201
    assert b_again.get_json()["data"]["status"] == "confirmed"


def test_update_status_invalid(client, make_event, register):
    event = make_event()
    registration = register(event["id"]).get_json()["data"]

    response = client.patch(
        f"/api/registrations/{registration['id']}/status", json={"status": "approved"}
    )
    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid status. Must be confirmed, pending, or rejected"

    missing_body = client.patch(f"/api/registrations/{registration['id']}/status")
    assert missing_body.status_code == 400

    listed = client.get(f"/api/events/{event['id']}/registrations").get_json()["data"]
    assert listed[0]["status"] == "confirmed"
    assert listed[0]["updated_at"] is None


def test_update_status_missing_registration(client):
    response = client.patch("/api/registrations/nope/status", json={"status": "pending"})
    assert response.status_code == 404
    assert response.get_json()["error"] == "Registration not found"


def test_confirm_over_capacity(client, make_event, register):
    event = make_event(capacity=1)
    a = register(event["id"], email="a@x.com").get_json()["data"]
    client.patch(f"/api/registrations/{a['id']}/status", json={"status": "pending"})
    register(event["id"], email="b@x.com")

    response = client.patch(f"/api/registrations/{a['id']}/status", json={"status": "confirmed"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Cannot confirm - event is at capacity"


def test_list_registrations(client, make_event, register):
    event = make_event()
    register(event["id"], email="a@x.com")
    register(event["id"], email="b@x.com")

    response = client.get(f"/api/events/{event['id']}/registrations")
    assert response.status_code == 200
    assert sorted(r["email"] for r in response.get_json()["data"]) == ["a@x.com", "b@x.com"]


def test_check_registration(client, make_event, register):
    event = make_event()
    registration = register(event["id"], email="a@x.com").get_json()["data"]

    found = client.get(f"/api/events/{event['id']}/check-registration?email=A@X.com")
    assert found.status_code == 200
    assert found.get_json()["data"]["id"] == registration["id"]

    not_found = client.get(f"/api/events/{event['id']}/check-registration?email=z@x.com")
    assert not_found.get_json() == {"success": True, "data": None}

    missing = client.get(f"/api/events/{event['id']}/check-registration")
    assert missing.status_code == 400
    assert missing.get_json()["error"] == "Email parameter is required"


def test_cancel_own_registration(client, make_event, register, participant_headers):
    event = make_event()
    mine = register(event["id"], email="ada@example.com").get_json()["data"]
    theirs = register(event["id"], email="bob@example.com").get_json()["data"]

    forbidden = client.post(f"/api/registrations/{theirs['id']}/cancel", headers=participant_headers)
    assert forbidden.status_code == 403
    assert forbidden.get_json()["message"] == "You can only cancel your own registration"

    cancelled = client.post(f"/api/registrations/{mine['id']}/cancel", headers=participant_headers)
    assert cancelled.status_code == 200
    assert cancelled.get_json()["data"]["status"] == "rejected"


def test_cancel_requires_login(client, make_event, register):
    event = make_event()
    registration = register(event["id"]).get_json()["data"]
    response = client.post(f"/api/registrations/{registration['id']}/cancel")
    assert response.status_code == 401


def test_admin_can_cancel_any_registration(client, make_event, register, admin_headers):
    event = make_event()
    registration = register(event["id"], email="bob@example.com").get_json()["data"]
    response = client.post(f"/api/registrations/{registration['id']}/cancel", headers=admin_headers)
    assert response.status_code == 200
    assert response.get_json()["data"]["status"] == "rejected"


def test_cancel_missing_registration(client, admin_headers):
    response = client.post("/api/registrations/nope/cancel", headers=admin_headers)
    assert response.status_code == 404


def test_register_rejects_non_ascii_phone_digits(client, make_event, register):
    event = make_event()
    response = register(event["id"], phone="١٢٣٤٥٦٧٨٩٠")
    assert response.status_code == 400
    assert response.get_json()["errors"] == {"phone": "Please enter a valid 10-digit phone number"}
    assert client.get(f"/api/events/{event['id']}/registrations").get_json()["data"] == []


def test_timestamps_are_serialized_as_utc(client, admin_headers, make_event, register):
    event = make_event()
    registration = register(event["id"]).get_json()["data"]
    client.patch(f"/api/registrations/{registration['id']}/status", json={"status": "pending"})
    announcement = client.post(
        f"/api/events/{event['id']}/announcements",
        json={"message": "Doors open at nine"},
        headers=admin_headers,
    ).get_json()["data"]

    stored_event = client.get(f"/api/events/{event['id']}").get_json()["data"]
    stored_registration = client.get(f"/api/events/{event['id']}/registrations").get_json()["data"][0]

    assert stored_event["created_at"].endswith("+00:00")
    assert stored_registration["registered_at"].endswith("+00:00")
    assert stored_registration["updated_at"].endswith("+00:00")
    assert announcement["sent_at"].endswith("+00:00")
    assert registration["registered_at"].endswith("+00:00")
