import io


REMINDER = {"medicineName": "Aspirin", "time": "08:00", "phoneNumber": "+1555", "durationType": "everyday"}
VACCINATION = {
    "vaccineName": "Tetanus",
    "doseNumber": "1st",
    "dateAdministered": "2024-01-01",
    "administeredBy": "Dr. X",
    "location": "Clinic",
}


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "OK"}


def test_signup_validates_password(client):
    resp = client.post("/api/v1/auth/signup", json={
        "name": "Jane", "email": "jane@example.com", "phone": "+1555", "password": "123",
    })
    assert resp.status_code == 422
    body = resp.get_json()
    assert body["field"] == "password"
    assert body["message"] == "Password must be at least 6 characters"


def test_signup_opens_session(client):
    resp = client.post("/api/v1/auth/signup", json={
        "name": "Jane", "email": "Jane@Example.com", "phone": "+1555", "password": "123456",
    })
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["user"]["email"] == "jane@example.com"
    assert body["access_token"]


def test_login_requires_fields(client):
    resp = client.post("/api/v1/auth/login", json={"email": "jane@example.com"})
    assert resp.status_code == 422
    body = resp.get_json()
    assert body["success"] is False
    assert body["field"] == "password"
    assert body["message"] == "Please fill in all fields"


def test_records_require_token(client):
    resp = client.get("/api/v1/reminders")
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_reminder_lifecycle(client, auth_headers):
    first = client.post("/api/v1/reminders", json=REMINDER, headers=auth_headers)
    assert first.status_code == 201
    assert first.get_json()["message"] == "You'll receive an SMS at 08:00 everyday for Aspirin"
    second = client.post("/api/v1/reminders", json=dict(REMINDER, medicineName="Vitamin D", time="09:00"),
                         headers=auth_headers)
    a_id = first.get_json()["reminder"]["id"]

    listed = client.get("/api/v1/reminders", headers=auth_headers).get_json()["reminders"]
    assert [r["medicineName"] for r in listed] == ["Vitamin D", "Aspirin"]
    assert listed[0]["timeDisplay"] == "9:00 AM"
    assert listed[0]["durationText"] == "Everyday (Ongoing)"
    assert second.get_json()["reminder"]["active"] is True

    toggled = client.patch(f"/api/v1/reminders/{a_id}/toggle", headers=auth_headers)
    assert toggled.get_json()["reminder"]["active"] is False

    assert client.patch("/api/v1/reminders/unknown/toggle", headers=auth_headers).status_code == 404

    gone = client.delete(f"/api/v1/reminders/{a_id}", headers=auth_headers)
    assert gone.status_code == 200
    assert gone.get_json()["deleted"] is True
    again = client.delete(f"/api/v1/reminders/{a_id}", headers=auth_headers)
    assert again.status_code == 200
    assert again.get_json()["deleted"] is False

    listed = client.get("/api/v1/reminders", headers=auth_headers).get_json()["reminders"]
    assert [r["medicineName"] for r in listed] == ["Vitamin D"]


def test_week_reminder_end_date(client, auth_headers):
    resp = client.post("/api/v1/reminders", json=dict(REMINDER, durationType="week", startDate="2024-01-01"),
                       headers=auth_headers)
    reminder = resp.get_json()["reminder"]
    assert reminder["endDate"] == "2024-01-08"
    assert reminder["durationText"] == "For One Week (until 1/8/2024)"


def test_reminder_missing_field(client, auth_headers):
    resp = client.post("/api/v1/reminders", json=dict(REMINDER, phoneNumber="  "), headers=auth_headers)
    assert resp.status_code == 422
    assert resp.get_json() == {
        "success": False,
        "message": "Please fill in all required fields",
        "field": "phoneNumber",
    }


def test_vaccination_rejects_incomplete(client, auth_headers):
    resp = client.post("/api/v1/vaccinations", json=dict(VACCINATION, vaccineName=""), headers=auth_headers)
    assert resp.status_code == 422
    assert resp.get_json()["field"] == "vaccineName"


def test_vaccination_listing_has_badges(client, auth_headers):
    client.post("/api/v1/vaccinations", json=dict(VACCINATION, nextDueDate="2000-01-01"), headers=auth_headers)
    listed = client.get("/api/v1/vaccinations", headers=auth_headers).get_json()["vaccinations"]
    assert listed[0]["isOverdue"] is True
    assert listed[0]["isUpcoming"] is False
    assert listed[0]["dateAdministeredDisplay"] == "January 1, 2024"


def test_appointment_with_tests(client, auth_headers):
    resp = client.post("/api/v1/appointments", json={
        "doctorName": "Dr. Who", "specialty": "Cardiology", "date": "2024-06-01", "time": "14:30",
        "tests": ["ECG", {"name": "Lipid panel"}],
    }, headers=auth_headers)
    assert resp.status_code == 201
    appt = resp.get_json()["appointment"]
    assert appt["dateDisplay"] == "Saturday, June 1, 2024"
    assert appt["timeDisplay"] == "2:30 PM"
    assert [t["name"] for t in appt["tests"]] == ["ECG", "Lipid panel"]

    assert client.delete(f"/api/v1/appointments/{appt['id']}", headers=auth_headers).status_code == 200
    assert client.get("/api/v1/appointments", headers=auth_headers).get_json()["appointments"] == []


def test_multipart_upload_and_history(client, auth_headers):
    resp = client.post("/api/v1/records", headers=auth_headers, content_type="multipart/form-data", data={
        "files": [
            (io.BytesIO(b"\x89PNG data"), "xray.png", "image/png"),
            (io.BytesIO(b"%PDF-1.4"), "Blood Test.pdf", "application/pdf"),
        ],
    })
    assert resp.status_code == 201
    stored = resp.get_json()["records"]
    assert [(r["name"], r["type"]) for r in stored] == [("xray.png", "image"), ("Blood Test.pdf", "document")]
    assert stored[0]["url"].startswith("data:image/png;base64,")
    assert [r["size"] for r in stored] == ["9 B", "8 B"]

    listing = client.get("/api/v1/records", headers=auth_headers).get_json()
    assert [r["name"] for r in listing["records"]] == ["Blood Test.pdf", "xray.png"]
    assert listing["remaining"] == 1

    history = client.get("/api/v1/records/history?q=blood&type=document", headers=auth_headers).get_json()
    assert history["total"] == 1
    assert history["groups"][0]["records"][0]["name"] == "Blood Test.pdf"

    assert client.get("/api/v1/records/history?type=video", headers=auth_headers).status_code == 400


def test_upload_limit(client, auth_headers):
    files = [(io.BytesIO(b"x"), f"doc{i}.pdf", "application/pdf") for i in range(4)]
    resp = client.post("/api/v1/records", headers=auth_headers, content_type="multipart/form-data",
                       data={"files": files})
    assert resp.status_code == 403
    assert resp.get_json()["success"] is False
    assert client.get("/api/v1/records", headers=auth_headers).get_json()["records"] == []


def test_json_upload_requires_name(client, auth_headers):
    resp = client.post("/api/v1/records", json={"type": "image"}, headers=auth_headers)
    assert resp.status_code == 422
    assert resp.get_json()["field"] == "name"


def test_dashboard(client, auth_headers):
    for name in ["A", "B", "C"]:
        client.post("/api/v1/vaccinations", json=dict(VACCINATION, vaccineName=name), headers=auth_headers)
    client.post("/api/v1/reminders", json=REMINDER, headers=auth_headers)

    resp = client.get("/api/v1/dashboard", headers=auth_headers)
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert [v["vaccineName"] for v in data["recentVaccinations"]] == ["C", "B"]
    assert data["counts"]["vaccinations"] == 3
    assert len(data["activeReminders"]) == 1


def test_sessions_do_not_share_records(client, auth_headers):
    client.post("/api/v1/reminders", json=REMINDER, headers=auth_headers)
    other = client.post("/api/v1/auth/login", json={"email": "sam@example.com", "password": "hunter2"})
    other_headers = {"Authorization": f"Bearer {other.get_json()['access_token']}"}
    assert client.get("/api/v1/reminders", headers=other_headers).get_json()["reminders"] == []


def test_logout_ends_session(client, auth_headers):
    client.post("/api/v1/reminders", json=REMINDER, headers=auth_headers)
    assert client.post("/api/v1/auth/logout", headers=auth_headers).status_code == 200
    resp = client.get("/api/v1/reminders", headers=auth_headers)
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Session expired, please log in again"


def test_monitor_is_wired_to_app_sessions(app, client, auth_headers, sms_sender):
    client.post("/api/v1/reminders", json=dict(REMINDER, time="07:15"), headers=auth_headers)
    from datetime import datetime
    sent = app.extensions["reminder_monitor"].check_once(datetime(2024, 6, 1, 7, 15))
    assert len(sent) == 1
    assert sms_sender.sent == [("+1555", "Time to take your medicine: Aspirin (As prescribed)")]


def test_json_upload_ignores_client_size(client, auth_headers):
    resp = client.post("/api/v1/records", json={"name": "scan.pdf", "type": "document", "size": "999 GB"},
                       headers=auth_headers)
    assert resp.status_code == 201
    assert resp.get_json()["records"][0]["size"] == ""
    assert client.get("/api/v1/records", headers=auth_headers).get_json()["records"][0]["size"] == ""


def test_signup_profile_is_kept(client):
    resp = client.post("/api/v1/auth/signup", json={
        "name": "Jane", "email": "Jane@Example.com", "phone": "+1555", "password": "123456",
    })
    headers = {"Authorization": f"Bearer {resp.get_json()['access_token']}"}

    resp = client.get("/api/v1/profile", headers=headers)
    assert resp.status_code == 200
    profile = resp.get_json()["data"]
    assert (profile["name"], profile["email"], profile["phone"]) == ("Jane", "jane@example.com", "+1555")
    assert profile["bloodGroup"] == ""


def test_update_profile(client, auth_headers):
    resp = client.put("/api/v1/profile", json={
        "name": "Jane Doe", "age": "34", "bloodGroup": "B-", "emergencyContact": "+1777",
    }, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["bloodGroup"] == "B-"

    profile = client.get("/api/v1/profile", headers=auth_headers).get_json()["data"]
    assert profile["name"] == "Jane Doe"
    assert profile["email"] == "jane@example.com"
    assert profile["emergencyContact"] == "+1777"


def test_update_profile_rejects_unknown_blood_group(client, auth_headers):
    client.put("/api/v1/profile", json={"name": "Jane", "bloodGroup": "O+"}, headers=auth_headers)
    resp = client.put("/api/v1/profile", json={"bloodGroup": "X"}, headers=auth_headers)
    assert resp.status_code == 422
    assert resp.get_json()["field"] == "bloodGroup"
    assert client.get("/api/v1/profile", headers=auth_headers).get_json()["data"]["bloodGroup"] == "O+"


def test_profile_requires_token(client):
    assert client.get("/api/v1/profile").status_code == 401
