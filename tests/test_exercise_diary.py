DAY = "2024-01-01"


def test_cardio_entry_estimates_calories(client, user, catalog):
    _, headers = user
    r = client.post("/api/exercise-diary/cardio", headers=headers, json={
        "exercise_id": catalog["running"], "duration_minutes": 30, "logged_date": DAY,
        "distance": 5, "distance_unit": "km",
    })
    assert r.status_code == 201, r.data
    entry = r.get_json()["data"]
    assert entry["calories_burned"] == 291
    assert entry["exercise"]["name"] == "Running"


def test_cardio_requires_duration(client, user, catalog):
    _, headers = user
    r = client.post("/api/exercise-diary/cardio", headers=headers, json={
        "exercise_id": catalog["running"], "logged_date": DAY,
    })
    assert r.status_code == 400
    assert "duration_minutes" in r.get_json()["error"]["details"]


def test_strength_entry_uses_sets_and_reps(client, user, catalog):
    _, headers = user
    r = client.post("/api/exercise-diary/strength", headers=headers, json={
        "exercise_id": catalog["squats"], "sets": 3, "reps": 10, "weight_used": 40, "logged_date": DAY,
    })
    assert r.status_code == 201, r.data
    assert r.get_json()["data"]["calories_burned"] == 70

    r = client.post("/api/exercise-diary/strength", headers=headers, json={
        "exercise_id": catalog["squats"], "sets": 3, "logged_date": DAY,
    })
    assert r.status_code == 400
    assert "reps" in r.get_json()["error"]["details"]


def test_explicit_calories_are_kept(client, user, catalog):
    _, headers = user
    r = client.post("/api/exercise-diary", headers=headers, json={
        "exercise_id": catalog["running"], "duration_minutes": 30, "calories_burned": 350, "logged_date": DAY,
    })
    assert r.get_json()["data"]["calories_burned"] == 350


def test_unknown_exercise(client, user):
    _, headers = user
    r = client.post("/api/exercise-diary", headers=headers, json={
        "exercise_id": 9999, "duration_minutes": 30, "logged_date": DAY,
    })
    assert r.status_code == 400
    assert "exercise_id" in r.get_json()["error"]["details"]


def test_update_rederives_and_ownership(client, user, other_user, catalog):
    _, headers = user
    _, other_headers = other_user
    entry = client.post("/api/exercise-diary", headers=headers, json={
        "exercise_id": catalog["running"], "duration_minutes": 30, "logged_date": DAY,
    }).get_json()["data"]

    r = client.put(f"/api/exercise-diary/{entry['id']}", headers=headers, json={"duration_minutes": 60})
    assert r.status_code == 200, r.data
    assert r.get_json()["data"]["calories_burned"] == 581

    r = client.put(f"/api/exercise-diary/{entry['id']}", headers=other_headers, json={"duration_minutes": 10})
    assert r.status_code == 403
    r = client.delete(f"/api/exercise-diary/{entry['id']}", headers=other_headers)
    assert r.status_code == 403
    r = client.put("/api/exercise-diary/9999", headers=headers, json={"duration_minutes": 10})
    assert r.status_code == 404

    r = client.delete(f"/api/exercise-diary/{entry['id']}", headers=headers)
    assert r.status_code == 200
    r = client.get(f"/api/exercise-diary?date={DAY}", headers=headers)
    assert r.get_json()["data"] == []


def test_daily_notes_upsert(client, user):
    _, headers = user
    r = client.get(f"/api/exercise-diary/notes?date={DAY}", headers=headers)
    assert r.status_code == 200
    assert r.get_json()["data"] == ""

    r = client.put("/api/exercise-diary/notes", headers=headers, json={"date": DAY, "notes": "Legs felt heavy"})
    assert r.status_code == 200
    first = r.get_json()["data"]

    r = client.put("/api/exercise-diary/notes", headers=headers, json={"date": DAY, "notes": "Rest day tomorrow"})
    second = r.get_json()["data"]
    assert second["id"] == first["id"]

    r = client.get(f"/api/exercise-diary/notes?date={DAY}", headers=headers)
    assert r.get_json()["data"] == "Rest day tomorrow"


def test_notes_require_date(client, user):
    _, headers = user
    r = client.get("/api/exercise-diary/notes", headers=headers)
    assert r.status_code == 400


def test_clearing_calories_re_estimates_from_stored_workload(client, user, catalog):
    _, headers = user
    entry = client.post("/api/exercise-diary/cardio", headers=headers, json={
        "exercise_id": catalog["running"], "duration_minutes": 30, "logged_date": DAY,
    }).get_json()["data"]
    assert entry["calories_burned"] == 291

    r = client.put(f"/api/exercise-diary/{entry['id']}", headers=headers,
                   json={"calories_burned": None, "notes": "easy pace"})
    assert r.status_code == 200, r.data
    updated = r.get_json()["data"]
    assert updated["calories_burned"] == 291
    assert updated["notes"] == "easy pace"


def test_notes_only_update_keeps_explicit_calories(client, user, catalog):
    _, headers = user
    entry = client.post("/api/exercise-diary", headers=headers, json={
        "exercise_id": catalog["running"], "duration_minutes": 30, "calories_burned": 350, "logged_date": DAY,
    }).get_json()["data"]

    r = client.put(f"/api/exercise-diary/{entry['id']}", headers=headers, json={"notes": "hills"})
    assert r.get_json()["data"]["calories_burned"] == 350


def test_workload_change_without_met_clears_stale_calories(client, user):
    _, headers = user
    exercise = client.post("/api/exercises", headers=headers, json={
        "name": "Rock Climbing", "category": "sports",
    }).get_json()["data"]
    entry = client.post("/api/exercise-diary", headers=headers, json={
        "exercise_id": exercise["id"], "duration_minutes": 30, "calories_burned": 250, "logged_date": DAY,
    }).get_json()["data"]
    assert entry["calories_burned"] == 250

    r = client.put(f"/api/exercise-diary/{entry['id']}", headers=headers, json={"duration_minutes": 90})
    assert r.status_code == 200, r.data
    updated = r.get_json()["data"]
    assert updated["duration_minutes"] == 90
    assert updated["calories_burned"] is None
