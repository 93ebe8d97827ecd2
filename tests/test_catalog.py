def test_search_foods_by_name_or_brand(client, user, catalog):
    _, headers = user
    r = client.get("/api/foods/search?q=apple", headers=headers)
    assert r.status_code == 200
    data = r.get_json()["data"]
    assert data["total"] == 1
    assert data["results"][0]["calories_per_serving"] == 52
    assert data["page"] == 1
    assert data["per_page"] == 20

    r = client.get("/api/foods/search?q=&limit=1&offset=1", headers=headers)
    data = r.get_json()["data"]
    assert data["total"] == 2
    assert len(data["results"]) == 1
    assert data["page"] == 2


def test_search_limit_is_bounded(client, user):
    _, headers = user
    r = client.get("/api/foods/search?q=a&limit=500", headers=headers)
    assert r.status_code == 400
    assert "limit" in r.get_json()["error"]["details"]


def test_create_and_update_own_food(client, user, other_user):
    _, headers = user
    _, other_headers = other_user
    r = client.post("/api/foods", headers=headers, json={
        "name": "Overnight Oats", "brand": "Homemade", "serving_size": 1,
        "serving_unit": "jar", "calories_per_serving": 320, "protein_g": 12,
    })
    assert r.status_code == 201, r.data
    food = r.get_json()["data"]
    assert food["verified"] is False

    r = client.get("/api/foods/search?q=homemade", headers=headers)
    assert r.get_json()["data"]["total"] == 1
    r = client.get("/api/foods/mine", headers=headers)
    assert [f["id"] for f in r.get_json()["data"]["results"]] == [food["id"]]
    r = client.get("/api/foods/mine", headers=other_headers)
    assert r.get_json()["data"]["results"] == []

    r = client.put(f"/api/foods/{food['id']}", headers=other_headers, json={"calories_per_serving": 10})
    assert r.status_code == 403

    r = client.put(f"/api/foods/{food['id']}", headers=headers, json={"calories_per_serving": 300})
    assert r.status_code == 200
    assert r.get_json()["data"]["calories_per_serving"] == 300

    r = client.get(f"/api/foods/{food['id']}", headers=headers)
    assert r.get_json()["data"]["name"] == "Overnight Oats"
    assert client.get("/api/foods/9999", headers=headers).status_code == 404


def test_exercise_search_and_categories(client, user, catalog):
    _, headers = user
    r = client.get("/api/exercises/search?category=strength", headers=headers)
    assert [e["name"] for e in r.get_json()["data"]["results"]] == ["Squats"]

    r = client.get("/api/exercises/search?q=run", headers=headers)
    assert r.get_json()["data"]["results"][0]["met_value"] == 8.3

    r = client.get("/api/exercises/categories", headers=headers)
    assert r.get_json()["data"] == ["cardio", "strength", "flexibility", "sports"]


def test_create_and_update_own_exercise(client, user, other_user):
    _, headers = user
    _, other_headers = other_user
    r = client.post("/api/exercises", headers=headers, json={
        "name": "Rowing", "category": "cardio", "met_value": 7.0,
        "muscle_groups": ["back", "legs"], "equipment_needed": ["rower"],
    })
    assert r.status_code == 201, r.data
    exercise = r.get_json()["data"]
    assert exercise["muscle_groups"] == ["back", "legs"]

    r = client.get("/api/exercises/mine", headers=headers)
    assert r.get_json()["data"]["total"] == 1

    r = client.put(f"/api/exercises/{exercise['id']}", headers=other_headers, json={"met_value": 1})
    assert r.status_code == 403
    r = client.put(f"/api/exercises/{exercise['id']}", headers=headers, json={"met_value": 8.5})
    assert r.get_json()["data"]["met_value"] == 8.5
    r = client.put("/api/exercises/9999", headers=headers, json={"met_value": 8.5})
    assert r.status_code == 404


def test_invalid_category(client, user):
    _, headers = user
    r = client.post("/api/exercises", headers=headers, json={"name": "Chess", "category": "mind"})
    assert r.status_code == 400
    assert "category" in r.get_json()["error"]["details"]
