import datetime as dt
from decimal import Decimal

from fitlog.extensions import db
from fitlog.models.food_diary_entry import FoodDiaryEntry
from fitlog.models.food_item import FoodItem
from fitlog.services.summary_service import daily_summary

DAY = "2024-01-01"


def _summary(client, headers, day=DAY):
    r = client.get(f"/api/users/daily-summary?date={day}", headers=headers)
    assert r.status_code == 200, r.data
    return r.get_json()["data"]


def test_empty_day_is_zero_filled(client, user):
    _, headers = user
    data = _summary(client, headers)

    assert data["date"] == DAY
    assert data["goals"] is None
    assert data["consumed"] == {"calories": 0, "protein": 0, "carbs": 0, "fat": 0}
    assert data["exercise_calories_burned"] == 0
    assert data["net_calories"] == 0
    assert list(data["meals"]) == ["breakfast", "lunch", "dinner", "snacks"]
    assert all(m == {"calories": 0, "entries": 0} for m in data["meals"].values())
    assert data["exercises"] == {"total_duration": 0, "total_calories": 0, "entries": 0}


def test_food_exercise_and_goal(client, user, catalog):
    _, headers = user
    r = client.post("/api/food-diary", headers=headers, json={
        "food_item_id": catalog["apple"], "quantity": 2, "meal_type": "breakfast", "logged_date": DAY,
    })
    assert r.status_code == 201, r.data
    r = client.post("/api/exercise-diary", headers=headers, json={
        "exercise_id": catalog["running"], "duration_minutes": 30, "calories_burned": 300, "logged_date": DAY,
    })
    assert r.status_code == 201, r.data
    r = client.post("/api/users/goals", headers=headers, json={
        "goal_type": "weight_loss", "daily_calorie_goal": 2000,
    })
    assert r.status_code == 201, r.data

    data = _summary(client, headers)
    assert data["consumed"]["calories"] == 104
    assert data["consumed"]["protein"] == 1.0
    assert data["exercise_calories_burned"] == 300
    assert data["net_calories"] == -196
    assert data["goals"]["calories"] == 2000
    assert list(data["meals"]) == ["breakfast", "lunch", "dinner", "snacks"]
    assert data["meals"]["breakfast"] == {"calories": 104, "entries": 1}
    assert data["exercises"] == {"total_duration": 30, "total_calories": 300, "entries": 1}


def test_meal_buckets_reconcile_with_consumed(client, user, catalog):
    _, headers = user
    for meal, qty in (("breakfast", 1), ("lunch", 2), ("dinner", 0.5)):
        client.post("/api/food-diary", headers=headers, json={
            "food_item_id": catalog["chicken"], "quantity": qty, "meal_type": meal, "logged_date": DAY,
        })
    client.post("/api/food-diary/quick-add", headers=headers, json={
        "meal_type": "snack", "calories": 250, "logged_date": DAY, "description": "Protein bar",
    })

    data = _summary(client, headers)
    meals = data["meals"]
    assert sum(m["calories"] for m in meals.values()) == data["consumed"]["calories"]
    assert sum(m["entries"] for m in meals.values()) == 4
    assert meals["snacks"] == {"calories": 250, "entries": 1}
    # quick-add contributes no macros
    assert data["consumed"]["protein"] == round(31 * 3.5, 2)


def test_entries_on_other_days_and_users_are_ignored(client, user, other_user, catalog):
    _, headers = user
    _, other_headers = other_user
    client.post("/api/food-diary/quick-add", headers=headers, json={
        "meal_type": "lunch", "calories": 500, "logged_date": "2024-01-02",
    })
    client.post("/api/food-diary/quick-add", headers=other_headers, json={
        "meal_type": "lunch", "calories": 700, "logged_date": DAY,
    })

    assert _summary(client, headers)["consumed"]["calories"] == 0


def test_dangling_food_reference_counts_but_contributes_nothing(app, client, user):
    user_id, headers = user
    with app.app_context():
        db.session.add(FoodDiaryEntry(
            user_id=user_id, food_item_id=9999, meal_type="dinner",
            quantity=Decimal("1"), calories=Decimal("400"), logged_date=dt.date(2024, 1, 1),
        ))
        db.session.commit()

    data = _summary(client, headers)
    assert data["consumed"]["calories"] == 0
    assert data["meals"]["dinner"] == {"calories": 0, "entries": 1}


def test_summary_is_idempotent(client, user, catalog):
    _, headers = user
    client.post("/api/food-diary", headers=headers, json={
        "food_item_id": catalog["apple"], "quantity": 1, "meal_type": "lunch", "logged_date": DAY,
    })
    assert _summary(client, headers) == _summary(client, headers)


def test_default_date_comes_from_clock(client, user):
    _, headers = user
    r = client.get("/api/users/daily-summary", headers=headers)
    assert r.status_code == 200
    assert r.get_json()["data"]["date"] == DAY


def test_invalid_date_is_rejected(client, user):
    _, headers = user
    r = client.get("/api/users/daily-summary?date=2024-13-45", headers=headers)
    assert r.status_code == 400
    body = r.get_json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert "date" in body["error"]["details"]


def test_requires_token(client):
    r = client.get("/api/users/daily-summary")
    assert r.status_code == 401
    assert r.get_json()["error"]["code"] == "UNAUTHORIZED"


def test_service_stored_calories_win_over_catalog(app, user, catalog):
    user_id, _ = user
    with app.app_context():
        db.session.add(FoodDiaryEntry(
            user_id=user_id, food_item_id=catalog["apple"], meal_type="lunch",
            quantity=Decimal("2"), calories=Decimal("120"), logged_date=dt.date(2024, 1, 1),
        ))
        db.session.add(FoodDiaryEntry(
            user_id=user_id, food_item_id=catalog["apple"], meal_type="lunch",
            quantity=Decimal("1"), calories=None, logged_date=dt.date(2024, 1, 1),
        ))
        db.session.commit()

        data = daily_summary(user_id, dt.date(2024, 1, 1))
        assert data["consumed"]["calories"] == 172
        assert data["meals"]["lunch"]["entries"] == 2


def test_fractional_meals_add_up_to_consumed(client, user):
    _, headers = user
    for meal, calories in (("breakfast", 0.1), ("lunch", 0.2)):
        client.post("/api/food-diary/quick-add", headers=headers, json={
            "meal_type": meal, "calories": calories, "logged_date": DAY,
        })

    data = _summary(client, headers)
    assert data["consumed"]["calories"] == 0.3
    assert data["net_calories"] == 0.3
    bucket_total = sum(Decimal(str(m["calories"])) for m in data["meals"].values())
    assert bucket_total == Decimal(str(data["consumed"]["calories"]))


def test_derived_calories_round_per_entry(app, user):
    user_id, _ = user
    with app.app_context():
        item = FoodItem(name="Trail Mix", serving_size=Decimal("1"), serving_unit="handful",
                        calories_per_serving=Decimal("33.33"))
        db.session.add(item)
        db.session.flush()
        for meal in ("breakfast", "dinner"):
            db.session.add(FoodDiaryEntry(
                user_id=user_id, food_item_id=item.id, meal_type=meal,
                quantity=Decimal("0.5"), calories=None, logged_date=dt.date(2024, 1, 1),
            ))
        db.session.commit()

        data = daily_summary(user_id, dt.date(2024, 1, 1))
        assert data["meals"]["breakfast"]["calories"] == 16.67
        assert data["meals"]["dinner"]["calories"] == 16.67
        assert data["consumed"]["calories"] == 33.34
