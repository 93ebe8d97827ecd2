import datetime as dt

import pytest
from sqlalchemy.exc import IntegrityError

from fitlog.extensions import db
from fitlog.models.user_goal import UserGoal
from fitlog.services import goal_service


def _create_goal(client, headers, **extra):
    body = {"goal_type": "weight_loss", "daily_calorie_goal": 1800}
    body.update(extra)
    r = client.post("/api/users/goals", headers=headers, json=body)
    assert r.status_code == 201, r.data
    return r.get_json()["data"]


def test_creating_a_goal_deactivates_previous(app, client, user):
    user_id, headers = user
    first = _create_goal(client, headers)
    second = _create_goal(client, headers, goal_type="maintain", daily_calorie_goal=2200)

    r = client.get("/api/users/goals", headers=headers)
    goals = r.get_json()["data"]
    assert [g["id"] for g in goals] == [second["id"]]

    with app.app_context():
        assert db.session.get(UserGoal, first["id"]).is_active is False
        assert goal_service.active_goal(user_id).daily_calorie_goal == 2200


def test_partial_index_rejects_second_active_goal(app, user):
    user_id, _ = user
    with app.app_context():
        db.session.add(UserGoal(user_id=user_id, goal_type="maintain", is_active=True))
        db.session.commit()
        db.session.add(UserGoal(user_id=user_id, goal_type="maintain", is_active=True))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()

        # inactive goals are not constrained
        db.session.add(UserGoal(user_id=user_id, goal_type="maintain", is_active=False))
        db.session.add(UserGoal(user_id=user_id, goal_type="maintain", is_active=False))
        db.session.commit()


def test_reactivating_old_goal_deactivates_current(client, user):
    _, headers = user
    first = _create_goal(client, headers)
    second = _create_goal(client, headers, goal_type="muscle_gain")

    r = client.put(f"/api/users/goals/{first['id']}", headers=headers, json={"is_active": True})
    assert r.status_code == 200, r.data
    assert r.get_json()["data"]["is_active"] is True

    goals = client.get("/api/users/goals", headers=headers).get_json()["data"]
    assert [g["id"] for g in goals] == [first["id"]]
    assert second["id"] not in [g["id"] for g in goals]


def test_update_goal_not_found_and_forbidden(client, user, other_user):
    _, headers = user
    _, other_headers = other_user
    goal = _create_goal(client, headers)

    r = client.put("/api/users/goals/9999", headers=headers, json={"daily_calorie_goal": 1500})
    assert r.status_code == 404
    assert r.get_json()["error"]["code"] == "NOT_FOUND"

    r = client.put(f"/api/users/goals/{goal['id']}", headers=other_headers, json={"daily_calorie_goal": 1500})
    assert r.status_code == 403
    assert r.get_json()["error"]["code"] == "FORBIDDEN"


def test_goal_validation_ranges(client, user):
    _, headers = user
    r = client.post("/api/users/goals", headers=headers, json={
        "goal_type": "weight_loss",
        "daily_calorie_goal": 100,
        "target_date": "2023-12-31",
    })
    assert r.status_code == 400
    details = r.get_json()["error"]["details"]
    assert "daily_calorie_goal" in details
    assert "target_date" in details


def test_active_goal_picks_newest_when_several_active(app, user, caplog):
    user_id, _ = user
    with app.app_context():
        # Legacy rows written before the unique index existed
        db.session.execute(db.text("DROP INDEX uq_user_goals_one_active"))
        older = UserGoal(user_id=user_id, goal_type="maintain", is_active=True,
                         created_at=dt.datetime(2023, 1, 1))
        newer = UserGoal(user_id=user_id, goal_type="weight_loss", is_active=True,
                         created_at=dt.datetime(2023, 6, 1))
        db.session.add_all([older, newer])
        db.session.commit()

        assert goal_service.active_goal(user_id).id == newer.id
        assert "active goals" in caplog.text
