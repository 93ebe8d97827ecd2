import datetime as dt
from decimal import Decimal

import pytest

from fitlog import create_app
from fitlog.extensions import db
from fitlog.models.exercise import Exercise
from fitlog.models.food_item import FoodItem

TODAY = dt.date(2024, 1, 1)


@pytest.fixture()
def app():
    app = create_app("config.TestingConfig")
    app.config["TODAY_PROVIDER"] = lambda: TODAY
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def register(client, username="demo", email=None, password="secret123"):
    r = client.post("/api/auth/register", json={
        "username": username,
        "email": email or f"{username}@example.com",
        "password": password,
    })
    assert r.status_code == 201, r.data
    body = r.get_json()["data"]
    return body["user"]["id"], {"Authorization": f"Bearer {body['token']}"}


@pytest.fixture()
def user(client):
    """(user_id, headers) for a freshly registered user."""
    return register(client)


@pytest.fixture()
def other_user(client):
    return register(client, username="other")


@pytest.fixture()
def catalog(app):
    """Seed a small food and exercise catalog; returns a name -> id map."""
    with app.app_context():
        apple = FoodItem(
            name="Apple, Raw", serving_size=Decimal("1"), serving_unit="medium apple",
            calories_per_serving=Decimal("52"), protein_g=Decimal("0.5"),
            carbs_g=Decimal("14"), fat_g=Decimal("0.25"), verified=True,
        )
        chicken = FoodItem(
            name="Chicken Breast, Grilled", serving_size=Decimal("100"), serving_unit="g",
            calories_per_serving=Decimal("165"), protein_g=Decimal("31"),
            carbs_g=Decimal("0"), fat_g=Decimal("3.6"), verified=True,
        )
        running = Exercise(name="Running", category="cardio", met_value=Decimal("8.3"))
        squats = Exercise(name="Squats", category="strength", met_value=Decimal("4.0"))
        db.session.add_all([apple, chicken, running, squats])
        db.session.commit()
        return {
            "apple": apple.id,
            "chicken": chicken.id,
            "running": running.id,
            "squats": squats.id,
        }


@pytest.fixture()
def register_user(client):
    def _register(username, email=None, password="secret123"):
        return register(client, username=username, email=email, password=password)
    return _register
