from decimal import Decimal

from fitlog import create_app
from fitlog.extensions import db
from fitlog.models.user import User
from fitlog.models.food_item import FoodItem
from fitlog.models.exercise import Exercise
from fitlog.utils.auth import hash_password

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()
    # user
    if not User.query.filter_by(email="user@example.com").first():
        db.session.add(User(
            username="demo",
            email="user@example.com",
            password=hash_password("secret123"),
            first_name="Demo",
        ))

    def add_food(name, size, unit, cal, p, c, f, fiber):
        if not FoodItem.query.filter_by(name=name).first():
            db.session.add(FoodItem(
                name=name,
                serving_size=Decimal(str(size)),
                serving_unit=unit,
                calories_per_serving=Decimal(str(cal)),
                protein_g=Decimal(str(p)),
                carbs_g=Decimal(str(c)),
                fat_g=Decimal(str(f)),
                fiber_g=Decimal(str(fiber)),
                verified=True,
            ))

    add_food("Apple, Raw", 1, "medium apple", 95, 0.5, 25, 0.3, 4)
    add_food("Banana, Raw", 1, "medium banana", 105, 1.3, 27, 0.4, 3)
    add_food("Chicken Breast, Grilled", 100, "g", 165, 31, 0, 3.6, 0)
    add_food("Brown Rice, Cooked", 100, "g", 111, 2.6, 23, 0.9, 1.8)
    add_food("Greek Yogurt, Plain", 100, "g", 59, 10, 3.6, 0.4, 0)
    add_food("Salmon, Baked", 100, "g", 206, 22, 0, 12, 0)
    add_food("Broccoli, Steamed", 100, "g", 34, 2.8, 7, 0.4, 2.6)
    add_food("Whole Wheat Bread", 1, "slice", 81, 3.6, 13.8, 1, 1.9)
    add_food("Egg, Hard Boiled", 1, "large egg", 78, 6.3, 0.6, 5.3, 0)
    add_food("Avocado, Raw", 100, "g", 160, 2, 8.5, 14.7, 6.7)

    def add_exercise(name, category, met, muscles, equipment, level):
        if not Exercise.query.filter_by(name=name).first():
            db.session.add(Exercise(
                name=name,
                category=category,
                met_value=Decimal(str(met)),
                muscle_groups=muscles,
                equipment_needed=equipment,
                difficulty_level=level,
            ))

    add_exercise("Running", "cardio", 8.3, ["legs", "core"], ["running shoes"], "intermediate")
    add_exercise("Walking", "cardio", 3.8, ["legs", "core"], ["walking shoes"], "beginner")
    add_exercise("Cycling", "cardio", 6.8, ["legs", "core"], ["bicycle", "helmet"], "intermediate")
    add_exercise("Swimming", "cardio", 7.0, ["arms", "shoulders", "legs", "core"], ["swimsuit", "goggles"], "intermediate")
    add_exercise("Jump Rope", "cardio", 10.0, ["legs", "arms", "core"], ["jump rope"], "intermediate")
    add_exercise("Push-ups", "strength", 3.0, ["chest", "shoulders", "triceps"], [], "intermediate")
    add_exercise("Squats", "strength", 4.0, ["quadriceps", "glutes", "hamstrings"], [], "beginner")
    add_exercise("Deadlift", "strength", 3.0, ["back", "glutes", "hamstrings"], ["barbell", "weights"], "advanced")
    add_exercise("Bicep Curls", "strength", 2.0, ["biceps"], ["dumbbells"], "beginner")
    add_exercise("Yoga", "flexibility", 2.5, ["full body"], ["yoga mat"], "beginner")
    add_exercise("Pilates", "flexibility", 3.0, ["core"], ["mat"], "beginner")
    add_exercise("Basketball", "sports", 8.0, ["legs", "arms", "core"], ["basketball"], "intermediate")
    add_exercise("Tennis", "sports", 7.0, ["arms", "legs", "core"], ["racket", "tennis balls"], "intermediate")

    db.session.commit()

    print("Seed completed.")
