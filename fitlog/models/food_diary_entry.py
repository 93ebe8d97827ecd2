from fitlog.extensions import db

class FoodDiaryEntry(db.Model):
    __tablename__ = "food_diary_entries"
    __table_args__ = (
        db.Index("ix_food_diary_entries_user_date", "user_id", "logged_date"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    # NULL for quick-add entries
    food_item_id = db.Column(db.Integer, db.ForeignKey("food_items.id"))
    meal_type = db.Column(db.String(20), nullable=False)
    quantity = db.Column(db.Numeric(8,2))
    serving_unit = db.Column(db.String(50))
    # Denormalized at write time
    calories = db.Column(db.Numeric(8,2))
    logged_date = db.Column(db.Date, nullable=False)
    logged_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    notes = db.Column(db.Text)

    food_item = db.relationship("FoodItem", lazy="joined")
