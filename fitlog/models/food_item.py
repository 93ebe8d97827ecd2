from fitlog.extensions import db

class FoodItem(db.Model):
    __tablename__ = "food_items"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, index=True)
    brand = db.Column(db.String(255))
    serving_size = db.Column(db.Numeric(8,2), nullable=False)
    serving_unit = db.Column(db.String(50), nullable=False)
    calories_per_serving = db.Column(db.Numeric(8,2), nullable=False, default=0)
    protein_g = db.Column(db.Numeric(8,2))
    carbs_g = db.Column(db.Numeric(8,2))
    fat_g = db.Column(db.Numeric(8,2))
    fiber_g = db.Column(db.Numeric(8,2))
    sugar_g = db.Column(db.Numeric(8,2))
    sodium_mg = db.Column(db.Numeric(8,2))
    verified = db.Column(db.Boolean, nullable=False, default=False)
    created_by = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"))
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now(), nullable=False)
