from fitlog.extensions import db

class UserGoal(db.Model):
    __tablename__ = "user_goals"
    __table_args__ = (
        # At most one active goal per user
        db.Index(
            "uq_user_goals_one_active",
            "user_id",
            unique=True,
            postgresql_where=db.text("is_active"),
            sqlite_where=db.text("is_active = 1"),
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    goal_type = db.Column(db.String(20), nullable=False)
    target_weight_kg = db.Column(db.Numeric(5,2))
    target_date = db.Column(db.Date)
    weekly_goal_kg = db.Column(db.Numeric(4,2))
    daily_calorie_goal = db.Column(db.Integer)
    daily_protein_goal = db.Column(db.Numeric(6,2))
    daily_carbs_goal = db.Column(db.Numeric(6,2))
    daily_fat_goal = db.Column(db.Numeric(6,2))
    daily_exercise_minutes = db.Column(db.Integer)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now(), nullable=False)
