from fitlog.extensions import db

class ExerciseDiaryEntry(db.Model):
    __tablename__ = "exercise_diary_entries"
    __table_args__ = (
        db.Index("ix_exercise_diary_entries_user_date", "user_id", "logged_date"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    exercise_id = db.Column(db.Integer, db.ForeignKey("exercises.id"), nullable=False)
    duration_minutes = db.Column(db.Integer)
    calories_burned = db.Column(db.Numeric(8,2))
    sets = db.Column(db.Integer)
    reps = db.Column(db.Integer)
    weight_used = db.Column(db.Numeric(8,2))
    distance = db.Column(db.Numeric(8,2))
    distance_unit = db.Column(db.String(10))
    logged_date = db.Column(db.Date, nullable=False)
    logged_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    notes = db.Column(db.Text)

    exercise = db.relationship("Exercise", lazy="joined")
