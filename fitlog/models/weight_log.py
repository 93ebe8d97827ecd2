from fitlog.extensions import db

class WeightLog(db.Model):
    __tablename__ = "weight_logs"
    __table_args__ = (
        db.UniqueConstraint("user_id", "logged_date", name="uq_weight_logs_user_date"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    weight_kg = db.Column(db.Numeric(5,2), nullable=False)
    neck_cm = db.Column(db.Numeric(5,2))
    waist_cm = db.Column(db.Numeric(5,2))
    hips_cm = db.Column(db.Numeric(5,2))
    logged_date = db.Column(db.Date, nullable=False)
    logged_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    notes = db.Column(db.Text)
