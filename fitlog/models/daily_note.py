from fitlog.extensions import db

class DailyNote(db.Model):
    __tablename__ = "daily_notes"
    __table_args__ = (
        db.UniqueConstraint("user_id", "date", name="uq_daily_notes_user_date"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    date = db.Column(db.Date, nullable=False)
    notes = db.Column(db.Text)
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now(), nullable=False)
