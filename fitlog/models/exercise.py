from fitlog.extensions import db

class Exercise(db.Model):
    __tablename__ = "exercises"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, index=True)
    category = db.Column(db.String(20), nullable=False)
    met_value = db.Column(db.Numeric(5,2))
    description = db.Column(db.Text)
    instructions = db.Column(db.Text)
    muscle_groups = db.Column(db.JSON)
    equipment_needed = db.Column(db.JSON)
    difficulty_level = db.Column(db.String(50))
    created_by = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"))
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now(), nullable=False)
