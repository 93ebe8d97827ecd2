from fitlog.extensions import db
from fitlog.utils.http import ok, error

def home_index():
    return ok({"service": "fitlog"}, "Fitlog API is running")

def health_check():
    try:
        # Ping the database
        db.session.execute(db.text('SELECT 1'))
    except Exception as e:
        return error("DATABASE_UNAVAILABLE", str(e), 503)
    return ok({"status": "online", "database": "healthy"}, "Service healthy")
