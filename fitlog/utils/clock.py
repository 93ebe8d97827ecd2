from datetime import date
from flask import current_app


def today() -> date:
    """Server-side "today", overridable through the ``TODAY_PROVIDER`` config key."""
    provider = current_app.config.get("TODAY_PROVIDER") or date.today
    return provider()
