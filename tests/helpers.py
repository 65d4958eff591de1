from datetime import date, timedelta


def future_date(days=30):
    return (date.today() + timedelta(days=days)).isoformat()


def event_payload(**overrides):
    payload = {
        "name": "Tech Hackathon",
        "description": "A 24-hour coding marathon with prizes.",
        "date": future_date(),
        "capacity": 10,
    }
    payload.update(overrides)
    return payload


def registration_payload(**overrides):
    payload = {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "555-123-4567",
    }
    payload.update(overrides)
    return payload


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
    "JWT_SECRET_KEY": "test-secret-key-long-enough-for-hs256-signing",
    "SEED_DEFAULT_ADMIN": True,
    "SEED_DEMO_EVENTS": False,
    "DEFAULT_ADMIN_EMAIL": "admin@local",
    "DEFAULT_ADMIN_PASSWORD": "admin123",
    "MAIL_SERVER": None,
}
