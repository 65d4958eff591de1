from datetime import date, timedelta

from flask import current_app

from eventhub.models.enums import UserRole
from eventhub.repositories import EventRepository, UserRepository
from eventhub.services.user_service import UserService

DEMO_EVENTS = [
    {
        "name": "Tech Hackathon",
        "description": "Join us for a 24-hour coding marathon where you can build innovative solutions and win exciting prizes!",
        "days_ahead": 30,
        "capacity": 100,
    },
    {
        "name": "AI/ML Workshop",
        "description": "Learn the fundamentals of Machine Learning and build your first AI model in this hands-on workshop.",
        "days_ahead": 35,
        "capacity": 50,
    },
]


def create_default_admin():
    email = current_app.config["DEFAULT_ADMIN_EMAIL"]
    admin = UserRepository.find_by_email(email)
    if admin:
        return admin

    admin = UserService.create_user(
        "Administrator",
        email,
        current_app.config["DEFAULT_ADMIN_PASSWORD"],
        role=UserRole.ADMIN,
    )
    current_app.logger.info(f"Default admin user created: {admin.email}")
    return admin


def create_demo_events(today=None):
    if EventRepository.count_events():
        return []

    today = today or date.today()
    events = [
        EventRepository.create_event(
            {
                "name": demo["name"],
                "description": demo["description"],
                "date": today + timedelta(days=demo["days_ahead"]),
                "capacity": demo["capacity"],
            }
        )
        for demo in DEMO_EVENTS
    ]
    current_app.logger.info(f"Created {len(events)} demo events")
    return events


def seed_database():
    if current_app.config["SEED_DEFAULT_ADMIN"]:
        create_default_admin()
    if current_app.config["SEED_DEMO_EVENTS"]:
        create_demo_events()
