from typing import List
from eventhub.extensions import db
from eventhub.models import Announcement


class AnnouncementRepository:
    @staticmethod
    def find_by_event_id(event_id: str) -> List[Announcement]:
        return (
            Announcement.query.filter_by(event_id=event_id)
            .order_by(Announcement.sent_at.asc())
            .all()
        )

    @staticmethod
    def count_announcements() -> int:
        return Announcement.query.count()

    @staticmethod
    def create_announcement(attrs):
        announcement = Announcement(**attrs)
        db.session.add(announcement)
        db.session.commit()
        return announcement
