import logging

from app import db
from app.models.school import School

logger = logging.getLogger(__name__)

class SchoolStorage:
    """Database-backed keeper of school records.

    The add-school form only depends on ``add_school``; ``get_schools`` feeds
    the listing view.
    """

    def add_school(self, record):
        try:
            school = School.from_record(record)
            db.session.add(school)
            db.session.commit()
            logger.info(f"Stored school {school.id}: {school.name}")
        except Exception:
            db.session.rollback()
            raise

    def get_schools(self):
        return School.query.order_by(School.id.asc()).all()


class InMemorySchoolStorage:
    """List-backed store, used in tests and when no database is wanted"""

    def __init__(self):
        self.schools = []

    def add_school(self, record):
        self.schools.append(dict(record))

    def get_schools(self):
        return list(self.schools)
