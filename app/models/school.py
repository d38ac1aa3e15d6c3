from app import db
from datetime import datetime

# Fields the add-school form collects, in display order
SCHOOL_FIELDS = ('name', 'address', 'city', 'state', 'contact', 'email_id', 'image')

class School(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    address = db.Column(db.String(200), nullable=False)
    city = db.Column(db.String(100), nullable=False)
    state = db.Column(db.String(100), nullable=False)
    contact = db.Column(db.String(10), nullable=False)
    email_id = db.Column(db.String(120), nullable=False)
    image = db.Column(db.String(512), nullable=True)  # Image URL, empty when none was given
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    @classmethod
    def from_record(cls, record):
        """Build a row from a validated school record (dict)"""
        school = cls()
        for field in SCHOOL_FIELDS:
            setattr(school, field, record.get(field))
        return school

    def to_record(self):
        return {field: getattr(self, field) for field in SCHOOL_FIELDS}

    def __repr__(self):
        return f'<School {self.name}>'
