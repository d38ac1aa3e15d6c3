from app.models.school import School, SCHOOL_FIELDS

__all__ = ['School', 'SCHOOL_FIELDS']
