import re
from typing import Dict, Optional, Tuple
from urllib.parse import urlparse

from email_validator import validate_email, EmailNotValidError

class SchoolValidator:
    def __init__(self):
        # (field, minimum length, message) in display order
        self.length_rules = [
            ('name', 2, 'School name must be at least 2 characters'),
            ('address', 5, 'Address must be at least 5 characters'),
            ('city', 2, 'City must be at least 2 characters'),
            ('state', 2, 'State must be at least 2 characters'),
        ]
        self.contact_pattern = re.compile(r'[0-9]{10}')
        self.contact_message = 'Contact must be a valid 10-digit number'
        self.email_message = 'Please enter a valid email address'
        self.image_message = 'Please enter a valid image URL'

    def check_contact(self, contact: str) -> Optional[str]:
        if not self.contact_pattern.fullmatch(contact):
            return self.contact_message
        return None

    def check_email(self, email: str) -> Optional[str]:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return self.email_message
        return None

    def check_image(self, image: str) -> Optional[str]:
        """An empty image means "no image"; anything else must parse as a URL."""
        if image == '':
            return None
        if re.search(r'\s', image):
            return self.image_message
        parsed = urlparse(image)
        if not parsed.scheme or not parsed.netloc:
            return self.image_message
        return None

    def validate(self, values: Dict[str, Optional[str]]) -> Tuple[bool, Dict[str, str]]:
        """Validate a school record and return (is_valid, errors keyed by field)."""
        errors = {}

        def value_of(field):
            value = values.get(field)
            return '' if value is None else str(value)

        for field, min_length, message in self.length_rules:
            if len(value_of(field)) < min_length:
                errors[field] = message

        contact_issue = self.check_contact(value_of('contact'))
        if contact_issue:
            errors['contact'] = contact_issue

        email_issue = self.check_email(value_of('email_id'))
        if email_issue:
            errors['email_id'] = email_issue

        image_issue = self.check_image(value_of('image'))
        if image_issue:
            errors['image'] = image_issue

        return len(errors) == 0, errors
