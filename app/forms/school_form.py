import logging
import threading
import time

from app.models.school import SCHOOL_FIELDS
from app.services.image_upload import PlaceholderImageUploader
from app.services.navigation import schedule_with_timer
from app.utils.school_validator import SchoolValidator

logger = logging.getLogger(__name__)

LISTING_ROUTE = '/show-schools'

SUCCESS_MESSAGE = 'School added successfully!'
FAILURE_MESSAGE = 'Failed to add school. Please try again.'
UPLOAD_MESSAGE = 'Image uploaded successfully!'


class SubmitResult:
    SUCCESS = 'success'
    INVALID = 'invalid'
    FAILED = 'failed'
    BUSY = 'busy'

    def __init__(self, status, errors=None):
        self.status = status
        self.errors = errors or {}

    @property
    def ok(self):
        return self.status == self.SUCCESS

    def __repr__(self):
        return f'<SubmitResult {self.status} {self.errors}>'


class SchoolFormController:
    """
    State and submit flow for the add-school form.

    Holds the current field values, per-field validation errors and the
    ``is_submitting`` flag. Storage, notifications and navigation are
    collaborators passed in by the caller:

    - storage.add_school(record)
    - notifier.notify_success(message) / notifier.notify_error(message)
    - navigator.go_to(route)

    ``schedule(delay, callback)`` runs the delayed navigation; it defaults to a
    background timer.
    """

    def __init__(self, storage, notifier, navigator, uploader=None, validator=None,
                 submit_delay=1.0, redirect_delay=1.5, schedule=None):
        self.storage = storage
        self.notifier = notifier
        self.navigator = navigator
        self.uploader = uploader or PlaceholderImageUploader()
        self.validator = validator or SchoolValidator()
        self.submit_delay = submit_delay
        self.redirect_delay = redirect_delay
        self.schedule = schedule or schedule_with_timer

        self.values = self.default_values()
        self.errors = {}
        self.is_submitting = False
        self._submit_lock = threading.Lock()

    @staticmethod
    def default_values():
        return {field: '' for field in SCHOOL_FIELDS}

    def update_field(self, field, value):
        if field not in self.values:
            raise KeyError(field)
        self.values[field] = value

    def update_fields(self, data):
        """Copy known fields out of a mapping such as request.form"""
        for field in SCHOOL_FIELDS:
            if field in data:
                self.update_field(field, data.get(field))

    def set_image(self, url):
        self.values['image'] = url

    @property
    def image_preview(self):
        return self.values.get('image') or None

    def upload_image(self, file):
        url = self.uploader.select_file(file)
        if url is None:
            return None
        self.set_image(url)
        self.notifier.notify_success(UPLOAD_MESSAGE)
        return url

    def reset(self):
        self.values = self.default_values()
        self.errors = {}

    def submit(self, values=None):
        if not self._submit_lock.acquire(blocking=False):
            return SubmitResult(SubmitResult.BUSY)

        try:
            if values is not None:
                self.update_fields(values)
            record = dict(self.values)

            is_valid, errors = self.validator.validate(record)
            self.errors = errors
            if not is_valid:
                return SubmitResult(SubmitResult.INVALID, errors)

            self.is_submitting = True
            try:
                if self.submit_delay:
                    time.sleep(self.submit_delay)
                self.storage.add_school(record)
            except Exception as e:
                logger.exception(f"Error adding school: {e}")
                self.notifier.notify_error(FAILURE_MESSAGE)
                return SubmitResult(SubmitResult.FAILED)

            self.notifier.notify_success(SUCCESS_MESSAGE)
            self.reset()
            self.schedule(self.redirect_delay, lambda: self.navigator.go_to(LISTING_ROUTE))
            return SubmitResult(SubmitResult.SUCCESS)
        finally:
            self.is_submitting = False
            self._submit_lock.release()
