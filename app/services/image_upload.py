"""
Image "upload" for the add-school form.

No upload service is wired in yet: any selected file is swapped for one fixed
placeholder image URL and its bytes are never read. Replace
``PlaceholderImageUploader`` with a real uploader exposing the same
``select_file(file) -> url`` method to store files for real.
"""
import logging

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE_URL = (
    'https://images.pexels.com/photos/289740/pexels-photo-289740.jpeg'
    '?auto=compress&cs=tinysrgb&w=800'
)

class PlaceholderImageUploader:

    def __init__(self, placeholder_url=PLACEHOLDER_IMAGE_URL):
        self.placeholder_url = placeholder_url

    def select_file(self, file):
        """Return the image URL for a selected file, or None when nothing was picked."""
        if file is None:
            return None
        # Werkzeug hands over an empty FileStorage when the input was left blank
        if getattr(file, 'filename', None) == '':
            return None

        logger.info(f"Using placeholder image for {getattr(file, 'filename', 'file')}")
        return self.placeholder_url
