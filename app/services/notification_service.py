from flask import flash
import logging

logger = logging.getLogger(__name__)

class FlashNotifier:
    """Shows toast-style messages through Flask's flash queue.

    Categories follow the templates: 'success' renders green, 'danger' red.
    """

    def notify_success(self, message):
        logger.info(f"Notify success: {message}")
        flash(message, 'success')

    def notify_error(self, message):
        logger.error(f"Notify error: {message}")
        flash(message, 'danger')
