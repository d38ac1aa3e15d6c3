import math
from threading import Timer


def schedule_with_timer(delay, callback):
    """Run callback once after delay seconds on a background timer"""
    timer = Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class RefreshNavigator:
    """Navigation for a single HTTP response.

    A request cannot wait on a timer, so the delay and target are recorded and
    the route turns them into a ``Refresh`` header; the browser does the waiting.
    """

    def __init__(self):
        self.target = None
        self.delay = 0

    def schedule(self, delay, callback):
        self.delay = delay
        callback()

    def go_to(self, route):
        self.target = route

    def refresh_header(self):
        if self.target is None:
            return None
        # Browsers only honour whole seconds here; round up so the redirect never comes early
        return f"{math.ceil(self.delay)}; url={self.target}"
