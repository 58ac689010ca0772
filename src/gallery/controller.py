"""Module providing slideshow controller."""

import math
import time

from collections import namedtuple
from enum import Enum

from kivy.logger import Logger


class VIEW_STATE(str, Enum):
    EMPTY = "empty"
    SHOWING = "showing"


# Result of SlideshowController.current_view(). The countdown is the number of
# whole seconds until the next image is shown.
View = namedtuple('View', ['state', 'image', 'countdown'])

# View returned while no images are available.
LOADING = View(VIEW_STATE.EMPTY, None, None)


class SlideshowController:
    """Slideshow controller.

    Keeps track of the images of a slideshow, the current image and the time
    of the last swap. The controller does not schedule anything itself. The
    on_tick method is expected to be called periodically, much more often than
    the swap interval. All methods must be called from the same thread.

    Time is taken from a monotonic clock, which may be replaced for testing.
    """

    def __init__(self, interval=5, clock=time.monotonic):
        """Initialize slideshow controller instance.

        :param interval: swap interval in seconds
        :type interval: int or float
        :param clock: function returning the current time in seconds
        :type clock: callable
        :raises: ValueError
        """
        if not interval > 0:
            raise ValueError(f"The swap interval must be > 0, but is {interval}.")
        self._interval = interval
        self._clock = clock
        self._images = []
        self._index = 0
        self._last_swap = clock()

    def __len__(self):
        return len(self._images)

    @property
    def images(self):
        """Return images of the slideshow in display order.

        :rtype: tuple
        """
        return tuple(self._images)

    @property
    def index(self):
        """Return index of the current image.

        :return: index or None if the slideshow is empty
        :rtype: int
        """
        return self._index if self._images else None

    @property
    def interval(self):
        """Return swap interval in seconds."""
        return self._interval

    @property
    def state(self):
        """Return view state.

        See enumeration VIEW_STATE for possible values.

        :rtype: str
        """
        return VIEW_STATE.SHOWING if self._images else VIEW_STATE.EMPTY

    def on_tick(self, now=None):
        """Advance to the next image if the swap interval has elapsed.

        Nothing happens while the slideshow contains less than two images.

        :param now: current time (default: read from clock)
        :type now: float
        """
        if len(self._images) <= 1:
            return
        if now is None:
            now = self._clock()
        if now - self._last_swap < self._interval:
            return
        self._index = (self._index + 1) % len(self._images)
        self._last_swap = now
        Logger.debug(f"Slideshow: Advancing to image {self._index + 1} of {len(self._images)}.")

    def on_images_loaded(self, images, now=None):
        """Replace all images of the slideshow.

        The current index is kept if still valid and reset to 0 otherwise.
        The swap timer is restarted if the slideshow was empty before, so the
        first image is shown for a full interval.

        :param images: new images in display order
        :type images: list
        :param now: current time (default: read from clock)
        :type now: float
        """
        was_empty = not self._images
        self._images = list(images)
        if self._index >= len(self._images):
            self._index = 0
        if was_empty and self._images:
            self._last_swap = self._clock() if now is None else now
        Logger.info(f"Slideshow: Slideshow contains {len(self._images)} image(s).")

    def current_view(self, now=None):
        """Return what shall be displayed.

        :param now: current time (default: read from clock)
        :type now: float
        :return: current image and countdown or LOADING if empty
        :rtype: View
        """
        if not self._images:
            return LOADING
        if now is None:
            now = self._clock()
        countdown = max(0, math.ceil(self._interval - (now - self._last_swap)))
        return View(VIEW_STATE.SHOWING, self._images[self._index], countdown)
