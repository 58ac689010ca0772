"""Module providing background image loader."""

import logging

from imagesource import AuthError, IoError
from threading import Thread
from time import time

from kivy.logger import Logger


class Loader:
    """Background image loader.

    Used by the application to authorize against the image source and to
    download all images without blocking the Kivy event loop. Loading is
    started once and runs to completion. There is no retry, cancellation or
    timeout.

    The result is passed to the on_loaded callback from within the background
    thread. Callers that need the result in the main thread wrap the callback
    with kivy.clock.mainthread.
    """

    def __init__(self, source, on_loaded, on_failed=None):
        """Initialize Loader instance.

        :param source: image source to load images from
        :type source: imagesource.ImageSource
        :param on_loaded: called with the list of loaded images
        :type on_loaded: callable
        :param on_failed: called with the exception if authorization or
            listing failed (default: None)
        :type on_failed: callable
        """
        self._source = source
        self._on_loaded = on_loaded
        self._on_failed = on_failed
        self._thread = None

    def _load(self):
        """Load images from the image source.

        The method is executed in a background thread.
        """
        start_time = time()
        logging.info("Starting to load images in the background.")
        try:
            images = self._source.load()
        except AuthError as e:
            logging.error(f"Authorization failed. {e}")
            self._fail(e)
            return
        except IoError as e:
            logging.error(f"Listing of images failed. {e}")
            self._fail(e)
            return
        logging.info(f"Loading of {len(images)} image(s) completed after {time() - start_time:.1f} seconds.")
        self._on_loaded(images)

    def _fail(self, e):
        """Report failure to the on_failed callback if any."""
        if self._on_failed is not None:
            self._on_failed(e)

    @property
    def running(self):
        """Return True if the background thread is running.

        :rtype: bool
        """
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        """Start loading images in the background.

        Creates a background thread, which executes the _load method.
        Subsequent calls are ignored.
        """
        if self._thread is not None:
            Logger.warning("Loader: Ignoring request since loading has already been started.")
            return
        Logger.info("Loader: Starting to load images in the background.")
        self._thread = Thread(name="loader", target=self._load, daemon=True)
        self._thread.start()

    def join(self, timeout=None):
        """Wait for the background thread to finish.

        :param timeout: timeout in seconds (default: None)
        :type timeout: float
        """
        if self._thread is not None:
            self._thread.join(timeout)
