"""Module providing gallery viewer application."""

import kivy.app
import signal

from imagesource import ConfigError, check_valid_required

from kivy.base import stopTouchApp
from kivy.clock import mainthread
from kivy.logger import Logger

from .common import APPLICATION_NAME, _configure_logging, _create_source, _load_config
from .content import decode_images
from .loader import Loader
from .slideshow import Slideshow


app = None

def signal_handler(sig, frame):
    """Close application after SIGINT and SIGTERM signals."""
    Logger.warning(f"App: Signal '{signal.strsignal(sig)}' received. Preparing for safe exit.")
    if app is not None:
        app.close()
    stopTouchApp()


def run_app(config_path=None):
    """Start gallery viewer.

    :param config_path: path of configuration file (default: None)
    :type config_path: str
    """
    global app
    # Catch interrupt and term signals and exit gracefully.
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)
    # Run gallery viewer.
    app = GalleryApp(config_path)
    app.run()
    # Clean up and exit.
    app.close()


class GalleryApp(kivy.app.App):
    """Gallery viewer application."""

    # Required and valid configuration parameters
    CONF_REQ_KEYS = {'enable_logging', 'log_dir', 'log_level', 'source', 'window_size'} | Slideshow.CONF_REQ_KEYS
    CONF_VALID_KEYS = {'client_id', 'extensions', 'root'} | CONF_REQ_KEYS | Slideshow.CONF_VALID_KEYS

    def __init__(self, config_path=None, **kwargs):
        """Initialize application instance.

        :param config_path: path of configuration file. The default locations
            are searched if None (default: None).
        :type config_path: str
        """
        super().__init__(**kwargs)
        self._config_path = config_path
        self._loader = None
        self._slideshow = None

    def _init_display(self):
        """Initialize window.

        :raises: ConfigError
        """
        # Import late to make sure the window is only created by the running
        # application.
        from kivy.core.window import Window

        value = self._config['window_size']
        if type(value) is list and len(value) == 2 and value[0] > 0 and value[1] > 0:
            Window.size = (value)
        elif value == "full":
            Window.fullscreen = 'auto'
        else:
            raise ConfigError(f"Invalid value '{value}' for parameter 'window_size' specified. Valid values are [width, height] and 'full'.", self._config)
        # Disable display of mouse cursor
        Window.show_cursor = False

    def build(self):
        """Build Kivy application.

        Loads the application configuration, creates the image source and the
        slideshow, and starts loading images in the background.
        """
        self.title = APPLICATION_NAME

        # Load configuration.
        self._config = _load_config(self._config_path)
        # Check the configuration for valid and required parameters.
        check_valid_required(self._config, self.CONF_VALID_KEYS, self.CONF_REQ_KEYS)
        # Configure logging.
        _configure_logging(self._config, "gallery.log")

        # Create image source and slideshow.
        source = _create_source(self._config)
        slideshow_config = {key: self._config[key] for key in Slideshow.CONF_VALID_KEYS if key in self._config}
        self._slideshow = Slideshow(slideshow_config)

        # Initialize display.
        self._init_display()

        # Start playing. The placeholder is displayed until images arrive.
        self._slideshow.play()
        # Results of the background loader are passed on to the main thread.
        self._loader = Loader(source, mainthread(self.on_images_loaded), mainthread(self.on_load_failed))
        self._loader.start()

        return self._slideshow

    def on_images_loaded(self, images):
        """Handle images loaded by the background loader."""
        handles = decode_images(images)
        Logger.info(f"App: Cloud images loaded in memory! {len(handles)} of {len(images)} image(s) could be decoded.")
        self._slideshow.show(handles)

    def on_load_failed(self, e):
        """Handle failures of the background loader."""
        Logger.error(f"App: Images could not be loaded. {e}")
        Logger.error("App: The slideshow remains empty until the application is restarted.")

    def close(self):
        """Prepare application for safe exit."""
        if self._slideshow is not None:
            self._slideshow.stop()
