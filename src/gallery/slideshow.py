"""Module providing slideshow class."""

from kivy.clock import Clock
from kivy.graphics import Color, Rectangle
from kivy.logger import Logger
from kivy.uix.anchorlayout import AnchorLayout
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.image import Image
from kivy.uix.label import Label

from imagesource import check_param, check_valid_required

from .controller import VIEW_STATE, SlideshowController


class Slideshow(AnchorLayout):
    """Slideshow widget.

    The slideshow widget displays the current image of its controller scaled
    to fill the available space, and the number of seconds until the next
    image below it. A placeholder text is displayed while the slideshow does
    not contain any images yet.

    While playing, the controller is ticked and the display refreshed in a
    fixed interval, which is independent of the swap interval.
    """

    # Required and valid configuration parameters
    CONF_REQ_KEYS = {'bg_color', 'countdown_font_size', 'pause', 'tick_interval'}
    CONF_VALID_KEYS = set() | CONF_REQ_KEYS

    # Text displayed while no images are available.
    PLACEHOLDER = "Downloading images!"

    def __init__(self, config, controller=None):
        """Initialize slideshow instance.

        :param config: slideshow configuration
        :type config: dict
        :param controller: slideshow controller. A new controller with the
            configured swap interval is created if None (default: None).
        :type controller: gallery.SlideshowController
        :raises ConfigError:
        """
        AnchorLayout.__init__(self, anchor_x='center', anchor_y='center')

        # Check the configuration for valid and required parameters.
        check_valid_required(config, self.CONF_VALID_KEYS, self.CONF_REQ_KEYS)
        # Check parameter values.
        check_param('pause', config, is_num=True, gr=0)
        check_param('tick_interval', config, is_num=True, gr=0)
        check_param('bg_color', config, is_color=True)
        check_param('countdown_font_size', config, is_int=True, gr=0)

        # Basic initialization.
        self._config = config
        # An empty controller evaluates to False. Compare with None instead.
        self._controller = controller if controller is not None else SlideshowController(config['pause'])
        self._bgcolor = config['bg_color']
        self._next_event = None
        self._state = None

        # Determine label color based on background color.
        lcolor = Color(*self._bgcolor)
        if lcolor.v > 0.5:
            lcolor.hsv = [0, 0, 0]
        else:
            lcolor.hsv = [0, 0, 1]

        # Create widgets. Only the ones matching the current state are added
        # to the layout.
        font_size = config['countdown_font_size']
        self._box = BoxLayout(orientation='vertical', spacing=20, padding=20)
        self._image = Image(fit_mode="contain")
        self._countdown = Label(halign="center", valign="middle", color=lcolor.rgba, font_size=font_size, size_hint_y=None, height=2*font_size)
        self._placeholder = Label(text=self.PLACEHOLDER, halign="center", valign="middle", color=lcolor.rgba, font_size=font_size)
        self.add_widget(self._box)

        # Call update_canvas method when the size of the widget changes.
        self.bind(size=self.update_canvas, pos=self.update_canvas)
        self.refresh()

    @property
    def controller(self):
        """Return slideshow controller.

        :rtype: gallery.SlideshowController
        """
        return self._controller

    @property
    def playing(self):
        """Return True if the slideshow is playing."""
        return self._next_event is not None

    def update_canvas(self, *args):
        """Fill canvas with the background color."""
        self.canvas.before.clear()
        with self.canvas.before:
            Color(*self._bgcolor)
            Rectangle(pos=self.pos, size=self.size)

    def refresh(self):
        """Update the displayed image and countdown from the controller."""
        view = self._controller.current_view()

        # Exchange widgets upon state changes.
        if view.state != self._state:
            self._box.clear_widgets()
            if view.state == VIEW_STATE.EMPTY:
                self._box.add_widget(self._placeholder)
            else:
                self._box.add_widget(self._image)
                self._box.add_widget(self._countdown)
            self._state = view.state

        if view.state == VIEW_STATE.SHOWING:
            if self._image.texture is not view.image.texture:
                self._image.texture = view.image.texture
            self._countdown.text = str(view.countdown)

    def show(self, images):
        """Replace the images of the slideshow.

        :param images: decoded images
        :type images: list of kivy.core.image.Image
        """
        self._controller.on_images_loaded(images)
        self.refresh()

    def play(self):
        """Start playing slideshow."""
        # Skip if already playing.
        if self._next_event is not None: return
        Logger.info("Slideshow: Starting to play slideshow.")
        self._next_event = Clock.schedule_interval(self._clock_callback, self._config['tick_interval'])

    def stop(self):
        """Stop playing slideshow."""
        # Skip if already stopped.
        if self._next_event is None: return
        Logger.info("Slideshow: Stopping slideshow.")
        self._next_event.cancel()
        self._next_event = None

    def _clock_callback(self, dt):
        """Clock callback function. Advance slideshow and refresh display."""
        self._controller.on_tick()
        self.refresh()
