"""Fullscreen slideshow of images stored in the cloud.

Provides :class:`gallery.slideshow.Slideshow` to display images and
:class:`gallery.SlideshowController` to cycle through them. Images are
retrieved from an image source (:mod:`imagesource`) in the background by
:class:`gallery.Loader`.

License: GNU General Public License v3 (GPLv3)
"""

import os

# Command line arguments are parsed by the application and not by Kivy.
os.environ.setdefault('KIVY_NO_ARGS', "1")

from .common import APPLICATION_NAME, APPLICATION_DESCRIPTION, VERSION, PROJECT_NAME
from .controller import LOADING, VIEW_STATE, SlideshowController, View
from .loader import Loader
