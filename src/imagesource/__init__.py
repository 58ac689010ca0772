"""Collection of classes to access remote images.

Provides the interface definition :class:`imagesource.ImageSource` and the
:class:`imagesource.RemoteImage` container. Actual implementations are
provided by sub-packages.

The following implementations, i.e. sub-packages, are currently available:
    - dropbox: Images are stored in a Dropbox account.
    - local: Images are stored on a local file system.

License: GNU General Public License v3 (GPLv3)
"""

from .common import AuthError, ConfigError, IoError, check_param, check_valid_required
from .file import EXT_IMAGE, RemoteImage, is_image
from .source import ImageSource
