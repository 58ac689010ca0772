"""Module providing image source class."""

import logging

from abc import ABC, abstractmethod

from .common import ConfigError, IoError, check_param
from .file import EXT_IMAGE, RemoteImage, is_image


class ImageSource(ABC):
    """Source of remote images.

    Abstract base class providing basic functionality common to all image
    source sub-classes. Implementing classes provide authorization, listing
    and download of files. The load method combines the three into a single
    call, which is typically run in a background thread.
    """

    # Required and valid configuration parameters. Need to be re-defined by
    # implementing sub-class.
    CONF_REQ_KEYS = set()
    CONF_VALID_KEYS = set()

    def __init__(self, config):
        """Initialize the image source.

        :param config: image source configuration
        :type config: dict
        :raises: ConfigError
        """
        # Check the configuration for errors.
        self._check_config(config)
        self._extensions = tuple(config.get('extensions', EXT_IMAGE))

    def _check_config(self, config):
        """Check the configuration of the image source.

        Sub-classes extend the check with their own parameters.

        :param config: image source configuration
        :type config: dict
        :raises: ConfigError
        """
        check_param('extensions', config, required=False, recurse=True, is_str=True)
        # A single string would be split into characters and an empty
        # extension matches every file.
        extensions = config.get('extensions', EXT_IMAGE)
        if not isinstance(extensions, (list, tuple)):
            raise ConfigError(f"Invalid value '{extensions}' for parameter 'extensions' specified. Value must be a list of extensions.", config)
        if "" in extensions:
            raise ConfigError("Invalid value '' for parameter 'extensions' specified. Extensions must not be empty.", config)

    @property
    def extensions(self):
        """Return accepted file extensions.

        :rtype: tuple of str
        """
        return self._extensions

    def accepts(self, name):
        """Return True if a file with the given name shall be displayed.

        :param name: file name
        :type name: str
        :rtype: bool
        """
        return is_image(name, self._extensions)

    @abstractmethod
    def authorize(self):
        """Authorize against the image source.

        May block while waiting for user input.

        :return: credential passed to list_images and fetch
        :raises: AuthError
        """
        pass

    @abstractmethod
    def list_images(self, credential):
        """Return identifiers of all accepted images in the image source.

        :param credential: credential returned by authorize
        :return: identifiers in display order
        :rtype: list of str
        :raises: IoError
        """
        pass

    @abstractmethod
    def fetch(self, credential, uuid):
        """Download a single image.

        :param credential: credential returned by authorize
        :param uuid: identifier of the image
        :type uuid: str
        :return: raw file content
        :rtype: bytes
        :raises: IoError
        """
        pass

    def load(self):
        """Authorize, list and download all images.

        Failing downloads are logged and skipped. Authorization and listing
        errors are passed on to the caller.

        :return: downloaded images in display order
        :rtype: list of imagesource.RemoteImage
        :raises: AuthError, IoError
        """
        credential = self.authorize()
        uuids = self.list_images(credential)
        logging.info(f"Found {len(uuids)} image(s) in image source.")

        images = []
        for uuid in uuids:
            try:
                data = self.fetch(credential, uuid)
            except IoError as e:
                logging.error(f"Skipping image '{uuid}'. {e}")
                continue
            images.append(RemoteImage(uuid, data))
        logging.info(f"Downloaded {len(images)} of {len(uuids)} image(s).")
        return images
