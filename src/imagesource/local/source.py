"""Module for local image sources."""

import imagesource
import logging
import os
import os.path

from imagesource import ConfigError, IoError, check_param, check_valid_required


class Source(imagesource.ImageSource):
    """Image source with local file base.

    Lists images in a directory tree on the local file system. No
    authorization is required.
    """

    # Required and valid configuration parameters
    CONF_REQ_KEYS = {'root'}
    CONF_VALID_KEYS = {'extensions'} | CONF_REQ_KEYS

    def __init__(self, config):
        """Initialize the image source.

        :param config: dictionary with image source configuration
        :type config: dict
        :raises: imagesource.ConfigError
        """
        # Call constructor of parent class.
        super().__init__(config)
        # Basic initialization.
        self._root = os.path.expanduser(config['root'])

    def _check_config(self, config):
        """Check the image source configuration.

        :param config:
        :type config: dict
        :raises: imagesource.ConfigError
        """
        # Make sure valid and required parameters have been specified.
        check_valid_required(config, self.CONF_VALID_KEYS, self.CONF_REQ_KEYS)
        super()._check_config(config)
        # Check parameter values.
        check_param('root', config, is_str=True)
        if not config['root'].strip():
            raise ConfigError("No root directory specified for local image source.", config)

    @property
    def root(self):
        """Return root directory of the image source.

        :rtype: str
        """
        return self._root

    def authorize(self):
        """Return root directory. Local files do not require authorization."""
        return self._root

    def list_images(self, credential):
        """Return full paths of all accepted images below the root directory.

        Directories and files are traversed in alphabetical order.

        :param credential: root directory
        :type credential: str
        :rtype: list of str
        :raises: imagesource.IoError
        """
        if not os.path.isdir(credential):
            raise IoError(f"The root directory '{credential}' does not exist.")

        def on_error(e):
            raise IoError(f"An exception occurred while listing directory '{e.filename}'. {e}", e)

        uuids = []
        for dir_path, dir_names, file_names in os.walk(credential, onerror=on_error):
            # Sort in place to make os.walk descend in alphabetical order.
            dir_names.sort()
            for name in sorted(file_names):
                if self.accepts(name):
                    uuids.append(os.path.join(dir_path, name))
                else:
                    logging.debug(f"Skipping file '{name}'.")
        return uuids

    def fetch(self, credential, uuid):
        """Read file from the local file system.

        :rtype: bytes
        :raises: imagesource.IoError
        """
        try:
            with open(uuid, 'rb') as file:
                return file.read()
        except OSError as e:
            raise IoError(f"An exception occurred while reading file '{uuid}'. {e}", e)
