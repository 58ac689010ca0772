"""Module providing common definitions."""

import copy
import logging
import os
import os.path
import yaml

from importlib import import_module
from logging.handlers import TimedRotatingFileHandler
from kivy.logger import Logger
from imagesource import ConfigError, check_param


APPLICATION_NAME = "Gallery Viewer"
APPLICATION_DESCRIPTION = "Fullscreen slideshow of cloud images"
VERSION = "0.1.0"
PROJECT_NAME = "cloud-gallery"

# Default configuration
DEFAULT_CONFIG = {
    'bg_color': [0, 0, 0],
    'client_id': "m35223alvo00gb2",
    'countdown_font_size': 20,
    'enable_logging': False,
    'extensions': [".jpg", ".jpeg", ".png"],
    'log_level': "warning",
    'log_dir': os.path.expanduser(f"~/.cache/{PROJECT_NAME}/log"),
    'pause': 5,
    'root': "",
    'source': "dropbox",
    'tick_interval': 0.1,
    'window_size': "full"
}

# Locations searched for the configuration file in the given order.
CONFIG_PATHS = [
    "./config.yaml",
    os.path.expanduser(f"~/.config/{PROJECT_NAME}/config.yaml"),
    f"/etc/{PROJECT_NAME}/config.yaml"
]

# Mapping of name to numeric log level.
LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL
}

# Mapping of source type names to image source classes.
SOURCE_TYPES = {
    'dropbox': ("imagesource.dropbox", "Source"),
    'local': ("imagesource.local", "Source")
}


class Formatter(logging.Formatter):
    """Log formatter.

    Used to imitate the Kivy log format in rotating log files.
    """

    def format(self, record):
        """Split and format record."""
        if isinstance(record.msg, str):
            msg = record.msg.split(':', 1)
            if len(msg) == 2:
                record.msg = '[%-13s]%s' % (msg[0], msg[1])
        return super().format(record)


def _configure_logging(config, filename):
    """Configure logging.

    Adjusts log levels based on the application configuration and adds a
    handler for logging to rotating log files if enabled.

    :param config: Application configuration
    :type config: dict
    :param filename: Log filename
    :type filename: str
    :returns: Rotating file handler or None if logging to file is disabled
    :rtype: logging.Handler
    :raises: ConfigError, Exception
    """
    # Check parameters.
    check_param('enable_logging', config, is_bool=True)
    check_param('log_level', config, options=set(LOG_LEVELS.keys()))
    check_param('log_dir', config, is_str=True)

    # Set log levels of default python and Kivy Logger.
    numeric_level = LOG_LEVELS[config['log_level']]
    logging.getLogger().setLevel(numeric_level)
    Logger.setLevel(numeric_level)

    # Reduce logging by the HTTP stack of the Dropbox SDK to warnings or
    # specified log level, whatever is higher.
    logging.getLogger("urllib3").setLevel(max(logging.WARN, numeric_level))
    logging.getLogger("dropbox").setLevel(max(logging.WARN, numeric_level))

    # Return here if logging to file is disabled.
    if not (config['enable_logging'] == "on" or config['enable_logging'] is True):
        return

    # Create log directory if it does not exist yet.
    log_dir = os.path.expanduser(config['log_dir'])
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError as e:
        raise Exception(f"An exception occurred while creating the log directory '{log_dir}': {e}")

    # Make sure the directory is writable.
    if not os.access(log_dir, os.W_OK):
        raise Exception(f"The log directory '{log_dir}' is not writeable.")

    # Write all log messages to a rotating log file.
    fullpath = os.path.join(log_dir, filename)
    logHandler = TimedRotatingFileHandler(fullpath, when="h", interval=24, backupCount=5, encoding='utf-8', errors='ignore')
    # Apply Kivy style formatter
    formatter = Formatter("%(asctime)s [%(levelname)-8s] %(message)s", "%Y-%m-%d %H:%M:%S")
    logHandler.setFormatter(formatter)
    # Add rotating log file handler to default logger.
    logging.info(f"Enabling logging to file '{fullpath}'.")
    logging.getLogger().addHandler(logHandler)
    return logHandler


def _create_source(config):
    """Create image source from configuration.

    :param config: Application configuration
    :type config: dict
    :returns: Image source
    :rtype: imagesource.ImageSource
    :raises: ConfigError
    """
    check_param('source', config, options=set(SOURCE_TYPES.keys()))

    # Retrieve image source class from type.
    ref = SOURCE_TYPES[config['source']]
    module = import_module(ref[0])
    source_class = getattr(module, ref[1])

    # Pass on the parameters relevant for the image source only.
    source_config = {key: config[key] for key in source_class.CONF_VALID_KEYS if key in config}

    try:
        logging.info(f"Configuration: Creating {config['source']} image source.")
        return source_class(source_config)
    except ConfigError as e:
        raise ConfigError(f"Error in the configuration of the {config['source']} image source. {e}", source_config)


def _load_config(path=None):
    """Load application configuration.

    Loads the application configuration from the specified or the first
    existing default configuration file and applies default values where
    missing. The default configuration is returned if no configuration file
    exists.

    :param path: Path of configuration file (default: None)
    :type path: str
    :returns: Application configuration
    :rtype: dict
    :raises: ConfigError
    """
    # Determine path of configuration file.
    if path is None:
        path = next((p for p in CONFIG_PATHS if os.path.isfile(p)), None)
    elif not os.path.isfile(path):
        raise ConfigError(f"The configuration file '{path}' does not exist.")

    # Copy default configuration.
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        logging.info("Configuration: No configuration file found. Using default configuration.")
        return config

    # Load configuration from yaml file.
    try:
        with open(path, 'r', encoding='utf8') as config_file:
            config2 = yaml.safe_load(config_file)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"An error occurred while reading the configuration file '{path}'. {e}")

    # An empty file results in None.
    if config2 is None:
        config2 = dict()
    if not isinstance(config2, dict):
        raise ConfigError(f"The configuration file '{path}' does not contain a dictionary.")
    config.update(config2)

    logging.debug(f"Configuration: Configuration = {config}")
    return config
