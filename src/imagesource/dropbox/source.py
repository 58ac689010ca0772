"""Module for Dropbox image sources."""

import dropbox
import imagesource
import logging
import sys

from dropbox import DropboxOAuth2FlowNoRedirect
from dropbox.files import FileMetadata
from imagesource import AuthError, IoError, check_param, check_valid_required


# Public client identifier of the application. Public clients authorize via
# PKCE and do not need a secret.
CLIENT_ID = "m35223alvo00gb2"


def prompt(msg):
    """Prompt the user for input on the console.

    :param msg: prompt message
    :type msg: str
    :return: user input without surrounding white space
    :rtype: str
    """
    print(f"{msg}: ", end="", file=sys.stderr, flush=True)
    return sys.stdin.readline().strip()


class Source(imagesource.ImageSource):
    """Image source with Dropbox file base.

    Authorization uses the OAuth2 code flow with PKCE and without redirect.
    The user opens the authorization URL printed to the console in a browser
    and pastes the displayed code back into the console. The access token is
    kept in memory only.

    Files are listed recursively starting from the root folder. The root
    folder of the account is represented by an empty string.
    """

    # Required and valid configuration parameters
    CONF_REQ_KEYS = set()
    CONF_VALID_KEYS = {'client_id', 'extensions', 'root'} | CONF_REQ_KEYS

    def __init__(self, config, prompt=prompt):
        """Initialize the image source.

        :param config: dictionary with image source configuration
        :type config: dict
        :param prompt: function used to ask the user for the authorization
            code (default: console prompt)
        :type prompt: callable
        :raises: imagesource.ConfigError
        """
        # Call constructor of parent class.
        super().__init__(config)
        # Basic initialization.
        self._client_id = config.get('client_id', CLIENT_ID)
        self._root = self._normalize_root(config.get('root', ""))
        self._prompt = prompt

    def _check_config(self, config):
        """Check the image source configuration.

        :param config: image source configuration
        :type config: dict
        :raises: imagesource.ConfigError
        """
        # Make sure all valid and required parameters have been specified.
        check_valid_required(config, self.CONF_VALID_KEYS, self.CONF_REQ_KEYS)
        super()._check_config(config)
        # Check parameter values.
        check_param('client_id', config, required=False, is_str=True)
        check_param('root', config, required=False, is_str=True)

    @staticmethod
    def _normalize_root(root):
        """Convert root folder to the path notation of the Dropbox API.

        The API expects an empty string for the account root and a leading
        slash otherwise.
        """
        root = root.rstrip("/")
        if root and not root.startswith("/"):
            root = "/" + root
        return root

    @property
    def client_id(self):
        """Return client identifier used for authorization.

        :rtype: str
        """
        return self._client_id

    @property
    def root(self):
        """Return root folder of the image source.

        :rtype: str
        """
        return self._root

    def authorize(self):
        """Authorize the user interactively.

        :return: authorized Dropbox client
        :rtype: dropbox.Dropbox
        :raises: imagesource.AuthError
        """
        flow = DropboxOAuth2FlowNoRedirect(self._client_id, use_pkce=True, token_access_type='online')
        try:
            url = flow.start()
            print("Open this URL in your browser:", file=sys.stderr)
            print(url, file=sys.stderr)
            print(file=sys.stderr)
            code = self._prompt("Then paste the code here")
        except Exception as e:
            raise AuthError(f"An exception occurred while requesting the authorization code. {e}", e)

        if not code or not code.strip():
            raise AuthError("No authorization code has been entered.")
        try:
            result = flow.finish(code.strip())
        except Exception as e:
            raise AuthError(f"An exception occurred while finishing the authorization. {e}", e)

        logging.info(f"Authorized Dropbox account '{result.account_id}'.")
        return dropbox.Dropbox(oauth2_access_token=result.access_token, app_key=self._client_id)

    def list_images(self, credential):
        """Return paths of all accepted images below the root folder.

        :param credential: authorized Dropbox client
        :type credential: dropbox.Dropbox
        :return: lower-case paths in the order reported by Dropbox
        :rtype: list of str
        :raises: imagesource.IoError
        """
        try:
            result = credential.files_list_folder(self._root, recursive=True)
            entries = list(result.entries)
            # Results are paginated. Follow the cursor until all entries have
            # been retrieved.
            while result.has_more:
                result = credential.files_list_folder_continue(result.cursor)
                entries.extend(result.entries)
        except Exception as e:
            raise IoError(f"An exception occurred while listing folder '{self._root}'. {e}", e)

        uuids = []
        for entry in entries:
            # Skip folders and deleted entries.
            if not isinstance(entry, FileMetadata):
                continue
            if not self.accepts(entry.name) or entry.path_lower is None:
                logging.debug(f"Skipping file '{entry.name}'.")
                continue
            uuids.append(entry.path_lower)
        return uuids

    def fetch(self, credential, uuid):
        """Download file from Dropbox.

        :param credential: authorized Dropbox client
        :type credential: dropbox.Dropbox
        :param uuid: path of the file
        :type uuid: str
        :return: raw file content
        :rtype: bytes
        :raises: imagesource.IoError
        """
        logging.info(f"Downloading file '{uuid}' from Dropbox.")
        try:
            _, response = credential.files_download(uuid)
            with response:
                return response.content
        except Exception as e:
            raise IoError(f"An exception occurred while downloading file '{uuid}' from Dropbox. {e}", e)
