"""Package providing Dropbox image sources.

License: GNU General Public License v3 (GPLv3)
"""

from .source import CLIENT_ID, Source
