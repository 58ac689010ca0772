"""Package providing local image sources.

License: GNU General Public License v3 (GPLv3)
"""

from .source import Source
