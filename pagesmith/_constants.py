"""Common literal values used across pagesmith.

These constants keep layout names, file extensions, and config file naming
centralized so the parser, renderer, and tests agree on the same values.

Examples
--------
>>> from pagesmith import _constants
>>> _constants.FEED_LAYOUT
'RSS'
>>> _constants.DEFAULT_PAGE_EXTENSION
'html'
"""

BASE_CONFIG_NAME = "base"
CONFIG_EXTENSIONS = (".yml", ".yaml")
DEFAULT_PAGE_EXTENSION = "html"
FEED_LAYOUT = "RSS"
FEED_EXTENSION = "xml"
PAGE_SEGMENT = "page"
INDEX_SEGMENT = "index"
