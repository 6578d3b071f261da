"""
Constants for node naming and localization.
"""

# Localization keys
TEXT_INTERNET = 'Internet'
TEXT_HOME = 'Home'
TEXT_NODE_GROUPS = 'NodeGroups'

# Default English texts, keyed by localization key
DEFAULT_TEXTS = {
    TEXT_INTERNET: 'Internet',
    TEXT_HOME: 'Home',
    TEXT_NODE_GROUPS: '×{0} merged',
}

# Name stored on template items shared by many URL instances
WILDCARD_ITEM_NAME = '*'

# Synthetic authority used to split raw node names into URL segments
URL_BASE_AUTHORITY = 'http://localhost'

# Query delimiter in raw node names
QUERY_DELIMITER = '?'
