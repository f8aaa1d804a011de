"""
Common constants used across the jsonsmith package.
"""

# Smart mode renders a subtree on one line when its minified text fits
SMART_INLINE_LIMIT = 80

# Separators passed to json.dumps
COMPACT_SEPARATORS = (",", ":")
SPACED_SEPARATORS = (",", ": ")

# Stable keys under which a tool session persists its state
STORAGE_KEY_INPUT = "tool-json-input"
STORAGE_KEY_INDENT = "tool-json-indent"
STORAGE_KEY_SORT = "tool-json-sort"
