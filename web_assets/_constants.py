"""Common literal values used across web_assets.

These constants keep separators, markers, and default URL roots in one place
so the accumulator, the manifest reader, and tests agree on them.

Examples
--------
>>> from web_assets import _constants
>>> _constants.TITLE_SEPARATOR
' - '
>>> _constants.CSS_LIST_KEYWORD in "# css-list"
True
"""

TITLE_SEPARATOR = " - "
TITLE_IGNORED = frozenset({"", "-"})

CSS_LIST_KEYWORD = "css-list"
LIST_COMMENT_PREFIX = "#"

DEFAULT_CSS_ROOT_URL = "/css/"
DEFAULT_JS_ROOT_URL = "/js/"
DEFAULT_ENCODING = "UTF-8"
DEFAULT_NAMESPACE_SEPARATOR = "."
DEFAULT_INLINE_JS_VARIABLE = "web_assets_inline_js"
DEFAULT_REQUIRE_NAMESPACE = "require"
