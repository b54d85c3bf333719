"""Constants for link classification (private)."""

# Prefix sets, ordered. Relative links have no prefix: relative means "not absolute".
EXTERNAL_PREFIXES = ("http://", "ftp://", "https://", "mailto:")
URI_PREFIXES = ("file://", *EXTERNAL_PREFIXES)
RELATIVE_PREFIXES: tuple[str, ...] = ()
LOCAL_PREFIXES = ("file:", "/", *RELATIVE_PREFIXES)
ABSOLUTE_PREFIXES = ("/", *URI_PREFIXES)

IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "gif")

# GitHub style wiki layout
WIKI_PAGE_EXTENSION = ".md"
WIKI_HOME_EXTENSION = ".wiki"
WIKI_HOME_FILENAME = "Home"
