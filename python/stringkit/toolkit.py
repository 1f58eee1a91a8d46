"""String toolkit facade.

Bundles the everyday string helpers behind one object that reads its
settings from a configuration provider:

    toolkit = StringToolkit()             # bundled defaults / stringkit.json
    toolkit.limit("Taylor Otwell", 3)     # "Tay..."
    toolkit.plural("child")               # "children"
    toolkit.slug("This is my blog post!") # "this-is-my-blog-post"
    toolkit.random(16, "alpha")

Settings are fetched once per toolkit and cached. The Pluralizer and the
transliterator are built on first use under a lock, or can be passed in.
"""

import codecs
import logging
import re
import secrets
import string
import threading
from typing import Any, Optional

from .config import ConfigProvider, as_provider
from .errors import ConfigurationError, InvalidArgument
from .normalizer import Transliterator
from .pluralizer import Pluralizer

logger = logging.getLogger(__name__)

POOLS: dict[str, str] = {
    "alpha": string.ascii_letters,
    "alnum": string.digits + string.ascii_letters,
}

# Delimiters turned into word breaks by classify()
CLASSIFY_DELIMITERS = ("_", "-", ".", "/")


class StringToolkit:
    """Locale-aware string helpers driven by a configuration provider."""

    def __init__(
        self,
        config: Any = None,
        pluralizer: Optional[Pluralizer] = None,
        transliterator: Optional[Transliterator] = None,
    ):
        """Initialize the toolkit.

        Args:
            config: A ConfigProvider, a mapping, a path to a JSON file, or
                None for the bundled defaults.
            pluralizer: Prebuilt Pluralizer; built from the "strings" key
                on first use when omitted.
            transliterator: Prebuilt Transliterator; built from the "ascii"
                key on first use when omitted.
        """
        self.config: ConfigProvider = as_provider(config)
        self._pluralizer = pluralizer
        self._transliterator = transliterator
        self._encoding: Optional[str] = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"StringToolkit(config={self.config!r})"

    # -------------------------------------------------------------------------
    # Cached configuration
    # -------------------------------------------------------------------------

    def encoding(self) -> str:
        """Get the configured encoding, fetching it from config only once."""
        if self._encoding is None:
            with self._lock:
                if self._encoding is None:
                    encoding = self.config.fetch("encoding")
                    try:
                        codecs.lookup(encoding)
                    except (LookupError, TypeError) as e:
                        raise ConfigurationError(f"Unknown encoding: {encoding!r}") from e
                    logger.debug("Using encoding %s", encoding)
                    self._encoding = encoding
        return self._encoding

    def pluralizer(self) -> Pluralizer:
        """Get the Pluralizer, building it from the "strings" key on first use."""
        if self._pluralizer is None:
            with self._lock:
                if self._pluralizer is None:
                    self._pluralizer = Pluralizer.from_config(self.config.fetch("strings"))
        return self._pluralizer

    def transliterator(self) -> Transliterator:
        """Get the Transliterator, building it from the "ascii" key on first use."""
        if self._transliterator is None:
            with self._lock:
                if self._transliterator is None:
                    self._transliterator = Transliterator.from_config(self.config.fetch("ascii"))
        return self._transliterator

    def _text(self, value: str | bytes) -> str:
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode(self.encoding())
        return value

    # -------------------------------------------------------------------------
    # Length and case
    # -------------------------------------------------------------------------

    def length(self, value: str | bytes) -> int:
        """Get the length of a string in characters.

        Example:
            >>> toolkit.length("ラドクリフ")
            5
        """
        return len(self._text(value))

    def lower(self, value: str | bytes) -> str:
        return self._text(value).lower()

    def upper(self, value: str | bytes) -> str:
        return self._text(value).upper()

    def title(self, value: str | bytes) -> str:
        """Convert a string to title case ("taylor otwell" -> "Taylor Otwell")."""
        return self._text(value).title()

    # -------------------------------------------------------------------------
    # Truncation
    # -------------------------------------------------------------------------

    def limit(self, value: str | bytes, limit: int = 100, end: str = "...") -> str:
        """Limit the number of characters in a string.

        Args:
            value: Text to truncate.
            limit: Characters to keep.
            end: Appended when the text was truncated.

        Example:
            >>> toolkit.limit("Taylor Otwell", 3)
            'Tay...'
        """
        value = self._text(value)
        if len(value) <= limit:
            return value
        return value[: max(limit, 0)] + end

    def limit_exact(self, value: str | bytes, limit: int = 100, end: str = "...") -> str:
        """Limit a string so that the result, ending included, fits in limit.

        Example:
            >>> toolkit.limit_exact("Taylor Otwell", 9)
            'Taylor...'
        """
        value = self._text(value)
        if len(value) <= limit:
            return value
        return self.limit(value, limit - len(end), end)

    def words(self, value: str | bytes, words: int = 100, end: str = "...") -> str:
        """Limit the number of words in a string.

        Example:
            >>> toolkit.words("This is a sentence.", 3)
            'This is a...'
        """
        value = self._text(value)
        if value.strip() == "":
            return ""
        if words < 1:
            return end
        # A string cannot hold more words than characters
        words = min(words, len(value))

        matched = re.match(r"\s*(?:\S+\s*){1,%d}" % words, value).group(0)
        if len(matched) == len(value):
            end = ""
        return matched.rstrip() + end

    # -------------------------------------------------------------------------
    # Inflection
    # -------------------------------------------------------------------------

    def singular(self, value: str) -> str:
        """Get the singular form of a word."""
        return self.pluralizer().singular(value)

    def plural(self, value: str, count: int = 2) -> str:
        """Get the plural form of a word, or the word itself when count is 1.

        Example:
            >>> toolkit.plural("child", 10)
            'children'
            >>> toolkit.plural("octocat", 1)
            'octocat'
        """
        return self.pluralizer().plural(value, count)

    # -------------------------------------------------------------------------
    # ASCII, slugs and identifiers
    # -------------------------------------------------------------------------

    def ascii(self, value: str | bytes) -> str:
        """Convert a string to 7-bit printable ASCII."""
        return self.transliterator()(self._text(value))

    def slug(self, title: str | bytes, separator: str = "-") -> str:
        """Generate a URL friendly slug from a string.

        Example:
            >>> toolkit.slug("This is my blog post!")
            'this-is-my-blog-post'
            >>> toolkit.slug("This is my blog post!", "_")
            'this_is_my_blog_post'
        """
        title = self.ascii(title)
        sep = re.escape(separator)

        # Remove all characters that are not the separator, letters, numbers, or whitespace
        title = re.sub(rf"[^{sep}a-z0-9\s]+", "", self.lower(title))

        # Replace all separator characters and whitespace by a single separator
        title = re.sub(rf"[{sep}\s]+", lambda m: separator, title)

        return title.strip(separator)

    def classify(self, value: str | bytes) -> str:
        """Convert a string to an underscored, capitalised class name.

        Example:
            >>> toolkit.classify("task_name")
            'Task_Name'
        """
        value = self._text(value)
        for delimiter in CLASSIFY_DELIMITERS:
            value = value.replace(delimiter, " ")
        return self.title(value).replace(" ", "_")

    def segments(self, value: str | bytes) -> list[str]:
        """Return the URI style segments of a string ("/a/b/" -> ["a", "b"])."""
        return [segment for segment in self._text(value).strip("/").split("/") if segment]

    # -------------------------------------------------------------------------
    # Random strings
    # -------------------------------------------------------------------------

    def random(self, length: int, pool_type: str = "alnum") -> str:
        """Generate a random alphabetic or alphanumeric string.

        Raises:
            InvalidArgument: for an unknown pool type or a negative length.
        """
        pool = self.pool(pool_type)
        if length < 0:
            raise InvalidArgument(f"Random string length must not be negative, got {length}")
        return "".join(secrets.choice(pool) for _ in range(length))

    def pool(self, pool_type: str) -> str:
        """Get the character pool for a type of random string."""
        if pool_type not in POOLS:
            raise InvalidArgument(
                f"Invalid random string type [{pool_type}]. Available: {list(POOLS)}"
            )
        return POOLS[pool_type]
