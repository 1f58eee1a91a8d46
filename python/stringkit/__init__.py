"""stringkit - String helpers with a rule-driven pluralizer.

Case conversion, truncation, pluralization, slugs, ASCII transliteration
and random strings behind a single configurable toolkit.

Core concepts:
    - Settings come from a configuration provider (encoding, ASCII table,
      pluralization rules), read once per toolkit
    - Inflection is driven by ordered regex rules plus irregular and
      uncountable word lists; the first matching rule wins
    - Results copy the case pattern of the input ("Child" -> "Children")

Usage:
    from stringkit import StringToolkit, Pluralizer

    toolkit = StringToolkit()
    toolkit.plural("person")          # "people"
    toolkit.slug("Grüße aus Köln!")   # "gruesse-aus-koeln"

    pluralizer = Pluralizer.from_config({
        "irregular": {"child": "children"},
        "uncountable": ["traffic"],
        "plural": [["s$", "s"], ["$", "s"]],
        "singular": [["s$", ""]],
    })
    pluralizer.plural("Child")        # "Children"
"""

__version__ = "0.1.0"

from .config import ConfigProvider, DictConfigProvider, JsonConfigProvider
from .container import Container, StringServiceProvider, create_container
from .errors import (
    BindingResolutionError,
    ConfigurationError,
    InvalidArgument,
    StringKitError,
)
from .normalizer import Transliterator, to_ascii
from .pluralizer import Pluralizer, RuleSet
from .toolkit import StringToolkit

__all__ = [
    "__version__",
    "ConfigProvider",
    "DictConfigProvider",
    "JsonConfigProvider",
    "Container",
    "StringServiceProvider",
    "create_container",
    "BindingResolutionError",
    "ConfigurationError",
    "InvalidArgument",
    "StringKitError",
    "Transliterator",
    "to_ascii",
    "Pluralizer",
    "RuleSet",
    "StringToolkit",
]
