"""Rule-driven English inflection.

A Pluralizer is built once from a rule bundle with four sections:

    irregular    - singular -> plural pairs ("child" -> "children")
    uncountable  - words with no distinct plural ("traffic")
    plural       - ordered (pattern, replacement) rules
    singular     - ordered (pattern, replacement) rules

Lookup order for every word: uncountable, irregular, then the first rule whose
pattern matches. Patterns are matched case-insensitively and should anchor to
the end of the word. The result copies the case pattern of the input.

Example:
    pluralizer = Pluralizer.from_config({
        "irregular": {"child": "children"},
        "uncountable": ["traffic"],
        "plural": [["s$", "s"], ["$", "s"]],
        "singular": [["s$", ""]],
    })
    pluralizer.plural("Child")    # "Children"
    pluralizer.singular("Users")  # "User"
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Optional

from .config import config_pairs
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def _ucfirst(value: str) -> str:
    return value[:1].upper() + value[1:]


# Tried in order; the first one that leaves the comparison unchanged wins
_CASE_FUNCTIONS = (str.lower, str.upper, _ucfirst)


def match_case(value: str, comparison: str) -> str:
    """Give value the same case pattern as comparison.

    Handles all-lowercase, all-uppercase and first-letter capitalised
    comparisons. Anything else leaves value as is.
    """
    for func in _CASE_FUNCTIONS:
        if func(comparison) == comparison:
            return func(value)
    return value


@dataclass(frozen=True)
class RuleSet:
    """Ordered (pattern, replacement) rules. The first matching rule wins."""

    rules: tuple[tuple[re.Pattern[str], str], ...] = ()

    @classmethod
    def from_config(cls, section: Any, name: str = "rules") -> "RuleSet":
        """Compile a rule section.

        Raises:
            ConfigurationError: if the section is malformed, a pattern does not
                compile or a replacement refers to a missing group.
        """
        rules = []
        for pattern, replacement in config_pairs(section, name):
            try:
                compiled = re.compile(pattern, re.IGNORECASE)
                # Parses the replacement template against the pattern's groups
                compiled.sub(replacement, "")
            except re.error as e:
                raise ConfigurationError(
                    f"Invalid rule in '{name}': {pattern!r} -> {replacement!r}: {e}"
                ) from e
            rules.append((compiled, replacement))
        return cls(rules=tuple(rules))

    def apply(self, word: str) -> Optional[str]:
        """Apply the first matching rule, or return None if none matches."""
        for pattern, replacement in self.rules:
            if pattern.search(word):
                return pattern.sub(replacement, word, count=1)
        return None

    def __len__(self) -> int:
        return len(self.rules)


@dataclass(frozen=True, eq=False)
class Pluralizer:
    """Immutable singular/plural inflector."""

    REQUIRED_SECTIONS: ClassVar[tuple[str, ...]] = (
        "irregular",
        "uncountable",
        "plural",
        "singular",
    )

    plural_rules: RuleSet
    singular_rules: RuleSet
    irregular: Mapping[str, str] = field(default_factory=dict)
    uncountable: frozenset[str] = frozenset()
    _irregular_singular: Mapping[str, str] = field(init=False, repr=False)

    def __post_init__(self):
        plurals = {k.lower(): v.lower() for k, v in self.irregular.items()}
        singulars = {v: k for k, v in plurals.items()}
        object.__setattr__(self, "irregular", MappingProxyType(plurals))
        object.__setattr__(self, "_irregular_singular", MappingProxyType(singulars))
        object.__setattr__(
            self, "uncountable", frozenset(w.lower() for w in self.uncountable)
        )

    @classmethod
    def from_config(cls, config: Any) -> "Pluralizer":
        """Build a Pluralizer from a rule bundle.

        Args:
            config: Mapping with irregular, uncountable, plural and singular
                sections.

        Raises:
            ConfigurationError: if a section is missing or malformed.
        """
        if not isinstance(config, Mapping):
            raise ConfigurationError(
                f"Pluralization config must be a mapping, got {type(config).__name__}"
            )

        missing = [name for name in cls.REQUIRED_SECTIONS if name not in config]
        if missing:
            raise ConfigurationError(
                f"Pluralization config is missing sections: {', '.join(missing)}"
            )

        uncountable = config["uncountable"]
        if isinstance(uncountable, str) or not isinstance(uncountable, (list, tuple, set, frozenset)):
            raise ConfigurationError("Pluralization section 'uncountable' must be a list of words")
        if not all(isinstance(w, str) for w in uncountable):
            raise ConfigurationError("Pluralization section 'uncountable' must contain only strings")

        pluralizer = cls(
            plural_rules=RuleSet.from_config(config["plural"], "plural"),
            singular_rules=RuleSet.from_config(config["singular"], "singular"),
            irregular=dict(config_pairs(config["irregular"], "irregular")),
            uncountable=frozenset(uncountable),
        )
        logger.debug(
            "Built pluralizer: %d plural rules, %d singular rules, "
            "%d irregular, %d uncountable",
            len(pluralizer.plural_rules),
            len(pluralizer.singular_rules),
            len(pluralizer.irregular),
            len(pluralizer.uncountable),
        )
        return pluralizer

    def plural(self, word: str, count: int = 2) -> str:
        """Get the plural form of word, or word itself when count is 1."""
        if count == 1:
            return word
        return self._inflect(word, self.plural_rules, self.irregular)

    def singular(self, word: str) -> str:
        """Get the singular form of word."""
        return self._inflect(word, self.singular_rules, self._irregular_singular)

    def is_uncountable(self, word: str) -> bool:
        return word.lower() in self.uncountable

    def _inflect(self, word: str, rules: RuleSet, irregular: Mapping[str, str]) -> str:
        lower = word.lower()
        if lower in self.uncountable:
            return word

        if lower in irregular:
            return match_case(irregular[lower], word)

        inflected = rules.apply(word)
        if inflected is None:
            return word
        return match_case(inflected, word)
