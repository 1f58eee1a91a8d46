"""Tests for the pluralizer module."""

import pytest

from stringkit.errors import ConfigurationError
from stringkit.pluralizer import Pluralizer, RuleSet, match_case


class TestMatchCase:
    """Tests for match_case function."""

    def test_lowercase(self):
        assert match_case("CHILDREN", "child") == "children"

    def test_uppercase(self):
        assert match_case("children", "CHILD") == "CHILDREN"

    def test_capitalized(self):
        assert match_case("children", "Child") == "Children"

    def test_capitalized_keeps_rest(self):
        """Only the first letter is touched for capitalised input."""
        assert match_case("userS", "User") == "UserS"

    def test_multi_word_follows_first_letter(self):
        """Multi-word input only transfers the first letter's case."""
        assert match_case("big dogs", "Big Dog") == "Big dogs"

    def test_mixed_case_left_alone(self):
        """Mixed case input gives no usable pattern; value is returned as is."""
        assert match_case("iphones", "iPhone") == "iphones"


class TestRuleSet:
    """Tests for RuleSet."""

    def test_first_match_wins(self):
        """Earlier rules take precedence over later ones."""
        rules = RuleSet.from_config([["s$", ""], ["ers$", "ERS"]])
        assert rules.apply("Users") == "User"

    def test_back_references(self):
        rules = RuleSet.from_config([["(x|ch)$", r"\1es"]])
        assert rules.apply("box") == "boxes"
        assert rules.apply("church") == "churches"

    def test_unmatched_optional_group(self):
        """Unmatched groups substitute as empty strings."""
        rules = RuleSet.from_config([["(?:([^f])fe|([lr])f)$", r"\1\2ves"]])
        assert rules.apply("knife") == "knives"
        assert rules.apply("wolf") == "wolves"

    def test_case_insensitive(self):
        rules = RuleSet.from_config([["y$", "ies"]])
        assert rules.apply("CITY") == "CITies"

    def test_no_match(self):
        rules = RuleSet.from_config([["y$", "ies"]])
        assert rules.apply("dog") is None

    def test_mapping_config(self):
        """Mappings are accepted and keep their insertion order."""
        rules = RuleSet.from_config({"s$": "", "$": "x"})
        assert len(rules) == 2
        assert rules.apply("dogs") == "dog"

    def test_invalid_pattern(self):
        with pytest.raises(ConfigurationError) as exc_info:
            RuleSet.from_config([["(unclosed$", ""]], "plural")
        assert "plural" in str(exc_info.value)

    def test_invalid_group_reference(self):
        with pytest.raises(ConfigurationError):
            RuleSet.from_config([["s$", r"\3"]])

    def test_malformed_pair(self):
        with pytest.raises(ConfigurationError):
            RuleSet.from_config([["s$"]])

    def test_not_a_sequence(self):
        with pytest.raises(ConfigurationError):
            RuleSet.from_config("s$")


class TestPluralizerConfig:
    """Tests for building a Pluralizer from config."""

    def test_from_config(self, simple_rules):
        pluralizer = Pluralizer.from_config(simple_rules)
        assert len(pluralizer.plural_rules) == 2
        assert len(pluralizer.singular_rules) == 1
        assert pluralizer.uncountable == frozenset({"traffic"})

    @pytest.mark.parametrize("section", ["irregular", "uncountable", "plural", "singular"])
    def test_missing_section(self, simple_rules, section):
        del simple_rules[section]
        with pytest.raises(ConfigurationError) as exc_info:
            Pluralizer.from_config(simple_rules)
        assert section in str(exc_info.value)

    def test_not_a_mapping(self):
        with pytest.raises(ConfigurationError):
            Pluralizer.from_config([["s$", ""]])

    def test_uncountable_must_be_list(self, simple_rules):
        simple_rules["uncountable"] = "traffic"
        with pytest.raises(ConfigurationError):
            Pluralizer.from_config(simple_rules)

    def test_irregular_pairs_list(self, simple_rules):
        """Irregulars may be given as a list of pairs."""
        simple_rules["irregular"] = [["child", "children"]]
        pluralizer = Pluralizer.from_config(simple_rules)
        assert pluralizer.plural("child") == "children"

    def test_immutable(self, simple_rules):
        pluralizer = Pluralizer.from_config(simple_rules)
        with pytest.raises(AttributeError):
            pluralizer.uncountable = frozenset()
        with pytest.raises(TypeError):
            pluralizer.irregular["ox"] = "oxen"


class TestPluralizer:
    """Tests for plural and singular inflection."""

    def test_simple_plural_and_singular(self, simple_rules):
        pluralizer = Pluralizer.from_config(simple_rules)
        assert pluralizer.plural("user") == "users"
        assert pluralizer.singular("users") == "user"
        assert pluralizer.plural("User") == "Users"
        assert pluralizer.singular("Users") == "User"

    def test_count(self, simple_rules):
        pluralizer = Pluralizer.from_config(simple_rules)
        assert pluralizer.plural("user", 1) == "user"
        assert pluralizer.plural("user", 2) == "users"
        assert pluralizer.plural("user", 0) == "users"

    def test_count_of_one_is_identity(self, english_rules):
        pluralizer = Pluralizer.from_config(english_rules)
        for word in ["user", "child", "traffic", "Box", "CITY", ""]:
            assert pluralizer.plural(word, 1) == word

    def test_existing_suffix(self, simple_rules):
        pluralizer = Pluralizer.from_config(simple_rules)
        assert pluralizer.plural("chassis", 2) == "chassis"

    def test_uncountable(self, english_rules):
        pluralizer = Pluralizer.from_config(english_rules)
        for word in ["traffic", "Traffic", "SHEEP", "information"]:
            assert pluralizer.plural(word, 5) == word
            assert pluralizer.singular(word) == word
            assert pluralizer.plural(pluralizer.plural(word)) == pluralizer.plural(word)
        assert pluralizer.is_uncountable("Sheep") is True
        assert pluralizer.is_uncountable("dog") is False

    def test_irregular(self, english_rules):
        pluralizer = Pluralizer.from_config(english_rules)
        assert pluralizer.plural("child") == "children"
        assert pluralizer.singular("children") == "child"
        assert pluralizer.plural("person") == "people"
        assert pluralizer.singular("people") == "person"

    def test_irregular_case(self, english_rules):
        pluralizer = Pluralizer.from_config(english_rules)
        assert pluralizer.plural("Child") == "Children"
        assert pluralizer.plural("CHILD") == "CHILDREN"
        assert pluralizer.singular("Teeth") == "Tooth"

    def test_irregular_matches_whole_word(self, english_rules):
        """Irregular entries do not apply to longer words ending in them."""
        pluralizer = Pluralizer.from_config(english_rules)
        assert pluralizer.plural("grandchild") == "grandchilds"

    def test_irregular_before_rules(self):
        pluralizer = Pluralizer.from_config({
            "irregular": {"ox": "oxen"},
            "uncountable": [],
            "plural": [["(x)$", r"\1es"]],
            "singular": [["es$", ""]],
        })
        assert pluralizer.plural("ox") == "oxen"
        assert pluralizer.plural("box") == "boxes"

    def test_rules(self, english_rules):
        pluralizer = Pluralizer.from_config(english_rules)
        assert pluralizer.plural("box") == "boxes"
        assert pluralizer.plural("city") == "cities"
        assert pluralizer.plural("day") == "days"
        assert pluralizer.singular("churches") == "church"
        assert pluralizer.singular("cities") == "city"

    def test_rule_case(self, english_rules):
        pluralizer = Pluralizer.from_config(english_rules)
        assert pluralizer.plural("CITY") == "CITIES"
        assert pluralizer.plural("Box") == "Boxes"
        assert pluralizer.singular("USERS") == "USER"

    def test_no_rule_matches(self):
        pluralizer = Pluralizer.from_config({
            "irregular": {},
            "uncountable": [],
            "plural": [["y$", "ies"]],
            "singular": [],
        })
        assert pluralizer.plural("dog") == "dog"
        assert pluralizer.singular("dogs") == "dogs"

    def test_multi_word_and_mixed_case_input(self, simple_rules):
        """Rules rewrite only the suffix, so the rest of the input keeps its case."""
        pluralizer = Pluralizer.from_config(simple_rules)
        assert pluralizer.plural("Big Dog") == "Big Dogs"
        assert pluralizer.plural("iPhone") == "iPhones"
