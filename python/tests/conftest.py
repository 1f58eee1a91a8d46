"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from stringkit.config import DictConfigProvider
from stringkit.toolkit import StringToolkit


@pytest.fixture
def simple_rules():
    """Minimal rule bundle: regular -s plurals and one uncountable word."""
    return {
        "irregular": {},
        "uncountable": ["traffic"],
        "plural": [
            ["s$", "s"],
            ["$", "s"],
        ],
        "singular": [
            ["s$", ""],
        ],
    }


@pytest.fixture
def english_rules():
    """Small English rule bundle with irregulars."""
    return {
        "irregular": {
            "child": "children",
            "person": "people",
            "tooth": "teeth",
        },
        "uncountable": ["traffic", "sheep", "information"],
        "plural": [
            ["(x|ch|ss|sh)$", r"\1es"],
            ["([^aeiouy]|qu)y$", r"\1ies"],
            ["s$", "s"],
            ["$", "s"],
        ],
        "singular": [
            ["(x|ch|ss|sh)es$", r"\1"],
            ["([^aeiouy]|qu)ies$", r"\1y"],
            ["s$", ""],
        ],
    }


@pytest.fixture
def config_values(simple_rules):
    """Configuration values as a host would provide them."""
    return {
        "encoding": "UTF-8",
        "ascii": {},
        "strings": simple_rules,
    }


@pytest.fixture
def provider(config_values):
    return DictConfigProvider(config_values)


@pytest.fixture
def toolkit(provider):
    return StringToolkit(provider)


@pytest.fixture
def default_toolkit(monkeypatch, tmp_path):
    """Toolkit on the bundled defaults, isolated from any stringkit.json."""
    monkeypatch.delenv("STRINGKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return StringToolkit()
