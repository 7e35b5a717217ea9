"""Tests for week rules and numbering selection."""

import pytest
from fluentdt.errors import WeekRuleError
from fluentdt.week_rule import MONDAY, SUNDAY, WeekNumbering, WeekRule

def test_presets():
    """Test the ISO and US presets."""
    assert WeekRule.ISO_8601 == WeekRule(MONDAY, 4)
    assert WeekRule.US == WeekRule(SUNDAY, 1)
    assert WeekRule() == WeekRule.ISO_8601

def test_invalid_rule():
    """Test out-of-range rule values."""
    with pytest.raises(WeekRuleError):
        WeekRule(7, 4)
    with pytest.raises(WeekRuleError):
        WeekRule(MONDAY, 0)
    with pytest.raises(WeekRuleError):
        WeekRule(MONDAY, 8)

def test_from_locale():
    """Test rules derived from CLDR locale data."""
    assert WeekRule.from_locale('de_DE') == WeekRule.ISO_8601
    assert WeekRule.from_locale('en_US') == WeekRule.US

def test_from_locale_unknown():
    """Test unknown and malformed locale names."""
    with pytest.raises(WeekRuleError):
        WeekRule.from_locale('xx_YY')
    with pytest.raises(WeekRuleError):
        WeekRule.from_locale('not a locale')

def test_numbering_from_string():
    """Test parsing numbering names."""
    assert WeekNumbering.from_string('german') is WeekNumbering.GERMAN
    assert WeekNumbering.from_string('International') is WeekNumbering.INTERNATIONAL
    with pytest.raises(WeekRuleError):
        WeekNumbering.from_string('french')
