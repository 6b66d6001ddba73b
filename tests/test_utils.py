"""Тесты для утилит."""

import math
import pytest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from base.utils import format_value, get_tutor_system_prompt, parse_number


class TestParseNumber:
    """Тесты разбора ответа ученика."""
    
    @pytest.mark.parametrize("text,expected", [
        ("20", 20.0),
        ("20.3", 20.3),
        ("  0.55  ", 0.55),
        ("-3.5", -3.5),
        ("+2", 2.0),
        (".5", 0.5),
        ("20.", 20.0),
        ("1e2", 100.0),
        ("12.5 ohms", 12.5),
        ("1e", 1.0),
    ])
    def test_numbers(self, text, expected):
        assert parse_number(text) == expected
    
    @pytest.mark.parametrize("text", ["abc", "", "   ", "ohms 12", "-", ".", None])
    def test_not_a_number(self, text):
        assert math.isnan(parse_number(text))


class TestFormatting:
    """Тесты форматирования."""
    
    def test_format_value(self):
        assert format_value(20.0) == "20.00"
        assert format_value(0.4166666) == "0.42"
        assert format_value(1.23456, 3) == "1.235"
    
    def test_tutor_system_prompt(self):
        prompt = get_tutor_system_prompt()
        assert "tutor" in prompt
        assert "numbered steps" in prompt
