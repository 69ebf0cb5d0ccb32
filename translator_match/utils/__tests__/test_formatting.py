"""
顯示格式工具測試模組
Test module for display formatting utilities
"""

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).parent.parent.parent.parent))

from translator_match.utils.formatting import (
    format_complexity,
    format_estimated_time,
    format_estimated_time_compact,
)


class TestFormatComplexity:
    """測試複雜度格式化"""

    @pytest.mark.parametrize("score, expected", [
        (0.5, "0.50 (Simple)"),
        (0.6, "0.60 (Moderate)"),
        (0.75, "0.75 (Moderate)"),
        (0.9, "0.90 (Complex)"),
    ])
    def test_format_complexity(self, score, expected):
        assert format_complexity(score) == expected

    def test_out_of_range_is_clamped(self):
        assert format_complexity(1.5) == "1.00 (Complex)"
        assert format_complexity(-0.2) == "0.00 (Simple)"


class TestFormatEstimatedTime:
    """測試預估時間格式化"""

    @pytest.mark.parametrize("hours, expected", [
        (0, "0 minutes"),
        (-1.0, "0 minutes"),
        (0.5, "30 minutes"),
        (1 / 60, "1 minute"),
        (1.0, "1 hour"),
        (2.5, "2 hours 30 minutes"),
        (4.8, "4 hours 48 minutes"),
        (1.999, "2 hours"),
    ])
    def test_format_estimated_time(self, hours, expected):
        assert format_estimated_time(hours) == expected

    @pytest.mark.parametrize("hours, expected", [
        (0, "0m"),
        (0.25, "15m"),
        (3.0, "3h"),
        (2.5, "2h 30m"),
        (1.999, "2h"),
    ])
    def test_format_estimated_time_compact(self, hours, expected):
        assert format_estimated_time_compact(hours) == expected
