"""Tests for event date normalization."""
import pytest

from civiconnect.dates import normalize_event_date


class TestNormalizeEventDate:

    @pytest.mark.parametrize("raw, expected", [
        ("2026-04-22", "2026-04-22"),
        ("15-03-2025", "2025-03-15"),
        (" 2026-04-22 ", "2026-04-22"),
        ("2026-04-22T18:30:00", "2026-04-22T18:30:00"),
        ("2026-04-22T18:30:00+00:00", "2026-04-22T18:30:00+00:00"),
        ("2026-05-08T23:00:00-05:00", "2026-05-09T04:00:00+00:00"),
        ("2026-04-22T18:30:00Z", "2026-04-22T18:30:00+00:00"),
    ])
    def test_accepted_formats(self, raw, expected):
        assert normalize_event_date(raw) == expected

    @pytest.mark.parametrize("raw", ["2026-4-22", "22/04/2026", "2026-02-30", "31-02-2026", ""])
    def test_rejected_formats(self, raw):
        with pytest.raises(ValueError):
            normalize_event_date(raw)

    def test_normalized_dates_sort_chronologically(self):
        raw = ["12-08-2026", "2025-03-15", "2026-04-22T09:00:00", "22-04-2026"]
        normalized = sorted(normalize_event_date(value) for value in raw)
        assert normalized == ["2025-03-15", "2026-04-22", "2026-04-22T09:00:00", "2026-08-12"]

    def test_mixed_offsets_sort_chronologically(self):
        late = normalize_event_date("2026-05-08T23:00:00-05:00")  # 04:00 UTC on the 9th
        early = normalize_event_date("2026-05-09T01:00:00+00:00")
        assert sorted([late, early]) == [early, late]
