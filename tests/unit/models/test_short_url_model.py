"""Unit tests for the ShortURLModel dataclass in short_url_model.py.

Test coverage includes:

1. Model creation and URL validation
   - Accepts http:// and https:// targets in any letter case.
   - Rejects any other target with InvalidURLError.

2. Shortcode assignment
   - Non-blank custom codes are used verbatim, without format validation.
   - Blank or missing custom codes fall back to generated unique codes.

3. Immutability
   - target and shortcode cannot be reassigned.

4. Visit log and statistics
   - visit() appends the current UTC date (time of day truncated).
   - total_visits and daily_stats are derived from the visit log.
"""

from dataclasses import FrozenInstanceError
from datetime import date, datetime, timedelta, timezone

import pytest
from freezegun import freeze_time

from urlsimulator.exceptions import InvalidURLError
from urlsimulator.models import ShortURLModel
from urlsimulator.models import short_url_model


# -------------------------------------------------
# 1. Model creation and URL validation
# -------------------------------------------------


@pytest.mark.parametrize(
    'target',
    [
        'http://example.com',
        'https://example.com/article/123',
        'HTTPS://EXAMPLE.COM',
        'HtTp://example.com/?q=1',
    ],
)
def test_valid_targets_are_accepted(target):
    short_url = ShortURLModel.create(target)
    assert short_url.target == target
    assert short_url.visits == []


@pytest.mark.parametrize(
    'target',
    [
        '',
        'example.com',
        'ftp://example.com',
        'www.example.com',
        'https:/example.com',
        ' https://example.com',
        'mailto:someone@example.com',
    ],
)
def test_invalid_targets_are_rejected(target):
    with pytest.raises(InvalidURLError, match='Invalid URL'):
        ShortURLModel.create(target)


def test_direct_construction_validates_target():
    with pytest.raises(InvalidURLError):
        ShortURLModel(target='example.com', shortcode='abc123')


def test_invalid_url_error_is_value_error():
    with pytest.raises(ValueError):
        ShortURLModel.create('nope')


def test_invalid_target_skips_code_generation(monkeypatch):
    """Validation happens before a code is requested from the generator."""

    def _fail(*args, **kwargs):
        raise AssertionError('generator should not be called')

    monkeypatch.setattr(short_url_model, 'generate_unique_code', _fail)
    with pytest.raises(InvalidURLError):
        ShortURLModel.create('example.com')


# -------------------------------------------------
# 2. Shortcode assignment
# -------------------------------------------------


@pytest.mark.parametrize('custom_code', ['abc123', 'my-alias', 'ünïcode', 'x'])
def test_custom_code_is_used_verbatim(custom_code):
    short_url = ShortURLModel.create('https://example.com', custom_code=custom_code)
    assert short_url.shortcode == custom_code


def test_custom_code_is_not_checked_for_uniqueness():
    short_url = ShortURLModel.create('https://example.com', custom_code='taken', existing_codes={'taken'})
    assert short_url.shortcode == 'taken'


@pytest.mark.parametrize('custom_code', [None, '', '   '])
def test_blank_custom_code_generates_shortcode(custom_code):
    short_url = ShortURLModel.create('https://example.com', custom_code=custom_code)
    assert len(short_url.shortcode) == 6
    assert short_url.shortcode.isalnum()


def test_generated_code_avoids_existing_codes(monkeypatch):
    captured = {}

    def _generate(existing_codes, length, max_attempts):
        captured.update(existing_codes=existing_codes, length=length, max_attempts=max_attempts)
        return 'fresh1'

    monkeypatch.setattr(short_url_model, 'generate_unique_code', _generate)
    short_url = ShortURLModel.create('https://example.com', existing_codes={'old111'}, length=8, max_attempts=7)

    assert short_url.shortcode == 'fresh1'
    assert captured == {'existing_codes': {'old111'}, 'length': 8, 'max_attempts': 7}


# -------------------------------------------------
# 3. Immutability
# -------------------------------------------------


@pytest.mark.parametrize(
    'field, new_value',
    [
        ('target', 'https://example.com/article/456'),
        ('shortcode', 'def456'),
        ('visits', []),
    ],
)
def test_short_url_model_immutability(field, new_value):
    short_url = ShortURLModel(target='https://example.com/article/123', shortcode='abc123')

    with pytest.raises(FrozenInstanceError):
        setattr(short_url, field, new_value)


# -------------------------------------------------
# 4. Visit log and statistics
# -------------------------------------------------


@freeze_time('2025-10-19 23:59:59')
def test_visit_appends_utc_date():
    short_url = ShortURLModel(target='https://example.com', shortcode='abc123')
    short_url.visit()

    assert short_url.visits == [date(2025, 10, 19)]
    assert short_url.total_visits == 1


def test_visit_uses_utc_calendar_date():
    """At 04:30 on Oct 20 in UTC+05:00 it is still Oct 19 in UTC."""
    short_url = ShortURLModel(target='https://example.com', shortcode='abc123')
    with freeze_time(datetime(2025, 10, 20, 4, 30, tzinfo=timezone(timedelta(hours=5)))):
        short_url.visit()

    assert short_url.visits == [date(2025, 10, 19)]


def test_no_visits_yields_empty_stats():
    short_url = ShortURLModel(target='https://example.com', shortcode='abc123')
    assert short_url.total_visits == 0
    assert short_url.daily_stats == {}


def test_daily_stats_groups_visits_by_date():
    short_url = ShortURLModel(target='https://example.com', shortcode='abc123')
    with freeze_time('2025-10-20 08:00:00'):
        short_url.visit()
    with freeze_time('2025-10-19 10:00:00'):
        short_url.visit()
        short_url.visit()
    with freeze_time('2025-10-20 22:00:00'):
        short_url.visit()

    assert short_url.total_visits == 4
    assert short_url.daily_stats == {date(2025, 10, 19): 2, date(2025, 10, 20): 2}


def test_total_visits_tracks_visit_log():
    short_url = ShortURLModel(target='https://example.com', shortcode='abc123')
    for expected in range(1, 6):
        short_url.visit()
        assert short_url.total_visits == expected
