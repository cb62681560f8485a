#!/usr/bin/env python3
"""
Unit tests for cron expression validation, explanation and next run times.
"""

import os
import sys
from datetime import datetime

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))

from toolkit.cron_parser import (
    COMMON_EXPRESSIONS, DAY_OF_MONTH, DAY_OF_WEEK, HOUR, MINUTE, MONTH, SECOND, CronSchedule,
    analyze_cron, expand_field, explain_field, next_run_times, parse_cron, split_expression
)
from toolkit.exceptions import CronExpressionError

# Monday
START = datetime(2024, 1, 1, 0, 0, 0)


class TestValidation:

    def test_field_count(self):
        with pytest.raises(CronExpressionError, match='Expected 5 fields, got 4'):
            split_expression('* * * *')

    def test_field_count_with_seconds(self):
        with pytest.raises(CronExpressionError, match='Expected 6 fields, got 5'):
            split_expression('* * * * *', include_seconds=True)

    @pytest.mark.parametrize('value,expected', [
        ('*', set(range(0, 60))),
        ('*/15', {0, 15, 30, 45}),
        ('5', {5}),
        ('10-12', {10, 11, 12}),
        ('0-30/10', {0, 10, 20, 30}),
        ('1,2,59', {1, 2, 59}),
        ('50/5', {50, 55}),
    ])
    def test_expand_minute(self, value, expected):
        assert expand_field(value, MINUTE) == expected

    @pytest.mark.parametrize('value', ['60', '0-60', '1,99'])
    def test_out_of_range(self, value):
        with pytest.raises(CronExpressionError, match='between 0 and 59'):
            expand_field(value, MINUTE)

    @pytest.mark.parametrize('value', ['a', '1-2-3', '*/x', 'MON', '1,*'])
    def test_bad_syntax(self, value):
        with pytest.raises(CronExpressionError, match='Invalid Minute field'):
            expand_field(value, MINUTE)

    def test_zero_step(self):
        with pytest.raises(CronExpressionError, match='step must be at least 1'):
            expand_field('*/0', MINUTE)

    def test_reversed_range(self):
        with pytest.raises(CronExpressionError, match='Invalid Hour range: 5-1'):
            expand_field('5-1', HOUR)

    def test_day_of_week_range(self):
        with pytest.raises(CronExpressionError):
            expand_field('7', DAY_OF_WEEK)


class TestExplanation:

    @pytest.mark.parametrize('value,spec,expected', [
        ('*', MINUTE, 'Minute: Every minute'),
        ('*/15', MINUTE, 'Minute: Every 15 minutes'),
        ('*/1', MINUTE, 'Minute: Every 1 minute'),
        ('1-3', MONTH, 'Month: from January to March'),
        ('9-17/2', HOUR, 'Hour: Every 2 hours from 9 to 17'),
        ('1,5', DAY_OF_WEEK, 'Day of week: At Monday, Friday'),
        ('5/15', MINUTE, 'Minute: Every 15 minutes starting at 5'),
        ('9', HOUR, 'Hour: At 9'),
        ('*', DAY_OF_WEEK, 'Day of week: Every day of week'),
        ('*', DAY_OF_MONTH, 'Day of month: Every day of month'),
        ('*', SECOND, 'Second: Every second'),
    ])
    def test_explain_field(self, value, spec, expected):
        assert explain_field(value, spec) == expected

    def test_explanation_has_one_line_per_field(self):
        info = parse_cron('0 12 * * 1-5', start=START)
        assert info.explanation.split('\n') == [
            'Minute: At 0',
            'Hour: At 12',
            'Day of month: Every day of month',
            'Month: Every month',
            'Day of week: from Monday to Friday',
        ]


class TestNextRuns:

    def test_every_minute(self):
        runs = next_run_times('* * * * *', count=3, start=START)
        assert runs == [datetime(2024, 1, 1, 0, 1), datetime(2024, 1, 1, 0, 2), datetime(2024, 1, 1, 0, 3)]

    def test_runs_are_strictly_after_start(self):
        runs = next_run_times('0 0 * * *', count=1, start=START)
        assert runs == [datetime(2024, 1, 2)]

    def test_weekdays_only(self):
        runs = next_run_times('0 10 * * 1-5', count=6, start=datetime(2024, 1, 4, 12, 0))
        assert [run.weekday() for run in runs] == [4, 0, 1, 2, 3, 4]
        assert all(run.hour == 10 and run.minute == 0 for run in runs)

    def test_sunday_is_zero(self):
        runs = next_run_times('0 0 * * 0', count=1, start=START)
        assert runs == [datetime(2024, 1, 7)]

    def test_day_of_month_or_day_of_week(self):
        # both restricted: the 15th or any Friday
        runs = next_run_times('0 0 15 * 5', count=3, start=START)
        assert runs == [datetime(2024, 1, 5), datetime(2024, 1, 12), datetime(2024, 1, 15)]

    def test_quarterly(self):
        runs = next_run_times('0 0 1 */3 *', count=4, start=START)
        assert [run.month for run in runs] == [4, 7, 10, 1]
        assert runs[-1].year == 2025

    def test_leap_day(self):
        runs = next_run_times('0 0 29 2 *', count=2, start=START)
        assert runs == [datetime(2024, 2, 29), datetime(2028, 2, 29)]

    def test_impossible_date_yields_nothing(self):
        assert next_run_times('0 0 31 2 *', start=START) == []

    def test_seconds_field(self):
        runs = next_run_times('*/20 * * * * *', include_seconds=True, count=3, start=START)
        assert runs == [datetime(2024, 1, 1, 0, 0, 20), datetime(2024, 1, 1, 0, 0, 40), datetime(2024, 1, 1, 0, 1, 0)]

    def test_count_is_capped(self):
        assert len(next_run_times('* * * * *', count=500, start=START)) == 50

    def test_day_matches_without_restriction(self):
        schedule = CronSchedule('0 0 * * *'.split())
        assert schedule.day_matches(START)


class TestParseCron:

    def test_to_dict(self):
        result = parse_cron('*/30 * * * *', count=2, start=START).to_dict()
        assert result['valid'] is True
        assert result['schedule'] == ['*/30', '*', '*', '*', '*']
        assert result['next_dates'] == ['2024-01-01T00:30:00', '2024-01-01T01:00:00']
        assert result['error'] is None

    def test_analyze_reports_errors(self):
        info = analyze_cron('61 * * * *')
        assert info.is_valid is False
        assert 'between 0 and 59' in info.error

    def test_common_expressions_are_valid(self):
        for entry in COMMON_EXPRESSIONS:
            assert analyze_cron(entry['expression'], start=START).is_valid
