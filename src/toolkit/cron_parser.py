"""
Cron expression parser and explainer.

Supports classic 5 field expressions (minute hour day-of-month month
day-of-week) and 6 field expressions with a leading seconds field. Each field
accepts ``*``, ``n``, ``*/step``, ``n/step``, ``a-b``, ``a-b/step`` or a
comma separated list of numbers. Day of week runs 0-6 with 0 = Sunday.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Set

from .exceptions import CronExpressionError

logger = logging.getLogger(__name__)

MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
]
DAY_NAMES = ['Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday']

DEFAULT_RUN_COUNT = 5
MAX_RUN_COUNT = 50
# Feb 29 can be up to 8 years apart (e.g. 2096 -> 2104)
MAX_YEARS_AHEAD = 8

_FIELD_GRAMMAR = re.compile(r'^(\*|\d+)(?:/\d+)?$|^(\d+-\d+)(?:/\d+)?$|^(\d+(?:,\d+)*)$')


@dataclass(frozen=True)
class FieldSpec:
    key: str
    label: str
    minimum: int
    maximum: int
    unit: str
    plural: str
    names: Optional[List[str]] = None

    def display(self, value: int):
        if self.names:
            return self.names[value - self.minimum]
        return value


SECOND = FieldSpec('second', 'Second', 0, 59, 'second', 'seconds')
MINUTE = FieldSpec('minute', 'Minute', 0, 59, 'minute', 'minutes')
HOUR = FieldSpec('hour', 'Hour', 0, 23, 'hour', 'hours')
DAY_OF_MONTH = FieldSpec('day_of_month', 'Day of month', 1, 31, 'day', 'days')
MONTH = FieldSpec('month', 'Month', 1, 12, 'month', 'months', MONTH_NAMES)
DAY_OF_WEEK = FieldSpec('day_of_week', 'Day of week', 0, 6, 'day of the week', 'days of the week', DAY_NAMES)

FIVE_FIELDS = [MINUTE, HOUR, DAY_OF_MONTH, MONTH, DAY_OF_WEEK]
SIX_FIELDS = [SECOND] + FIVE_FIELDS

COMMON_EXPRESSIONS = [
    {'name': 'Every minute', 'expression': '* * * * *',
     'description': 'Run a task every minute'},
    {'name': 'Every hour', 'expression': '0 * * * *',
     'description': 'Run a task at the beginning of every hour'},
    {'name': 'Every day at midnight', 'expression': '0 0 * * *',
     'description': 'Run a task at 12:00 AM every day'},
    {'name': 'Every day at noon', 'expression': '0 12 * * *',
     'description': 'Run a task at 12:00 PM every day'},
    {'name': 'Every Sunday at midnight', 'expression': '0 0 * * 0',
     'description': 'Run a task at 12:00 AM every Sunday'},
    {'name': 'Every Monday to Friday at 10:00 AM', 'expression': '0 10 * * 1-5',
     'description': 'Run a task at 10:00 AM every weekday'},
    {'name': 'Every 30 minutes', 'expression': '*/30 * * * *',
     'description': 'Run a task every 30 minutes'},
    {'name': 'Every month on the 1st at midnight', 'expression': '0 0 1 * *',
     'description': 'Run a task at 12:00 AM on the 1st of every month'},
    {'name': 'Every quarter on the 1st at midnight', 'expression': '0 0 1 */3 *',
     'description': 'Run a task at 12:00 AM on the 1st of every 3rd month'},
    {'name': 'Every year on January 1st at midnight', 'expression': '0 0 1 1 *',
     'description': 'Run a task at 12:00 AM on January 1st'},
]


@dataclass
class CronInfo:
    """Parsed cron expression with explanation and upcoming runs."""
    is_valid: bool
    schedule: List[str] = field(default_factory=list)
    explanation: str = ''
    next_dates: List[datetime] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            'valid': self.is_valid,
            'schedule': self.schedule,
            'explanation': self.explanation,
            'next_dates': [d.isoformat() for d in self.next_dates],
            'error': self.error,
        }


def split_expression(expression: str, include_seconds: bool = False) -> List[str]:
    """Split an expression into fields, checking the field count."""
    parts = expression.strip().split()
    expected = 6 if include_seconds else 5
    if len(parts) != expected:
        raise CronExpressionError(
            f'Invalid cron expression format. Expected {expected} fields, got {len(parts)}.'
        )
    return parts


def _step(value: str, spec: FieldSpec) -> int:
    step = int(value)
    if step < 1:
        raise CronExpressionError(f'{spec.label} step must be at least 1')
    return step


def expand_field(value: str, spec: FieldSpec) -> Set[int]:
    """Validate a field and return the set of values it selects."""
    if not value:
        raise CronExpressionError(f'{spec.label} field cannot be empty')
    if not _FIELD_GRAMMAR.match(value):
        raise CronExpressionError(f'Invalid {spec.label} field: {value}')

    base, _, step_text = value.partition('/')
    step = _step(step_text, spec) if step_text else 1

    if base == '*':
        start, end = spec.minimum, spec.maximum
        numbers = []
    elif '-' in base:
        start, end = (int(n) for n in base.split('-'))
        numbers = [start, end]
        if start > end:
            raise CronExpressionError(f'Invalid {spec.label} range: {base}')
    elif ',' in base:
        numbers = [int(n) for n in base.split(',')]
        start = end = None
    else:
        start = int(base)
        # "n/step" runs from n to the end of the field
        end = spec.maximum if step_text else start
        numbers = [start]

    if any(n < spec.minimum or n > spec.maximum for n in numbers):
        raise CronExpressionError(
            f'{spec.label} values must be between {spec.minimum} and {spec.maximum}'
        )

    if start is None:
        return set(numbers)
    return set(range(start, end + 1, step))


def explain_field(value: str, spec: FieldSpec) -> str:
    """Human readable phrase for a single field."""
    label = spec.label
    base, _, step_text = value.partition('/')

    def every(step: int) -> str:
        return f'Every {step} {spec.plural if step != 1 else spec.unit}'

    if value == '*':
        return f'{label}: Every {label.lower()}'

    if base == '*':
        return f'{label}: {every(int(step_text))}'

    if '-' in base:
        start, end = (int(n) for n in base.split('-'))
        range_text = f'from {spec.display(start)} to {spec.display(end)}'
        if step_text:
            return f'{label}: {every(int(step_text))} {range_text}'
        return f'{label}: {range_text}'

    if ',' in base:
        values = ', '.join(str(spec.display(int(n))) for n in base.split(','))
        return f'{label}: At {values}'

    if step_text:
        return f'{label}: {every(int(step_text))} starting at {spec.display(int(base))}'

    return f'{label}: At {spec.display(int(base))}'


def explain(parts: List[str], include_seconds: bool = False) -> str:
    """Explain every field, one line per field."""
    specs = SIX_FIELDS if include_seconds else FIVE_FIELDS
    return '\n'.join(explain_field(part, spec) for part, spec in zip(parts, specs))


class CronSchedule:
    """Expanded field sets of a validated expression."""

    def __init__(self, parts: List[str], include_seconds: bool = False):
        specs = SIX_FIELDS if include_seconds else FIVE_FIELDS
        values = {spec.key: expand_field(part, spec) for part, spec in zip(parts, specs)}
        raw = dict(zip((spec.key for spec in specs), parts))

        self.include_seconds = include_seconds
        self.seconds = values.get('second', {0})
        self.minutes = values['minute']
        self.hours = values['hour']
        self.days = values['day_of_month']
        self.months = values['month']
        self.weekdays = values['day_of_week']
        self.dom_restricted = raw['day_of_month'] != '*'
        self.dow_restricted = raw['day_of_week'] != '*'

    def day_matches(self, moment: datetime) -> bool:
        # Python: Monday=0, cron: Sunday=0
        dom = moment.day in self.days
        dow = (moment.weekday() + 1) % 7 in self.weekdays
        if self.dom_restricted and self.dow_restricted:
            return dom or dow
        return dom and dow

    def next_after(self, after: datetime) -> Optional[datetime]:
        """First matching moment strictly after ``after``, or None."""
        if self.include_seconds:
            moment = after.replace(microsecond=0) + timedelta(seconds=1)
        else:
            moment = after.replace(second=0, microsecond=0) + timedelta(minutes=1)
        limit_year = after.year + MAX_YEARS_AHEAD

        while moment.year <= limit_year:
            if moment.month not in self.months:
                if moment.month == 12:
                    moment = moment.replace(year=moment.year + 1, month=1, day=1, hour=0, minute=0, second=0)
                else:
                    moment = moment.replace(month=moment.month + 1, day=1, hour=0, minute=0, second=0)
                continue
            if not self.day_matches(moment):
                moment = (moment + timedelta(days=1)).replace(hour=0, minute=0, second=0)
                continue
            if moment.hour not in self.hours:
                moment = (moment + timedelta(hours=1)).replace(minute=0, second=0)
                continue
            if moment.minute not in self.minutes:
                moment = (moment + timedelta(minutes=1)).replace(second=0)
                continue
            if moment.second not in self.seconds:
                moment = moment + timedelta(seconds=1)
                continue
            return moment

        return None

    def next_runs(self, count: int = DEFAULT_RUN_COUNT, start: Optional[datetime] = None) -> List[datetime]:
        """The next ``count`` run times after ``start`` (default: now)."""
        moment = start or datetime.now()
        runs = []
        for _ in range(max(0, min(count, MAX_RUN_COUNT))):
            moment = self.next_after(moment)
            if moment is None:
                logger.debug('No further occurrences within %d years', MAX_YEARS_AHEAD)
                break
            runs.append(moment)
        return runs


def parse_cron(expression: str, include_seconds: bool = False, count: int = DEFAULT_RUN_COUNT,
               start: Optional[datetime] = None) -> CronInfo:
    """Validate, explain and project an expression. Raises CronExpressionError."""
    parts = split_expression(expression, include_seconds)
    schedule = CronSchedule(parts, include_seconds)
    return CronInfo(
        is_valid=True,
        schedule=parts,
        explanation=explain(parts, include_seconds),
        next_dates=schedule.next_runs(count, start),
    )


def analyze_cron(expression: str, include_seconds: bool = False, count: int = DEFAULT_RUN_COUNT,
                 start: Optional[datetime] = None) -> CronInfo:
    """Like parse_cron, but reports errors in the result instead of raising."""
    try:
        return parse_cron(expression, include_seconds, count, start)
    except CronExpressionError as e:
        return CronInfo(is_valid=False, error=str(e))


def next_run_times(expression: str, include_seconds: bool = False, count: int = DEFAULT_RUN_COUNT,
                   start: Optional[datetime] = None) -> List[datetime]:
    """Upcoming run times of an expression."""
    parts = split_expression(expression, include_seconds)
    return CronSchedule(parts, include_seconds).next_runs(count, start)
