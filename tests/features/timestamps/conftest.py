"""BDD step definitions for GC log time stamp features."""

from dataclasses import dataclass
from datetime import datetime

import pytest
from pytest_bdd import given, parsers, then, when

from gctimeline.core.exceptions import DateTimeStampFormatError
from gctimeline.core.log_line import from_gc_log_line
from gctimeline.core.time import EMPTY_DATE_TIME_STAMP, DateTimeStamp


@dataclass
class TimestampScenarioContext:
    """State shared between the steps of one scenario."""

    line: str = ""
    stamp: DateTimeStamp | None = None
    error: DateTimeStampFormatError | None = None


@pytest.fixture
def ctx() -> TimestampScenarioContext:
    """Fresh scenario context for each test."""
    return TimestampScenarioContext()


@given(parsers.parse('the GC log line "{line}"'))
def given_gc_log_line(ctx: TimestampScenarioContext, line: str) -> None:
    """Store the raw line."""
    ctx.line = line


@when("the time stamp is extracted")
def when_time_stamp_extracted(ctx: TimestampScenarioContext) -> None:
    """Extract the stamp, capturing format errors."""
    try:
        ctx.stamp = from_gc_log_line(ctx.line)
    except DateTimeStampFormatError as e:
        ctx.error = e


@then(parsers.parse('the date stamp is "{expected}"'))
def then_date_stamp_is(ctx: TimestampScenarioContext, expected: str) -> None:
    """The wall clock matches the expected ISO 8601 date time."""
    expected_date_time = datetime.fromisoformat(expected)
    assert ctx.stamp is not None
    assert ctx.stamp.date_time == expected_date_time
    assert ctx.stamp.date_time.utcoffset() == expected_date_time.utcoffset()


@then(parsers.parse("the time stamp is {seconds:g}"))
def then_time_stamp_is(ctx: TimestampScenarioContext, seconds: float) -> None:
    """The scalar time stamp matches."""
    assert ctx.stamp is not None
    assert ctx.stamp.time_stamp == pytest.approx(seconds)


@then("there is no date stamp")
def then_no_date_stamp(ctx: TimestampScenarioContext) -> None:
    """No wall clock was found."""
    assert ctx.stamp is not None
    assert not ctx.stamp.has_date_stamp()


@then("the result is the empty time stamp")
def then_empty_time_stamp(ctx: TimestampScenarioContext) -> None:
    """The empty value was returned."""
    assert ctx.stamp is EMPTY_DATE_TIME_STAMP
    assert not ctx.stamp.has_time_stamp()


@then("a format error is raised")
def then_format_error(ctx: TimestampScenarioContext) -> None:
    """Parsing failed loudly."""
    assert ctx.stamp is None
    assert ctx.error is not None
