from datetime import datetime, timedelta, timezone

import pytest

from testscribe.clock import Clock
from testscribe.reporting import (
    Failure,
    OperationReport,
    OperationType,
    StepReport,
    SuiteReport,
    TestReport,
)

EPOCH = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock(Clock):
    """Clock that advances by a fixed step on every call to now()."""

    def __init__(self, start: datetime = EPOCH, step: timedelta = timedelta(milliseconds=250)):
        self.current = start
        self.step = step

    def now(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


@pytest.fixture
def epoch() -> datetime:
    return EPOCH


@pytest.fixture
def make_clock():
    """Factory for clocks with a custom tick."""
    return FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def smoke_suite(clock: FakeClock) -> SuiteReport:
    """The 'smoke' suite: one test, one step, one apply operation, closed."""
    suite = SuiteReport("smoke", clock=clock)
    test = TestReport("t1", False, "ns1", False, False, clock=clock)
    step = StepReport("step1")
    op = OperationReport("op1", OperationType.APPLY, clock=clock)
    op.mark_end()
    step.add_operation(op)
    test.add_step(step)
    test.mark_end()
    suite.add_test(test)
    suite.close()
    return suite


@pytest.fixture
def failed_suite(clock: FakeClock) -> SuiteReport:
    """Two tests, the second one failed, with a message on its operation."""
    suite = SuiteReport("regression", clock=clock)

    ok = TestReport("ok", concurrent=True, clock=clock)
    ok.mark_end()
    suite.add_test(ok)

    broken = TestReport("broken", namespace="ns2", skip_delete=True, clock=clock)
    step = StepReport("check")
    op = OperationReport("assert-pod", OperationType.ASSERT, clock=clock)
    op.result = "fail"
    op.message = "pod not ready"
    op.mark_end()
    step.add_operation(op)
    broken.add_step(step)
    broken.failure = Failure(message="boom", type="AssertionError")
    broken.mark_end()
    suite.add_test(broken)

    suite.close()
    return suite
