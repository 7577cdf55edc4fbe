import pytest

from autowait import ElementResolver, WaitSession, WaitSettings

from fakes import FakeClock, FakeDriver


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def driver():
    return FakeDriver()


@pytest.fixture
def settings():
    return WaitSettings(timeout=1.0, poll_interval=0.2)


@pytest.fixture
def session(driver, settings, clock):
    return WaitSession(driver, settings, clock=clock, sleep=clock.sleep)


@pytest.fixture
def resolver(session):
    return ElementResolver(session)
