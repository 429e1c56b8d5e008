# tests/conftest.py
"""Shared fixtures for the load generator tests."""

import time

import pytest


class FakeClock:
    """Clock returning a scripted sequence of epoch seconds as nanoseconds."""

    def __init__(self, seconds, micros=0):
        self.values = [s * 1_000_000_000 + micros * 1000 for s in seconds]
        self.calls = 0

    def __call__(self):
        if self.calls >= len(self.values):
            raise OSError("clock exhausted")
        value = self.values[self.calls]
        self.calls += 1
        return value


class RecordingSender:
    """Sender keeping every event in memory."""

    def __init__(self):
        self.events = []
        self.closed = False

    def send(self, event):
        self.events.append(event)

    def close(self):
        self.closed = True


@pytest.fixture
def utc_localtime():
    return time.gmtime


@pytest.fixture
def recording_sender():
    return RecordingSender()


@pytest.fixture
def fake_clock():
    return FakeClock
