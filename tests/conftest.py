"""Shared test fixtures and dummy classes."""

from __future__ import annotations

import pytest

from simple_startup_log import probes
from simple_startup_log.application import SimpleApplication


class DummyApplication(SimpleApplication):
    """Dummy application recording how often it ran."""

    runs = 0

    def __init__(self) -> None:
        self.ran = False

    def run(self) -> None:
        DummyApplication.runs += 1
        self.ran = True

    def banner(self) -> str | None:
        return "=== dummy ==="


class FailingApplication(SimpleApplication):
    """Dummy application whose run() fails."""

    def run(self) -> None:
        raise RuntimeError("boom")


class PlainApplication:
    """Duck-typed application without a banner() method."""

    def __init__(self) -> None:
        self.ran = False

    def run(self) -> None:
        self.ran = True


@pytest.fixture
def fixed_environment(monkeypatch):
    """Pin every environment probe to a deterministic value."""
    monkeypatch.setattr(probes, "implementation_version", lambda entry: None)
    monkeypatch.setattr(probes, "runtime_version", lambda: "3.12.1")
    monkeypatch.setattr(probes, "resolve_host_name", lambda: "host1")
    monkeypatch.setattr(probes, "current_pid", lambda: "4321")
    monkeypatch.setattr(probes, "user_name", lambda: "alice")
    monkeypatch.setattr(probes, "working_directory", lambda: "/srv/app")
    monkeypatch.setattr(probes, "os_name", lambda: "Linux-6.1-x86_64")
    monkeypatch.setattr(probes, "process_uptime_seconds", lambda: None)
    return monkeypatch
