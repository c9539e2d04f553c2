"""Tests for the application lifecycle runner."""

import logging

import pytest

from conftest import DummyApplication, FailingApplication, PlainApplication
from simple_startup_log import application, config
from simple_startup_log.application import ApplicationRunner, LifecycleState, run_app


@pytest.fixture
def startup_log(caplog):
    caplog.set_level(logging.INFO, logger="tests.app")
    return logging.getLogger("tests.app")


def _messages(caplog):
    return [r.getMessage() for r in caplog.records if r.name == "tests.app"]


def test_run_app_logs_and_prints_banner(fixed_environment, startup_log, caplog, capsys):
    fixed_environment.setattr(config, "PRINT_BANNER", True)

    app = run_app(
        DummyApplication,
        log=startup_log,
        in_test_harness=True,
        configure_logging=False,
    )

    assert isinstance(app, DummyApplication)
    assert app.ran
    messages = _messages(caplog)
    assert len(messages) == 2
    assert messages[0] == (
        "Starting DummyApplication using Python 3.12.1 on host1 with PID 4321 "
        "(started by alice in /srv/app)"
    )
    assert messages[1].startswith("Started DummyApplication in ")
    assert messages[1].endswith(" seconds")
    assert capsys.readouterr().out == "=== dummy ===\n"


def test_runner_reaches_reported_state(fixed_environment, startup_log):
    runner = ApplicationRunner(
        DummyApplication,
        log=startup_log,
        in_test_harness=True,
        configure_logging=False,
        print_banner=False,
    )
    assert runner.state is LifecycleState.NOT_STARTED

    runner.run()

    assert runner.state is LifecycleState.REPORTED
    assert runner.application.ran


def test_runner_cannot_run_twice(fixed_environment, startup_log):
    runner = ApplicationRunner(
        DummyApplication, log=startup_log, configure_logging=False, print_banner=False
    )
    runner.run()
    with pytest.raises(RuntimeError):
        runner.run()


def test_run_failure_propagates_without_started(fixed_environment, startup_log, caplog):
    runner = ApplicationRunner(
        FailingApplication, log=startup_log, in_test_harness=True, configure_logging=False
    )

    with pytest.raises(RuntimeError, match="boom"):
        runner.run()

    messages = _messages(caplog)
    assert len(messages) == 1
    assert messages[0].startswith("Starting FailingApplication ")
    assert runner.state is LifecycleState.RUNNING


def test_factory_failure_propagates(fixed_environment, startup_log, caplog):
    error = ValueError("cannot build")

    def factory():
        raise error

    with pytest.raises(ValueError) as excinfo:
        run_app(factory, log=startup_log, configure_logging=False)

    assert excinfo.value is error
    assert not any(m.startswith("Started") for m in _messages(caplog))


def test_closure_factory_with_explicit_entry(fixed_environment, startup_log, caplog, capsys):
    app = PlainApplication()

    result = run_app(
        lambda: app,
        entry=PlainApplication,
        log=startup_log,
        in_test_harness=True,
        configure_logging=False,
    )

    assert result is app
    assert app.ran
    assert _messages(caplog)[0].startswith("Starting PlainApplication ")
    assert capsys.readouterr().out == ""


def test_empty_banner_is_not_printed(fixed_environment, startup_log, capsys):
    class Quiet(DummyApplication):
        def banner(self):
            return ""

    ApplicationRunner(
        Quiet, log=startup_log, configure_logging=False, print_banner=True
    ).run()

    assert capsys.readouterr().out == ""


def test_pid_is_passed_to_logging_setup(fixed_environment, startup_log, caplog):
    calls = []
    fixed_environment.setattr(application, "setup_logging", lambda pid=None: calls.append(pid))

    run_app(DummyApplication, log=startup_log, in_test_harness=True)

    assert calls == ["4321"]
    assert " with PID 4321 " in _messages(caplog)[0]


def test_default_logger_is_named_after_entry_module(fixed_environment, caplog):
    caplog.set_level(logging.INFO)

    ApplicationRunner(
        DummyApplication, in_test_harness=True, configure_logging=False, print_banner=False
    ).run()

    names = {r.name for r in caplog.records if r.getMessage().startswith("Start")}
    assert names == {DummyApplication.__module__}


def test_closure_factory_without_entry_reports_application(fixed_environment, startup_log, caplog):
    run_app(
        lambda: PlainApplication(),
        log=startup_log,
        in_test_harness=True,
        configure_logging=False,
    )

    messages = _messages(caplog)
    assert messages[0].startswith("Starting application using Python ")
    assert messages[1].startswith("Started application in ")
