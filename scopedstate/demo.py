"""Scenario runner for scoped state handles.

Builds handles and closure helpers, exercises them against fixed inputs and
prints one line per scenario. Configuration comes from the environment
(see scopedstate.utils.config).
"""

import logging
import sys
from typing import List, Optional

from scopedstate.closures import capture_each, create_greeting, create_id_generator, memoize
from scopedstate.factory import create, create_from_config
from scopedstate.models import ScenarioReport
from scopedstate.utils.config import ConfigurationError, ScopedStateConfig, configure_logging
from scopedstate.utils.logging import StateLogger

logger = logging.getLogger(__name__)


def _factorial(n: int) -> int:
    if n <= 1:
        return 1
    return n * _factorial(n - 1)


def run_counter_scenarios(report: ScenarioReport) -> None:
    """Counter scenarios: single increment, repeated increments, independence, privacy."""
    counter = create()
    counter.increment()
    report.add("counter.single_increment", 1, counter.get())

    counter = create()
    for _ in range(3):
        counter.increment()
    report.add("counter.three_increments", 3, counter.get())

    first, second = create(), create()
    first.increment()
    report.add("counter.independent_first", 1, first.get())
    report.add("counter.independent_second", 0, second.get())

    report.add("counter.private_count", None, getattr(counter, "count", None))


def run_configured_counter(report: ScenarioReport, config: ScopedStateConfig) -> None:
    counter = create_from_config(config)
    counter.increment()
    report.add("counter.configured", config.initial_value + 1, counter.get())


def run_id_generator_scenarios(report: ScenarioReport, config: ScopedStateConfig) -> None:
    generate_id = create_id_generator(config.id_start)
    issued = [generate_id() for _ in range(3)]
    start = config.id_start
    report.add("ids.sequential", [start + 1, start + 2, start + 3], issued)

    another = create_id_generator(config.id_start)
    report.add("ids.independent", [start + 1, start + 2], [another(), another()])


def run_capture_scenario(report: ScenarioReport, config: ScopedStateConfig) -> None:
    callbacks = capture_each(range(config.capture_count), lambda index: index)
    report.add(
        "capture.per_iteration",
        list(range(config.capture_count)),
        [callback() for callback in callbacks],
    )


def run_memoize_scenario(report: ScenarioReport) -> None:
    calls: List[int] = []

    def counted_factorial(n: int) -> int:
        calls.append(n)
        return _factorial(n)

    memoized = memoize(counted_factorial)
    results = [memoized(n) for n in (5, 6, 5, 6, 7)]
    report.add("memoize.results", [120, 720, 120, 720, 5040], results)
    report.add("memoize.computed_once", [5, 6, 7], calls)


def run_greeting_scenario(report: ScenarioReport) -> None:
    say_hello = create_greeting("Hello")
    say_goodbye = create_greeting("Goodbye")
    report.add(
        "greeting.bound",
        ["Hello, Alice!", "Hello, Bob!", "Goodbye, Alice!"],
        [say_hello("Alice"), say_hello("Bob"), say_goodbye("Alice")],
    )


def run_scenarios(config: Optional[ScopedStateConfig] = None) -> ScenarioReport:
    """Run every scenario and return the collected results.

    Args:
        config: Configuration to use. Defaults to ScopedStateConfig().

    Returns:
        ScenarioReport with one result per checked value
    """
    config = config or ScopedStateConfig()
    state_logger = StateLogger(run_name="demo")
    report = ScenarioReport()

    state_logger.log_run_start()

    groups = [
        ("counter", lambda: run_counter_scenarios(report)),
        ("counter.configured", lambda: run_configured_counter(report, config)),
        ("ids", lambda: run_id_generator_scenarios(report, config)),
        ("capture", lambda: run_capture_scenario(report, config)),
        ("memoize", lambda: run_memoize_scenario(report)),
        ("greeting", lambda: run_greeting_scenario(report)),
    ]
    for name, run_group in groups:
        try:
            run_group()
        except Exception as e:
            # Record the failure and continue with the remaining groups
            state_logger.log_error(name, e)
            report.add(name, "completed", f"{type(e).__name__}: {e}")

    for result in report.results:
        state_logger.log_scenario_result(
            result.name, result.expected, result.actual, result.passed
        )

    state_logger.log_run_complete(report.total_count(), report.passed_count())
    report.log_entries = state_logger.get_log_entries()
    return report


def main() -> int:
    """Console entry point.

    Returns:
        0 when every scenario passes, 1 on any failure, 2 on configuration error
    """
    try:
        config = ScopedStateConfig.from_environment()
    except ConfigurationError as e:
        configure_logging()
        logger.error(f"Configuration errors: {e.errors or e.message}")
        return 2

    configure_logging(config)
    report = run_scenarios(config)

    for result in report.results:
        status = "ok" if result.passed else "FAIL"
        print(f"{status:4} {result.name}: {result.actual!r}")

    if not report.all_passed():
        names = ", ".join(result.name for result in report.failures())
        logger.error(f"Failed scenarios: {names}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
