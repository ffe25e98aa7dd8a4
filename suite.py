import asyncio
import inspect
import logging
import time
from dataclasses import dataclass
from functools import wraps
from typing import List, Any, Callable, Optional, Type, Tuple, Union

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'

logger = logging.getLogger("suite")


class _c:
    """terminal colour codes"""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


@dataclass
class Case:
    description: str
    func: Callable[[], Any]


@dataclass
class Outcome:
    case: Case
    error: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.error is None


_registered: List[Case] = []


class SuiteAssertionError(AssertionError):
    """an assert_that failure, as opposed to an unexpected error in the test body"""


def test(description: str) -> Callable:
    """
    register a function as a test case. coroutine functions are driven with
    asyncio.run, so whatever gets registered (and collected by pytest) is a
    plain callable.
    """

    def decorator(func: Callable) -> Callable:
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            def runner(*args, **kwargs):
                return asyncio.run(func(*args, **kwargs))
        else:
            runner = func

        _registered.append(Case(description, runner))
        return runner

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(expected: Union[Type[BaseException], Tuple[Type[BaseException], ...]],
                  action: Callable[[], Any], message: str = "") -> BaseException:
    """call action and check it raises expected. returns the raised error for further checks."""
    try:
        action()
    except expected as e:
        return e
    names = " or ".join(e.__name__ for e in expected) if isinstance(expected, tuple) else expected.__name__
    raise SuiteAssertionError(message or f"expected {names} to be raised")


def _run_case(case: Case) -> Outcome:
    try:
        case.func()
    except SuiteAssertionError as e:
        return Outcome(case, f"assertion failed: {e}")
    except Exception as e:
        logger.debug(f"unexpected error in '{case.description}'", exc_info=True)
        return Outcome(case, f"{type(e).__name__}: {e}")
    return Outcome(case)


def run(title: str = "test run") -> List[Outcome]:
    """run every registered case, print a report and return the outcomes"""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    outcomes = []
    for case in _registered:
        outcome = _run_case(case)
        outcomes.append(outcome)
        if outcome.passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {case.description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {case.description}")
            print(f"    {_c.grey}└─> {outcome.error}{_c.reset}")

    _print_summary(outcomes, time.perf_counter() - start_time)

    # a script may define and run several suites in turn
    _registered.clear()
    return outcomes


def _print_summary(outcomes: List[Outcome], seconds: float) -> None:
    passed_count = sum(1 for o in outcomes if o.passed)
    failed_count = len(outcomes) - passed_count
    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{len(outcomes)}{_c.reset} tests in {_c.warn}{seconds * 1000:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
