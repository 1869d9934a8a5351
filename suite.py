import sys
import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_MARK = '(^ ω ^)'
FAIL_MARK = '(ﾉಥДಥ)ﾉ'


class _c:
    """ansi color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


# --- assertion error ---

class SuiteAssertionError(AssertionError):
    """assertion failure raised by the helpers below, kept apart from unexpected errors."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """decorator registering a zero-argument function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_equal(actual: Any, expected: Any, message: str = "values differ") -> None:
    """like assert_that, but reports both values on failure."""
    if not actual == expected:
        raise SuiteAssertionError(f"{message}: expected {expected!r}, got {actual!r}")


def assert_raises(error_type: Type[BaseException], func: Callable, *args: Any,
                  message: str = "expected an error", **kwargs: Any) -> BaseException:
    """calls func and checks that it raises error_type. returns the caught error."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise SuiteAssertionError(f"{message}: {error_type.__name__} was not raised")


def run(title: str = "test run", verbose_errors: bool = False) -> int:
    """executes all registered tests, prints a report and returns the failure count."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        func = test_item['func']
        description = test_item['description']

        error = None
        try:
            func()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except AssertionError as e:
            error = f"assertion failed: {e or 'assert statement'}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose_errors:
                traceback.print_exc()

        passed = error is None
        _suite_state['results'].append({'passed': passed, 'description': description, 'error': error})

        if passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_MARK}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_MARK}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    failed = _print_summary(start_time)

    # clear registrations so several suites can run from one script
    _suite_state['tests'] = []
    return failed


def main(title: str) -> None:
    """run the registered tests and exit non-zero if any failed."""
    sys.exit(1 if run(title) else 0)


def _print_summary(start_time: float) -> int:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count
