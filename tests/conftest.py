#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import sys
import threading
from typing import Any, Callable

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from strkit.errors import ErrorCode, set_error


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_error_slot():
    """Start and finish every test with a SUCCESS error slot on the main thread."""
    set_error(ErrorCode.SUCCESS)
    yield
    set_error(ErrorCode.SUCCESS)


@pytest.fixture
def int_digit_limit():
    """Pin CPython's int/str digit limit to its default for the test, then restore it."""
    saved = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(saved)


@pytest.fixture
def run_in_thread() -> Callable[[Callable[[], Any]], Any]:
    """Fixture to run a callable in a fresh thread and return its result."""

    def _run(fn: Callable[[], Any]) -> Any:
        result = {}

        def target():
            result["value"] = fn()

        t = threading.Thread(target=target)
        t.start()
        t.join()
        return result["value"]

    return _run
