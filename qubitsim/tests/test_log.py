# qubitsim/tests/test_log.py
import logging
from qubitsim.log import ColorFormatter, get_logger

def record(level, msg="hello"):
    return logging.LogRecord("qubitsim.x", level, "/src/qubitsim/register.py", 42, msg, None, None)

def test_plain_format_has_severity_and_location():
    fmt = ColorFormatter(use_color=False)
    assert fmt.format(record(logging.INFO)) == "[Info] register.py:42\nhello"
    assert fmt.format(record(logging.WARNING)).startswith("[Warning]")
    assert fmt.format(record(logging.CRITICAL)).startswith("[Error]")

def test_empty_message_prints_header_only():
    fmt = ColorFormatter(use_color=False)
    assert fmt.format(record(logging.DEBUG, "")) == "[Debug] register.py:42"

def test_color_codes():
    fmt = ColorFormatter(use_color=True)
    assert fmt.format(record(logging.ERROR)).startswith("\x1b[91m[Error]")
    assert fmt.format(record(logging.DEBUG)).startswith("\x1b[92m[Debug]")
    assert "\x1b[90mregister.py:42" in fmt.format(record(logging.INFO))

def test_handler_lives_on_package_logger():
    child = get_logger("qubitsim.somewhere")
    base = logging.getLogger("qubitsim")
    assert child.name == "qubitsim.somewhere"
    assert len(base.handlers) == 1
    get_logger("qubitsim.elsewhere")
    assert len(base.handlers) == 1

def test_color_header_resets_terminal():
    fmt = ColorFormatter(use_color=True)
    header = fmt.format(record(logging.WARNING)).splitlines()[0]
    assert header.endswith("register.py:42\x1b[0m")
