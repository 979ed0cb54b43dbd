import io
import tempfile
from pathlib import Path

import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys

    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


SETTINGS_ENV_VARS = (
    "ARGSPLIT_DEBUG",
    "ARGSPLIT_DEFAULT_CAPACITY",
    "ARGSPLIT_GROWTH",
    "ARGSPLIT_ERROR_SYM",
    "ARGSPLIT_INFO_SYM",
    "ARGSPLIT_NO_STYLES",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate every test from the developer's own settings and config file."""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def stream():
    """In-memory stream for MessagePrinter output."""
    return io.StringIO()


@pytest.fixture
def printer(stream):
    """Plain-style MessagePrinter writing to the ``stream`` fixture."""
    from argsplit.printer import MessagePrinter

    return MessagePrinter(stream=stream)


@pytest.fixture
def limited_allocator():
    """
    Factory fixture for allocators with a hard slot limit.

    Usage:
        def test_out_of_memory(limited_allocator):
            allocator = limited_allocator(10)
            ...
            assert allocator.in_use == 0
    """
    from argsplit.allocator import LimitedAllocator

    return LimitedAllocator


@pytest.fixture
def temp_config_with_content():
    """Fixture for temporary config files with various content types."""
    temp_dirs = []

    def _create_config(content, encoding="utf-8"):
        temp_dir = tempfile.mkdtemp()
        temp_dirs.append(temp_dir)
        config_path = Path(temp_dir) / "argsplit.conf"
        with open(config_path, "w", encoding=encoding) as f:
            f.write(content)
        return config_path

    yield _create_config

    import shutil

    for temp_dir in temp_dirs:
        shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def xdg_config(tmp_path):
    """Write argsplit.conf into the isolated XDG_CONFIG_HOME and return its path."""

    def _write(content):
        config_dir = tmp_path / "xdg"
        config_dir.mkdir(parents=True, exist_ok=True)
        config_path = config_dir / "argsplit.conf"
        config_path.write_text(content, encoding="utf-8")
        return config_path

    return _write


@pytest.fixture
def argv_scenarios():
    """
    Argument vectors with their expected classification.

    Each scenario maps to ``(argv, positional, pre_options, post_options)``.
    """
    return {
        "executable_only": (["./prog"], [], [], []),
        "mode_switch_on_positional": (["./prog", "-a", "b", "-c"], ["b"], ["-a"], ["-c"]),
        "double_dash_routing": (["./prog", "--", "-a", "-b"], [], [], ["-a", "-b"]),
        "options_only": (["./prog", "-v", "--verbose", "-x"], [], ["-v", "--verbose", "-x"], []),
        "positionals_only": (["./prog", "one", "two", "three"], ["one", "two", "three"], [], []),
        "lone_dash_is_option": (["./prog", "-", "file"], ["file"], ["-"], []),
        "empty_token_is_positional": (["./prog", "", "-x"], [""], [], ["-x"]),
        "triple_dash_is_option": (["./prog", "---"], [], ["---"], []),
        "double_dash_then_positional": (
            ["./prog", "-v", "--", "-x", "input", "-y"],
            ["input"],
            ["-v"],
            ["-x", "-y"],
        ),
        "repeated_double_dash": (["./prog", "--", "--", "-a"], [], [], ["-a"]),
        "long_options_with_values": (
            ["./prog", "--color=yes", "--out=file", "src", "--force"],
            ["src"],
            ["--color=yes", "--out=file"],
            ["--force"],
        ),
    }
