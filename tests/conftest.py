import pytest

from a11y_compliance.announcer import StatusAnnouncer
from a11y_compliance.scheduling import ManualScheduler
from a11y_compliance.tree import ElementNode


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def announcer(scheduler):
    return StatusAnnouncer(scheduler)


@pytest.fixture
def dialog():
    """A body holding an opener button and a three-control dialog."""
    opener = ElementNode("button", "Open", width=80, height=44)
    a = ElementNode("input", aria_label="Name", width=200, height=44)
    b = ElementNode("a", "Terms", href="/terms", width=60, height=44)
    c = ElementNode("button", "Close", width=80, height=44)
    container = ElementNode("div", role="dialog", children=[
        ElementNode("h2", "Confirm request"),
        a,
        ElementNode("p", "Read the terms", children=[b]),
        c,
    ])
    body = ElementNode("body", children=[opener, container])
    return {"body": body, "opener": opener, "container": container, "a": a, "b": b, "c": c}


CONFIG_VARS = [
    "A11Y_MIN_TOUCH_TARGET",
    "A11Y_RECOMMENDED_TOUCH_TARGET",
    "A11Y_POLITE_DELAY_MS",
    "A11Y_ASSERTIVE_DELAY_MS",
    "A11Y_LARGE_TEXT_PX",
    "A11Y_LARGE_BOLD_TEXT_PX",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate config loading from the developer's environment and .env files.

    setenv followed by delenv makes monkeypatch remove anything load_dotenv
    writes into os.environ during the test.
    """
    for name in CONFIG_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path
