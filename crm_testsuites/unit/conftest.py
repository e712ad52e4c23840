"""
Fakes for framework unit tests.

The fakes mimic the small slice of the Playwright sync API the framework
touches and record every call, so tests can assert on exact interaction
sequences without launching a browser.
"""

from pathlib import Path

import pytest

from crm_testsuites.ui_testing.framework import BrowserSession, WaitConfig

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


class FakeClock:
    """Stand-in for the time module used by fluent_wait."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def monotonic(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class FakeMouse:
    def __init__(self):
        self.events = []

    def move(self, x, y):
        self.events.append(("move", x, y))

    def down(self):
        self.events.append(("down",))

    def up(self):
        self.events.append(("up",))


class FakeLocator:
    def __init__(self, selector, box=None, checked=False, visible=True, enabled=True, text="", count=1):
        self.selector = selector
        self.box = box if box is not None else {"x": 10, "y": 20, "width": 100, "height": 40}
        self.checked = checked
        self.visible = visible
        self.enabled = enabled
        self.text = text
        self.match_count = count
        self.value = ""
        self.calls = []
        self.error = None
        self.evaluate_result = None

    def __repr__(self):
        return f"FakeLocator({self.selector!r})"

    def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))
        if self.error is not None:
            raise self.error

    @property
    def first(self):
        return self

    def count(self):
        return self.match_count

    def click(self, **kwargs):
        self._record("click", **kwargs)
        if not kwargs:
            self.checked = not self.checked

    def dblclick(self, **kwargs):
        self._record("dblclick", **kwargs)

    def hover(self, **kwargs):
        self._record("hover", **kwargs)

    def select_option(self, **kwargs):
        self._record("select_option", **kwargs)

    def clear(self):
        self._record("clear")
        self.value = ""

    def fill(self, text):
        self._record("fill", text)
        self.value = text

    def press(self, key):
        self._record("press", key)

    def wait_for(self, state="visible", timeout=None):
        self._record("wait_for", state=state, timeout=timeout)

    def scroll_into_view_if_needed(self):
        self._record("scroll_into_view_if_needed")

    def bounding_box(self):
        return self.box

    def is_checked(self):
        return self.checked

    def is_visible(self):
        return self.visible

    def is_enabled(self, timeout=None):
        return self.enabled

    def inner_text(self, timeout=None):
        return self.text

    def evaluate(self, expression, arg=None):
        self._record("evaluate", expression, arg)
        return self.evaluate_result


class FakeDialog:
    def __init__(self, message, type="alert"):
        self.message = message
        self.type = type
        self.outcome = None

    def accept(self, prompt_text=None):
        self.outcome = ("accept", prompt_text)

    def dismiss(self):
        self.outcome = ("dismiss", None)


class FakePage:
    def __init__(self, title="", url="about:blank", context=None):
        self._title = title
        self.url = url
        self.context = context
        self.mouse = FakeMouse()
        self.locators = {}
        self.listeners = {}
        self.evaluated = []
        self.evaluate_result = None
        self.calls = []
        self.wait_error = None
        self.viewport = None
        self._closed = False
        self.brought_to_front = 0

    def __repr__(self):
        return f"FakePage({self._title!r})"

    def title(self):
        return self._title

    def is_closed(self):
        return self._closed

    def close(self):
        self._closed = True

    def bring_to_front(self):
        self.brought_to_front += 1

    def locator(self, selector):
        if selector not in self.locators:
            self.locators[selector] = FakeLocator(selector)
        return self.locators[selector]

    def once(self, event, handler):
        self.listeners.setdefault(event, []).append(handler)

    def remove_listener(self, event, handler):
        self.listeners[event].remove(handler)

    def emit_dialog(self, dialog):
        for handler in self.listeners.pop("dialog", []):
            handler(dialog)

    def evaluate(self, expression, arg=None):
        self.evaluated.append((expression, arg))
        return self.evaluate_result

    def screenshot(self, path=None, full_page=False):
        self.calls.append(("screenshot", path, full_page))
        if path is not None:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            Path(path).write_bytes(PNG_BYTES)
        return PNG_BYTES

    def set_viewport_size(self, size):
        self.viewport = size

    def set_default_timeout(self, timeout):
        self.calls.append(("set_default_timeout", timeout))

    def wait_for_load_state(self, state="load", timeout=None):
        self.calls.append(("wait_for_load_state", state, timeout))
        if self.wait_error is not None:
            raise self.wait_error

    def wait_for_function(self, expression, arg=None, timeout=None, polling=None):
        self.calls.append(("wait_for_function", expression, arg, timeout, polling))
        if self.wait_error is not None:
            raise self.wait_error

    def go_back(self):
        self.calls.append(("go_back",))

    def go_forward(self):
        self.calls.append(("go_forward",))

    def reload(self):
        self.calls.append(("reload",))


class FakeContext:
    def __init__(self):
        self.pages = []

    def new_page(self, title="", url="about:blank"):
        page = FakePage(title=title, url=url, context=self)
        self.pages.append(page)
        return page


@pytest.fixture
def context():
    return FakeContext()


@pytest.fixture
def page(context):
    return context.new_page(title="vtiger CRM - Home", url="http://localhost:8888/index.php?module=Home")


@pytest.fixture
def session(page):
    return BrowserSession(page)


@pytest.fixture
def clock(monkeypatch):
    """Replace the wait module's clock so waits finish instantly."""
    fake = FakeClock()
    monkeypatch.setattr("crm_testsuites.ui_testing.framework.wait_helpers.time", fake)
    return fake


@pytest.fixture
def wait_config():
    return WaitConfig(timeout_seconds=2, poll_interval_ms=500)
