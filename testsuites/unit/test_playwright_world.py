from unittest.mock import MagicMock

import pytest

from e2e_framework.core import playwright_world
from e2e_framework.core.global_properties import GlobalProperties
from e2e_framework.core.playwright_adapter import UnsupportedBrowserError
from e2e_framework.core.playwright_world import PlaywrightWorld, WorldNotInitializedError
from e2e_framework.plugins.base_plugin import PlaywrightPlugin


class RecordingPlugin(PlaywrightPlugin):
    def __init__(self, config=None):
        super().__init__("recording", config)
        self.events = []

    def setup_page_events(self, page):
        self.events.append(("page", page))

    def cleanup(self):
        self.events.append(("cleanup", None))
        super().cleanup()


@pytest.fixture
def playwright(monkeypatch):
    """The object returned by ``sync_playwright().start()``."""
    starter = MagicMock()
    monkeypatch.setattr(playwright_world, "sync_playwright", starter)
    return starter.return_value.start.return_value


@pytest.fixture
def attached(monkeypatch):
    calls = []
    monkeypatch.setattr(playwright_world, "attach_png", lambda image, name: calls.append((name, image)))
    return calls


def make_config(tmp_path, *argv):
    return GlobalProperties(config_dir=tmp_path / "missing", environ={}, argv=list(argv))


def make_world(tmp_path, *argv, plugins=None):
    return PlaywrightWorld("Unit scenario", config=make_config(tmp_path, *argv), plugins=plugins)


def test_new_world_has_no_browser_objects(tmp_path):
    world = make_world(tmp_path)

    assert world.browser is None
    assert world.context is None
    assert world.page is None
    assert world.shared_data == {}
    assert world.screenshots == []


@pytest.mark.parametrize(
    "operation",
    [
        lambda world: world.capture_screenshot("x"),
        lambda world: world.get_locator("#id"),
        lambda world: world.goto("https://example.com"),
    ],
)
def test_page_operations_require_init(tmp_path, operation):
    with pytest.raises(WorldNotInitializedError):
        operation(make_world(tmp_path))


def test_init_creates_browser_context_page(tmp_path, playwright):
    world = make_world(tmp_path)
    world.init()

    browser = playwright.chromium.launch.return_value
    context = browser.new_context.return_value
    assert world.browser is browser
    assert world.context is context
    assert world.page is context.new_page.return_value


def test_init_failure_is_reraised(tmp_path, monkeypatch):
    starter = MagicMock()
    starter.return_value.start.side_effect = RuntimeError("no driver")
    monkeypatch.setattr(playwright_world, "sync_playwright", starter)

    with pytest.raises(RuntimeError, match="no driver"):
        make_world(tmp_path).init()


def test_failed_init_releases_started_resources(tmp_path, playwright):
    with pytest.raises(UnsupportedBrowserError):
        with PlaywrightWorld("Unit scenario", config=make_config(tmp_path, "--browser.name=netscape")):
            pass

    playwright.stop.assert_called_once()


def test_failed_init_closes_half_built_browser(tmp_path, playwright):
    browser = playwright.chromium.launch.return_value
    browser.new_context.side_effect = RuntimeError("context refused")
    world = make_world(tmp_path)

    with pytest.raises(RuntimeError, match="context refused"):
        world.init()

    browser.close.assert_called_once()
    playwright.stop.assert_called_once()
    assert world.browser is None


def test_enabled_plugins_are_registered_and_cleaned_up(tmp_path, playwright):
    enabled = RecordingPlugin()
    disabled = RecordingPlugin({"enabled": False})
    world = make_world(tmp_path, plugins=[enabled, disabled])

    world.init()
    world.cleanup()

    assert [event for event, _ in enabled.events] == ["page", "cleanup"]
    assert disabled.events == []


def test_plugin_registered_after_init_attaches_immediately(tmp_path, playwright):
    world = make_world(tmp_path)
    world.init()

    plugin = RecordingPlugin()
    world.register_plugin(plugin)

    assert plugin.events == [("page", world.page)]


def test_cleanup_releases_in_reverse_order(tmp_path, playwright):
    world = make_world(tmp_path)
    world.init()

    order = []
    world.page.close.side_effect = lambda: order.append("page")
    world.context.close.side_effect = lambda: order.append("context")
    world.browser.close.side_effect = lambda: order.append("browser")
    playwright.stop.side_effect = lambda: order.append("playwright")

    world.cleanup()

    assert order == ["page", "context", "browser", "playwright"]
    assert world.page is None and world.context is None and world.browser is None


def test_cleanup_continues_after_failure_and_reraises(tmp_path, playwright):
    world = make_world(tmp_path)
    world.init()
    browser = world.browser
    world.page.close.side_effect = RuntimeError("page already closed")

    with pytest.raises(RuntimeError, match="page already closed"):
        world.cleanup()

    browser.close.assert_called_once()
    playwright.stop.assert_called_once()
    assert world.page is None and world.context is None and world.browser is None


def test_cleanup_without_init_is_noop(tmp_path):
    make_world(tmp_path).cleanup()


def test_cleanup_saves_trace_when_enabled(tmp_path, playwright, monkeypatch):
    monkeypatch.setattr(playwright_world, "TRACE_DIR", tmp_path / "traces")
    world = make_world(tmp_path, "--execution.trace=true")
    world.init()
    context = world.context

    world.cleanup()

    path = context.tracing.stop.call_args.kwargs["path"]
    assert path.startswith(str(tmp_path / "traces" / "trace-"))
    assert path.endswith(".zip")


def test_capture_screenshot_keeps_and_attaches(tmp_path, playwright, attached):
    world = make_world(tmp_path, "--reporting.screenshots.full_page=false")
    world.init()
    world.page.screenshot.return_value = b"\x89PNG"

    result = world.capture_screenshot("after login")

    world.page.screenshot.assert_called_once_with(full_page=False, type="png")
    assert result == b"\x89PNG"
    assert world.screenshots == [("after login", b"\x89PNG")]
    assert attached == [("after login", b"\x89PNG")]


def test_goto_and_locator_delegate_to_page(tmp_path, playwright):
    world = make_world(tmp_path)
    world.init()

    world.goto("https://example.com", wait_until="domcontentloaded")
    locator = world.get_locator("#login")

    world.page.goto.assert_called_once_with("https://example.com", wait_until="domcontentloaded")
    assert locator is world.page.locator.return_value


def test_wait_sleeps_in_seconds(tmp_path, monkeypatch):
    slept = []
    monkeypatch.setattr(playwright_world.time, "sleep", slept.append)

    make_world(tmp_path).wait(250)

    assert slept == [0.25]


def test_context_manager_inits_and_cleans_up(tmp_path, playwright):
    with make_world(tmp_path) as world:
        page = world.page
        assert page is not None

    page.close.assert_called_once()
    assert world.page is None
