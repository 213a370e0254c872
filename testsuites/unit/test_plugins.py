from unittest.mock import MagicMock

import pytest

from e2e_framework.plugins import console_capture
from e2e_framework.plugins.base_plugin import PlaywrightPlugin
from e2e_framework.plugins.console_capture import ConsoleCapturePlugin


class FailingPlugin(PlaywrightPlugin):
    def setup_context_events(self, context):
        raise RuntimeError("cannot listen")


@pytest.mark.parametrize(
    "config, expected",
    [
        (None, True),
        ({}, True),
        ({"enabled": True}, True),
        ({"enabled": None}, True),
        ({"enabled": 0}, True),
        ({"enabled": False}, False),
    ],
)
def test_is_enabled_only_false_when_explicitly_false(config, expected):
    assert PlaywrightPlugin("p", config).is_enabled() is expected


def test_register_stores_handles_and_cleanup_drops_them():
    plugin = PlaywrightPlugin("noop")
    page, context, browser = MagicMock(), MagicMock(), MagicMock()

    plugin.register(page, context, browser)
    assert (plugin.page, plugin.context, plugin.browser) == (page, context, browser)

    plugin.cleanup()
    assert (plugin.page, plugin.context, plugin.browser) == (None, None, None)


def test_register_reraises_hook_failure():
    with pytest.raises(RuntimeError, match="cannot listen"):
        FailingPlugin("failing").register(MagicMock(), MagicMock(), MagicMock())


def test_name_and_repr():
    plugin = PlaywrightPlugin("audit", {"enabled": False})
    assert plugin.name == "audit"
    assert repr(plugin) == "PlaywrightPlugin(name='audit', enabled=False)"


def page_handlers(plugin):
    page = MagicMock()
    plugin.register(page, MagicMock(), MagicMock())
    return {c.args[0]: c.args[1] for c in page.on.call_args_list}


def test_console_capture_filters_types():
    plugin = ConsoleCapturePlugin({"types": ["error"]})
    handlers = page_handlers(plugin)

    handlers["console"](MagicMock(type="log", text="hello"))
    handlers["console"](MagicMock(type="error", text="Failed to load resource"))
    handlers["pageerror"]("TypeError: undefined")

    assert plugin.entries == [
        {"source": "console", "type": "error", "text": "Failed to load resource"},
        {"source": "pageerror", "type": "error", "text": "TypeError: undefined"},
    ]
    assert len(plugin.errors) == 2


def test_console_capture_default_types_keep_warnings():
    plugin = ConsoleCapturePlugin()
    handlers = page_handlers(plugin)

    handlers["console"](MagicMock(type="warning", text="deprecated"))

    assert plugin.entries[0]["type"] == "warning"
    assert plugin.errors == []


def test_console_capture_attaches_on_cleanup(monkeypatch):
    attached = []
    monkeypatch.setattr(console_capture, "attach_json", lambda data, name: attached.append((name, data)))
    plugin = ConsoleCapturePlugin()
    handlers = page_handlers(plugin)
    handlers["pageerror"]("boom")

    plugin.cleanup()

    assert attached == [("Browser console", [{"source": "pageerror", "type": "error", "text": "boom"}])]
    assert plugin.page is None


@pytest.mark.parametrize("config", [None, {"attach": False}])
def test_console_capture_skips_attachment(monkeypatch, config):
    attached = []
    monkeypatch.setattr(console_capture, "attach_json", lambda data, name: attached.append(data))
    plugin = ConsoleCapturePlugin(config)
    handlers = page_handlers(plugin)
    if config:
        handlers["pageerror"]("boom")

    plugin.cleanup()

    assert attached == []
