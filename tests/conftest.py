"""Fake shell collaborators built on the Signals emitter in fakes.py."""

from types import SimpleNamespace

import pytest

from payattention.config.schema import ExtensionConfig
from fakes import Signals
from payattention.extension import PayAttentionExtension
from payattention.host import ShellHost


class FakeWindow(Signals):
    def __init__(self, title="window", focused=False, skip_taskbar=False):
        super().__init__()
        self.title = title
        self.focused = focused
        self.skip_taskbar = skip_taskbar
        self.demands_attention = True
        self.urgent = False

    def has_focus(self):
        return self.focused

    def is_skip_taskbar(self):
        return self.skip_taskbar

    def set_title(self, title):
        self.title = title
        self.emit("notify::title", self, None)

    def settle(self):
        """Host cleared both attention flags."""
        self.demands_attention = False
        self.urgent = False


class FakeApp:
    def __init__(self, app_id):
        self.app_id = app_id

    def get_id(self):
        return self.app_id


class FakeAppTracker:
    def __init__(self):
        self.apps = {}
        self.focus_app = None

    def assign(self, window, app):
        self.apps[id(window)] = app

    def get_window_app(self, window):
        return self.apps.get(id(window))


class FakeNotification(Signals):
    def __init__(self, app, window, title, banner):
        super().__init__()
        self.app = app
        self.window = window
        self.title = title
        self.banner = banner
        self.destroyed = False

    def update(self, title, banner):
        self.title = title
        self.banner = banner

    def destroy(self):
        self.destroyed = True


class FakeTray:
    def __init__(self):
        self.shown = []

    def get_title_and_banner(self, app, window):
        return app.get_id(), f"“{window.title}” is ready"

    def show_notification(self, app, window, title, banner):
        notification = FakeNotification(app, window, title, banner)
        self.shown.append(notification)
        return notification


class FakeIcon:
    def __init__(self, app):
        self.app = app
        self.icon = object()
        self.style_classes = set()
        self.calls = []

    def add_style_class_name(self, name):
        self.calls.append(("add", name))
        self.style_classes.add(name)

    def remove_style_class_name(self, name):
        self.calls.append(("remove", name))
        self.style_classes.discard(name)


class FakeDash:
    def __init__(self, icons=()):
        self.icons = list(icons)

    def get_app_icons(self):
        return self.icons


class FakeAttentionHandler:
    """Host's default handler: owns the original handles in named slots."""

    def __init__(self, display):
        self.calls = []
        self.window_demands_attention_id = display.connect(
            "window-demands-attention", self.on_window_demands_attention)
        self.window_marked_urgent_id = display.connect(
            "window-marked-urgent", self.on_window_demands_attention)

    def on_window_demands_attention(self, display, window):
        self.calls.append(window)


class Shell:
    """Bundle of fakes plus helpers that emit host signals."""

    def __init__(self):
        self.display = Signals()
        self.window_manager = Signals()
        self.attention_handler = FakeAttentionHandler(self.display)
        self.app_tracker = FakeAppTracker()
        self.tray = FakeTray()
        self.dash = FakeDash()
        self.activated = []
        self.host = ShellHost(
            display=self.display,
            window_manager=self.window_manager,
            attention_handler=self.attention_handler,
            app_tracker=self.app_tracker,
            tray=self.tray,
            activate_window=self.activated.append,
            get_dash=lambda: self.dash,
        )

    def window(self, app_id="app1", title="window", **kwargs):
        win = FakeWindow(title=title, **kwargs)
        self.app_tracker.assign(win, FakeApp(app_id))
        return win

    def icon(self, app_id):
        icon = FakeIcon(FakeApp(app_id))
        self.dash.icons.append(icon)
        return icon

    def map(self, window):
        self.window_manager.emit("map", self.window_manager, SimpleNamespace(meta_window=window))

    def unmanage(self, window):
        window.emit("unmanaged", window)

    def demand(self, window, signal="window-demands-attention"):
        self.display.emit(signal, self.display, window)

    def focus(self, window):
        window.focused = True
        window.settle()
        self.app_tracker.focus_app = self.app_tracker.get_window_app(window)
        self.display.emit("notify::focus-window", self.display, None)


@pytest.fixture
def shell():
    return Shell()


@pytest.fixture
def config():
    return ExtensionConfig()


@pytest.fixture
def extension(shell, config):
    ext = PayAttentionExtension(shell.host, config)
    ext.enable()
    yield ext
    ext.disable()
