from __future__ import annotations
import logging
from functools import partial
from typing import Optional

from payattention.core.connections import ConnectionRegistry
from payattention.core.state import HighlightStore
from payattention.core.windows import WindowTracker
from payattention.notify.source import NotificationSource

logger = logging.getLogger(__name__)

IGNORED = "ignored"
FRESH = "fresh"
URGENT = "urgent"


class AttentionManager:
    """
    attention 요청마다 호출되는 판정기.
    - ignored: 창 없음 / 이미 포커스 / 작업표시줄 제외 창
    - fresh: 방금 map된 창 → 포커스만 주고 끝
    - urgent: 알림 + dock 하이라이트
    """

    def __init__(self, host, registry: ConnectionRegistry, tracker: WindowTracker,
                 store: HighlightStore, focus_new_windows: bool = True):
        self.host = host
        self.registry = registry
        self.tracker = tracker
        self.store = store
        self.focus_new_windows = bool(focus_new_windows)

    def classify(self, window) -> str:
        if window is None or window.has_focus() or window.is_skip_taskbar():
            return IGNORED
        if self.focus_new_windows and self.tracker.consume_if_new(window):
            return FRESH
        return URGENT

    def on_window_demands_attention(self, display, window) -> None:
        kind = self.classify(window)
        if kind == IGNORED:
            return
        if kind == FRESH:
            # 새 창의 map도 attention 요청으로 들어오므로, 첫 요청은 그냥 포커스
            logger.debug("focusing new window %r", window)
            self.host.activate_window(window)
            return
        self._notify(window)

    def _app_id(self, app) -> Optional[str]:
        if app is None:
            return None
        return app.get_id() or None

    def _notify(self, window) -> None:
        app = self.host.app_tracker.get_window_app(window)
        app_id = self._app_id(app)
        if app_id is None:
            logger.warning("no application for window %r, skipping", window)
            return

        source = self.store.source_for(window)
        if source is None:
            source = NotificationSource(app, app_id, window, self.host.tray, self.registry,
                                        self.host.activate_window)
            self.store.add_source(source)
        else:
            source.refresh()
        source.sync = partial(self.store.sync_notification, app_id, source)
        source.on_unmanaged = partial(self.store.release_source, app_id, source)

        if self.store.mark_urgent(app_id):
            logger.debug("marked urgent: %s", app_id)

    def on_focus_changed(self, *_) -> None:
        app_id = self._app_id(self.host.app_tracker.focus_app)
        if app_id is not None:
            self.store.clear_urgent(app_id)
        # 포커스가 바뀌면 창들의 urgent 플래그도 바뀌었을 수 있음
        for source in self.store.live_sources():
            if source.sync is not None:
                source.sync()
