from __future__ import annotations
import logging
from typing import Callable, List, Optional

from payattention.core.connections import Connection, ConnectionRegistry

logger = logging.getLogger(__name__)


class NotificationSource:
    """(app, window) 한 쌍에 대한 알림. 창 제목이 바뀌면 알림 문구를 따라 갱신한다."""

    def __init__(self, app, app_id: str, window, tray, registry: ConnectionRegistry,
                 activate_window: Callable[[object], None]):
        self.app = app
        self.app_id = app_id
        self.window = window
        self.tray = tray
        self.registry = registry
        self.activate_window = activate_window
        self.sync: Optional[Callable[[], None]] = None
        self.on_unmanaged: Optional[Callable[[], None]] = None
        self.destroyed = False
        self._conns: List[Connection] = []

        title, banner = tray.get_title_and_banner(app, window)
        self.notification = tray.show_notification(app, window, title, banner)

        self._watch(self.notification, "activated", self.open)
        self._watch(window, "notify::title", self._on_title_changed)
        self._watch(window, "notify::demands-attention", self._on_flags_changed)
        self._watch(window, "notify::urgent", self._on_flags_changed)
        self._watch(window, "unmanaged", self._on_window_unmanaged)

    def _watch(self, obj, evt: str, cb: Callable) -> None:
        self._conns.append(self.registry.subscribe(obj, evt, cb))

    def open(self, *_) -> None:
        # 알림 클릭 → 창을 앞으로
        self.activate_window(self.window)

    def refresh(self) -> None:
        if self.destroyed:
            return
        title, banner = self.tray.get_title_and_banner(self.app, self.window)
        self.notification.update(title, banner)

    def _on_title_changed(self, *_) -> None:
        self.refresh()

    def _on_flags_changed(self, *_) -> None:
        if self.sync is not None and not self.destroyed:
            self.sync()

    def _on_window_unmanaged(self, *_) -> None:
        # 창이 닫히면 플래그와 상관없이 정리
        if self.destroyed:
            return
        if self.on_unmanaged is not None:
            self.on_unmanaged()
        else:
            self.destroy()

    def destroy(self) -> None:
        if self.destroyed:
            return
        self.destroyed = True
        for conn in self._conns:
            self.registry.unsubscribe(conn)
        self._conns.clear()
        self.notification.destroy()
        logger.debug("notification destroyed for %r", self.window)
