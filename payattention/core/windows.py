from __future__ import annotations
import logging
from typing import Any

from payattention.core.connections import ConnectionRegistry

logger = logging.getLogger(__name__)


class IdentitySet:
    """identity 기준 집합 (창 객체가 __eq__를 재정의해도 안전하게)"""

    def __init__(self):
        self._items = {}

    def add(self, obj: Any) -> None:
        self._items[id(obj)] = obj

    def discard(self, obj: Any) -> None:
        self._items.pop(id(obj), None)

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, obj: Any) -> bool:
        return self._items.get(id(obj)) is obj

    def __len__(self) -> int:
        return len(self._items)


class WindowTracker:
    """방금 map된 창을 기억했다가, 첫 attention 요청 한 번에 한해 '새 창'으로 판정한다."""

    def __init__(self, registry: ConnectionRegistry):
        self.registry = registry
        self._new_windows = IdentitySet()

    def on_map(self, shellwm, actor) -> None:
        # window manager 'map' 시그널: (shellwm, actor)
        self.on_window_mapped(actor.meta_window)

    def on_window_mapped(self, window) -> None:
        if window in self._new_windows:
            return
        self.registry.subscribe(window, "unmanaged", self.on_window_unmanaged)
        self._new_windows.add(window)
        logger.debug("window mapped: %r", window)

    def on_window_unmanaged(self, window, *_) -> None:
        self._new_windows.discard(window)
        # 같은 창의 unmanaged를 보는 알림 source 연결은 건드리지 않는다
        self.registry.unsubscribe_matching(window, "unmanaged", self.on_window_unmanaged)

    def is_new(self, window) -> bool:
        return window in self._new_windows

    def consume_if_new(self, window) -> bool:
        if window not in self._new_windows:
            return False
        self._new_windows.discard(window)
        return True

    def clear(self) -> None:
        self._new_windows.clear()

    def __len__(self) -> int:
        return len(self._new_windows)
