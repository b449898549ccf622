from __future__ import annotations
import logging
from typing import Callable, Dict, List, Optional, Set

from payattention.ui.dock import find_app_icon

logger = logging.getLogger(__name__)


class HighlightStore:
    """
    앱별 urgent 하이라이트 + 살아있는 알림 source 관리.
    하이라이트와 알림은 항상 같이 정리된다 (sync_notification 참고).
    """

    def __init__(self, get_dash: Callable[[], object], style_class: str = "urgent"):
        self.get_dash = get_dash
        self.style_class = style_class
        self.highlights: Set[str] = set()
        self._sources: Dict[int, object] = {}   # id(window) -> NotificationSource

    # ---- 하이라이트 ----
    def is_urgent(self, app_id: str) -> bool:
        return app_id in self.highlights

    def mark_urgent(self, app_id: str) -> bool:
        if app_id in self.highlights:
            return False
        self.highlights.add(app_id)
        icon = find_app_icon(self.get_dash(), app_id)
        if icon is not None:
            icon.add_style_class_name(self.style_class)
        else:
            # dock에 아이콘이 없어도 상태는 남겨둔다 (나중에 clear할 수 있게)
            logger.debug("no dock icon for %s", app_id)
        return True

    def clear_urgent(self, app_id: str) -> None:
        if app_id not in self.highlights:
            return
        self.highlights.discard(app_id)
        icon = find_app_icon(self.get_dash(), app_id)
        if icon is not None:
            icon.remove_style_class_name(self.style_class)
        logger.debug("cleared urgent: %s", app_id)

    # ---- 알림 source ----
    def add_source(self, source) -> None:
        self._sources[id(source.window)] = source

    def source_for(self, window) -> Optional[object]:
        source = self._sources.get(id(window))
        if source is not None and source.window is window:
            return source
        return None

    def live_sources(self) -> List[object]:
        return list(self._sources.values())

    def discard_source(self, source) -> None:
        if self._sources.get(id(source.window)) is source:
            del self._sources[id(source.window)]

    def release_source(self, app_id: str, source) -> None:
        """창이 사라진 source 정리. 같은 앱의 다른 알림이 남아 있으면 하이라이트는 유지."""
        self.discard_source(source)
        source.destroy()
        if not any(s.app_id == app_id for s in self.live_sources()):
            self.clear_urgent(app_id)

    def sync_notification(self, app_id: str, source) -> None:
        window = source.window
        if window.demands_attention or window.urgent:
            return
        self.clear_urgent(app_id)
        self.discard_source(source)
        source.destroy()

    def reset(self) -> None:
        for app_id in list(self.highlights):
            self.clear_urgent(app_id)
        for source in self.live_sources():
            self.discard_source(source)
            source.destroy()
