from __future__ import annotations
import logging
from typing import Optional

from payattention.config import load_effective_config
from payattention.config.schema import ExtensionConfig
from payattention.core.connections import ConnectionRegistry
from payattention.core.state import HighlightStore
from payattention.core.windows import WindowTracker
from payattention.host import ShellHost
from payattention.notify.attention import AttentionManager

logger = logging.getLogger("payattention")

# 호스트 attention 핸들러가 기본 핸들러 handle을 들고 있는 slot
DEMANDS_ATTENTION_SLOT = "window_demands_attention_id"
MARKED_URGENT_SLOT = "window_marked_urgent_id"


class PayAttentionExtension:
    def __init__(self, host: ShellHost, config: Optional[ExtensionConfig] = None):
        self.host = host
        self.config = config
        self.registry: Optional[ConnectionRegistry] = None
        self.tracker: Optional[WindowTracker] = None
        self.store: Optional[HighlightStore] = None
        self.attention: Optional[AttentionManager] = None

    @property
    def enabled(self) -> bool:
        return self.registry is not None

    def enable(self) -> None:
        if self.enabled:
            return
        cfg = self.config or load_effective_config()
        self.config = cfg
        logger.setLevel(cfg.log_level)

        host = self.host
        self.registry = ConnectionRegistry(host.attention_handler)
        self.tracker = WindowTracker(self.registry)
        self.store = HighlightStore(host.get_dash, style_class=cfg.URGENT_STYLE_CLASS)
        self.attention = AttentionManager(host, self.registry, self.tracker, self.store,
                                          focus_new_windows=cfg.FOCUS_NEW_WINDOWS)

        on_demand = self.attention.on_window_demands_attention
        self.registry.subscribe(host.display, "window-demands-attention", on_demand, DEMANDS_ATTENTION_SLOT)
        self.registry.subscribe(host.display, "window-marked-urgent", on_demand, MARKED_URGENT_SLOT)
        self.registry.subscribe(host.display, "notify::focus-window", self.attention.on_focus_changed)
        self.registry.subscribe(host.window_manager, "map", self.tracker.on_map)
        logger.info("enabled")

    def disable(self) -> None:
        if not self.enabled:
            return
        try:
            # 하이라이트/알림부터 정리해야 source들의 연결이 장부에서 먼저 빠진다
            self.store.reset()
        finally:
            self.registry.teardown_all()
            self.tracker.clear()
            self.registry = self.tracker = self.store = self.attention = None
        logger.info("disabled")


def init(host: ShellHost, config: Optional[ExtensionConfig] = None) -> PayAttentionExtension:
    return PayAttentionExtension(host, config)
