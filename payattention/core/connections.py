"""
ConnectionRegistry: 이 확장이 만든 모든 시그널 연결의 장부.
- subscribe(): 필요하면 호스트 기본 핸들러를 떼어내고(takeover) 우리 콜백을 연결
- unsubscribe_matching(): 특정 source(+이벤트)의 연결만 해제
- teardown_all(): 전부 해제하고 떼어냈던 호스트 핸들러를 원래 자리에 재연결
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Connection:
    source: Any
    event_name: str
    callback: Callable
    handle: Any
    takeover_slot: Optional[str] = None
    original_handler: Optional[Callable] = None   # takeover 당시 호스트 핸들러 (재연결용)

    @property
    def took_over(self) -> bool:
        return self.takeover_slot is not None


class ConnectionRegistry:
    def __init__(self, handler_owner: Any = None, original_handler_name: str = "on_window_demands_attention"):
        # handler_owner: 기본 핸들러의 handle을 slot 속성으로 들고 있는 호스트 객체
        self.handler_owner = handler_owner
        self.original_handler_name = original_handler_name
        self._connections: List[Connection] = []

    def __len__(self) -> int:
        return len(self._connections)

    @property
    def connections(self) -> List[Connection]:
        return list(self._connections)

    def subscribe(self, source: Any, event_name: str, callback: Callable,
                  takeover_slot: Optional[str] = None) -> Connection:
        original = None
        if takeover_slot:
            if self.handler_owner is None:
                raise ValueError(f"takeover of '{takeover_slot}' needs a handler owner")
            existing = getattr(self.handler_owner, takeover_slot, None)
            if existing is None:
                # 떼어낼 기본 핸들러가 없으면 takeover도 아님 (복원할 것도 없음)
                takeover_slot = None
            else:
                self._safe_disconnect(source, existing)
                original = getattr(self.handler_owner, self.original_handler_name)
        handle = source.connect(event_name, callback)
        conn = Connection(source, event_name, callback, handle, takeover_slot, original)
        self._connections.append(conn)
        logger.debug("subscribed %s (takeover=%s)", event_name, takeover_slot)
        return conn

    def unsubscribe(self, conn: Connection) -> None:
        if conn in self._connections:
            self._connections.remove(conn)
            self._safe_disconnect(conn.source, conn.handle)

    def unsubscribe_matching(self, source: Any, event_name: Optional[str] = None,
                             callback: Optional[Callable] = None) -> int:
        removed = 0
        # 뒤에서부터 지워야 인덱스가 안 밀림
        for i in range(len(self._connections) - 1, -1, -1):
            conn = self._connections[i]
            if conn.source is not source:
                continue
            if event_name and conn.event_name != event_name:
                continue
            if callback is not None and conn.callback != callback:
                continue
            self._safe_disconnect(source, conn.handle)
            del self._connections[i]
            removed += 1
        return removed

    def teardown_all(self) -> None:
        conns, self._connections = self._connections, []
        for conn in conns:
            self._safe_disconnect(conn.source, conn.handle)
            if conn.took_over:
                self._restore(conn)
        if conns:
            logger.debug("teardown released %d connection(s)", len(conns))

    def _restore(self, conn: Connection) -> None:
        # 호스트 기본 동작 복원: 같은 source, 같은 이벤트 이름으로
        try:
            new_handle = conn.source.connect(conn.event_name, conn.original_handler)
        except Exception:
            # 하나가 실패해도 나머지 연결은 끝까지 정리한다
            logger.exception("could not restore host handler %s on %s", conn.takeover_slot, conn.event_name)
            return
        setattr(self.handler_owner, conn.takeover_slot, new_handle)
        logger.debug("restored host handler %s on %s", conn.takeover_slot, conn.event_name)

    @staticmethod
    def _safe_disconnect(source: Any, handle: Any) -> None:
        if handle is None:
            return
        try:
            source.disconnect(handle)
        except LookupError:
            # 호스트가 먼저 정리한 경우
            logger.debug("handle %r already gone", handle)
