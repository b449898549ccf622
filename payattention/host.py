from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass
class ShellHost:
    """확장이 쓰는 셸 쪽 협력 객체 묶음. 전역 lookup 대신 enable 시점에 주입한다."""
    display: Any                      # window-demands-attention / window-marked-urgent / notify::focus-window
    window_manager: Any               # map (shellwm, actor)
    attention_handler: Any            # 호스트 기본 attention 핸들러 (slot 속성 + on_window_demands_attention)
    app_tracker: Any                  # get_window_app(window), focus_app
    tray: Any                         # get_title_and_banner(), show_notification()
    activate_window: Callable[[Any], None]
    get_dash: Callable[[], Optional[Any]] = lambda: None
