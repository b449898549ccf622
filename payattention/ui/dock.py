"""
Dock 아이콘 조회. dash 구현마다 노출하는 API가 달라서 variant별 provider로 나눈다.
- NoDock: dash가 없음 → 빈 목록
- RichDock: get_app_icons()를 제공하는 dash (Dash to Dock 등)
- DefaultDash: 기본 dash, _box 자식 중 아이콘이 붙은 것만
"""
from __future__ import annotations
from typing import Any, List, Optional


class NoDock:
    def app_icons(self) -> List[Any]:
        return []


class RichDock:
    def __init__(self, dash):
        self.dash = dash

    def app_icons(self) -> List[Any]:
        return list(self.dash.get_app_icons())


class DefaultDash:
    def __init__(self, dash):
        self.dash = dash

    def app_icons(self) -> List[Any]:
        icons = []
        for actor in self.dash._box.get_children():
            delegate = getattr(getattr(actor, "child", None), "_delegate", None)
            if delegate is None or getattr(delegate, "icon", None) is None:
                continue
            if getattr(actor, "animating_out", False):
                continue
            icons.append(delegate)
        return icons


def icon_provider(dash):
    if dash is None:
        return NoDock()
    if callable(getattr(dash, "get_app_icons", None)):
        return RichDock(dash)
    if getattr(dash, "_box", None) is not None:
        return DefaultDash(dash)
    return NoDock()


def find_app_icon(dash, app_id: str) -> Optional[Any]:
    for icon in icon_provider(dash).app_icons():
        app = getattr(icon, "app", None)
        if app is not None and app.get_id() == app_id:
            return icon
    return None
