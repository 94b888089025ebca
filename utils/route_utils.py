# utils/route_utils.py
"""ナビゲーション用のルート文字列を組み立て・照合するユーティリティ。

ルートパターンは "detail/{id}" のように "{名前}" のプレースホルダーを含むことができる。
"""
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from utils.constants import ROUTE_DETAIL

_PLACEHOLDER = re.compile(r"^\{(\w+)\}$")


@dataclass(frozen=True)
class RouteMatch:
    """ルート文字列とパターンの照合結果。

    Attributes:
        pattern (str): 一致したルートパターン（例: "detail/{id}"）。
        arguments (Dict[str, str]): パターン中のプレースホルダーに対応する引数。
    """
    pattern: str
    arguments: Dict[str, str] = field(default_factory=dict)


def detail_route(memo_id: str) -> str:
    """メモ詳細画面へのルート文字列を返す。"""
    return ROUTE_DETAIL.replace("{id}", memo_id)


def match_pattern(route: str, pattern: str) -> Optional[RouteMatch]:
    """ルート文字列が単一のパターンに一致するか判定する。

    末尾のプレースホルダーが省略されている場合（"detail" や "detail/"）は
    その引数を空文字列として一致させる。

    Args:
        route (str): 照合するルート文字列。
        pattern (str): ルートパターン。

    Returns:
        Optional[RouteMatch]: 一致した場合は照合結果、そうでなければNone。
    """
    route_parts: List[str] = route.split("/")
    pattern_parts: List[str] = pattern.split("/")

    # 省略された末尾の引数は空文字列として扱う
    while len(route_parts) < len(pattern_parts):
        route_parts.append("")
    if len(route_parts) != len(pattern_parts):
        return None

    arguments: Dict[str, str] = {}
    for actual, expected in zip(route_parts, pattern_parts):
        placeholder = _PLACEHOLDER.match(expected)
        if placeholder:
            arguments[placeholder.group(1)] = actual
        elif actual != expected:
            return None
    return RouteMatch(pattern=pattern, arguments=arguments)


def match_route(route: str, patterns: Iterable[str]) -> Optional[RouteMatch]:
    """登録済みパターンの中から最初に一致したものを返す。

    Args:
        route (str): 照合するルート文字列。
        patterns (Iterable[str]): ルートパターンの一覧。

    Returns:
        Optional[RouteMatch]: 一致した照合結果。どれにも一致しなければNone。
    """
    for pattern in patterns:
        matched = match_pattern(route, pattern)
        if matched:
            return matched
    return None
