# models/memo_models.py
import uuid
from dataclasses import dataclass, field
from typing import Tuple


def new_memo_id() -> str:
    """衝突しないメモIDを生成する（ランダムな128ビットのUUID）。"""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Memo:
    """ユーザーが作成する単一のメモを表現するデータモデル。

    インスタンスは不変であり、更新時は同じIDを持つ新しいインスタンスに置き換えられる。

    Attributes:
        title (str): メモのタイトル。空でないことは呼び出し側が保証する。
        content (str): メモの本文。空でもよい。
        id (str): メモの一意なID。作成時に割り当てられ、以後変更されない。
    """
    title: str
    content: str = ""
    id: str = field(default_factory=new_memo_id)


# ストアが公開するメモ一覧のスナップショット（先頭が最新）
MemoSnapshot = Tuple[Memo, ...]
