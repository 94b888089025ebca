# services/memo_store.py
import logging
import threading
from dataclasses import replace
from typing import Callable, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from models.memo_models import Memo, MemoSnapshot

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[MemoSnapshot], None]


class MemoStore(QObject):
    """メモ一覧をメモリ上で保持し、変更のたびにスナップショットを公開するストア。

    メモを変更できるのはこのクラスの add / update / delete だけであり、
    画面側はスナップショット（不変のタプル）を購読して再描画する。
    永続化は行わず、プロセス終了とともにデータは失われる。

    Signals:
        memos_changed (pyqtSignal):
            変更後のメモ一覧全体（tuple[Memo, ...]、先頭が最新）を送信する。
            内容が変わらない操作（存在しないIDの更新・削除）でも送信される。
    """
    memos_changed = pyqtSignal(object)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        """MemoStoreのコンストラクタ。

        Args:
            parent (Optional[QObject]): 親オブジェクト。
        """
        super().__init__(parent)
        self._memos: MemoSnapshot = ()
        # 読み取り→変更→差し替えの間だけ保持する。シグナル送信はロック外で行う。
        self._lock = threading.Lock()

    @property
    def memos(self) -> MemoSnapshot:
        """現在のスナップショットを返す。"""
        return self._memos

    def subscribe(self, callback: SnapshotCallback) -> None:
        """スナップショットの購読を開始し、現在の値を直ちに一度通知する。

        Args:
            callback (SnapshotCallback): スナップショットを受け取る関数。
        """
        self.memos_changed.connect(callback)
        callback(self._memos)

    def unsubscribe(self, callback: SnapshotCallback) -> None:
        """購読を解除する。既に解除済みのコールバックを渡してもよい。"""
        try:
            self.memos_changed.disconnect(callback)
        except (TypeError, RuntimeError):
            logger.debug("購読解除済みのコールバックです: %r", callback)

    def add(self, title: str, content: str) -> None:
        """新しいメモを作成し、一覧の先頭に追加する。

        タイトルの検証は行わない（空でないことは呼び出し側の責任）。

        Args:
            title (str): メモのタイトル。
            content (str): メモの本文。
        """
        memo = Memo(title=title, content=content)
        with self._lock:
            self._memos = (memo,) + self._memos
            snapshot = self._memos
        logger.debug("メモを追加しました: id=%s", memo.id)
        self._publish(snapshot)

    def update(self, memo_id: str, title: str, content: str) -> None:
        """指定IDのメモのタイトルと本文を置き換える。

        一覧内の位置とIDは変わらない。該当するメモがない場合は何もしない。

        Args:
            memo_id (str): 更新するメモのID。
            title (str): 新しいタイトル。
            content (str): 新しい本文。
        """
        with self._lock:
            self._memos = tuple(
                replace(m, title=title, content=content) if m.id == memo_id else m
                for m in self._memos
            )
            snapshot = self._memos
        logger.debug("メモを更新しました: id=%s", memo_id)
        self._publish(snapshot)

    def delete(self, memo_id: str) -> None:
        """指定IDのメモを削除する。該当するメモがない場合は何もしない。

        Args:
            memo_id (str): 削除するメモのID。
        """
        with self._lock:
            self._memos = tuple(m for m in self._memos if m.id != memo_id)
            snapshot = self._memos
        logger.debug("メモを削除しました: id=%s", memo_id)
        self._publish(snapshot)

    def find(self, memo_id: str) -> Optional[Memo]:
        """指定IDのメモを返す。

        Args:
            memo_id (str): 検索するメモのID。

        Returns:
            Optional[Memo]: 見つかったメモ。存在しない場合はNone。
        """
        return next((m for m in self._memos if m.id == memo_id), None)

    def _publish(self, snapshot: MemoSnapshot) -> None:
        self.memos_changed.emit(snapshot)
