# utils/constants.py
"""アプリケーション全体で共有する定数（ウィンドウ設定・表示文言・ルート名）。"""

APP_TITLE = "メモ帳"
WINDOW_GEOMETRY = (100, 100, 480, 800)

# --- ルート ---
ROUTE_HOME = "home"
ROUTE_ADD = "add"
ROUTE_DETAIL = "detail/{id}"
START_ROUTE = ROUTE_HOME

# --- 表示文言 ---
ADD_SCREEN_TITLE = "メモ追加"
DETAIL_SCREEN_TITLE = "メモ詳細"
ADD_BUTTON_TEXT = "追加"
SAVE_BUTTON_TEXT = "保存"
DELETE_BUTTON_TEXT = "削除"
BACK_BUTTON_TEXT = "戻る"
TITLE_PLACEHOLDER = "タイトル"
CONTENT_PLACEHOLDER = "内容"
EMPTY_LIST_MESSAGE = "メモがありません。"
NOT_FOUND_MESSAGE = "メモが見つかりません。"

# ログレベルを指定する環境変数（main.py のみが参照する）
LOG_LEVEL_ENV = "MYMEMO_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
