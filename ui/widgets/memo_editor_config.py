from dataclasses import dataclass, field
from PyQt6.QtGui import QFont, QColor, QFontInfo, QFontMetrics

@dataclass
class MemoEditorConfig:
    """
    メモ画面の見た目（フォント・色・入力欄の行数）をカプセル化するデータクラス。
    """
    font_family: str = "Hiragino Sans"
    fallback_font_family: str = "Meiryo"
    font_size: int = 14

    app_bar_title_size: int = 20
    home_title_size: int = 22
    item_title_size: int = 18
    item_preview_size: int = 14

    # 本文入力欄の最小表示行数（追加画面 / 詳細画面）
    add_content_min_lines: int = 5
    detail_content_min_lines: int = 6

    horizontal_padding: int = 16
    item_spacing: int = 8

    text_color: QColor = field(default_factory=lambda: QColor("#111111"))
    preview_color: QColor = field(default_factory=lambda: QColor("#555555"))
    divider_color: QColor = field(default_factory=lambda: QColor("#d3d3d3"))
    background_color: QColor = field(default_factory=lambda: QColor("#ffffff"))

    def get_font(self, point_size: int = 0, bold: bool = False) -> QFont:
        """
        プライマリフォントを試み、利用できない場合はフォールバックフォントを使用してQFontオブジェクトを返す。

        Args:
            point_size (int): フォントサイズ。0の場合は font_size を使用する。
            bold (bool): 太字にするかどうか。
        """
        size = point_size or self.font_size
        font = QFont(self.font_family, size)
        if not QFontInfo(font).exactMatch():
            font = QFont(self.fallback_font_family, size)
        font.setBold(bold)
        return font

    def min_content_height(self, lines: int) -> int:
        """指定行数を表示するのに必要な本文入力欄の高さ（ピクセル）を概算する。"""
        line_spacing = QFontMetrics(self.get_font()).lineSpacing()
        return lines * line_spacing + 16
