from .memo_editor_config import MemoEditorConfig

__all__ = [
    "MemoEditorConfig",
]
