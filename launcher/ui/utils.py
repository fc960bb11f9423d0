"""InfoBar helpers for reporting operation outcomes."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget
from qfluentwidgets import InfoBar, InfoBarPosition

from launcher.models.results import OperationResult

# Errors stay up longer so the message can be read
_SUCCESS_MS = 3000
_ERROR_MS = 5000


def _notify(factory, parent: QWidget, title: str, content: str, duration: int) -> None:
    factory(
        title=title,
        content=content,
        orient=Qt.Orientation.Vertical,
        isClosable=True,
        position=InfoBarPosition.TOP_RIGHT,
        duration=duration,
        parent=parent,
    )


def show_success(parent: QWidget, title: str, content: str = "") -> None:
    _notify(InfoBar.success, parent, title, content, _SUCCESS_MS)


def show_error(parent: QWidget, title: str, content: str = "") -> None:
    _notify(InfoBar.error, parent, title, content, _ERROR_MS)


def show_result(parent: QWidget, title: str, result: OperationResult) -> None:
    """Report *result* as a success or error InfoBar, with the unlocks it caused."""
    if not result.success:
        show_error(parent, title, result.message)
        return
    content = result.message
    if result.unlocked:
        content += "\n" + ", ".join(f"{d.icon} {d.title}" for d in result.unlocked)
    show_success(parent, title, content)
