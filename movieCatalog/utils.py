from datetime import datetime

from movieCatalog.settings import LOG_PATH, ACCENT_COLOR


def log_debug(message: str) -> None:
    """Append timestamped message to the log file."""
    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().isoformat(timespec="seconds")
    with LOG_PATH.open("a", encoding="utf-8") as f:
        f.write(f"[{ts}] {message}\n")


def apply_dark_palette(app) -> None:
    """Apply a dark Fusion palette with gold highlights to the application."""
    from PySide6.QtCore import Qt # type: ignore
    from PySide6.QtGui  import QColor, QPalette # type: ignore

    palette = QPalette()
    palette.setColor(QPalette.Window,        QColor("#2b2b2b"))
    palette.setColor(QPalette.WindowText,    Qt.white)
    palette.setColor(QPalette.Base,          QColor("#3a3a3a"))
    palette.setColor(QPalette.AlternateBase, QColor("#424242"))
    palette.setColor(QPalette.Button,        QColor(ACCENT_COLOR))
    palette.setColor(QPalette.ButtonText,    Qt.black)
    palette.setColor(QPalette.Text,          Qt.white)
    palette.setColor(QPalette.Link,          QColor(ACCENT_COLOR))
    palette.setColor(QPalette.Highlight,     QColor(ACCENT_COLOR))
    palette.setColor(QPalette.HighlightedText, Qt.black)
    app.setStyle("Fusion")
    app.setPalette(palette)
