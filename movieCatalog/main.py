import sys

from PySide6.QtWidgets import QApplication, QMessageBox

from movieCatalog.settings          import DATABASE_PATH
from movieCatalog.utils             import apply_dark_palette, log_debug
from movieCatalog.metadata          import CatalogDB, MovieRepo, PersistenceError
from movieCatalog.gui.main_window   import MainWindow


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main(argv: list[str] | None = None) -> int:
    argv = sys.argv if argv is None else argv
    app  = QApplication(argv)
    apply_dark_palette(app)

    # -------- open the one connection for the whole session -----------
    db_path = argv[1] if len(argv) > 1 else DATABASE_PATH
    try:
        db = CatalogDB(db_path)
    except PersistenceError as e:
        log_debug(f"startup: cannot open {db_path}: {e.detail}")
        QMessageBox.critical(None, "Connection Error", f"Failed to connect: {e.detail}")
        print("No database connection. Program exiting.")
        return 1

    # -------- main window + event loop --------------------------------
    with db:
        window = MainWindow(MovieRepo(db))
        window.show()
        return app.exec()


# Python entry-point guard
if __name__ == "__main__":
    sys.exit(main())
