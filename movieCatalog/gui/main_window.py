# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Qt, Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton,
    QTableWidget, QTableWidgetItem, QAbstractItemView, QHeaderView,
    QMessageBox
)

from movieCatalog.settings          import TABLE_HEADERS
from movieCatalog.utils             import log_debug
from movieCatalog.metadata          import CatalogError, MovieRepo, NotFoundError
from movieCatalog.gui.controller    import (
    load_movies,
    catalog_status,
    selected_movie,
    add_movie,
    edit_movie,
    delete_movie,
    delete_prompt,
    scariness_message,
)
from movieCatalog.gui.movie_dialog  import MovieDialog
from movieCatalog.gui.window_center import center_when_shown


class MainWindow(QMainWindow):
    def __init__(self, repo: MovieRepo):
        super().__init__()
        self.repo = repo
        self.setWindowTitle("Movie Database System")
        self.resize(900, 500)

        # ── table ───────────────────────────────────────────────────────
        self.table = QTableWidget(0, len(TABLE_HEADERS))
        self.table.setHorizontalHeaderLabels(list(TABLE_HEADERS))
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        self.table.verticalHeader().setDefaultSectionSize(28)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.Stretch)

        # ── buttons ─────────────────────────────────────────────────────
        buttons = QHBoxLayout()
        for label, slot in [
            ("Add Movie",      self._on_add),
            ("Edit Movie",     self._on_edit),
            ("Delete Movie",   self._on_delete),
            ("Show Scariness", self._on_scariness),
            ("Refresh",        self.refresh),
        ]:
            btn = QPushButton(label)
            btn.setAutoDefault(False)
            btn.setCursor(Qt.PointingHandCursor)
            btn.clicked.connect(slot)
            buttons.addWidget(btn)

        root = QWidget()
        box  = QVBoxLayout(root)
        box.addWidget(self.table)
        box.addLayout(buttons)
        self.setCentralWidget(root)

        center_when_shown(self)
        self.refresh()

    # ───────────────────────────────────────────────────────────────────
    @Slot()
    def refresh(self) -> None:
        """Reload every row from the database."""
        try:
            rows   = load_movies(self.repo)
            status = catalog_status(self.repo)
        except CatalogError as e:
            self._show_error(e)
            return

        self.table.setRowCount(0)
        for r, values in enumerate(rows):
            self.table.insertRow(r)
            for c, value in enumerate(values):
                item = QTableWidgetItem(str(value))
                if isinstance(value, (int, float)):
                    item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
                self.table.setItem(r, c, item)
        self.statusBar().showMessage(status)

    def _selected_id(self) -> int | None:
        row = self.table.currentRow()
        if row < 0 or not self.table.selectionModel().hasSelection():
            return None
        return int(self.table.item(row, 0).text())

    def _show_error(self, e: CatalogError) -> None:
        log_debug(f"{type(e).__name__}: {e.detail}")
        QMessageBox.critical(self, "Error", e.detail)
        if isinstance(e, NotFoundError):
            self.refresh()

    # ───────────────────────── button handlers ─────────────────────────
    @Slot()
    def _on_add(self):
        movie = MovieDialog.ask_add(self)
        if movie is None:
            return
        try:
            add_movie(self.repo, movie)
        except CatalogError as e:
            self._show_error(e)
            return
        self.refresh()

    @Slot()
    def _on_edit(self):
        movie_id = self._selected_id()
        if movie_id is None:
            QMessageBox.information(self, "Edit Movie", "Please select a movie to edit.")
            return
        try:
            current = selected_movie(self.repo, movie_id)
            updated = MovieDialog.ask_edit(current, self)
            if updated is None:
                return
            edit_movie(self.repo, updated)
        except CatalogError as e:
            self._show_error(e)
            return
        self.refresh()

    @Slot()
    def _on_delete(self):
        movie_id = self._selected_id()
        if movie_id is None:
            QMessageBox.information(self, "Delete Movie", "Please select a movie to delete.")
            return
        try:
            movie = selected_movie(self.repo, movie_id)
            reply = QMessageBox.question(
                self, "Confirm Delete", delete_prompt(movie),
                QMessageBox.Yes | QMessageBox.No, QMessageBox.No,
            )
            if reply != QMessageBox.Yes:
                return
            delete_movie(self.repo, movie_id)
        except CatalogError as e:
            self._show_error(e)
            return
        self.refresh()

    @Slot()
    def _on_scariness(self):
        movie_id = self._selected_id()
        if movie_id is None:
            QMessageBox.information(self, "Show Scariness", "Please select a movie first.")
            return
        try:
            movie = selected_movie(self.repo, movie_id)
        except CatalogError as e:
            self._show_error(e)
            return
        QMessageBox.information(self, "Scariness Score", scariness_message(movie))
