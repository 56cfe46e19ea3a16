from __future__ import annotations
from PySide6.QtCore    import Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QDialog, QFormLayout, QLineEdit, QCheckBox,
    QDialogButtonBox, QMessageBox
)

from movieCatalog.metadata          import Movie, ValidationError, movie_from_form
from movieCatalog.gui.controller    import FormData, form_from_movie, form_labels
from movieCatalog.gui.window_center import center_when_shown


class MovieDialog(QDialog):
    """Modal add / edit form. `result_movie` is set only after a valid Save."""

    def __init__(
        self,
        title: str,
        movie: Movie | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setFixedWidth(400)

        self._movie_id   = movie.id if movie else 0
        self.result_movie: Movie | None = None

        # ── fields ──────────────────────────────────────────────────────
        form = QFormLayout(self)
        self.inputs: dict[str, QLineEdit] = {}
        for key, label in form_labels():
            edit = QLineEdit()
            self.inputs[key] = edit
            form.addRow(label, edit)

        self.watched_box = QCheckBox()
        form.addRow("Watched:", self.watched_box)

        if movie is not None:
            for key, text in form_from_movie(movie).items():
                self.inputs[key].setText(text)
            self.watched_box.setChecked(movie.watched)

        # ── buttons ─────────────────────────────────────────────────────
        bb = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        bb.accepted.connect(self._attempt_save)
        bb.rejected.connect(self.reject)
        form.addRow(bb)

        center_when_shown(self)

    def form_data(self) -> FormData:
        return {key: edit.text() for key, edit in self.inputs.items()}

    @Slot()
    def _attempt_save(self) -> None:
        """Parse + validate; keep the dialog open on bad input."""
        try:
            self.result_movie = movie_from_form(
                watched=self.watched_box.isChecked(),
                movie_id=self._movie_id,
                **self.form_data(),
            )
        except ValidationError as e:
            QMessageBox.warning(self, "Invalid Input", e.detail)
            field = self.inputs.get(e.field)
            if field is not None:
                field.setFocus()
            return
        self.accept()

    # ─────────────────────────── convenience ───────────────────────────
    @classmethod
    def ask_add(cls, parent: QWidget | None = None) -> Movie | None:
        dlg = cls("Add Movie", parent=parent)
        return dlg.result_movie if dlg.exec() else None

    @classmethod
    def ask_edit(cls, movie: Movie, parent: QWidget | None = None) -> Movie | None:
        dlg = cls("Edit Movie", movie, parent)
        return dlg.result_movie if dlg.exec() else None
