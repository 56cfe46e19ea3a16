"""
gui
~~~
Qt widgets and the command handlers behind them.

•  No direct SQL here – everything goes through `metadata.MovieRepo`.
•  The handlers in `gui.controller` are plain functions with no Qt imports,
   so importing this package does not pull in PySide6. Widgets are imported
   from their own modules:

    from movieCatalog.gui.main_window import MainWindow
"""

from movieCatalog.gui.controller import (
    load_movies,
    catalog_status,
    selected_movie,
    add_movie,
    edit_movie,
    delete_movie,
    delete_prompt,
    scariness_message,
)

__all__ = [
    "load_movies", "catalog_status", "selected_movie",
    "add_movie", "edit_movie", "delete_movie",
    "delete_prompt", "scariness_message",
]
