"""
Demo Main Window
================
Example wiring of the KeyValueGridWidget.

Why is this file needed?
------------------------
1. Layout: It shows the grid inside a scroll area with a button row below it.
2. Routing: It connects the buttons and the entry row to the grid operations.
"""
import logging

from PySide6.QtCore import QByteArray, QSettings
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLineEdit, QScrollArea
)

from keyvaluegrid.model.tree import GroupedKeyValueTree
from keyvaluegrid.view.widgets.key_value_grid import KeyValueGridWidget

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "KeyValueGrid Demo"

SAMPLE_DATA = [
    ("User Account Information", "Name", "Alice"),
    ("User", "Email", "alice@example.com"),
    ("Settings", "Theme", "Dark"),
    ("Settings", "Language", "en-US"),
    ("Network", "Proxy", ""),
    ("Network", "Timeout", "30s"),
]


def format_tree(tree: GroupedKeyValueTree) -> str:
    """Render the tree as `[group]` headers followed by `key = value` lines."""
    lines = []
    for group in tree:
        lines.append(f"[{group.name}]")
        for elem in group.elements:
            lines.append(f"{elem.key} = {elem.value}")
    return "\n".join(lines)


class MainWindow(QMainWindow):
    def __init__(self, settings: QSettings | None = None) -> None:
        super().__init__()
        self.settings = settings if settings is not None else QSettings()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(500, 420)
        self._restore_geometry()

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)

        # --- 1. GRID (scrollable) ---
        self.grid = KeyValueGridWidget()
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.grid)
        main_layout.addWidget(scroll, 1)

        # --- 2. ENTRY ROW ---
        entry_row = QHBoxLayout()
        self.group_edit = QLineEdit()
        self.group_edit.setPlaceholderText("Group")
        self.key_edit = QLineEdit()
        self.key_edit.setPlaceholderText("Key")
        self.value_edit = QLineEdit()
        self.value_edit.setPlaceholderText("Value")
        btn_add = QPushButton("Add")
        btn_add.clicked.connect(self.on_add)
        btn_delete = QPushButton("Delete")
        btn_delete.clicked.connect(self.on_delete)
        for w in (self.group_edit, self.key_edit, self.value_edit, btn_add, btn_delete):
            entry_row.addWidget(w)
        main_layout.addLayout(entry_row)

        # --- 3. BUTTON ROW ---
        button_row = QHBoxLayout()
        btn_print = QPushButton("Print Data")
        btn_print.setFixedSize(120, 30)
        btn_print.clicked.connect(self.on_print_data)
        btn_clear = QPushButton("Clear All")
        btn_clear.setFixedSize(120, 30)
        btn_clear.clicked.connect(self.on_clear_all)
        button_row.addWidget(btn_print)
        button_row.addStretch()
        button_row.addWidget(btn_clear)
        main_layout.addLayout(button_row)

        self.statusBar()

        # Sample data, added after the layout is set up
        self.grid.add_many(SAMPLE_DATA)

    def _restore_geometry(self) -> None:
        geometry = self.settings.value("window/geometry")
        if isinstance(geometry, QByteArray) and not geometry.isEmpty():
            self.restoreGeometry(geometry)

    def on_add(self) -> None:
        group, key, value = self.group_edit.text(), self.key_edit.text(), self.value_edit.text()
        if self.grid.add(group, key, value):
            self.statusBar().showMessage(f"Added '{group.strip()}/{key.strip()}'.", 3000)
        else:
            self.statusBar().showMessage("A group name is required.", 3000)

    def on_delete(self) -> None:
        group, key = self.group_edit.text(), self.key_edit.text()
        if self.grid.delete(group, key):
            self.statusBar().showMessage(f"Deleted '{group.strip()}/{key.strip()}'.", 3000)
        else:
            self.statusBar().showMessage("Nothing matched.", 3000)

    def on_print_data(self) -> None:
        text = format_tree(self.grid.get_data())
        logger.info(f"Data from UI:\n{text}")
        print("==== Data from UI ====")
        print(text)

    def on_clear_all(self) -> None:
        self.grid.clear_all()
        self.statusBar().showMessage("Cleared.", 3000)

    def closeEvent(self, event) -> None:
        self.settings.setValue("window/geometry", self.saveGeometry())
        super().closeEvent(event)
