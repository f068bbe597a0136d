from __future__ import annotations

import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QFrame, QLabel, QLineEdit, QWidget

from keyvaluegrid.controller.surface import Rect
from keyvaluegrid.view.main_window import MainWindow, SAMPLE_DATA, format_tree
from keyvaluegrid.view.qt_surface import QtSurface
from keyvaluegrid.view.widgets.key_value_grid import KeyValueGridWidget


@pytest.fixture
def widget(qt_app):
    w = KeyValueGridWidget()
    w.grid.resize(0, 0, 400, 300)
    yield w
    w.deleteLater()


def _line_edits(widget):
    return widget.findChildren(QLineEdit)


def test_surface_creates_positioned_children(qt_app):
    host = QWidget()
    surface = QtSurface(host)
    frame = surface.create_container(Rect(10, 20, 100, 50))
    label = surface.create_label(Rect(15, 5, 40, 24), "Settings", 10)
    line = surface.create_input(Rect(30, 30, 60, 25), "Dark")

    assert isinstance(frame, QFrame)
    assert frame.geometry().getRect() == (10, 20, 100, 50)
    assert label.text() == "Settings"
    assert label.font().pointSize() == 10
    assert surface.input_text(line) == "Dark"
    assert line.parent() is host

    surface.detach(line)
    assert line.parent() is None
    assert line not in host.findChildren(QLineEdit)


def test_add_renders_line_edits(widget):
    changes = []
    widget.data_changed.connect(lambda: changes.append(1))

    assert widget.add("Settings", "Theme", "Dark")
    assert widget.add("Settings", "Language", "en-US")
    assert not widget.add("", "Key", "Value")

    assert [e.text() for e in _line_edits(widget)] == ["Dark", "en-US"]
    assert len(widget.findChildren(QFrame)) >= 1
    assert len(changes) == 2
    assert widget.minimumHeight() == widget.grid.content_bottom


def test_edits_are_pulled_back(widget):
    widget.add("Settings", "Theme", "Dark")
    _line_edits(widget)[0].setText("Light")

    assert widget.get_data().to_dict() == {"Settings": {"Theme": "Light"}}


def test_delete_and_clear_remove_widgets(widget):
    cleared = []
    widget.cleared.connect(lambda: cleared.append(1))

    widget.add("A", "k", "1")
    widget.add("B", "k", "2")
    assert widget.delete("A")
    assert [e.text() for e in _line_edits(widget)] == ["2"]
    assert not widget.delete("A")

    widget.clear_all()
    assert _line_edits(widget) == []
    assert widget.findChildren(QLabel) == []
    assert cleared == [1]
    assert len(widget.get_data()) == 0


def test_main_window_seeds_sample_data(qt_app, tmp_path, capsys):
    settings = QSettings(str(tmp_path / "demo.ini"), QSettings.Format.IniFormat)
    window = MainWindow(settings)

    data = window.grid.get_data()
    assert [g.name for g in data] == ["User Account Information", "User", "Settings", "Network"]
    assert len(SAMPLE_DATA) == sum(len(g) for g in data)

    window.group_edit.setText("Settings")
    window.key_edit.setText("Theme")
    window.value_edit.setText("Light")
    window.on_add()
    assert window.grid.get_data().find_group("Settings").find_element("Theme").value == "Light"

    window.on_delete()
    assert window.grid.get_data().find_group("Settings").find_element("Theme") is None

    window.on_print_data()
    out = capsys.readouterr().out
    assert "[Network]" in out
    assert "Timeout = 30s" in out

    window.on_clear_all()
    assert len(window.grid.get_data()) == 0
    window.show()
    window.close()
    assert settings.value("window/geometry") is not None


def test_format_tree(widget):
    widget.add("G", "a", "1")
    widget.add("G", "b", "")
    assert format_tree(widget.get_data()) == "[G]\na = 1\nb = "
