import logging
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (QApplication, QHBoxLayout, QMainWindow, QMessageBox,
                             QSplitter, QTabWidget, QTextEdit, QTreeWidget,
                             QTreeWidgetItem, QWidget)

import parsers
from smbios_errors import SmbiosError

log = logging.getLogger(__name__)


class HexViewer(QTextEdit):
    def __init__(self):
        super().__init__()
        self.setReadOnly(True)
        self.setFont(QFont("Consolas", 10))

    def set_data(self, data):
        if not data:
            self.setText("")
            return
        self.setText(parsers.hex_dump(data))


class MainWindow(QMainWindow):
    def __init__(self, smbios, long_flags=False):
        super().__init__()
        self.smbios = smbios
        self.long_flags = long_flags
        self.records = []
        self.setWindowTitle(f"SMBIOS Viewer - SMBIOS {smbios.version} ({smbios.source})")
        self.resize(1000, 700)

        # Main Layout
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QHBoxLayout(central_widget)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        layout.addWidget(splitter)

        # Left Panel: Tree
        self.tree = QTreeWidget()
        self.tree.setHeaderLabel("SMBIOS Structures")
        self.tree.itemClicked.connect(self.on_item_clicked)
        splitter.addWidget(self.tree)

        # Right Panel: Tabs
        self.tabs = QTabWidget()
        splitter.addWidget(self.tabs)

        self.hex_view = HexViewer()
        self.tabs.addTab(self.hex_view, "Hex View")

        self.parsed_view = QTextEdit()
        self.parsed_view.setReadOnly(True)
        self.parsed_view.setFont(QFont("Consolas", 10))
        self.tabs.addTab(self.parsed_view, "Parsed View")

        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 3)

        self.load_data()

    def load_data(self):
        root = QTreeWidgetItem(self.tree, [f"SMBIOS {self.smbios.version}"])
        try:
            for record in self.smbios.structures():
                name = f"Type {record.code} (Handle {record.handle:04X}) - {record.info}"
                item = QTreeWidgetItem(root, [name])
                item.setData(0, Qt.ItemDataRole.UserRole, len(self.records))
                self.records.append(record)
        except SmbiosError as e:
            log.warning("SMBIOS walk stopped: %s", e)
            QTreeWidgetItem(root, [f"Error: {e}"])
            QMessageBox.critical(self, "Error", f"Failed to walk SMBIOS table: {e}")

        self.tree.expandAll()

    def on_item_clicked(self, item, column):
        index = item.data(0, Qt.ItemDataRole.UserRole)
        if index is None:
            return
        self.show_smbios(self.records[index])

    def show_smbios(self, record):
        # whole structure: header, formatted section and strings
        end = record.offset + 4 + len(record.data) + len(record.strings)
        self.hex_view.set_data(self.smbios.data[record.offset:end])

        output = [
            f"SMBIOS Type {record.code} - {record.info}",
            f"Handle: 0x{record.handle:04X}",
            f"Length: {len(record.data) + 4}",
            "=" * 40,
        ]

        details = parsers.get_parsed_smbios_info(record, self.long_flags)
        if details:
            for key, val in details:
                # continuation lines of multi-line values line up with the first
                val = val.replace("\n", "\n" + " " * 27)
                output.append(f"{key:25}: {val}")
        else:
            strings = list(record.iter_strings())
            if strings:
                output.append("Strings:")
                for i, s in enumerate(strings, 1):
                    output.append(f"  {i}: {s}")
            else:
                output.append("No strings.")

        self.parsed_view.setText("\n".join(output))


def run_gui(smbios, long_flags=False):
    app = QApplication.instance() or QApplication(sys.argv)
    window = MainWindow(smbios, long_flags)
    window.show()
    return app.exec()
