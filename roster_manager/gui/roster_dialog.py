# gui/roster_dialog.py
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QComboBox,
    QPushButton, QTableView, QMessageBox, QGridLayout, QGroupBox
)
from PySide6.QtWidgets import QAbstractItemView

from roster_manager.config import DEFAULT_BASIC_SALARY
from roster_manager.data.roster import Roster
from roster_manager.exceptions import InvalidArgument
from roster_manager.gui.roster_model import RosterTableModel
from roster_manager.logging import get_logger
from roster_manager.models.employee import Employee
from roster_manager.models.role import Role
from roster_manager.utils.parse_utils import parse_amount, parse_int

logger = get_logger(__name__)


class RosterDialog(QDialog):
    """
    Roster window.
    Left: employee table
    Right: add form (name/ID/role/basic salary) and bonus editor for the selected row
    """
    def __init__(self, roster: Roster, parent=None):
        super().__init__(parent)
        self.roster = roster
        self.setWindowTitle(f"Employee Roster (capacity {roster.capacity})")
        self.resize(900, 480)

        self.model = RosterTableModel(roster, self)
        self._build_ui()
        self._update_status()

        self.changed = False

    # ---------- UI ----------
    def _build_ui(self):
        root = QHBoxLayout(self)

        left = QVBoxLayout()
        self.lbl_status = QLabel("")
        left.addWidget(self.lbl_status)

        self.table = QTableView()
        self.table.setModel(self.model)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        left.addWidget(self.table)

        right = QVBoxLayout()

        gb_add = QGroupBox("New employee")
        form = QGridLayout()
        r = 0
        form.addWidget(QLabel("Name*"), r, 0)
        self.txt_name = QLineEdit()
        form.addWidget(self.txt_name, r, 1); r += 1

        form.addWidget(QLabel("Employee ID*"), r, 0)
        self.txt_id = QLineEdit()
        form.addWidget(self.txt_id, r, 1); r += 1

        form.addWidget(QLabel("Role"), r, 0)
        self.cmb_role = QComboBox(); self.cmb_role.addItems(Role.labels())
        form.addWidget(self.cmb_role, r, 1); r += 1

        form.addWidget(QLabel("Basic salary"), r, 0)
        self.txt_salary = QLineEdit()
        self.txt_salary.setPlaceholderText(f"{DEFAULT_BASIC_SALARY:.2f} if blank")
        form.addWidget(self.txt_salary, r, 1); r += 1

        self.btn_add = QPushButton("+ Add")
        form.addWidget(self.btn_add, r, 1)
        gb_add.setLayout(form)
        right.addWidget(gb_add)

        gb_bonus = QGroupBox("Bonus (selected employee)")
        bonus_row = QHBoxLayout()
        self.txt_bonus = QLineEdit()
        self.btn_bonus = QPushButton("Update bonus")
        bonus_row.addWidget(self.txt_bonus)
        bonus_row.addWidget(self.btn_bonus)
        gb_bonus.setLayout(bonus_row)
        right.addWidget(gb_bonus)

        right.addStretch(1)
        self.btn_close = QPushButton("Close")
        right.addWidget(self.btn_close)

        root.addLayout(left, 6)
        root.addLayout(right, 4)

        self.btn_add.clicked.connect(self._on_add_clicked)
        self.btn_bonus.clicked.connect(self._on_bonus_clicked)
        self.btn_close.clicked.connect(self.accept)
        self.table.selectionModel().selectionChanged.connect(self._on_selection_changed)

    def _update_status(self):
        self.lbl_status.setText(f"Employees: {self.roster.count}/{self.roster.capacity}")
        self.btn_add.setEnabled(not self.roster.is_full)

    def _refresh(self):
        self.model.refresh()
        self._update_status()
        self.changed = True

    def selected_employee(self):
        rows = self.table.selectionModel().selectedRows()
        if not rows:
            return None
        return self.model.employee_at(rows[0].row())

    def _on_selection_changed(self, *_):
        emp = self.selected_employee()
        if emp is not None:
            self.txt_bonus.setText(f"{emp.bonus:.2f}")

    def _clear_form(self):
        self.txt_name.clear()
        self.txt_id.clear()
        self.cmb_role.setCurrentIndex(0)
        self.txt_salary.clear()

    # ---------- actions ----------
    def _on_add_clicked(self):
        emp_id = parse_int(self.txt_id.text())
        if emp_id is None:
            QMessageBox.warning(self, "Check", "Employee ID must be a whole number.")
            self.txt_id.setFocus()
            return

        salary_text = self.txt_salary.text().strip()
        salary = parse_amount(salary_text) if salary_text else None
        if salary_text and salary is None:
            QMessageBox.warning(self, "Check", "Basic salary must be a number.")
            return

        try:
            emp = Employee.create(self.txt_name.text(), emp_id,
                                  Role.parse(self.cmb_role.currentText()), salary)
        except InvalidArgument as e:
            QMessageBox.warning(self, "Check", str(e))
            return

        if not self.roster.add(emp):
            QMessageBox.warning(self, "Not added",
                                "Employee was not added (roster full or duplicate ID).")
            return

        self._refresh()
        self._clear_form()
        QMessageBox.information(self, "Done", f"Added {emp.name}.")

    def _on_bonus_clicked(self):
        emp = self.selected_employee()
        if emp is None:
            QMessageBox.information(self, "Info", "Select an employee first.")
            return
        bonus = parse_amount(self.txt_bonus.text())
        if bonus is None:
            QMessageBox.warning(self, "Check", "Bonus must be a number.")
            return
        if not self.roster.update_bonus(emp.employee_id, bonus):
            QMessageBox.warning(self, "Not updated", "Bonus must not be negative.")
            return
        self._refresh()
        QMessageBox.information(self, "Done", f"Updated bonus for {emp.name}.")


def run_gui(roster: Roster) -> int:
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    dlg = RosterDialog(roster)
    logger.debug("opening roster dialog (capacity %d)", roster.capacity)
    dlg.show()
    return app.exec()
