# gui/roster_model.py
from PySide6.QtCore import Qt, QAbstractTableModel, QModelIndex

from roster_manager.data.roster import Roster
from roster_manager.utils.formatting import format_money

COLUMNS = ["ID", "Name", "Role", "Basic", "Bonus", "Total"]
MONEY_COLUMNS = {3, 4, 5}


class RosterTableModel(QAbstractTableModel):
    """Read-only view of roster.list_all(); call refresh() after changes."""
    def __init__(self, roster: Roster, parent=None):
        super().__init__(parent)
        self.roster = roster
        self._rows = roster.list_all()

    def refresh(self):
        self.beginResetModel()
        self._rows = self.roster.list_all()
        self.endResetModel()

    def employee_at(self, row: int):
        if 0 <= row < len(self._rows):
            return self._rows[row]
        return None

    def rowCount(self, _=QModelIndex()):
        return len(self._rows)

    def columnCount(self, _=QModelIndex()):
        return len(COLUMNS)

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole:
            return None
        if orientation == Qt.Horizontal:
            return COLUMNS[section]
        return str(section + 1)

    def flags(self, index: QModelIndex):
        if not index.isValid():
            return Qt.NoItemFlags
        return Qt.ItemIsEnabled | Qt.ItemIsSelectable

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        emp = self._rows[index.row()]
        col = index.column()

        if role == Qt.DisplayRole:
            values = [
                str(emp.employee_id), emp.name, emp.role.value,
                format_money(emp.basic_salary), format_money(emp.bonus),
                format_money(emp.total_salary()),
            ]
            return values[col]

        if role == Qt.TextAlignmentRole:
            if col in MONEY_COLUMNS or col == 0:
                return Qt.AlignRight | Qt.AlignVCenter
            return Qt.AlignLeft | Qt.AlignVCenter

        return None
