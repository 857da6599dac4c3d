"""
Rich table helpers and the ``tabgroups`` command line.
"""

from tg_ui.models import TableModel
from tg_ui.table_layout import build_rich_table

__all__ = ["TableModel", "build_rich_table"]
