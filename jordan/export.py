"""
Export logic for tableau solutions.
Handles generation of Excel reports with one worksheet per system.
"""
import io
import logging
import numbers
from typing import Any, Dict, List, Optional

import pandas as pd
import xlsxwriter

from jordan.config import TableauConfiguration
from jordan.linalg import residuals

logger = logging.getLogger(__name__)

# Excel limits sheet names to 31 characters
MAX_SHEET_NAME = 31


def _matrix_frame(matrix: List[List[float]], prefix: str) -> pd.DataFrame:
    """Ragged rows are padded with NaN."""
    df = pd.DataFrame(matrix)
    df.columns = [f"{prefix}{k}" for k in range(df.shape[1])]
    return df


class TableauExcelExporter:
    def __init__(self, configurations: List[TableauConfiguration]):
        self.configurations = configurations
        self.output = io.BytesIO()
        self.workbook = xlsxwriter.Workbook(self.output, {'in_memory': True, 'nan_inf_to_errors': True})
        self._sheet_names: set = set()

        self.fmt_header = self.workbook.add_format({
            'bold': True, 'bg_color': '#D9E1F2', 'border': 1,
            'align': 'center', 'valign': 'vcenter', 'text_wrap': True
        })
        self.fmt_header_main = self.workbook.add_format({
            'bold': True, 'font_size': 12, 'bg_color': '#4472C4',
            'font_color': 'white', 'border': 1
        })
        self.fmt_num = self.workbook.add_format({'num_format': '0.000000', 'border': 1})
        self.fmt_sci = self.workbook.add_format({'num_format': '0.00E+00', 'border': 1})
        self.fmt_text = self.workbook.add_format({'border': 1, 'align': 'left'})
        self.fmt_error = self.workbook.add_format({
            'border': 1, 'bg_color': '#FFC7CE', 'font_color': '#9C0006'
        })

    def close(self) -> io.BytesIO:
        self.workbook.close()
        self.output.seek(0)
        return self.output

    def _sheet_name(self, label: str, index: int) -> str:
        base = (label.strip() or f"System {index + 1}").replace("/", "-").replace("\\", "-")
        for char in "[]:*?":
            base = base.replace(char, "")
        name = base[:MAX_SHEET_NAME]
        suffix = 1
        while name.lower() in self._sheet_names:
            tag = f"_{suffix}"
            name = base[:MAX_SHEET_NAME - len(tag)] + tag
            suffix += 1
        self._sheet_names.add(name.lower())
        return name

    def _write_table(self, worksheet, start_row: int, title: str, df: pd.DataFrame, residual: bool = False) -> int:
        """Write a DataFrame below a title row and return the next free row."""
        if df.empty:
            return start_row

        worksheet.merge_range(start_row, 0, start_row, max(len(df.columns) - 1, 1), title, self.fmt_header_main)
        row = start_row + 1

        for col_num, value in enumerate(df.columns):
            worksheet.write(row, col_num, str(value), self.fmt_header)
        row += 1

        value_fmt = self.fmt_sci if residual else self.fmt_num
        for _, record in df.iterrows():
            for col_num, col_name in enumerate(df.columns):
                val = record[col_name]
                if isinstance(val, numbers.Real) and not isinstance(val, bool):
                    worksheet.write_number(row, col_num, float(val), value_fmt)
                else:
                    worksheet.write(row, col_num, str(val), self.fmt_text)
            row += 1

        return row + 1

    def export_configuration(self, config: TableauConfiguration, index: int = 0,
                             options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Write one system to its own worksheet and return its summary record."""
        options = options or {}
        ws = self.workbook.add_worksheet(self._sheet_name(config.label, index))
        ws.set_column(0, 0, 12)
        ws.set_column(1, 30, 14)

        ws.write(0, 0, "Gauss-Jordan Solution Report", self.fmt_header_main)
        ws.write(1, 0, f"System: {config.label}")
        ws.write(2, 0, f"Desc: {config.description}")
        ws.write(3, 0, f"Date: {pd.Timestamp.now().strftime('%Y-%m-%d %H:%M')}")
        curr_row = 5

        if options.get("include_inputs", True):
            df_a = _matrix_frame(config.coefficients, "a")
            df_b = _matrix_frame(config.results, "b")
            curr_row = self._write_table(ws, curr_row, "Coefficients", df_a)
            curr_row = self._write_table(ws, curr_row, "Right-Hand Sides", df_b)

        outcome = config.solve()
        summary: Dict[str, Any] = {
            "System": config.label,
            "Equations": len(config.coefficients),
            "Status": "Solved" if outcome.ok else outcome.error.value,
        }

        if not outcome.ok:
            logger.info("System %r not solved: %s", config.label, outcome.message)
            ws.write(curr_row, 0, "Error", self.fmt_header_main)
            ws.write(curr_row + 1, 0, outcome.error.value, self.fmt_error)
            ws.write(curr_row + 1, 1, outcome.message, self.fmt_error)
            summary["Max |Residual|"] = None
            return summary

        solution = outcome.solution
        df_x = _matrix_frame(solution, "x")
        df_x.insert(0, "Variable", [f"v{i}" for i in range(len(solution))])
        curr_row = self._write_table(ws, curr_row, "Solution", df_x)

        res = residuals(config.coefficients, config.results, solution)
        max_residual = max((abs(value) for row in res for value in row), default=0.0)
        if options.get("include_residuals", True):
            df_r = _matrix_frame(res, "r")
            curr_row = self._write_table(ws, curr_row, "Residuals (A·X - B)", df_r, residual=True)

        summary["Max |Residual|"] = max_residual
        return summary

    def export_all(self, options: Optional[Dict[str, Any]] = None) -> io.BytesIO:
        """Export every configuration plus a summary sheet and close the workbook."""
        summaries = [
            self.export_configuration(config, index, options)
            for index, config in enumerate(self.configurations)
        ]

        ws = self.workbook.add_worksheet(self._sheet_name("Summary", len(self.configurations)))
        ws.set_column(0, 4, 18)
        df_summary = pd.DataFrame(summaries)
        if not df_summary.empty:
            df_summary = df_summary.fillna("")
        self._write_table(ws, 0, "Summary", df_summary)
        return self.close()


def export_to_excel(configurations: List[TableauConfiguration],
                    options: Optional[Dict[str, Any]] = None) -> io.BytesIO:
    """Return an in-memory workbook reporting every configuration."""
    return TableauExcelExporter(configurations).export_all(options)


__all__ = ["TableauExcelExporter", "export_to_excel"]
