from pathlib import Path
from typing import Optional

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from scoreline.config import settings
from scoreline.data.dto import SparklineView


class SeriesExporter:
    """
    Writes a sparkline view (points + summary) to an Excel workbook.
    """

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = Path(output_dir or settings.export.output_dir)

    def export(self, view: SparklineView, name: str) -> Path:
        wb = Workbook()

        ws_series = wb.active
        ws_series.title = "Series"
        ws_series.append(["Label", "Start", "Quality Score", "Count"])
        for point in view.points:
            ws_series.append([point.label, point.start.isoformat(), round(point.qs, 2), point.secondary_count])
        _autosize(ws_series)

        ws_summary = wb.create_sheet("Summary")
        ws_summary.append(["Level", view.level])
        ws_summary.append(["Window (days)", view.window_days])
        ws_summary.append(["Granularity", view.granularity.value])
        ws_summary.append(["Reference date", view.reference_date.isoformat() if view.reference_date else ""])
        ws_summary.append(["Average QS", round(view.summary.average, 2)])
        ws_summary.append(["Trend %", round(view.summary.trend_percent, 1)])
        _autosize(ws_summary)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        safe_name = name.replace(" ", "_").replace("/", "-")
        filename = f"Scoreline_{view.level}_{safe_name}_{view.window_days}d.xlsx"
        path = self.output_dir / filename
        wb.save(path)
        return path


def _autosize(ws):
    for column_cells in ws.columns:
        length = max(len(str(cell.value)) if cell.value is not None else 0 for cell in column_cells)
        ws.column_dimensions[get_column_letter(column_cells[0].column)].width = min(max(length + 2, 12), 60)
