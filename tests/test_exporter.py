from openpyxl import load_workbook

from scoreline.services.exporter import SeriesExporter
from scoreline.services.sparklines import SparklineService


def test_export_writes_series_and_summary(tmp_path, reference_now):
    items = [{"date": "01.06.2024", "qs": 6, "adGroupCount": 2}, {"date": "03.06.2024", "qs": 8, "adGroupCount": 3}]
    view = SparklineService().build("campaign", items, window=7, reference_now=reference_now)

    path = SeriesExporter(output_dir=tmp_path).export(view, name="Brand Campaign")

    assert path.exists()
    assert path.name == "Scoreline_campaign_Brand_Campaign_7d.xlsx"
    wb = load_workbook(path)
    assert wb.sheetnames == ["Series", "Summary"]
    rows = list(wb["Series"].iter_rows(values_only=True))
    assert rows[0] == ("Label", "Start", "Quality Score", "Count")
    assert len(rows) == 8
    assert rows[1] == ("Jun 1", "2024-06-01", 6, 2)
    summary = dict(wb["Summary"].iter_rows(values_only=True))
    assert summary["Average QS"] == 7
    assert summary["Trend %"] == 33.3
