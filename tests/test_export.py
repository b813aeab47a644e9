import zipfile

from jordan import TableauConfiguration
from jordan.examples import reference_configurations
from jordan.export import TableauExcelExporter, export_to_excel


def test_export_writes_a_workbook():
    configurations = reference_configurations() + [
        TableauConfiguration([[0.0, 0.0], [1.0, 1.0]], [[1.0], [2.0]], label="No pivot"),
    ]
    output = export_to_excel(configurations)
    data = output.getvalue()
    assert data[:2] == b"PK"

    with zipfile.ZipFile(output) as archive:
        names = archive.namelist()
    sheets = [name for name in names if name.startswith("xl/worksheets/sheet")]
    assert len(sheets) == len(configurations) + 1


def test_export_summary_records():
    exporter = TableauExcelExporter([])
    solved = exporter.export_configuration(reference_configurations()[2], 0)
    failed = exporter.export_configuration(
        TableauConfiguration([[1.0, 1.0], [1.0, 1.0]], [[1.0], [2.0]], label="Singular"), 1
    )
    exporter.close()

    assert solved["Status"] == "Solved"
    assert solved["Equations"] == 3
    assert solved["Max |Residual|"] < 1e-9
    assert failed["Status"] == "SingularSystem"
    assert failed["Max |Residual|"] is None


def test_duplicate_labels_get_distinct_sheet_names():
    exporter = TableauExcelExporter([])
    first = exporter._sheet_name("Case", 0)
    second = exporter._sheet_name("case", 1)
    unnamed = exporter._sheet_name("", 2)
    exporter.close()
    assert first == "Case"
    assert second == "case_1"
    assert unnamed == "System 3"
