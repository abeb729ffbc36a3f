from pathlib import Path


def test_diagram_path_default(tmp_path, monkeypatch):
    """Diagram path is keyed by distance under outputs/diagrams."""
    monkeypatch.chdir(tmp_path)
    from hoptree.cli.paths import diagram_path, diagrams_dir

    result = diagram_path(5)

    assert Path(result).parent == diagrams_dir()
    assert Path(result).name == "5_distance_tree.svg"
    assert diagrams_dir().exists()


def test_report_path_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    from hoptree.cli.paths import report_path, reports_dir

    result = report_path(5)

    assert Path(result) == reports_dir() / "5_distance_report.yaml"


def test_custom_base_dir(tmp_path):
    """A base dir replaces ./outputs."""
    from hoptree.cli.paths import diagram_path, report_path

    base = tmp_path / "custom"

    assert Path(diagram_path(2, str(base))) == base / "diagrams" / "2_distance_tree.svg"
    assert Path(report_path(2, str(base))) == base / "reports" / "2_distance_report.yaml"


def test_paths_are_fresh_per_distance(tmp_path):
    """Each distance gets its own filename; nothing is shared between calls."""
    from hoptree.cli.paths import diagram_path

    first = diagram_path(1, str(tmp_path))
    second = diagram_path(2, str(tmp_path))

    assert first != second
    assert first.endswith("1_distance_tree.svg")
