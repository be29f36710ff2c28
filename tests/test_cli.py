import json

import pytest

from org_chart.cli import main

CSV = (
    "Id,ManagerId,Name,Company\n"
    "1,,Иван,УК\n"
    "2,1,Anna,ДК\n"
    "3,1,Boris,\"УК; РТ\"\n"
)


@pytest.fixture
def staff_csv(tmp_path):
    path = tmp_path / "staff.csv"
    path.write_text(CSV, encoding="utf-8")
    return path


def test_json_export(staff_csv, tmp_path):
    main([str(staff_csv), "--format", "json", "--output", str(tmp_path / "out")])

    with open(tmp_path / "out.json", encoding="utf-8") as f:
        tree = json.load(f)
    assert [c["Name"] for c in tree[0]["children"]] == ["Anna", "Boris"]


def test_json_export_with_company_filter(staff_csv, tmp_path):
    main([str(staff_csv), "--format", "json", "--company", "РТ", "--output", str(tmp_path / "out")])

    with open(tmp_path / "out.json", encoding="utf-8") as f:
        tree = json.load(f)
    assert [c["Name"] for c in tree[0]["children"]] == ["Boris"]


def test_html_export(staff_csv, tmp_path):
    main([str(staff_csv), "--format", "html", "--collapse", "1", "--output", str(tmp_path / "out")])

    assert (tmp_path / "out.html").exists()


def test_bad_input_exits_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "staff.txt")])

    assert exc.value.code == 1
    assert "[ERROR]" in capsys.readouterr().err
