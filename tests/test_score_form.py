# tests/test_score_form.py

"""
CLI Tests - python -m app.scripts.score_form
"""

import json

import pytest

from app.scripts.score_form import main


@pytest.fixture
def form_file(tmp_path, single_indicator_form):
    path = tmp_path / "application.json"
    path.write_text(json.dumps(single_indicator_form), encoding="utf-8")
    return path


def test_scores_full_form(form_file, capsys):
    assert main([str(form_file)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["overallScore"] == pytest.approx(12.5)
    assert data["certificationLevel"] == "Not Certified"
    assert data["recommendations"]


def test_single_pillar(form_file, capsys):
    assert main([str(form_file), "--pillar", "1", "--indent", "0"]) == 0
    out = capsys.readouterr().out.strip()
    assert "\n" not in out
    data = json.loads(out)
    assert data["id"] == 1
    assert data["averageScore"] == pytest.approx(75.0)


def test_no_recommendations(form_file, capsys):
    assert main([str(form_file), "--no-recommendations"]) == 0
    assert json.loads(capsys.readouterr().out)["recommendations"] == []


def test_missing_file(tmp_path):
    assert main([str(tmp_path / "nope.json")]) == 1


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{broken", encoding="utf-8")
    assert main([str(path)]) == 1


def test_non_object_json(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert main([str(path)]) == 1


def test_invalid_pillar_choice(form_file):
    with pytest.raises(SystemExit):
        main([str(form_file), "--pillar", "9"])
