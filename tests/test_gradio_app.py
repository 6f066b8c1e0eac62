"""Tests para la función de análisis de la app Gradio (requiere el extra 'ui')."""
import json

import pytest

pytest.importorskip("gradio")

import gradio_app  # noqa: E402


def test_analyze_with_text_inputs(sample_job, sample_cv):
    summary, scores, strengths, weaknesses, payload = gradio_app.analyze(sample_job, "", sample_cv, None, 4, "substring")
    assert summary.startswith("John Smith:")
    assert "Skills: 100" in scores
    assert strengths.startswith("+ Strong technical skills")
    assert weaknesses == "- Minor areas for development"
    assert json.loads(payload)["email"] == "john@x.com"


def test_analyze_requires_both_texts():
    summary, *rest = gradio_app.analyze("", "", "", None, None, "substring")
    assert summary == "Introduce una oferta y un CV."
    assert rest == ["", "", "", ""]


def test_bad_vocabulary_file_reported_in_ui(monkeypatch, tmp_path, sample_job, sample_cv):
    from cvmatch.config import Settings

    monkeypatch.setattr(gradio_app, "SETTINGS", Settings(vocabulary_file=str(tmp_path / "missing.txt")))
    summary, *rest = gradio_app.analyze(sample_job, "", sample_cv, None, None, "substring")
    assert summary.startswith("Error leyendo entradas:")
    assert rest == ["", "", "", ""]
