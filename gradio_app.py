"""App Gradio para puntuar un CV frente a una oferta.

Flujo:
- Usuario pega texto de oferta o URL.
- Usuario pega CV en texto (o sube archivo .txt/.pdf/.docx).
- Ejecutar análisis -> muestra resumen, puntuaciones, fortalezas/debilidades y JSON.

Nota: los resultados son heurísticos; revisa siempre el CV original.
"""
import json
import logging
import os

import gradio as gr
import requests

from cvmatch import sources
from cvmatch.analyzer import MATCH_MODES
from cvmatch.config import Settings
from cvmatch.exceptions import CVMatchError
from cvmatch.logging_config import setup_logging

logger = logging.getLogger("cvmatch.app")

SETTINGS = Settings.from_env()


def _read_uploaded_file(file) -> str:
    if not file:
        return ""
    # gradio entrega una ruta o un objeto con .name
    name = file if isinstance(file, str) else file.name
    return sources.read_document(name)


def _uploaded_name(file) -> str:
    if not file:
        return "cv.txt"
    name = file if isinstance(file, str) else file.name
    return os.path.basename(name)


def analyze(job_text, job_url, cv_text, cv_file, seed, match_mode):
    seed_value = int(seed) if seed not in (None, "") else None
    # obtener job_text desde url si procede
    try:
        analyzer = SETTINGS.override(seed=seed_value, match_mode=match_mode).build_analyzer()
        if job_url and not job_text:
            job_text = sources.fetch_job_posting_from_url(job_url, timeout=SETTINGS.request_timeout)
        file_name = "cv.txt"
        if cv_file and not cv_text:
            cv_text = _read_uploaded_file(cv_file)
            file_name = _uploaded_name(cv_file)
    except (CVMatchError, requests.RequestException) as e:
        logger.warning("Error leyendo entradas: %s", e)
        return f"Error leyendo entradas: {e}", "", "", "", ""

    if not (job_text or "").strip() or not (cv_text or "").strip():
        return "Introduce una oferta y un CV.", "", "", "", ""

    result = analyzer.analyze(job_text, cv_text, file_name)

    s = result.scores
    scores_text = "\n".join([
        f"Skills: {s.skills_score}",
        f"Experiencia: {s.experience_score}",
        f"Educación: {s.education_score}",
        f"Global: {s.overall_score} ({s.band}, {s.recommendation})",
    ])
    strengths_text = "\n".join(f"+ {x}" for x in result.strengths)
    weaknesses_text = "\n".join(f"- {x}" for x in result.weaknesses)
    payload = json.dumps(result.to_payload(), indent=2, ensure_ascii=False)
    return result.summary, scores_text, strengths_text, weaknesses_text, payload


def build_ui():
    with gr.Blocks(title="cvmatch") as demo:
        gr.Markdown("## cvmatch - encaje CV / oferta")
        with gr.Row():
            with gr.Column():
                job_text = gr.Textbox(label="Oferta (texto)", lines=10)
                job_url = gr.Textbox(label="Oferta (URL)")
            with gr.Column():
                cv_text = gr.Textbox(label="CV (texto)", lines=10)
                cv_file = gr.File(label="CV (.txt, .pdf, .docx)")
        with gr.Row():
            seed = gr.Number(label="Semilla (opcional)", precision=0, value=SETTINGS.seed)
            match_mode = gr.Dropdown(choices=list(MATCH_MODES), value=SETTINGS.match_mode, label="Modo de cruce")
        run = gr.Button("Analizar")

        summary = gr.Textbox(label="Resumen")
        scores = gr.Textbox(label="Puntuaciones", lines=4)
        with gr.Row():
            strengths = gr.Textbox(label="Fortalezas", lines=5)
            weaknesses = gr.Textbox(label="Debilidades", lines=5)
        payload = gr.Code(label="JSON", language="json")

        run.click(
            analyze,
            inputs=[job_text, job_url, cv_text, cv_file, seed, match_mode],
            outputs=[summary, scores, strengths, weaknesses, payload],
        )
    return demo


if __name__ == "__main__":
    setup_logging(SETTINGS.get_log_level())
    build_ui().launch()
