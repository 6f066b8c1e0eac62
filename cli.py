#!/usr/bin/env python3
"""CLI para cvmatch.

Ejemplos:
  python cli.py --job-file oferta.txt --cv-file cv.pdf
  python cli.py --job-url https://empresa.example/careers/123 --cv-file cv.txt --seed 7 --json

Output: imprime datos del candidato, puntuaciones, fortalezas, debilidades y resumen.
"""
import argparse
import json
import logging
import os
import sys

import requests

from cvmatch import sources
from cvmatch.analyzer import MATCH_MODES
from cvmatch.config import Settings
from cvmatch.exceptions import CVMatchError
from cvmatch.logging_config import setup_logging

logger = logging.getLogger("cvmatch.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="cvmatch: puntúa un CV frente a una oferta")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--job-url", help="URL de la oferta de trabajo")
    group.add_argument("--job-file", help="Fichero con el texto de la oferta")
    parser.add_argument("--cv-file", required=True, help="CV en texto plano, PDF o DOCX")
    parser.add_argument("--seed", type=int, help="Semilla para puntuaciones reproducibles")
    parser.add_argument("--match-mode", choices=MATCH_MODES, help="Cruce por subcadena o por palabra completa")
    parser.add_argument("--vocabulary-file", help="Fichero con una skill por línea")
    parser.add_argument("--log-level", help="Nivel de logging (DEBUG, INFO, ...)")
    parser.add_argument("--json", action="store_true", help="Imprimir el resultado en JSON")
    return parser


def print_report(result) -> None:
    facts = result.facts
    scores = result.scores
    print("\n--- Candidato ---\n")
    print(f"Nombre:    {facts.name}")
    print(f"Email:     {facts.email_display}")
    print(f"Teléfono:  {facts.phone_display}")
    print(f"Ubicación: {facts.location_display}")

    print("\n--- Skills ---\n")
    print(f"Requeridas: {', '.join(result.skills.required) or '(ninguna)'}")
    print(f"En el CV:   {', '.join(result.skills.cv) or '(ninguna)'}")
    print(f"Coinciden:  {', '.join(result.skills.matched) or '(ninguna)'}")
    if result.skills.soft_skills:
        print(f"Blandas:    {', '.join(result.skills.soft_skills)}")

    print("\n--- Puntuaciones ---\n")
    print(f"  - Skills:      {scores.skills_score}")
    print(f"  - Experiencia: {scores.experience_score}")
    print(f"  - Educación:   {scores.education_score}")
    print(f"  - Global:      {scores.overall_score} ({scores.band}, {scores.recommendation})")

    print("\n--- Fortalezas ---\n")
    for s in result.strengths:
        print(f"+ {s}")
    print("\n--- Debilidades ---\n")
    for w in result.weaknesses:
        print(f"- {w}")
    print("\n--- Resumen ---\n")
    print(result.summary)


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env().override(
            seed=args.seed,
            match_mode=args.match_mode,
            vocabulary_file=args.vocabulary_file,
            log_level=args.log_level,
        )
        setup_logging(settings.get_log_level())
        analyzer = settings.build_analyzer()

        if args.job_url:
            job_text = sources.fetch_job_posting_from_url(args.job_url, timeout=settings.request_timeout)
        else:
            job_text = sources.read_text_file(args.job_file)
        cv_text = sources.read_document(args.cv_file)
    except (CVMatchError, requests.RequestException) as e:
        logger.error("%s", e)
        return 1

    result = analyzer.analyze(job_text, cv_text, os.path.basename(args.cv_file))
    if args.json:
        print(json.dumps(result.to_payload(), indent=2, ensure_ascii=False))
    else:
        print_report(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
