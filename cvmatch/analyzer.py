"""Analizador de CVs frente a una oferta.

Pipeline (de izquierda a derecha, sin estado):
- extract_facts: nombre, email, teléfono y ubicación del CV en texto.
- match_skills: skills del vocabulario presentes en la oferta y en el CV.
- aggregate_scores: puntuación de skills + sub-puntuaciones sintéticas de
  experiencia y educación, combinadas en una puntuación global.
- generate_narrative: fortalezas, debilidades y resumen legibles.

Las heurísticas son simples y transparentes; los resultados son estimaciones,
no hechos verificados. El motor no lanza excepciones con texto vacío o raro:
siempre degrada a valores por defecto.
"""
import logging
import math
import re
from typing import List, Optional, Sequence

import numpy as np

from .models import (
    AnalysisResult,
    CandidateFacts,
    Narrative,
    ScoreBundle,
    SkillSet,
    fit_band,
)
from .vocabulary import SkillVocabulary, default_vocabulary

logger = logging.getLogger(__name__)

UNKNOWN_CANDIDATE = "Unknown Candidate"

MATCH_SUBSTRING = "substring"
MATCH_WORD = "word"
MATCH_MODES = (MATCH_SUBSTRING, MATCH_WORD)

# límites de puntuación
NO_REQUIREMENTS_SKILLS_SCORE = 75
SKILLS_FLOOR, SKILLS_CEILING = 30, 100
EXPERIENCE_RANGE = (65, 85)  # [low, high)
EDUCATION_RANGE = (70, 85)
OVERALL_FLOOR, OVERALL_CEILING = 40, 95
WEIGHTS = {"skills": 0.4, "experience": 0.3, "education": 0.3}

NAME_RE = re.compile(r"^([A-Z][a-z]+ [A-Z][a-z]+(?: [A-Z][a-z]+)?)\b")
DOC_EXTENSION_RE = re.compile(r"\.(pdf|doc|docx)$", re.I)
EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_RE = re.compile(r"\+?\d{1,3}[-.\s]?\d{1,4}[-.\s]?\d{1,4}[-.\s]?\d{1,9}")
LOCATION_LABEL_RE = re.compile(r"\b(?:Location|Address|City)[ \t]*:[ \t]*([A-Za-z ,]{2,50})", re.I)
# "Austin, TX": sólo en la cabecera, si no "Python, SQL" pasa por ubicación
CITY_CODE_RE = re.compile(r"\b([A-Z][a-z]+,[ \t]*[A-Z]{2})\b")
HEADER_LINES = 5

PHONE_MIN_LEN, PHONE_MAX_LEN = 8, 20
PHONE_MIN_DIGITS = 9
YEAR_RE = re.compile(r"(19|20)\d\d")


def round_half_up(value: float) -> int:
    # round() de Python redondea al par; aquí .5 siempre sube
    return int(math.floor(value + 0.5))


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def name_from_file_name(file_name: str) -> str:
    """Nombre de respaldo a partir del fichero: 'jane_doe.pdf' -> 'jane doe'."""
    base = DOC_EXTENSION_RE.sub("", file_name or "")
    base = re.sub(r"[_-]", " ", base).strip()
    return base or UNKNOWN_CANDIDATE


def _non_empty_lines(text: str) -> List[str]:
    return [ln.strip() for ln in text.splitlines() if ln.strip()]


def extract_name(text: str, file_name: str) -> str:
    # el tercer nombre tiene que estar en la misma línea
    lines = _non_empty_lines(text)
    first = re.sub(r"[ \t]+", " ", lines[0]) if lines else ""
    m = NAME_RE.match(first)
    return m.group(1) if m else name_from_file_name(file_name)


def _looks_like_phone(candidate: str) -> bool:
    if not PHONE_MIN_LEN <= len(candidate) <= PHONE_MAX_LEN:
        return False
    if sum(c.isdigit() for c in candidate) < PHONE_MIN_DIGITS:
        return False
    # "2015-2019 2020" son años, no un teléfono
    groups = [g for g in re.split(r"[-.\s]+", candidate.lstrip("+")) if g]
    return not all(len(g) == 4 and YEAR_RE.fullmatch(g) for g in groups)


def extract_phone(text: str) -> Optional[str]:
    for m in PHONE_RE.finditer(text):
        candidate = m.group(0).strip()
        if _looks_like_phone(candidate):
            return candidate
    return None


def extract_location(text: str) -> Optional[str]:
    m = LOCATION_LABEL_RE.search(text)
    if m and m.group(1).strip(" ,"):
        return m.group(1).strip(" ,")
    for line in _non_empty_lines(text)[:HEADER_LINES]:
        m = CITY_CODE_RE.search(line)
        if m:
            return m.group(1)
    return None


def extract_facts(cv_text: str, file_name: str) -> CandidateFacts:
    """Extrae los datos básicos del candidato.

    El nombre es una heurística: dos o tres palabras capitalizadas al inicio
    de la primera línea con texto, o el nombre del fichero si no hay
    coincidencia. El teléfono debe tener entre 8 y 20 caracteres y al menos
    9 dígitos, y no puede ser sólo una lista de años.
    """
    text = cv_text or ""
    email_m = EMAIL_RE.search(text)
    return CandidateFacts(
        name=extract_name(text, file_name),
        email=email_m.group(0) if email_m else None,
        phone=extract_phone(text),
        location=extract_location(text),
    )


def _contains(token: str, text: str, mode: str) -> bool:
    if mode == MATCH_WORD:
        return re.search(r"(?<![a-z0-9])" + re.escape(token) + r"(?![a-z0-9])", text) is not None
    return token in text


def match_skills(vocabulary: SkillVocabulary, job_description: str, cv_text: str, mode: str = MATCH_SUBSTRING) -> SkillSet:
    """Cruza el vocabulario con la oferta y con el CV.

    En modo 'substring' basta con que la skill aparezca dentro del texto
    ('java' coincide dentro de 'javascript'); en modo 'word' debe aparecer
    como palabra completa. El orden es siempre el del vocabulario.
    """
    if mode not in MATCH_MODES:
        raise ValueError(f"Modo de matching desconocido: {mode!r}")
    jd_lower = (job_description or "").lower()
    cv_lower = (cv_text or "").lower()

    required = [s for s in vocabulary.technical if _contains(s, jd_lower, mode)]
    cv_skills = [s for s in vocabulary.technical if _contains(s, cv_lower, mode)]
    in_cv = set(cv_skills)
    matched = [s for s in required if s in in_cv]
    soft = [s for s in vocabulary.soft if _contains(s, cv_lower, mode)]
    return SkillSet(required=required, cv=cv_skills, matched=matched, soft_skills=soft)


def skills_score_for(required_count: int, matched_count: int) -> int:
    if required_count <= 0:
        raw = NO_REQUIREMENTS_SKILLS_SCORE
    else:
        raw = round_half_up(100 * matched_count / required_count)
    return clamp(raw, SKILLS_FLOOR, SKILLS_CEILING)


def combine_scores(skills_score: int, experience_score: int, education_score: int) -> ScoreBundle:
    """Combina sub-puntuaciones ya calculadas en un ScoreBundle acotado."""
    skills_score = clamp(int(skills_score), 0, 100)
    experience_score = clamp(int(experience_score), 0, 100)
    education_score = clamp(int(education_score), 0, 100)
    raw = (
        WEIGHTS["skills"] * skills_score
        + WEIGHTS["experience"] * experience_score
        + WEIGHTS["education"] * education_score
    )
    overall = clamp(round_half_up(raw), OVERALL_FLOOR, OVERALL_CEILING)
    return ScoreBundle(
        skills_score=skills_score,
        experience_score=experience_score,
        education_score=education_score,
        overall_score=overall,
    )


def aggregate_scores(required: Sequence[str], matched: Sequence[str], rng: np.random.Generator) -> ScoreBundle:
    """Calcula las puntuaciones.

    Experiencia y educación no se extraen del CV todavía: se sortean con el
    generador recibido. Con un generador sembrado el resultado es reproducible.
    """
    skills = skills_score_for(len(required), len(matched))
    experience = int(rng.integers(*EXPERIENCE_RANGE))
    education = int(rng.integers(*EDUCATION_RANGE))
    return combine_scores(skills, experience, education)


def match_percentage(required_count: int, matched_count: int) -> int:
    if required_count <= 0:
        return 0
    return round_half_up(100 * matched_count / required_count)


def generate_narrative(candidate_name: str, scores: ScoreBundle, matched: Sequence[str], cv_skills: Sequence[str], required: Sequence[str]) -> Narrative:
    """Fortalezas, debilidades y resumen. Las listas nunca quedan vacías."""
    strengths: List[str] = []
    if matched:
        strengths.append(f"Strong technical skills: {', '.join(matched[:3])}")
    if len(cv_skills) > 5:
        strengths.append(f"Diverse technical skill set ({len(cv_skills)} skills identified)")
    strengths.append("Professional background with relevant qualifications")

    weaknesses: List[str] = []
    matched_set = set(matched)
    missing = [s for s in required if s not in matched_set]
    if missing:
        weaknesses.append(f"Missing key skills: {', '.join(missing[:2])}")
    if len(matched) * 2 < len(required):
        weaknesses.append("Limited match with the required technical skills")
    if not weaknesses:
        weaknesses.append("Minor areas for development")

    pct = match_percentage(len(required), len(matched))
    summary = (
        f"{candidate_name}: {fit_band(scores.overall_score)} candidate fit "
        f"({scores.overall_score}% overall score) with a {pct}% skill match, "
        f"{len(matched)} of {len(required)} required skills matched."
    )
    return Narrative(strengths=strengths, weaknesses=weaknesses, summary=summary)


class CVAnalyzer:
    """Servicio sin estado que ejecuta el pipeline completo.

    Guarda sólo configuración inmutable: vocabulario, modo de matching y
    semilla opcional. Con semilla, cada llamada crea un generador nuevo a
    partir de ella, de modo que dos llamadas iguales dan el mismo resultado.
    """

    def __init__(self, vocabulary: Optional[SkillVocabulary] = None, *, match_mode: str = MATCH_SUBSTRING, seed: Optional[int] = None):
        if match_mode not in MATCH_MODES:
            raise ValueError(f"Modo de matching desconocido: {match_mode!r}")
        self.vocabulary = vocabulary if vocabulary is not None else default_vocabulary()
        self.match_mode = match_mode
        self.seed = seed

    def make_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)

    def analyze(self, job_description: str, cv_text: str, file_name: str, rng: Optional[np.random.Generator] = None) -> AnalysisResult:
        for label, value in (("job_description", job_description), ("cv_text", cv_text), ("file_name", file_name)):
            if not isinstance(value, str):
                raise TypeError(f"{label} debe ser str, no {type(value).__name__}")
        if rng is None:
            rng = self.make_rng()

        logger.debug("Analizando CV %s (modo=%s)", file_name, self.match_mode)
        facts = extract_facts(cv_text, file_name)
        skills = match_skills(self.vocabulary, job_description, cv_text, self.match_mode)
        scores = aggregate_scores(skills.required, skills.matched, rng)
        narrative = generate_narrative(facts.name, scores, skills.matched, skills.cv, skills.required)
        result = AnalysisResult(
            file_name=file_name,
            facts=facts,
            skills=skills,
            scores=scores,
            narrative=narrative,
            match_percentage=match_percentage(len(skills.required), len(skills.matched)),
        )
        logger.info(
            "CV %s analizado: %s, score=%d (%d/%d skills)",
            file_name, facts.name, scores.overall_score, len(skills.matched), len(skills.required),
        )
        return result


def analyze_cv(job_description: str, cv_text: str, file_name: str, *, vocabulary: Optional[SkillVocabulary] = None, match_mode: str = MATCH_SUBSTRING, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None) -> AnalysisResult:
    """Atajo: construye un CVAnalyzer y analiza un único CV."""
    analyzer = CVAnalyzer(vocabulary, match_mode=match_mode, seed=seed)
    return analyzer.analyze(job_description, cv_text, file_name, rng=rng)


if __name__ == "__main__":
    # demo rápido si se ejecuta solo
    sample_job = "Looking for a Python and Docker engineer with SQL skills"
    sample_cv = "John Smith john@x.com +1-555-123-4567\nSkills: python, docker, mysql experience"
    res = analyze_cv(sample_job, sample_cv, "john_smith.pdf", seed=42)
    print(res.summary)
    print("\n".join(res.strengths + res.weaknesses))
