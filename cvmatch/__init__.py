"""cvmatch: compara un CV con una oferta y explica el encaje.

Paquete pequeño con:
- extracción de datos del candidato (nombre, email, teléfono, ubicación)
- cruce de skills del vocabulario entre oferta y CV
- puntuación multi-factor con aleatoriedad inyectable y sembrable
- narrativa legible: fortalezas, debilidades y resumen

Las heurísticas son simples y transparentes; los resultados son estimaciones.
"""

from .analyzer import CVAnalyzer, analyze_cv
from .models import AnalysisResult, CandidateFacts, Narrative, ScoreBundle, SkillSet
from .vocabulary import SkillVocabulary, default_vocabulary, load_vocabulary

__all__ = [
    "AnalysisResult",
    "CVAnalyzer",
    "CandidateFacts",
    "Narrative",
    "ScoreBundle",
    "SkillSet",
    "SkillVocabulary",
    "analyze_cv",
    "default_vocabulary",
    "load_vocabulary",
]
