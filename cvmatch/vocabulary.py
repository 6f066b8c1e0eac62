"""Vocabularios de skills reconocidas.

Listas fijas, en minúsculas y en orden estable. El orden importa: los
resultados del matcher siguen el orden del vocabulario, no el del texto.
"""
from pathlib import Path
from typing import Iterable, Tuple, Union

from .exceptions import VocabularyError

TECH_SKILLS = [
    # lenguajes
    "python", "javascript", "java", "c++", "sql", "html", "css", "typescript", "php",
    "ruby", "go", "rust", "swift",
    # ML / IA
    "tensorflow", "keras", "pytorch", "opencv", "pandas", "numpy", "matplotlib",
    "scikit-learn", "scipy", "huggingface", "transformers", "bert", "gpt", "llama",
    "stable diffusion",
    # cloud y devops
    "aws", "azure", "google cloud", "gcp", "docker", "kubernetes", "jenkins", "git",
    "github", "gitlab", "terraform", "ansible", "ci/cd", "devops",
    # bases de datos
    "mysql", "postgresql", "mongodb", "redis", "elasticsearch", "sqlite", "oracle",
    "sql server",
    # web
    "react", "angular", "vue", "node.js", "express", "django", "flask", "spring",
    "laravel", "rest api", "graphql", "microservices",
    # móvil
    "ios", "android", "react native", "flutter", "kotlin",
    # datos
    "data science", "machine learning", "deep learning", "ai", "artificial intelligence",
    "data analysis", "statistics", "tableau", "power bi", "excel",
    # otros
    "blockchain", "cybersecurity", "penetration testing", "network security", "linux",
    "windows",
]

SOFT_SKILLS = [
    "leadership", "communication", "teamwork", "problem solving", "analytical thinking",
    "creativity", "adaptability", "time management", "project management", "collaboration",
    "critical thinking", "innovation", "mentoring", "conflict resolution", "negotiation",
]


def _normalize(tokens: Iterable[str]) -> Tuple[str, ...]:
    """Minúsculas, sin espacios sobrantes y sin duplicados, manteniendo orden."""
    seen = set()
    out = []
    for t in tokens:
        if not isinstance(t, str):
            raise VocabularyError(f"Entrada de vocabulario no es texto: {t!r}")
        key = t.strip().lower()
        if not key or key in seen:
            continue
        seen.add(key)
        out.append(key)
    return tuple(out)


class SkillVocabulary:
    """Vocabulario inmutable de skills técnicas y blandas.

    Se construye una vez y se pasa al analizador; nunca se modifica.
    """

    __slots__ = ("_technical", "_soft")

    def __init__(self, technical: Iterable[str], soft: Iterable[str] = ()):
        technical = _normalize(technical)
        if not technical:
            raise VocabularyError("El vocabulario técnico no puede estar vacío")
        object.__setattr__(self, "_technical", technical)
        object.__setattr__(self, "_soft", _normalize(soft))

    def __setattr__(self, name, value):
        raise AttributeError("SkillVocabulary es inmutable")

    @property
    def technical(self) -> Tuple[str, ...]:
        return self._technical

    @property
    def soft(self) -> Tuple[str, ...]:
        return self._soft

    def __iter__(self):
        return iter(self._technical)

    def __len__(self) -> int:
        return len(self._technical)

    def __contains__(self, token: str) -> bool:
        return token.lower() in self._technical

    def __eq__(self, other) -> bool:
        if not isinstance(other, SkillVocabulary):
            return NotImplemented
        return self._technical == other._technical and self._soft == other._soft

    def __hash__(self) -> int:
        return hash((self._technical, self._soft))

    def __repr__(self) -> str:
        return f"SkillVocabulary({len(self._technical)} technical, {len(self._soft)} soft)"


def default_vocabulary() -> SkillVocabulary:
    return SkillVocabulary(TECH_SKILLS, SOFT_SKILLS)


def load_vocabulary(path: Union[str, Path], soft: Iterable[str] = SOFT_SKILLS) -> SkillVocabulary:
    """Carga un vocabulario técnico desde un fichero de texto.

    Una skill por línea; líneas vacías y líneas que empiezan por `#` se
    ignoran (así "c#" sigue siendo una skill válida).
    Las skills blandas se mantienen por defecto.
    """
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as e:
        raise VocabularyError(f"No se pudo leer el vocabulario {p}: {e}") from e
    tokens = []
    for line in raw.splitlines():
        s = line.strip()
        if s and not s.startswith("#"):
            tokens.append(s)
    if not tokens:
        raise VocabularyError(f"El fichero de vocabulario {p} no contiene skills")
    return SkillVocabulary(tokens, soft)
