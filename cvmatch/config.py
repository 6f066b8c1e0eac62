"""Configuración desde variables de entorno (y fichero .env si existe).

Variables:
- CVMATCH_SEED: semilla para sub-puntuaciones reproducibles.
- CVMATCH_MATCH_MODE: 'substring' (por defecto) o 'word'.
- CVMATCH_VOCABULARY_FILE: vocabulario técnico alternativo.
- CVMATCH_LOG_LEVEL: nivel de logging (INFO por defecto).
- CVMATCH_REQUEST_TIMEOUT: segundos para descargar ofertas.
"""
import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from dotenv import load_dotenv

from .analyzer import MATCH_MODES, MATCH_SUBSTRING, CVAnalyzer
from .exceptions import ConfigurationError
from .vocabulary import default_vocabulary, load_vocabulary

ENV_PREFIX = "CVMATCH_"


def _get_int(env: Mapping[str, str], key: str) -> Optional[int]:
    raw = env.get(ENV_PREFIX + key, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{ENV_PREFIX}{key} debe ser un entero, no {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    seed: Optional[int] = None
    match_mode: str = MATCH_SUBSTRING
    vocabulary_file: Optional[str] = None
    log_level: str = "INFO"
    request_timeout: float = 10.0

    def __post_init__(self):
        if self.match_mode not in MATCH_MODES:
            raise ConfigurationError(
                f"Modo de matching inválido {self.match_mode!r}; usa uno de {', '.join(MATCH_MODES)}"
            )
        if self.request_timeout <= 0:
            raise ConfigurationError("El timeout de descarga debe ser positivo")

    def get_log_level(self) -> int:
        """Convierte el nivel en texto a la constante de logging."""
        return getattr(logging, self.log_level.upper(), logging.INFO)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        if env is None:
            load_dotenv()
            env = os.environ
        timeout_raw = env.get(ENV_PREFIX + "REQUEST_TIMEOUT", "").strip()
        try:
            timeout = float(timeout_raw) if timeout_raw else 10.0
        except ValueError as e:
            raise ConfigurationError(f"{ENV_PREFIX}REQUEST_TIMEOUT inválido: {timeout_raw!r}") from e
        return cls(
            seed=_get_int(env, "SEED"),
            match_mode=env.get(ENV_PREFIX + "MATCH_MODE", MATCH_SUBSTRING).strip().lower() or MATCH_SUBSTRING,
            vocabulary_file=env.get(ENV_PREFIX + "VOCABULARY_FILE") or None,
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", "INFO").strip() or "INFO",
            request_timeout=timeout,
        )

    def override(self, **changes) -> "Settings":
        """Copia con los valores no nulos de `changes` (p.ej. flags de CLI)."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def build_analyzer(self) -> CVAnalyzer:
        vocab = load_vocabulary(self.vocabulary_file) if self.vocabulary_file else default_vocabulary()
        return CVAnalyzer(vocab, match_mode=self.match_mode, seed=self.seed)
