"""Excepciones propias de cvmatch.

El motor de análisis nunca lanza para texto válido; estas excepciones sólo
aparecen en los bordes (configuración, vocabularios, lectura de documentos).
"""


class CVMatchError(Exception):
    """Base de todos los errores de cvmatch."""


class VocabularyError(CVMatchError):
    """Vocabulario vacío, ilegible o con entradas inválidas."""


class ConfigurationError(CVMatchError):
    """Valor de configuración inválido (p.ej. variable de entorno mal formada)."""


class DocumentReadError(CVMatchError):
    """Documento de entrada no soportado o imposible de leer."""
