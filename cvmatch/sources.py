"""Lectura de entradas: ofertas desde URL y CVs desde ficheros.

Esto es trabajo previo al análisis: el analizador sólo recibe texto.
"""
import logging
import re
from pathlib import Path
from typing import Union

import docx
import requests
from bs4 import BeautifulSoup
from pdfminer.high_level import extract_text as extract_text_from_pdfminer

from .exceptions import DocumentReadError

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = {".txt", ".md", ".text", ""}
NON_CONTENT_TAGS = ["script", "style", "noscript", "template"]


def fetch_job_posting_from_url(url: str, timeout: float = 10) -> str:
    """Texto de una oferta publicada como HTML estático (el JS no se ejecuta)."""
    logger.info("Descargando oferta desde %s", url)
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    soup = BeautifulSoup(resp.text, "html.parser")
    for tag in soup.find_all(NON_CONTENT_TAGS):
        tag.decompose()
    lines = [re.sub(r"[ \t]+", " ", ln).strip() for ln in soup.get_text(separator="\n").splitlines()]
    # como mucho una línea en blanco entre bloques
    posting = re.sub(r"\n{3,}", "\n\n", "\n".join(lines)).strip()
    logger.debug("Oferta %s: %d caracteres", url, len(posting))
    return posting


def extract_text_from_pdf(path: Union[str, Path]) -> str:
    try:
        return extract_text_from_pdfminer(str(path))
    except Exception as e:
        raise DocumentReadError(f"No se pudo extraer texto del PDF {path}: {e}") from e


def extract_text_from_docx(path: Union[str, Path]) -> str:
    try:
        document = docx.Document(str(path))
    except Exception as e:
        raise DocumentReadError(f"No se pudo abrir el DOCX {path}: {e}") from e
    return "\n".join(p.text for p in document.paragraphs)


def read_text_file(path: Union[str, Path]) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(f"No se pudo leer {path}: {e}") from e


def read_document(path: Union[str, Path]) -> str:
    """Devuelve el texto de un CV según su extensión (.pdf, .docx o texto)."""
    p = Path(path)
    suffix = p.suffix.lower()
    logger.debug("Leyendo documento %s", p)
    if suffix == ".pdf":
        return extract_text_from_pdf(p)
    if suffix == ".docx":
        return extract_text_from_docx(p)
    if suffix == ".doc":
        raise DocumentReadError(f"Formato .doc no soportado, convierte {p.name} a .docx o .pdf")
    if suffix not in TEXT_SUFFIXES:
        logger.warning("Extensión %s desconocida, se lee %s como texto plano", suffix, p.name)
    return read_text_file(p)
