"""Jinja2 environment compartido por páginas y reportes.

Por qué un único Environment:
- Las páginas web y el HTML que WeasyPrint convierte a PDF usan el mismo
  directorio de plantillas y la misma política de autoescape.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@lru_cache(maxsize=1)
def get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
