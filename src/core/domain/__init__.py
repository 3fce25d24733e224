"""Modelos, errores y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP, sesiones, CLI ni PDF: solo rangos y primos.
"""
