"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2) y las
  excepciones del lookup.
- El dominio no conoce DNS, procesos ni CLI: solo conceptos del problema.
"""
