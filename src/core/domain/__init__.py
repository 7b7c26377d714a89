"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los value objects del pipeline (Pydantic v2, inmutables).
- El dominio no conoce la CLI, Rich ni el reloj del sistema.
"""
