"""Modelos y entidades del dominio.

Aquí viven las estructuras de datos (Pydantic v2). El dominio no conoce
HTTP ni CLI: solo las formas de los recursos y de sus filtros.
"""
