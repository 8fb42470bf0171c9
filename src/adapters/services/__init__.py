"""Facades por recurso (departamentos, email, tareas).

Cada método compone plantilla de ruta + query + cuerpo en un
`RequestDescriptor` y tipa la respuesta con `ShapeResolver`.
"""

from adapters.services.departments import DepartmentsService
from adapters.services.email import EmailService
from adapters.services.tasks import TasksService

__all__ = [
    "DepartmentsService",
    "EmailService",
    "TasksService",
]
