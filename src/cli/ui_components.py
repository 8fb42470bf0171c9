"""Componentes de UI para CLI (Rich).

Tablas y paneles reutilizables; los comandos solo deciden qué mostrar.
"""

from __future__ import annotations

from typing import Any, Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.department import Department
from core.domain.pagination import PaginationMeta
from core.domain.task import Task
from core.errors import HttpStatusError


def build_departments_table(departments: Iterable[Department]) -> Table:
    table = Table(title="Departments")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Parent", style="dim")
    table.add_column("Head", style="magenta")
    table.add_column("Users", style="green", justify="right")
    table.add_column("Active", style="green")
    for dep in departments:
        table.add_row(
            dep.id,
            dep.name or "",
            dep.parent_id or "",
            dep.head_id or "",
            str(len(dep.users_ids)),
            "yes" if dep.active else "no",
        )
    return table


def build_tasks_table(tasks: Iterable[Task]) -> Table:
    table = Table(title="Tasks")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Status", style="yellow")
    table.add_column("Priority", style="magenta")
    table.add_column("Responsible", style="dim")
    table.add_column("Deadline", style="green", justify="right")
    for task in tasks:
        table.add_row(
            task.id,
            task.title or "",
            task.status or "",
            task.priority or "",
            task.responsible_id or "",
            str(task.deadline) if task.deadline is not None else "",
        )
    return table


def format_meta(meta: PaginationMeta) -> Text:
    """Pie de página: `page 2/4 · items 11-20 of 35`."""

    return Text(
        f"page {meta.current_page}/{meta.last_page} · items {meta.from_}-{meta.to} of {meta.total}",
        style="dim",
    )


def print_error(console: Console, error: HttpStatusError) -> None:
    body: Any = error.body
    console.print(Panel(Text(str(body)), title=f"HTTP {error.status}", border_style="red"))
