"""CLI `crmkit` (Typer + Rich)."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.client import CrmClient
from cli import doctor
from cli.ui_components import build_departments_table, build_tasks_table, format_meta, print_error
from core.config import ClientSettings
from core.domain.filters import ALL, ListSize, TaskListParams
from core.domain.pagination import Paginated
from core.errors import CrmSdkError, HttpStatusError
from core.query import coerce_filter, encode_query, serialize_query

app = typer.Typer(no_args_is_help=True, help="Client for the task/CRM REST API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _parse_list_size(value: Optional[str]) -> Optional[ListSize]:
    if value is None:
        return None
    if value.strip().lower() == ALL:
        return ALL
    try:
        return int(value)
    except ValueError as exc:
        raise typer.BadParameter("--list must be an integer or 'all'") from exc


def _task_filters(
    *,
    page: Optional[int],
    list_size: Optional[str],
    status: Optional[List[str]],
    priority: Optional[List[str]],
    responsible: Optional[List[int]],
    group_id: Optional[List[int]],
    parent_id: Optional[List[int]],
    deadline_from: Optional[int],
    deadline_to: Optional[int],
    created_from: Optional[int],
    created_to: Optional[int],
    closed_from: Optional[int],
    closed_to: Optional[int],
    search: Optional[str],
    boolean_operator: Optional[str],
) -> TaskListParams:
    data: dict[str, Any] = {
        "page": page,
        "list": _parse_list_size(list_size),
        "status": status or None,
        "priority": priority or None,
        "responsible": responsible or None,
        "group_id": group_id or None,
        "parent_id": parent_id or None,
        "search": search,
        "boolean_operator": boolean_operator,
    }
    for key, start, end in (
        ("deadline", deadline_from, deadline_to),
        ("created_date", created_from, created_to),
        ("closed_date", closed_from, closed_to),
    ):
        if start is not None or end is not None:
            data[key] = [start, end]
    try:
        return coerce_filter(data, TaskListParams)
    except CrmSdkError as exc:
        raise typer.BadParameter(str(exc)) from exc


_PAGE = typer.Option(None, "--page", "-p", min=1, help="Page number.")
_LIST = typer.Option(None, "--list", "-l", help="Page size, or 'all' to disable pagination.")


@app.callback()
def _main() -> None:
    _configure_logging(ClientSettings().log_level)


@app.command()
def departments(
    page: Optional[int] = _PAGE,
    list_size: Optional[str] = _LIST,
    show_all: bool = typer.Option(False, "--show-all", help="Include inactive departments."),
) -> None:
    """List departments."""

    size = _parse_list_size(list_size)

    async def _fetch() -> Any:
        async with CrmClient() as crm:
            return await crm.departments.get_departments(page, size, "all" if show_all else None)

    result = asyncio.run(_fetch())
    if isinstance(result, HttpStatusError):
        print_error(_console, result)
        raise typer.Exit(code=1)

    if isinstance(result.data, Paginated):
        _console.print(build_departments_table(result.data.data))
        _console.print(format_meta(result.data.meta))
    elif isinstance(result.data, list):
        _console.print(build_departments_table(result.data))
    else:
        _console.print_json(data=result.data)


@app.command()
def tasks(
    page: Optional[int] = _PAGE,
    list_size: Optional[str] = _LIST,
    status: Optional[List[str]] = typer.Option(None, "--status", "-s"),
    priority: Optional[List[str]] = typer.Option(None, "--priority"),
    responsible: Optional[List[int]] = typer.Option(None, "--responsible"),
    group_id: Optional[List[int]] = typer.Option(None, "--group-id"),
    parent_id: Optional[List[int]] = typer.Option(None, "--parent-id"),
    deadline_from: Optional[int] = typer.Option(None, "--deadline-from"),
    deadline_to: Optional[int] = typer.Option(None, "--deadline-to"),
    created_from: Optional[int] = typer.Option(None, "--created-from"),
    created_to: Optional[int] = typer.Option(None, "--created-to"),
    closed_from: Optional[int] = typer.Option(None, "--closed-from"),
    closed_to: Optional[int] = typer.Option(None, "--closed-to"),
    search: Optional[str] = typer.Option(None, "--search"),
    boolean_operator: Optional[str] = typer.Option(None, "--boolean-operator"),
) -> None:
    """List tasks matching the given filters."""

    filters = _task_filters(**locals())

    async def _fetch() -> Any:
        async with CrmClient() as crm:
            return await crm.tasks.get_tasks(filters)

    result = asyncio.run(_fetch())
    if isinstance(result, HttpStatusError):
        print_error(_console, result)
        raise typer.Exit(code=1)

    if isinstance(result.data, Paginated):
        _console.print(build_tasks_table(result.data.data))
        _console.print(format_meta(result.data.meta))
    elif isinstance(result.data, list):
        _console.print(build_tasks_table(result.data))
    else:
        _console.print_json(data=result.data)


@app.command()
def query(
    page: Optional[int] = _PAGE,
    list_size: Optional[str] = _LIST,
    status: Optional[List[str]] = typer.Option(None, "--status", "-s"),
    priority: Optional[List[str]] = typer.Option(None, "--priority"),
    responsible: Optional[List[int]] = typer.Option(None, "--responsible"),
    group_id: Optional[List[int]] = typer.Option(None, "--group-id"),
    parent_id: Optional[List[int]] = typer.Option(None, "--parent-id"),
    deadline_from: Optional[int] = typer.Option(None, "--deadline-from"),
    deadline_to: Optional[int] = typer.Option(None, "--deadline-to"),
    created_from: Optional[int] = typer.Option(None, "--created-from"),
    created_to: Optional[int] = typer.Option(None, "--created-to"),
    closed_from: Optional[int] = typer.Option(None, "--closed-from"),
    closed_to: Optional[int] = typer.Option(None, "--closed-to"),
    search: Optional[str] = typer.Option(None, "--search"),
    boolean_operator: Optional[str] = typer.Option(None, "--boolean-operator"),
) -> None:
    """Print the query string a task listing would send (no network I/O)."""

    filters = _task_filters(**locals())
    typer.echo(encode_query(serialize_query(filters)))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
