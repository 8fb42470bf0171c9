"""Resolución de plantillas de rutas (`company/v1/departments/:id`).

Reglas:
- Un placeholder es `:` seguido de un identificador.
- Cada ocurrencia se sustituye por `str(valor)`; solo `str` e `int`.
- No se hace url-encoding de segmentos.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from core.errors import MissingParameterError, TemplateError

_PLACEHOLDER_RE = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")
# A marker not followed by an identifier start (":/", ":1", trailing ":").
_DANGLING_RE = re.compile(r":(?![A-Za-z_])")


def template_placeholders(template: str) -> list[str]:
    """Identifiers referenced by `template`, in order of first appearance."""

    seen: list[str] = []
    for match in _PLACEHOLDER_RE.finditer(template):
        name = match.group(1)
        if name not in seen:
            seen.append(name)
    return seen


def _stringify(name: str, value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TemplateError(f"URL parameter {name!r} must be str or int, got {type(value).__name__}")
    return str(value)


def resolve_path(template: str, params: Mapping[str, Any] | None = None) -> str:
    """Substitute every `:name` in `template` with its value from `params`.

    Raises `MissingParameterError` for an identifier absent from `params` and
    `TemplateError` for dangling markers or non-scalar values. Only the
    template is scanned: substituted values may contain `:` (`"urn:1"`).
    """

    params = params or {}
    dangling = _DANGLING_RE.search(template)
    if dangling:
        raise TemplateError(f"dangling placeholder marker at {dangling.start()} in template {template!r}")

    for name in template_placeholders(template):
        if name not in params:
            raise MissingParameterError(name, template)

    # Literal segments between placeholders hold no marker, so one pass
    # resolves every placeholder of the template.
    return _PLACEHOLDER_RE.sub(lambda m: _stringify(m.group(1), params[m.group(1)]), template)
