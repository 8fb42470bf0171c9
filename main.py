"""Entry point de desarrollo sin instalar el paquete.

Uso: `python -m main departments --list all`.

El código vive en `src/`; sin instalación editable Python no encuentra
`cli`, `core` ni `adapters`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
