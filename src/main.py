"""Script de ejecución.

Por qué existe:
- Permite ejecutar la CLI con `python src/main.py ip <config>` durante desarrollo.
- Mantiene un entrypoint simple además del script `netaddrs` instalado.
"""

from __future__ import annotations

import sys

# Addresses and error messages are plain ASCII, but stderr may carry
# executable output in any encoding; avoid cp1252 crashes on Windows.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
