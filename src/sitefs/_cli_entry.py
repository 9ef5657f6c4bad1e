"""Console-script entry point for ``sitefs``.

The command modules import click at load time; click ships in the ``cli``
extra, so report a missing install instead of a bare ImportError.
"""

import sys


def main():
    try:
        from .cli import main as cli_main
    except ModuleNotFoundError as exc:
        if exc.name != "click":
            raise
        sys.stderr.write(
            "sitefs: the command-line tools need click, which is not installed.\n"
            "Run 'pip install \"sitefs[cli]\"' and try again.\n"
        )
        raise SystemExit(1)
    cli_main()
