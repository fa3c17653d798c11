"""Entry point for running litreview as a module or installed script.

Usage:
    litreview / python -m litreview                 → web UI (uvicorn)
    litreview <command> ... / python -m litreview <command> ... → CLI
"""

import logging
import sys

import uvicorn


def run() -> None:
    """Entry point: no args → web UI, else → CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if len(sys.argv) == 1:
        uvicorn.run("litreview.gui.app:app", host="127.0.0.1", port=8000)
    else:
        from litreview.cli import main
        sys.exit(main())


if __name__ == "__main__":
    run()
