"""Glance CLI entry point.

Allows running via `python -m glance` and provides the console script
defined in `pyproject.toml`.

Usage:
    glance [filename]

Controls:
    h/j/k/l, arrow keys: Move the cursor (left/right wrap across lines)
    ^, Home / $, End: Start / end of line
    Ctrl-U, PageUp / Ctrl-D, PageDown: Page up / down
    Ctrl-Q: Quit
"""

from __future__ import annotations

import sys
from typing import Optional

from .errors import GlanceError
from .version import get_version_string


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0

    # Lazy import to avoid importing terminal deps for --version
    from .document import Document
    from .settings import load_settings
    from .viewer import Viewer

    try:
        document = Document.open(args[0]) if args else Document()
        viewer = Viewer(document, settings=load_settings())
        viewer.run()
    except (GlanceError, OSError) as e:
        print(f"glance: error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
