"""Module entrypoint for ``python -m shortcut_release_helper``."""

from shortcut_release_helper.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
