"""`python -m main` from inside `src/`, same behaviour as the `bobcat` script."""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
