"""Module entrypoint for ``python -m autopick``.

All argument parsing happens in ``autopick.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
