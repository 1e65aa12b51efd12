"""Allow ``python -m bosun_emitter``."""

from .cli import main


if __name__ == "__main__":
    main()
