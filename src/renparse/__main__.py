"""Allow ``python -m renparse``."""

from renparse.cli import main

if __name__ == "__main__":
    main()
