"""Allow ``python -m bashguide``."""

from bashguide.cli import main

if __name__ == "__main__":
    main()
