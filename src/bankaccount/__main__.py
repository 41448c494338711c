"""Allow running the package with ``python -m bankaccount``."""

from bankaccount.cli import main

if __name__ == "__main__":
    main()
