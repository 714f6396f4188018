"""Allow ``python -m pr_checker``."""

from pr_checker.cli import main

if __name__ == "__main__":
    main()
