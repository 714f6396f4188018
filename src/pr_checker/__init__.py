"""pr-checker - validate pull request titles and labels against a policy."""

__version__ = "0.3.0"
