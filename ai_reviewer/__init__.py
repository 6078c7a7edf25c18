"""AI-assisted pull request reviewer for GitHub Actions."""

__version__ = "0.2.0"
