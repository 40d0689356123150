"""Allow running boilerstrip as a module: python -m boilerstrip."""

from boilerstrip.cli import app

if __name__ == "__main__":
    app()
