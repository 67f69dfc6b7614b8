"""Allow ``python -m wifiwatch``."""

from wifiwatch.cli import cli

if __name__ == "__main__":
    cli()
