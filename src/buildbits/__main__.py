# topmark:header:start
#
#   project      : BuildBits
#   file         : __main__.py
#   file_relpath : src/buildbits/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point so that ``python -m buildbits`` runs the CLI."""

from buildbits.cli.main import cli

if __name__ == "__main__":
    cli()
