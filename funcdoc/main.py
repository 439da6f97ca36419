"""Entry point for the function documentation extractor.

Delegates to the CLI, which initializes configuration and logging.
"""

from funcdoc.cli.commands import funcdoc


def main() -> None:
    """Launch the CLI."""
    funcdoc(prog_name="funcdoc")


if __name__ == "__main__":
    main()
