"""
Entry point for the `sitectl` command-line interface.

sitectl drives a static-site workflow: page generation, JS bundling, a
local container environment, rsync deploys and 7z backups.
"""


def main():
    """Main entry point for the sitectl CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
