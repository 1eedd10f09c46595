"""Module entry point for `python -m plq.cli`."""

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    from plq.cli import cli

    cli()
