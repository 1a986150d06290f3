from core.cli.app import cli


def main():
    """Entry point for the manage-secrets CLI. Delegates to core.cli.app:cli."""
    cli()


if __name__ == "__main__":
    main()
