"""Main entry point for the prime_catacombs package."""
from prime_catacombs.cli import cli


def main():
    """Main entry point function."""
    cli()


if __name__ == "__main__":
    main()
