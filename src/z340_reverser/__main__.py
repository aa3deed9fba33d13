"""Run the Z-340 reverser as ``python -m z340_reverser``."""
from z340_reverser.cli import cli


def main():
    cli(prog_name="z340-reverser")


if __name__ == "__main__":
    main()
