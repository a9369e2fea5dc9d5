"""CLI entry point: python -m nugetsentinel"""

from nugetsentinel.cli import main

main(prog_name="nugetsentinel")
