"""Allow ``python -m gale`` invocation."""

from gale.cli import main

if __name__ == "__main__":
    main(prog_name="gale")
