"""Allow ``python -m designprompt``."""

from designprompt.cli import main

main()
