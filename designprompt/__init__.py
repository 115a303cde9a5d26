"""designprompt -- design prompt and starter document generator.

See ``designprompt.generator`` for the generation core and
``designprompt.cli`` for the command-line caller.
"""

__version__ = "0.1.0"
