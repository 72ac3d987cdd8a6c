"""
errors.py

Anything raised as a FatalError ends the presentation with a non-zero exit.
Errors outside this tree are either handled where they occur or are bugs.
"""


class FatalError(RuntimeError):
    """Leaves the displayed state out of step with the document."""
