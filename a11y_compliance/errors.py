"""
Error Types

Exceptions raised by the compliance runtime. Only pure computation
errors and registry conflicts are raised; state-machine edge cases
(empty focus traps, unmeasured elements) degrade to no-ops or failing
verdicts instead.
"""


class ComplianceError(Exception):
    """Base class for all compliance runtime errors"""


class InvalidColorFormat(ComplianceError, ValueError):
    """
    A color value is not a well-formed 6-hex-digit sRGB string.

    Attributes:
        value: The rejected input
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid hex color format: {value!r} (expected #RRGGBB)")


class ShortcutConflictError(ComplianceError):
    """A shortcut with the same key and modifiers is already registered"""

    def __init__(self, sequence: str, existing_description: str):
        self.sequence = sequence
        self.existing_description = existing_description
        super().__init__(
            f"Shortcut {sequence} is already bound to '{existing_description}'"
        )
