class InvariantViolation(Exception):
    """Raised when a content record breaks a structural rule."""


class ContentValidationError(InvariantViolation):
    """
    Raised when editor input fails validation.

    `errors` maps a field key (``title_fr``, ``section_0_content_ar``...)
    to a message in the editor language.
    """

    def __init__(self, errors, message="Content validation failed"):
        super().__init__(message)
        self.errors = dict(errors)
