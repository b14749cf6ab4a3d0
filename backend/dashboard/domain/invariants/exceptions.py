class InvariantViolation(ValueError):
    """A document or edit breaks a structural rule of the site content."""
