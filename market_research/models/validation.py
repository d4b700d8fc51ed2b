from typing import Optional

class FormValidationError(ValueError):
    """Raised when a research form is submitted with invalid input"""
    pass

def has_title(title: Optional[str]) -> bool:
    """A research entry needs a non-blank title before it can be saved."""
    return bool(title and title.strip())

def require_title(title: Optional[str]) -> str:
    if not has_title(title):
        raise FormValidationError("Research title is required")
    return title
