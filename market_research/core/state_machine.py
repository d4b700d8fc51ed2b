from enum import Enum

class InvalidTransitionError(Exception):
    """Raised when a form is driven through a transition it does not allow"""
    pass

class ViewMode(str, Enum):
    DASHBOARD = "dashboard"
    LIST = "list"
    INSIGHTS = "insights"

class SubmitState(Enum):
    IDLE = 0
    SUBMITTING = 1
    SUCCEEDED = 2
    FAILED = 3

class StateTransition:
    """Simple state transition validator for form submission"""

    _allowed = {
        SubmitState.IDLE: {SubmitState.SUBMITTING},
        SubmitState.SUBMITTING: {SubmitState.SUCCEEDED, SubmitState.FAILED},
        # A failed save keeps the form open; the user may retry
        SubmitState.FAILED: {SubmitState.SUBMITTING},
        SubmitState.SUCCEEDED: {SubmitState.IDLE},
    }

    @staticmethod
    def is_valid(from_state: SubmitState, to_state: SubmitState) -> bool:
        return to_state in StateTransition._allowed.get(from_state, set())
