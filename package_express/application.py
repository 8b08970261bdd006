"""
Shipping Application

Runs one quote session as a small state machine:

    START -> COLLECT_WEIGHT -> VALIDATE_WEIGHT -> COLLECT_DIMENSIONS
          -> VALIDATE_DIMENSIONS -> COMPUTE_AND_REPORT -> END

Either validation state can move to ABORT instead. ABORT and END are both
terminal; neither is reported as a failure to the caller's process.
"""

from enum import Enum

from .data import CURRENCY_FORMAT, messages
from .package import Package


class SessionState(Enum):
    START = "Start"
    COLLECT_WEIGHT = "CollectWeight"
    VALIDATE_WEIGHT = "ValidateWeight"
    COLLECT_DIMENSIONS = "CollectDimensions"
    VALIDATE_DIMENSIONS = "ValidateDimensions"
    COMPUTE_AND_REPORT = "ComputeAndReport"
    ABORT = "Abort"
    END = "End"


TERMINAL_STATES = {SessionState.ABORT, SessionState.END}


def format_cost(cost: float) -> str:
    """Format a cost for display, e.g. 100 -> "$100.00"."""
    return CURRENCY_FORMAT.format(cost)


class ShippingApplication:
    """
    Coordinates one quote session.

    Args:
        ui: Gateway used for every prompt and message
        validator: Object with validate_weight / validate_dimensions
        calculator: Object with calculate_cost(package)
    """

    def __init__(self, ui, validator, calculator):
        self._ui = ui
        self._validator = validator
        self._calculator = calculator
        self._handlers = {
            SessionState.START: self._start,
            SessionState.COLLECT_WEIGHT: self._collect_weight,
            SessionState.VALIDATE_WEIGHT: self._validate_weight,
            SessionState.COLLECT_DIMENSIONS: self._collect_dimensions,
            SessionState.VALIDATE_DIMENSIONS: self._validate_dimensions,
            SessionState.COMPUTE_AND_REPORT: self._compute_and_report,
        }
        self.state = SessionState.START
        self.package = Package()

    def run(self) -> SessionState:
        """Run the session to a terminal state and return it."""
        self.state = SessionState.START
        self.package = Package()

        while self.state not in TERMINAL_STATES:
            self.state = self._handlers[self.state]()

        return self.state

    # -------------------------------------------------------------------------
    # STATES
    # -------------------------------------------------------------------------

    def _start(self) -> SessionState:
        self._ui.display(messages.WELCOME)
        return SessionState.COLLECT_WEIGHT

    def _collect_weight(self) -> SessionState:
        self.package.weight = self._ui.get_numeric_input(messages.PROMPT_WEIGHT)
        return SessionState.VALIDATE_WEIGHT

    def _validate_weight(self) -> SessionState:
        ok, error = self._validator.validate_weight(self.package.weight)
        if not ok:
            self._ui.display(error)
            return SessionState.ABORT
        return SessionState.COLLECT_DIMENSIONS

    def _collect_dimensions(self) -> SessionState:
        # Fixed order: width, height, length
        self.package.width = self._ui.get_numeric_input(messages.PROMPT_WIDTH)
        self.package.height = self._ui.get_numeric_input(messages.PROMPT_HEIGHT)
        self.package.length = self._ui.get_numeric_input(messages.PROMPT_LENGTH)
        return SessionState.VALIDATE_DIMENSIONS

    def _validate_dimensions(self) -> SessionState:
        ok, error = self._validator.validate_dimensions(
            self.package.width, self.package.height, self.package.length
        )
        if not ok:
            self._ui.display(error)
            return SessionState.ABORT
        return SessionState.COMPUTE_AND_REPORT

    def _compute_and_report(self) -> SessionState:
        cost = self._calculator.calculate_cost(self.package)
        self._ui.display(messages.ESTIMATE.format(cost=format_cost(cost)))
        self._ui.display(messages.THANK_YOU)
        return SessionState.END
