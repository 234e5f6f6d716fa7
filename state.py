"""
Calculator state and the handlers that mutate it.

The page keeps a single CalculatorState in the Streamlit session. Widgets
write into ``form``; the submit button calls ``submit``; the finished tip
request calls ``settle_tip``.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import MutableMapping, Optional

from bmi import BmiResult, InvalidMeasurementError, evaluate, validate
from tips import TipOutcome

logger = logging.getLogger("bmi_tips.state")

STATE_KEY = "calculator"


class TipStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class TipState:
    status: TipStatus = TipStatus.IDLE
    text: Optional[str] = None

    @property
    def is_settled(self) -> bool:
        return self.status in (TipStatus.LOADED, TipStatus.FAILED)


@dataclass
class FormInput:
    height: str = ""
    weight: str = ""

    def is_complete(self) -> bool:
        return bool(self.height.strip()) and bool(self.weight.strip())


@dataclass
class CalculatorState:
    form: FormInput = field(default_factory=FormInput)
    error: str = ""
    result: Optional[BmiResult] = None
    tip: TipState = field(default_factory=TipState)
    submission: int = 0

    @property
    def is_loading(self) -> bool:
        return self.tip.status is TipStatus.LOADING

    @property
    def can_submit(self) -> bool:
        return not self.is_loading and self.form.is_complete()


def load_state(session: MutableMapping) -> CalculatorState:
    if STATE_KEY not in session:
        session[STATE_KEY] = CalculatorState()
    return session[STATE_KEY]


def submit(state: CalculatorState) -> bool:
    """Validate the form and start a new calculation. Returns False on bad input."""
    try:
        height, weight = validate(state.form.height, state.form.weight)
        result = evaluate(height, weight)
    except InvalidMeasurementError as e:
        logger.info("Rejected %s input %r", e.field, e.raw)
        state.error = str(e)
        state.result = None
        state.tip = TipState()
        return False

    state.error = ""
    state.result = result
    state.tip = TipState(status=TipStatus.LOADING)
    state.submission += 1
    logger.debug("Submission %d: BMI %.2f (%s)", state.submission, state.result.value, state.result.category)
    return True


def settle_tip(state: CalculatorState, submission: int, outcome: TipOutcome) -> bool:
    # a superseded request must not overwrite the current tip
    if submission != state.submission:
        logger.debug("Ignoring tip for stale submission %d (current %d)", submission, state.submission)
        return False

    status = TipStatus.LOADED if outcome.ok else TipStatus.FAILED
    state.tip = TipState(status=status, text=outcome.text)
    return True
