import math
from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum

import pandas as pd

# ------------------------ CONSTANTS ------------------------

INVALID_INPUT_MESSAGE = "Por favor, insira valores válidos para altura e peso."


class Tone(Enum):
    """Display color attached to each BMI category."""
    BLUE = "#3b82f6"
    GREEN = "#22c55e"
    YELLOW = "#eab308"
    ORANGE = "#f97316"
    RED = "#ef4444"
    DARK_RED = "#b91c1c"

    @property
    def color(self) -> str:
        return self.value


@dataclass(frozen=True)
class Band:
    lower: float
    upper: float
    label: str
    tone: Tone

    def contains(self, value: float) -> bool:
        return self.lower <= value < self.upper


# Ordered, closed below / open above. Single source for label and tone.
BANDS = (
    Band(-math.inf, 18.5, "Abaixo do peso", Tone.BLUE),
    Band(18.5, 25.0, "Peso normal", Tone.GREEN),
    Band(25.0, 30.0, "Sobrepeso", Tone.YELLOW),
    Band(30.0, 35.0, "Obesidade Grau I", Tone.ORANGE),
    Band(35.0, 40.0, "Obesidade Grau II", Tone.RED),
    Band(40.0, math.inf, "Obesidade Grau III", Tone.DARK_RED),
)

_UPPER_BOUNDS = [band.upper for band in BANDS[:-1]]


@dataclass(frozen=True)
class BmiResult:
    value: float
    category: str
    tone: Tone


class InvalidMeasurementError(ValueError):
    """Raised when a height or weight field is not a positive real number."""

    def __init__(self, field: str, raw: str):
        super().__init__(INVALID_INPUT_MESSAGE)
        self.field = field
        self.raw = raw


# ------------------------ VALIDATION ------------------------

def parse_measurement(raw: str, field: str) -> float:
    """
    Parse a raw form field into a positive, finite float.
    Accepts a decimal comma ("1,5") as typed in pt-BR.
    """
    if raw is None:
        raise InvalidMeasurementError(field, raw)

    text = str(raw).strip().replace(",", ".")
    try:
        number = float(text)
    except ValueError:
        raise InvalidMeasurementError(field, raw) from None

    if not math.isfinite(number) or number <= 0:
        raise InvalidMeasurementError(field, raw)
    return number


def validate(height: str, weight: str) -> tuple[float, float]:
    return parse_measurement(height, "height"), parse_measurement(weight, "weight")


# ------------------------ BMI ENGINE ------------------------

def calculate_bmi(height_cm: float, weight_kg: float) -> float:
    if height_cm <= 0 or weight_kg <= 0:
        raise ValueError("height and weight must be positive")
    height_m = height_cm / 100
    try:
        value = weight_kg / (height_m ** 2)
    except (ZeroDivisionError, OverflowError):
        raise InvalidMeasurementError("height", str(height_cm)) from None

    # float range limits, not a real body measurement
    if not math.isfinite(value) or value <= 0:
        raise InvalidMeasurementError("weight", str(weight_kg))
    return value


def classify(value: float) -> Band:
    return BANDS[bisect_right(_UPPER_BOUNDS, value)]


def evaluate(height_cm: float, weight_kg: float) -> BmiResult:
    value = calculate_bmi(height_cm, weight_kg)
    band = classify(value)
    return BmiResult(value=value, category=band.label, tone=band.tone)


def format_range(band: Band) -> str:
    if band.lower == -math.inf:
        return f"< {band.upper:.1f}"
    if band.upper == math.inf:
        return f"≥ {band.lower:.1f}"
    return f"{band.lower:.1f} – {band.upper - 0.1:.1f}"


def bands_frame() -> pd.DataFrame:
    """Reference table of the BMI bands, as shown on the page."""
    return pd.DataFrame(
        {
            "Faixa de IMC": [format_range(band) for band in BANDS],
            "Classificação": [band.label for band in BANDS],
        }
    )
