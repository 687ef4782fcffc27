# bloch_inspector/parser.py
"""
Amplitude literal parsing.

Each token of a statevector dump is tried against an ordered list of
recognizers (polar, exponential, signed cartesian, pure imaginary, real).
The first recognizer whose shape matches AND whose numbers are finite wins;
a shape match with bad numbers falls through to the next recognizer.
Failure is reported as None, never raised.
"""
import math
import re
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .complex_math import ComplexNumber, from_polar

_NUM = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?"

_NUMBER_RE      = re.compile(rf"^{_NUM}$", re.IGNORECASE)
_POLAR_RE       = re.compile(rf"^({_NUM})\s*(?:∠|angle|ang)\s*({_NUM})", re.IGNORECASE)  # prefix only; trailing units ignored
_EXPONENTIAL_RE = re.compile(rf"^({_NUM})\s*e\^\{{?\s*i\s*({_NUM})\s*\}}?$", re.IGNORECASE)
_CARTESIAN_RE   = re.compile(rf"^({_NUM})\s*([+-])\s*({_NUM})\s*[ij]$", re.IGNORECASE)
_IMAGINARY_RE   = re.compile(rf"^({_NUM})[ij]$", re.IGNORECASE)


class LiteralForm(Enum):
    POLAR = "polar"
    EXPONENTIAL = "exponential"
    CARTESIAN = "cartesian"
    IMAGINARY = "imaginary"
    REAL = "real"


def _finite(text: str) -> Optional[float]:
    """float(text) if it is a well-formed, finite number, else None."""
    if not _NUMBER_RE.match(text):
        return None
    value = float(text)
    return value if math.isfinite(value) else None


def _polar(token: str) -> Optional[ComplexNumber]:
    m = _POLAR_RE.match(token)
    if not m:
        return None
    magnitude, angle = _finite(m.group(1)), _finite(m.group(2))
    if magnitude is None or angle is None:
        return None
    return from_polar(magnitude, angle)


def _exponential(token: str) -> Optional[ComplexNumber]:
    m = _EXPONENTIAL_RE.match(token)
    if not m:
        return None
    magnitude = _finite(m.group(1))
    angle = _finite(m.group(2))
    if magnitude is None or angle is None:
        return None
    return from_polar(magnitude, angle)


def _cartesian(token: str) -> Optional[ComplexNumber]:
    m = _CARTESIAN_RE.match(token)
    if not m:
        return None
    real = _finite(m.group(1))
    # sign and digits are joined so "3-4i" gives imag=-4; "3+-4i" is malformed
    imag = _finite(m.group(2) + m.group(3))
    if real is None or imag is None:
        return None
    return ComplexNumber(real, imag)


def _imaginary(token: str) -> Optional[ComplexNumber]:
    m = _IMAGINARY_RE.match(token)
    if not m:
        return None
    imag = _finite(m.group(1))
    if imag is None:
        return None
    return ComplexNumber(0.0, imag)


def _real(token: str) -> Optional[ComplexNumber]:
    value = _finite(token.rstrip("ijIJ").strip())
    if value is None:
        return None
    return ComplexNumber(value, 0.0)


RECOGNIZERS: Tuple[Tuple[LiteralForm, Callable[[str], Optional[ComplexNumber]]], ...] = (
    (LiteralForm.POLAR, _polar),
    (LiteralForm.EXPONENTIAL, _exponential),
    (LiteralForm.CARTESIAN, _cartesian),
    (LiteralForm.IMAGINARY, _imaginary),
    (LiteralForm.REAL, _real),
)


def recognize(text: str) -> Optional[Tuple[LiteralForm, ComplexNumber]]:
    """Return (form, value) for the first recognizer that accepts text."""
    token = re.sub(r"\s+", " ", text).strip()
    if not token:
        return None
    for form, recognizer in RECOGNIZERS:
        value = recognizer(token)
        if value is not None:
            return form, value
    return None


def parse_complex_text(text: str) -> Optional[ComplexNumber]:
    hit = recognize(text)
    return hit[1] if hit is not None else None


def parse_state_vector_text(text: str) -> Optional[List[ComplexNumber]]:
    """
    Parse "[a, b, ...]" into amplitudes.
    Any malformed bracket or token invalidates the whole vector (None).
    """
    trimmed = text.strip()
    if not (trimmed.startswith("[") and trimmed.endswith("]")) or len(trimmed) < 2:
        return None
    vector = []
    for entry in trimmed[1:-1].split(","):
        amp = parse_complex_text(entry)
        if amp is None:
            return None
        vector.append(amp)
    return vector
