# bloch_inspector/sample.py
"""
Snapshot records handed over by the page scraper, and the glue that turns
them into Bloch vectors for the renderer.
"""
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .bloch import BlochResult, compute_bloch_vectors
from .complex_math import ComplexNumber
from .parser import parse_state_vector_text
from .state import qubit_count_for

@dataclass(frozen=True)
class InspectSample:
    step_index: int
    total_steps: int
    label: Optional[str]
    state_vector: List[ComplexNumber]
    last_updated: int  # epoch milliseconds
    qubit_count: int

def collect_sample(text: str, label: Optional[str] = None, timestamp: Optional[int] = None,
                   step_index: int = 0, total_steps: int = 0) -> Optional[InspectSample]:
    """None when the text is empty or any part of it fails to parse."""
    if not text or not text.strip():
        return None
    state = parse_state_vector_text(text)
    if not state:
        return None
    if timestamp is None:
        timestamp = int(time.time() * 1000)
    return InspectSample(step_index, total_steps, label, state, timestamp, qubit_count_for(len(state)))

def state_hash(state: Sequence[ComplexNumber]) -> str:
    return "|".join(f"{a.real:.6f}:{a.imag:.6f}" for a in state)

def display_label(sample: InspectSample) -> str:
    return sample.label if sample.label is not None else f"Step {sample.step_index + 1}"

class SampleTracker:
    """Lets a snapshot through only when it differs from the previous one."""

    def __init__(self):
        self.last_hash = ""

    def accept(self, sample: InspectSample) -> bool:
        h = state_hash(sample.state_vector)
        if h == self.last_hash:
            return False
        self.last_hash = h
        return True

    def reset(self):
        self.last_hash = ""

def inspect(sample: InspectSample, backend: str = "serial") -> BlochResult:
    return compute_bloch_vectors(sample.state_vector, backend=backend)
