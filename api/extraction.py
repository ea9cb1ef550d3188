import re
from typing import List, NamedTuple, Optional

from .models import MAX_GRATITUDE

ENERGY_PATTERN = re.compile(r'energy.*?(low|medium|high)', re.IGNORECASE)
GRATITUDE_PATTERN = re.compile(r'grateful for:?(.*)', re.IGNORECASE | re.DOTALL)
GRATITUDE_DELIMITERS = re.compile(r',|\band\b|\n|\*')


class Signals(NamedTuple):
    energy: str
    gratitude: List[str]


def extract_energy(summary: Optional[str]) -> str:
    """Return the first low/medium/high mentioned after "energy", else "unknown"."""
    if not summary:
        return 'unknown'
    match = ENERGY_PATTERN.search(summary)
    return match.group(1).lower() if match else 'unknown'


def extract_gratitude(summary: Optional[str]) -> List[str]:
    """Return up to three items listed after "grateful for", in order."""
    if not summary:
        return []
    match = GRATITUDE_PATTERN.search(summary)
    if not match:
        return []

    items = [item.strip() for item in GRATITUDE_DELIMITERS.split(match.group(1))]
    return [item for item in items if item][:MAX_GRATITUDE]


def extract_signals(summary: Optional[str]) -> Signals:
    """Pull energy and gratitude out of a model summary.

    Best effort only: the summary is free text, so misses and false hits are
    expected and never treated as errors.
    """
    return Signals(extract_energy(summary), extract_gratitude(summary))
