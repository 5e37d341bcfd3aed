"""Weight validation for the suitability score.

Weights arrive from the AI extraction step and may be partial, malformed,
or slightly off from summing to 1.0. Validation never raises: a usable
vector is always returned, falling back to DEFAULT_WEIGHTS when the
candidate cannot be trusted.
"""

import logging
import math
from collections.abc import Mapping
from numbers import Real
from typing import Any

from models.schemas.scoring_weights import DEFAULT_WEIGHTS, WEIGHT_FIELDS, ScoringWeights

logger = logging.getLogger(__name__)

# Allowed deviation of the weight sum from 1.0 before it counts as malformed
WEIGHT_SUM_TOLERANCE = 0.01


def _is_valid_weight(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        number = float(value)
    except OverflowError:
        return False
    return math.isfinite(number) and 0.0 <= number <= 1.0


def validate_weights(candidate: Mapping[str, Any] | ScoringWeights | None) -> ScoringWeights:
    """Return a sanitized weight vector summing to 1.0."""
    if candidate is None:
        return DEFAULT_WEIGHTS

    if isinstance(candidate, ScoringWeights):
        candidate = candidate.model_dump()
    elif not isinstance(candidate, Mapping):
        logger.warning("Ignoring non-mapping weights %r, using defaults", candidate)
        return DEFAULT_WEIGHTS

    values: dict[str, float] = {}
    for name in WEIGHT_FIELDS:
        value = candidate.get(name)
        if value is None:
            value = getattr(DEFAULT_WEIGHTS, name)
        if not _is_valid_weight(value):
            logger.warning("Invalid %s weight %r, using default weights", name, value)
            return DEFAULT_WEIGHTS
        values[name] = float(value)

    total = sum(values.values())
    if total <= 0:
        logger.warning("Weights sum to zero, using default weights")
        return DEFAULT_WEIGHTS

    if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
        logger.warning("Weights sum to %.4f, renormalizing", total)
    if total != 1.0:
        values = {name: value / total for name, value in values.items()}

    return ScoringWeights(**values)
