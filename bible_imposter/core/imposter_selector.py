"""
Recency-weighted imposter selection.

The most recent imposter gets weight 0 and the one before that 0.80. The
next entry jumps to 0.85, and each older one climbs by 0.03 from there up
to a ceiling of 0.98. Players not in the history get the full weight of
1.0, so nobody is excluded for long.
"""

import random
from typing import List, Sequence

from .player import Player

FULL_WEIGHT = 1.0
FIRST_RECOVERY_WEIGHT = 0.80
SECOND_RECOVERY_WEIGHT = 0.85
RECOVERY_STEP = 0.03
MAX_RECOVERY_WEIGHT = 0.98


def imposter_weight(position: int) -> float:
    """
    Weight for a player found at a given position in the imposter history.
    
    Positions 0..6 give 0.0, 0.80, 0.85, 0.88, 0.91, 0.94, 0.97; anything
    older is held at 0.98.
    
    Args:
        position: Index in the history, 0 being the most recent imposter
    """
    if position == 0:
        return 0.0
    if position == 1:
        return FIRST_RECOVERY_WEIGHT
    return min(SECOND_RECOVERY_WEIGHT + RECOVERY_STEP * (position - 2), MAX_RECOVERY_WEIGHT)


def compute_weights(roster: Sequence[Player], history: Sequence[str]) -> List[float]:
    """
    Weight every roster member by how recently they were the imposter.
    
    A name appearing more than once in the history uses its newest position.
    """
    positions = {}
    for position, name in enumerate(history):
        positions.setdefault(name, position)
    
    weights = []
    for player in roster:
        if player.name in positions:
            weights.append(imposter_weight(positions[player.name]))
        else:
            weights.append(FULL_WEIGHT)
    return weights


class ImposterSelector:
    """Chooses the imposter's roster index using recency weights."""
    
    def __init__(self, rng: random.Random = None):
        self.random = rng or random.Random()
    
    def select_imposter(self, roster: Sequence[Player], history: Sequence[str]) -> int:
        """
        Pick the imposter for a round.
        
        Does not touch the history; the caller records the choice once the
        round is committed.
        
        Args:
            roster: Players in turn order
            history: Recent imposter names, newest first
            
        Returns:
            Index into roster of the chosen player
            
        Raises:
            ValueError: If the roster is empty
        """
        if not roster:
            raise ValueError("Cannot select an imposter from an empty roster")
        
        weights = compute_weights(roster, history)
        total = sum(weights)
        if total <= 0:
            return self._fallback(roster, history)
        
        draw = self.random.random() * total
        cumulative = 0.0
        for index, weight in enumerate(weights):
            cumulative += weight
            if draw < cumulative:
                return index
        
        # Float rounding can leave draw == total; land on the last eligible player
        return max(i for i, w in enumerate(weights) if w > 0)
    
    def _fallback(self, roster: Sequence[Player], history: Sequence[str]) -> int:
        """Uniform choice avoiding the most recent imposter when possible."""
        last = history[0] if history else None
        candidates = [i for i, p in enumerate(roster) if p.name != last]
        if not candidates:
            candidates = list(range(len(roster)))
        return self.random.choice(candidates)
