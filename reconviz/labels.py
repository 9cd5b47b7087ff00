from typing import List, Sequence


def stagger_labels(positions: Sequence[float], min_separation: float) -> List[int]:
    """
    assign each label to the lowest tier where it is at least min_separation away from every label
    already in that tier. Labels are placed in the order given so the caller controls the tie-breaking

    Args:
        positions: the horizontal anchor of each label
        min_separation: labels closer than this must be on different tiers

    Returns:
        the tier (0 is the lowest) for each input position

    Example:
        >>> stagger_labels([0, 5, 100, 8], 10)
        [0, 1, 0, 2]
    """
    tiers: List[List[float]] = []
    result = []
    for pos in positions:
        for tier_index, tier in enumerate(tiers):
            if all([abs(pos - other) >= min_separation for other in tier]):
                tier.append(pos)
                result.append(tier_index)
                break
        else:
            tiers.append([pos])
            result.append(len(tiers) - 1)
    return result
