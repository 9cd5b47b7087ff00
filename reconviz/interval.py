"""
closed integer intervals used to clip genomic features to the displayed regions
"""


class Interval:
    """
    closed interval [start, end] of genomic positions
    """

    def __init__(self, start: int, end: int):
        """
        Args:
            start: the first position (inclusive)
            end: the last position (inclusive)

        Raises:
            AttributeError: end is before start
        """
        self.start = int(start)
        self.end = int(end)
        if self.start > self.end:
            raise AttributeError('interval start > end is not allowed', self.start, self.end)

    def __getitem__(self, index):
        if index == 0:
            return self.start
        elif index == 1:
            return self.end
        raise IndexError('index input accessor is out of bounds: 0 or 1 only', index)

    def __eq__(self, other):
        try:
            return self[0] == other[0] and self[1] == other[1]
        except (TypeError, IndexError):
            return False

    def __hash__(self):
        return hash((self[0], self[1]))

    def __repr__(self):
        return '{}({}, {})'.format(self.__class__.__name__, self.start, self.end)

    def __sub__(self, other):
        """
        the positions of this interval not covered by another

        Example:
            >>> Interval(1, 10) - Interval(4, 6)
            [Interval(1, 3), Interval(7, 10)]
            >>> Interval(1, 2) - Interval(-1, 10)
            []
        """
        if not Interval.overlaps(self, other):
            return [Interval(self[0], self[1])]
        result = []
        if other[0] > self[0]:
            result.append(Interval(self[0], other[0] - 1))
        if other[1] < self[1]:
            result.append(Interval(other[1] + 1, self[1]))
        return result

    @classmethod
    def overlaps(cls, first, other) -> bool:
        """
        Example:
            >>> Interval.overlaps(Interval(1, 4), Interval(5, 7))
            False
            >>> Interval.overlaps((1, 10), (10, 11))
            True
        """
        return first[0] <= other[1] and other[0] <= first[1]

    @classmethod
    def intersection(cls, first, other):
        """
        returns None if the intervals do not overlap

        Example:
            >>> Interval.intersection((1, 10), (7, 15))
            Interval(7, 10)
        """
        low = max(first[0], other[0])
        high = min(first[1], other[1])
        if low > high:
            return None
        return Interval(low, high)
