from typing import List, Sequence

from scoreline.data.dto import Bucket, Summary


class TrendAnalyzer:
    """
    Reduces an assembled series to the average and trend shown next to each sparkline.
    Zero buckets are treated as "no data" by both figures.
    """

    @staticmethod
    def _non_zero(series: Sequence[Bucket]) -> List[float]:
        return [b.qs for b in series if b.qs > 0]

    def average(self, series: Sequence[Bucket]) -> float:
        values = self._non_zero(series)
        if not values:
            return 0.0
        return sum(values) / len(values)

    def trend(self, series: Sequence[Bucket]) -> float:
        """
        Percent change from the first to the last non-zero bucket.
        First/last are positions among the non-zero buckets, not in the whole series.
        """
        values = self._non_zero(series)
        if len(values) < 2:
            return 0.0
        first, last = values[0], values[-1]
        if first == 0:
            return 0.0
        return ((last - first) / first) * 100

    def summarize(self, series: Sequence[Bucket]) -> Summary:
        return Summary(average=self.average(series), trend_percent=self.trend(series))
