from typing import Protocol


class DistanceCalculator(Protocol):
    def calculate(self, source: str, target: str) -> int:
        ...


class DamerauLevenshteinDistance:
    """Optimal string alignment distance.

    Counts insertions, deletions, substitutions and swaps of two adjacent
    characters. The result is not bounded; callers that only care about
    small distances prune by length before calling.
    """

    def calculate(self, source: str, target: str) -> int:
        if source == target:
            return 0
        if not source or not target:
            return max(len(source), len(target))

        rows = len(source) + 1
        cols = len(target) + 1
        dp = [[0] * cols for _ in range(rows)]

        for i in range(rows):
            dp[i][0] = i
        for j in range(cols):
            dp[0][j] = j

        for i in range(1, rows):
            for j in range(1, cols):
                cost = 0 if source[i - 1] == target[j - 1] else 1
                value = min(
                    dp[i - 1][j] + 1,
                    dp[i][j - 1] + 1,
                    dp[i - 1][j - 1] + cost,
                )

                if (
                    i > 1
                    and j > 1
                    and source[i - 1] == target[j - 2]
                    and source[i - 2] == target[j - 1]
                ):
                    value = min(value, dp[i - 2][j - 2] + 1)

                dp[i][j] = value

        return dp[-1][-1]


damerau_levenshtein_distance = DamerauLevenshteinDistance()


def calculate_distance(source: str, target: str) -> int:
    return damerau_levenshtein_distance.calculate(source, target)
