from typing import List


def levenshtein_distance(a: str, b: str) -> int:
    # rows follow b, columns follow a
    matrix: List[List[int]] = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]
    for i in range(len(a) + 1):
        matrix[0][i] = i
    for j in range(len(b) + 1):
        matrix[j][0] = j
    for j in range(1, len(b) + 1):
        for i in range(1, len(a) + 1):
            substitution_cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[j][i] = min(
                matrix[j][i - 1] + 1,
                matrix[j - 1][i] + 1,
                matrix[j - 1][i - 1] + substitution_cost,
            )
    return matrix[len(b)][len(a)]


def similarity(a: str, b: str) -> float:
    """Edit-distance similarity in [0, 1]; two empty strings are identical."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return (longest - levenshtein_distance(a, b)) / longest
