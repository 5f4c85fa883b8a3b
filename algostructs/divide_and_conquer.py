"""Divide-and-conquer algorithms: binary search, k-way merge and matrix product."""

from __future__ import annotations

from typing import Optional, Sequence

Matrix = list[list[int]]


def recursive_binary_search(data: Sequence[int], target: int) -> Optional[int]:
    """Return the index of ``target`` in the ascending ``data``, or None if absent."""

    def search(low: int, high: int) -> Optional[int]:
        if low > high:
            return None
        mid = (low + high) // 2
        current = data[mid]
        if target == current:
            return mid
        if target < current:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(data) - 1)


def _merge_two(first: Sequence[int], second: Sequence[int]) -> list[int]:
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            result.append(first[i])
            i += 1
        else:
            result.append(second[j])
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def merge_k_sorted(
    lists: Sequence[Sequence[int]], recursive: bool = True
) -> Optional[list[int]]:
    """Merge sorted lists into one sorted list.

    With ``recursive`` the lists are merged by halving the range of lists;
    otherwise neighbouring lists are merged pairwise, round after round.
    Returns None when no lists are given.
    """
    if not lists:
        return None
    if len(lists) == 1:
        return list(lists[0])

    if not recursive:
        current = [list(values) for values in lists]
        while len(current) > 1:
            merged = [
                _merge_two(current[i], current[i + 1])
                for i in range(0, len(current) - 1, 2)
            ]
            if len(current) % 2 == 1:
                merged.append(current[-1])
            current = merged
        return current[0]

    def merge_range(left: int, right: int) -> list[int]:
        if left == right:
            return list(lists[left])
        mid = (left + right) // 2
        return _merge_two(merge_range(left, mid), merge_range(mid + 1, right))

    return merge_range(0, len(lists) - 1)


def _multiply_2x2(a: Matrix, b: Matrix) -> Matrix:
    return [
        [a[0][0] * b[0][0] + a[0][1] * b[1][0], a[0][0] * b[0][1] + a[0][1] * b[1][1]],
        [a[1][0] * b[0][0] + a[1][1] * b[1][0], a[1][0] * b[0][1] + a[1][1] * b[1][1]],
    ]


def _add(a: Matrix, b: Matrix) -> Matrix:
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def _split(m: Matrix) -> tuple[Matrix, Matrix, Matrix, Matrix]:
    half = len(m) // 2
    top, bottom = m[:half], m[half:]
    return (
        [row[:half] for row in top],
        [row[half:] for row in top],
        [row[:half] for row in bottom],
        [row[half:] for row in bottom],
    )


def _join(c11: Matrix, c12: Matrix, c21: Matrix, c22: Matrix) -> Matrix:
    return [left + right for left, right in zip(c11, c12)] + [
        left + right for left, right in zip(c21, c22)
    ]


def _multiply(a: Matrix, b: Matrix) -> Matrix:
    if len(a) == 2:
        return _multiply_2x2(a, b)
    a11, a12, a21, a22 = _split(a)
    b11, b12, b21, b22 = _split(b)
    return _join(
        _add(_multiply(a11, b11), _multiply(a12, b21)),
        _add(_multiply(a11, b12), _multiply(a12, b22)),
        _add(_multiply(a21, b11), _multiply(a22, b21)),
        _add(_multiply(a21, b12), _multiply(a22, b22)),
    )


def matrix_multiply(matrix1: Sequence[Sequence[int]], matrix2: Sequence[Sequence[int]]) -> Matrix:
    """Multiply two square matrices of equal size by recursive block splitting.

    The size must be a power of two, at least 2. Raises ValueError otherwise,
    and for empty or mismatched matrices.
    """
    if not matrix1 or not matrix2:
        raise ValueError("Input matrices must not be empty.")

    n = len(matrix1)
    if len(matrix2) != n or any(len(row) != n for row in (*matrix1, *matrix2)):
        raise ValueError("Only square matrices of equal size are supported.")
    if n < 2 or n & (n - 1):
        raise ValueError("Matrix size must be a power of two, at least 2.")

    return _multiply([list(row) for row in matrix1], [list(row) for row in matrix2])