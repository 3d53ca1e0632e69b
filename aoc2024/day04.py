"""Ceres Search: finding XMAS in a letter grid."""

_WORDS = ("XMAS", "SAMX")

_HORIZONTAL = ((0, 0), (1, 0), (2, 0), (3, 0))
_VERTICAL = ((0, 0), (0, 1), (0, 2), (0, 3))
_BACK_DIAGONAL = ((0, 0), (1, 1), (2, 2), (3, 3))
_FRONT_DIAGONAL = ((0, 3), (1, 2), (2, 1), (3, 0))


def _gridify(text: str) -> list[list[str]]:
    return [list(line) for line in text.splitlines()]


def _count_along(grid: list[list[str]], offsets: tuple[tuple[int, int], ...]) -> int:
    """Count windows of the given shape that spell XMAS either way round."""
    span_x = max(dx for dx, _ in offsets)
    span_y = max(dy for _, dy in offsets)
    total = 0
    for y in range(len(grid) - span_y):
        for x in range(len(grid[y]) - span_x):
            word = "".join(grid[y + dy][x + dx] for dx, dy in offsets)
            if word in _WORDS:
                total += 1
    return total


def run_a(text: str) -> int:
    grid = _gridify(text)
    return sum(
        _count_along(grid, shape)
        for shape in (_HORIZONTAL, _VERTICAL, _BACK_DIAGONAL, _FRONT_DIAGONAL)
    )


def _is_mas_pair(first: str, second: str) -> bool:
    return {first, second} == {"M", "S"}


def _is_x_mas(grid: list[list[str]], x: int, y: int) -> bool:
    """Check for two crossing MAS words centred on an inner cell."""
    if grid[y][x] != "A":
        return False
    return _is_mas_pair(grid[y - 1][x - 1], grid[y + 1][x + 1]) and _is_mas_pair(
        grid[y + 1][x - 1], grid[y - 1][x + 1]
    )


def run_b(text: str) -> int:
    grid = _gridify(text)
    if not grid:
        return 0
    return sum(
        1
        for y in range(1, len(grid) - 1)
        for x in range(1, len(grid[0]) - 1)
        if _is_x_mas(grid, x, y)
    )