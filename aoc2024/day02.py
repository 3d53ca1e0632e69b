"""Red-Nosed Reports: counting safe level sequences."""


def _is_safe(levels: list[int]) -> bool:
    increasing: bool | None = None
    for prev, current in zip(levels, levels[1:]):
        if prev == current:
            return False
        if increasing is None:
            increasing = prev < current
        diff = current - prev
        if abs(diff) > 3 or (diff < 0) == increasing:
            return False
    return True


def _is_safe_dampened(levels: list[int]) -> bool:
    if _is_safe(levels):
        return True
    return any(
        _is_safe(levels[:skip] + levels[skip + 1 :]) for skip in range(len(levels))
    )


def _reports(text: str) -> list[list[int]]:
    return [[int(word) for word in line.split()] for line in text.splitlines()]


def run_a(text: str) -> int:
    return sum(1 for report in _reports(text) if _is_safe(report))


def run_b(text: str) -> int:
    return sum(1 for report in _reports(text) if _is_safe_dampened(report))