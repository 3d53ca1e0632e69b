"""Template day: both parts report the length of the input."""


def run_a(text: str) -> int:
    return len(text)


def run_b(text: str) -> int:
    return len(text)