"""Integer rounding to multiples of a step."""


def _check(x: int, step: int) -> None:
    if x < 0:
        raise ValueError(f"x must be non-negative, got {x}")
    if step < 1:
        raise ValueError(f"step must be at least 1, got {step}")


def round_up(x: int, step: int) -> int:
    """Return X rounded up to the nearest multiple of STEP."""
    _check(x, step)
    return (x + step - 1) // step * step


def div_round_up(x: int, step: int) -> int:
    """Return X divided by STEP, rounded up."""
    _check(x, step)
    return (x + step - 1) // step


def round_down(x: int, step: int) -> int:
    """Return X rounded down to the nearest multiple of STEP."""
    _check(x, step)
    return x // step * step