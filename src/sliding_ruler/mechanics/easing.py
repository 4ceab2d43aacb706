def ease_out(x: float) -> float:
    """Quadratic ease-out on [0, 1]. Values outside are clamped."""
    x = max(0.0, min(1.0, x))
    return 1.0 - (1.0 - x) ** 2
