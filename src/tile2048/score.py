def add(current: int, delta: int) -> int:
    if current < 0 or delta < 0:
        raise ValueError(f"score must not decrease: {current} + {delta}")
    return current + delta
