def require_non_negative(v: float, name: str = "value") -> None:
    if v < 0:
        raise ValueError(f"{name} must be >= 0")

def is_positive_qty(qty: int) -> bool:
    return qty is not None and qty > 0
