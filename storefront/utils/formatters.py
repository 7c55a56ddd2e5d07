from storefront.config import settings

def amount(v: float) -> str:
    return f"{v:.{settings.decimals}f}"

def money(v: float) -> str:
    return f"{amount(v)} {settings.currency}"
