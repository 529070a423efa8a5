def calculate_savings(original_price: float | None, price: float) -> float:
    """Savings shown on a product card. No reference price means no savings."""
    if not original_price:
        return 0.0
    return original_price - price


def format_currency(amount: float, currency: str = "NZD") -> str:
    sign = "-" if amount < 0 else ""
    if currency == "NZD":
        return f"{sign}${abs(amount):,.2f}"
    return f"{sign}{currency} {abs(amount):,.2f}"


def format_discount(discount: int | None) -> str:
    if not discount:
        return ""
    return f"{discount}% OFF"
