from pydantic import BaseModel


class CategoryLabel(BaseModel):
    icon: str
    color: str


DEFAULT_LABEL = CategoryLabel(icon="box", color="gray")

# keys are lower-case; misspellings present in the source data are mapped too
CATEGORY_LABELS: dict[str, CategoryLabel] = {
    "alcohol": CategoryLabel(icon="wine", color="purple"),
    "baby": CategoryLabel(icon="baby", color="pink"),
    "bakery": CategoryLabel(icon="bread", color="amber"),
    "beauty": CategoryLabel(icon="brush", color="rose"),
    "candy": CategoryLabel(icon="chocolate", color="indigo"),
    "deli": CategoryLabel(icon="cheese", color="orange"),
    "dairy": CategoryLabel(icon="milk", color="blue"),
    "diary": CategoryLabel(icon="milk", color="blue"),
    "drinks": CategoryLabel(icon="glass", color="purple"),
    "flowers": CategoryLabel(icon="flower-pot", color="pink"),
    "floral": CategoryLabel(icon="flower-pot", color="pink"),
    "frozen": CategoryLabel(icon="snowflake", color="cyan"),
    "household": CategoryLabel(icon="home", color="slate"),
    "meat": CategoryLabel(icon="meat", color="red"),
    "medicine": CategoryLabel(icon="pharmacy", color="teal"),
    "medecine": CategoryLabel(icon="pharmacy", color="teal"),
    "pharmacy": CategoryLabel(icon="pharmacy", color="teal"),
    "outdoor": CategoryLabel(icon="tent", color="green"),
    "pantry": CategoryLabel(icon="flour", color="yellow"),
    "personal": CategoryLabel(icon="shower", color="purple"),
    "personal_care": CategoryLabel(icon="shower", color="purple"),
    "pet": CategoryLabel(icon="paw", color="orange"),
    "pets": CategoryLabel(icon="paw", color="orange"),
    "prepared": CategoryLabel(icon="hot-meal", color="red"),
    "produce": CategoryLabel(icon="tomato", color="green"),
    "seafood": CategoryLabel(icon="fish", color="blue"),
    "snacks": CategoryLabel(icon="popcorn", color="yellow"),
    "vitamin": CategoryLabel(icon="pill", color="emerald"),
    "viatamin": CategoryLabel(icon="pill", color="emerald"),
    "electronics": CategoryLabel(icon="tv", color="blue"),
    "grocery": CategoryLabel(icon="basket", color="green"),
    "health": CategoryLabel(icon="heartbeat", color="red"),
    "toys": CategoryLabel(icon="gamepad", color="purple"),
    "apparel": CategoryLabel(icon="shirt", color="indigo"),
    "automotive": CategoryLabel(icon="car", color="gray"),
    "books": CategoryLabel(icon="book", color="amber"),
    "other": DEFAULT_LABEL,
}


def category_label(category: str) -> CategoryLabel:
    return CATEGORY_LABELS.get(category.lower(), DEFAULT_LABEL)
