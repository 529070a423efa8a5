from pathlib import Path

from dotenv import dotenv_values
from pydantic_settings import BaseSettings

_ENV_FILE = Path.home() / "env" / ".env.dev"
_env_vars = dotenv_values(str(_ENV_FILE)) if _ENV_FILE.exists() else {}


class Settings(BaseSettings):
    app_name: str = "Bargains"
    debug: bool = False
    products_csv: Path = Path("data/products.csv")
    page_size: int = 30
    top_n: int = 12
    default_currency: str = "NZD"
    default_price_ceiling: float = 1000.0

    model_config = {
        "env_prefix": "BARGAINS_",
        "env_file": ".env",
        "extra": "ignore",
    }

    def model_post_init(self, __context):
        # shared dev env file only fills in the dataset location
        if self.products_csv == Path("data/products.csv") and _env_vars.get("PRODUCTS_CSV"):
            self.products_csv = Path(_env_vars["PRODUCTS_CSV"])


settings = Settings()
