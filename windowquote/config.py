from pydantic_settings import BaseSettings

from .pricing_model import (
    FACTORY_BUILD_COST_PER_WINDOW,
    INSTALLATION_COST_PER_WINDOW,
    TIMBER_FRAME_DEDUCTION_MM,
    WASTE_AND_PROFIT_MARKUP,
)


class Settings(BaseSettings):
    APP_NAME: str = "windowquote"
    COMPANY_NAME: str = "CapLock Windows"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # Pricing overrides: defaults and rates per mm live in pricing_model.py
    MARKUP_RATIO: float = WASTE_AND_PROFIT_MARKUP
    FACTORY_COST_PER_WINDOW: float = FACTORY_BUILD_COST_PER_WINDOW
    INSTALL_COST_PER_WINDOW: float = INSTALLATION_COST_PER_WINDOW
    TIMBER_DEDUCTION_MM: float = TIMBER_FRAME_DEDUCTION_MM

    class Config:
        env_file = ".env"


settings = Settings()
