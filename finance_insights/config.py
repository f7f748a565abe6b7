"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from finance_insights.domain.thresholds import Thresholds


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "finance-insights"
    log_level: str = "INFO"
    currency_symbol: str = "₹"

    # Savings rate targets (% of income)
    target_savings_rate: float = 20.0
    excellent_savings_rate: float = 35.0
    poor_savings_rate: float = 10.0

    # Spending alerts
    category_warning_threshold: float = 25.0  # % of income for a single category
    mom_growth_warning: float = 30.0  # % month-over-month category growth

    # Emergency fund (months of expenses)
    emergency_fund_min: float = 3.0
    emergency_fund_ideal: float = 6.0

    # 50/30/20 rule
    wants_max_percentage: float = 30.0
    needs_max_percentage: float = 50.0

    def thresholds(self) -> Thresholds:
        """Build the engine thresholds from the loaded settings"""
        return Thresholds(
            target_savings_rate=self.target_savings_rate,
            excellent_savings_rate=self.excellent_savings_rate,
            poor_savings_rate=self.poor_savings_rate,
            category_warning_threshold=self.category_warning_threshold,
            mom_growth_warning=self.mom_growth_warning,
            emergency_fund_min=self.emergency_fund_min,
            emergency_fund_ideal=self.emergency_fund_ideal,
            wants_max_percentage=self.wants_max_percentage,
            needs_max_percentage=self.needs_max_percentage,
        )


settings = Settings()
