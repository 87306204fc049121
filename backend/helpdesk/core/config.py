from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    project_name: str = "helpdesk"
    database_url: str = "sqlite:///./helpdesk.db"
    log_level: str = "INFO"

    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # simulated round trip before the login callback fires
    auth_latency_seconds: float = 1.0
    min_password_length: int = 6

    ticket_categories: list[str] = [
        "Hardware",
        "Software",
        "Internet Connection",
        "Access",
        "Systems",
        "Security",
        "Printer",
        "Phone/Mobile",
        "Other",
    ]
    staff_roster: list[str] = [
        "john.doe@company.com",
        "jane.smith@company.com",
        "mike.wilson@company.com",
    ]
    escalation_contact: str = "it-support@company.com"


settings = Settings()
