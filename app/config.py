import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3750"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Database
    database_url: Optional[str] = os.getenv("DATABASE_URL")
    db_host: str = os.getenv("DB_HOST", "localhost")
    db_name: Optional[str] = os.getenv("DB_NAME")
    db_user: str = os.getenv("DB_USER", "root")
    db_pass: str = os.getenv("DB_PASS", "")

    # Loans
    loan_days: int = int(os.getenv("LOAN_DAYS", "7"))

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        if self.db_name:
            return f"mysql+pymysql://{self.db_user}:{self.db_pass}@{self.db_host}/{self.db_name}"
        return "sqlite:///./library.db"


settings = Settings()
