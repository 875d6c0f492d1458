import os
from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))


class Settings:
    ACCESS_TOKEN_EXPIRE_DAYS = 7
    TOKEN_ISSUER = "folio-auth"
    TOKEN_AUDIENCE = "folio-app"

    def __init__(self):
        self.JWT_SECRET = os.getenv("JWT_SECRET")
        if not self.JWT_SECRET:
            raise ValueError("JWT_SECRET must be set in environment variables")

        self.DATABASE_URL = os.getenv("DATABASE_URL")
        if not self.DATABASE_URL:
            raise ValueError("DATABASE_URL must be set in environment variables")

        self.DEBUG = os.getenv("DEBUG", "False").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ALGORITHM = os.getenv("ALGORITHM", "HS256")

        try:
            self.BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))
        except (TypeError, ValueError):
            self.BCRYPT_ROUNDS = 10


settings = Settings()
