from os import getenv

class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "postgresql+psycopg://dailytasks:dailytasks@db:5432/dailytasks")
    JWT_SECRET = getenv("JWT_SECRET", "dev-secret-change-in-prod")
    JWT_ALGORITHM = "HS256"
    JWT_EXPIRE_DAYS = int(getenv("JWT_EXPIRE_DAYS", "30"))  # expire au bout de 30 jours
    BCRYPT_ROUNDS = int(getenv("BCRYPT_ROUNDS", "10"))
    PORT = int(getenv("PORT", "5000"))
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = [o.strip() for o in getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

settings = Settings()
