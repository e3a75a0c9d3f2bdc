import os

# Настройки читаются при импорте app.core.config, поэтому задаются до импорта приложения
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-jwt-secret"
os.environ["REFRESH_JWT_SECRET"] = "test-refresh-jwt-secret"
os.environ["CACHE_BACKEND"] = "memory"
os.environ["LOG_LEVEL"] = "DEBUG"
