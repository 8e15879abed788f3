MIN_PASSWORD_LENGTH = 6
JWT_ALGORITHM = "HS256"
DEFAULT_JWT_EXPIRES_SECONDS = 60 * 60  # 1 hour
