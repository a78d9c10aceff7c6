import os

DEFAULT_STRIPE_API_VERSION = "2022-11-15"


class Config:
    """Runtime configuration, read from the environment when instantiated."""

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    def __init__(self):
        self.STRIPE_SECRET_KEY = os.getenv("STRIPE_SECRET_KEY")
        self.STRIPE_API_VERSION = os.getenv("STRIPE_API_VERSION", DEFAULT_STRIPE_API_VERSION)
        self.SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///catalog.db")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class TestingConfig(Config):
    TESTING = True

    def __init__(self):
        super().__init__()
        self.STRIPE_SECRET_KEY = "sk_test_fake_key_for_testing"
        self.SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
