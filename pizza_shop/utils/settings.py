# pizza_shop/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


DATA_DIR = os.getenv("DATA_DIR", os.path.join(os.getcwd(), ".data"))
LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.getcwd(), ".logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3000))

# hmac key for password digests
HASHING_SECRET = os.getenv("HASHING_SECRET", "change-me")

TOKEN_TTL_MS = int(os.getenv("TOKEN_TTL_MS", 24 * 60 * 60 * 1000))
TOKEN_SWEEP_SECONDS = float(os.getenv("TOKEN_SWEEP_SECONDS", 60 * 60))
LOG_ROTATE_SECONDS = float(os.getenv("LOG_ROTATE_SECONDS", 24 * 60 * 60))

STRIPE_API_URL = os.getenv("STRIPE_API_URL", "https://api.stripe.com")
STRIPE_SECRET_KEY = os.getenv("STRIPE_SECRET_KEY", "")

MAILGUN_API_URL = os.getenv("MAILGUN_API_URL", "https://api.mailgun.net")
MAILGUN_DOMAIN = os.getenv("MAILGUN_DOMAIN", "sandbox.mailgun.org")
MAILGUN_API_KEY = os.getenv("MAILGUN_API_KEY", "")
MAIL_FROM = os.getenv("MAIL_FROM", f"Big Bear's Pizza <bigbear@{MAILGUN_DOMAIN}>")

HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", 5))
HTTP_RETRIES = int(os.getenv("HTTP_RETRIES", 3))

REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", REDIS_URL)
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://redis:6379/2")
CELERY_TASK_ALWAYS_EAGER = _flag("CELERY_TASK_ALWAYS_EAGER")
