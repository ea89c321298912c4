# pizza_shop/celery_worker.py
from celery import Celery

from pizza_shop.utils.settings import (
    CELERY_BROKER_URL,
    CELERY_RESULT_BACKEND,
    CELERY_TASK_ALWAYS_EAGER,
    LOG_ROTATE_SECONDS,
    TOKEN_SWEEP_SECONDS,
)

celery_app = Celery(
    "pizza_shop",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# tasks live outside this module and must be imported to be registered
celery_app.conf.imports = (
    "pizza_shop.tasks.reaper",
    "pizza_shop.services.notification_service",
)

celery_app.conf.beat_schedule = {
    "remove-expired-tokens": {
        "task": "pizza_shop.tasks.reaper.remove_expired_tokens_task",
        "schedule": TOKEN_SWEEP_SECONDS,
    },
    "rotate-logs": {
        "task": "pizza_shop.tasks.reaper.rotate_logs_task",
        "schedule": LOG_ROTATE_SECONDS,
    },
}

celery_app.conf.timezone = "UTC"
celery_app.conf.task_always_eager = CELERY_TASK_ALWAYS_EAGER
