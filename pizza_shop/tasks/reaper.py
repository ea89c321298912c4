# pizza_shop/tasks/reaper.py
from pizza_shop.celery_worker import celery_app
from pizza_shop.data.storage import FileStore
from pizza_shop.repos.log_store import LogStore
from pizza_shop.services.token_service import TokenService
from pizza_shop.utils.logging import get_logger

logger = get_logger(__name__)


@celery_app.task(name="pizza_shop.tasks.reaper.remove_expired_tokens_task")
def remove_expired_tokens_task():
    logger.info("Expired token sweep started")
    service = TokenService(FileStore(), log_store=LogStore())
    return service.sweep_expired()


@celery_app.task(name="pizza_shop.tasks.reaper.rotate_logs_task")
def rotate_logs_task():
    logger.info("Log rotation started")
    return LogStore().rotate()
