# pizza_shop/services/notification_service.py
from kombu.exceptions import OperationalError

from pizza_shop.celery_worker import celery_app
from pizza_shop.domain.errors import MailError
from pizza_shop.services.mail_client import MailClient
from pizza_shop.utils.logging import get_logger

logger = get_logger(__name__)

RECEIPT_SUBJECT = "Your order is on its way!"


class NotificationService:
    """
    Order receipts by email, delivered through Celery.

    Delivery is best-effort: a failed send is logged and never reaches the
    order that triggered it.
    """

    @staticmethod
    def send_receipt(to: str, body: str) -> bool:
        try:
            send_receipt_task.delay(to, RECEIPT_SUBJECT, body)
        except OperationalError as e:
            logger.error(f"Could not queue receipt for {to}: {e}")
            return False
        return True


@celery_app.task(name="pizza_shop.services.notification_service.send_receipt_task")
def send_receipt_task(to: str, subject: str, body: str):
    try:
        result = MailClient().send(to, subject, body)
    except MailError as e:
        logger.error(f"[NOTIFICATION] error sending receipt to {to}: {e}")
        return {"to": to, "status": "failed"}

    logger.info(f"[NOTIFICATION] receipt sent to {to}")
    return {"to": to, "status": "sent", "message_id": result.get("messageId")}
