# pizza_shop/utils/retry.py
import logging

import requests
from tenacity import before_sleep_log, retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from pizza_shop.utils.settings import HTTP_RETRIES
from pizza_shop.utils.logging import get_logger

logger = get_logger(__name__)

# only the transport failed; an HTTP error status is an answer and is never retried
TRANSIENT_ERRORS = (requests.ConnectionError, requests.Timeout)


def http_retry(attempts: int | None = None):
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts or HTTP_RETRIES),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )
