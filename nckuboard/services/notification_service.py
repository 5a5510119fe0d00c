# nckuboard/services/notification_service.py
import logging

from ..extensions import _
from ..models.task import Task

log = logging.getLogger(__name__)


def notify_task_accepted(task: Task) -> str:
    """
    Tell the publisher someone volunteered. Nothing is delivered yet: the
    notice is logged and the returned text is flashed to the helper.
    """
    log.info("[notify stub] Task #%s: %s -> %s", task.id, task.helper, task.publisher)
    return _(
        "Notification sent to %(publisher)s! They know you (%(helper)s) are willing to help.",
        publisher=task.publisher,
        helper=task.helper,
    )
