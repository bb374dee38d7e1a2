# stretch/reminder.py
from stretch.notifier import DEFAULT_MESSAGE, DEFAULT_TITLE, notify
from stretch.timer import wait


def run_reminder(seconds: int, title: str = DEFAULT_TITLE, message: str = DEFAULT_MESSAGE,
                 sleep=None, send=notify):
    """
    Wait, then notify exactly once.
    NotificationError and KeyboardInterrupt propagate to the caller;
    an interrupted wait never reaches send().
    """
    wait(seconds, sleep=sleep)
    send(title, message)
