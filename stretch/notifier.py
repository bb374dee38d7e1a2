# stretch/notifier.py
from plyer import notification

APP_NAME = "Stretch Timer"
DEFAULT_TITLE = "Stretch Timer"
DEFAULT_MESSAGE = "Time to stretch!"
DEFAULT_TIMEOUT = 10  # seconds the toast stays up, where the OS honours it


class NotificationError(RuntimeError):
    """The desktop notification could not be shown."""


def notify(title: str, message: str, duration: int = DEFAULT_TIMEOUT):
    """
    Pop the stretch reminder through plyer, tagged with APP_NAME.
    One attempt only; a missing or failing platform backend surfaces as
    NotificationError with the plyer exception chained.
    """
    try:
        notification.notify(
            title=title,
            message=message,
            app_name=APP_NAME,
            timeout=duration
        )
    except Exception as e:
        # plyer raises NotImplementedError when no backend exists for the platform
        raise NotificationError(str(e) or e.__class__.__name__) from e
