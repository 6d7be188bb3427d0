"""Maps resolver failures to a transcript entry and a notification.

The transcript always gets the same generic sentence so no raw error text
ever lands in the permanent history. Diagnostic detail goes to the
notification only.
"""

from typing import NamedTuple

from src.chat.errors import ConnectivityFailure, ProtocolFailure
from src.models.schemas import Notification

GENERIC_FAILURE_TEXT = (
    "Sorry, I'm having trouble connecting to the backend. "
    "Please check the console for details."
)
NOTIFICATION_TITLE = "Connection Error"


class Classification(NamedTuple):
    transcript_text: str
    notification: Notification


def describe_failure(error: BaseException) -> str:
    """Return the user-facing diagnostic for a failure."""
    if isinstance(error, ConnectivityFailure):
        return (
            f"Cannot connect to {error.target} from this client. "
            "Try running the app locally or use a tunnel service like ngrok."
        )
    if isinstance(error, ProtocolFailure):
        return f"Error: HTTP error! status: {error.status_code}"
    return f"Error: {error}"


def classify(error: BaseException) -> Classification:
    """Classify a failure raised while resolving a query.

    Args:
        error: Any exception from a resolver.

    Returns:
        The generic transcript text and a destructive notification.
    """
    notification = Notification(
        title=NOTIFICATION_TITLE,
        description=describe_failure(error),
        variant="destructive",
    )
    return Classification(GENERIC_FAILURE_TEXT, notification)
