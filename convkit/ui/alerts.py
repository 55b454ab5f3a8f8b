"""
Alert models and presentation shortcuts.

The host UI toolkit supplies an ``AlertPresenter``; these helpers only build
the alert and hand it over.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol

from ..util.strings import localized


logger = logging.getLogger(__name__)

ERROR_TITLE = "Error"


@dataclass
class AlertAction:
    """A button on an alert and the handler invoked when it is tapped."""
    title: str
    handler: Optional[Callable[["AlertAction"], None]] = None

    def trigger(self) -> None:
        if self.handler is not None:
            self.handler(self)


@dataclass
class Alert:
    """A modal message with one or more actions."""
    title: str
    message: str
    actions: List[AlertAction] = field(default_factory=list)


class AlertPresenter(Protocol):
    """Anything able to display an alert modally."""

    def present(self, alert: Alert) -> None:
        ...


def show_alert(presenter: AlertPresenter, title: str, message: str,
               handler: Optional[Callable[[AlertAction], None]] = None) -> Alert:
    """Present an alert with a single localized OK button."""
    alert = Alert(title, message, [AlertAction(localized("OK"), handler)])
    logger.debug(f"Presenting alert: {title}")
    presenter.present(alert)
    return alert


def show_error_alert(presenter: AlertPresenter, message: str) -> Alert:
    """Present an alert titled 'Error'."""
    return show_alert(presenter, ERROR_TITLE, message)
