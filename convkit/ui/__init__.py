"""
Presentation helpers: colors, fonts and alerts.
"""

from .colors import (
    Color, Palette, LinearGradient, default_gradient, Border, CornerStyle
)
from .fonts import Font, FontFamily, apply_default_font_family, DEFAULT_FONT_PREFIX
from .alerts import (
    Alert, AlertAction, AlertPresenter, show_alert, show_error_alert, ERROR_TITLE
)

__all__ = [
    # Colors
    'Color', 'Palette', 'LinearGradient', 'default_gradient', 'Border', 'CornerStyle',

    # Fonts
    'Font', 'FontFamily', 'apply_default_font_family', 'DEFAULT_FONT_PREFIX',

    # Alerts
    'Alert', 'AlertAction', 'AlertPresenter', 'show_alert', 'show_error_alert',
    'ERROR_TITLE',
]
