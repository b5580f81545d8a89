"""
Order settings, read from ``settings.ORDERS`` with defaults.
"""
from django.conf import settings

DEFAULTS = {
    'TRANSITION_POLICY': 'permissive',
    'LOCK_TERMINAL_ORDERS': True,
    'CURRENCY': 'ZMW',
    'PAYMENT_METHOD': 'airtel_money',
    'PAYMENT_PHONE_NUMBER': '0974147414',
    'CHARGE_CUSTOMIZATION': False,
}


class OrdersSettings:
    """Attribute access to the ORDERS setting; re-read on every access."""

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid ORDERS setting: '{name}'")
        return getattr(settings, 'ORDERS', {}).get(name, DEFAULTS[name])


orders_settings = OrdersSettings()


def current_transition_policy():
    """Transition policy configured for the lifecycle use cases."""
    from .domain.services.transition_policy import get_transition_policy

    return get_transition_policy(
        orders_settings.TRANSITION_POLICY,
        lock_terminal=orders_settings.LOCK_TERMINAL_ORDERS,
    )
