# Domain services
from .pricing import (
    PriceBreakdown,
    apply_customization_surcharges,
    compute_price,
    price_breakdown,
)
from .progress import (
    CountdownUrgency,
    DeliveryCountdown,
    DeliveryUrgency,
    delivery_countdown,
    delivery_urgency,
    progress_percent,
    status_label,
    tracking_stats,
)
from .transition_policy import (
    PermissiveTransitionPolicy,
    StrictTransitionPolicy,
    TransitionPolicy,
    get_transition_policy,
)

__all__ = [
    'PriceBreakdown',
    'apply_customization_surcharges',
    'compute_price',
    'price_breakdown',
    'CountdownUrgency',
    'DeliveryCountdown',
    'DeliveryUrgency',
    'delivery_countdown',
    'delivery_urgency',
    'progress_percent',
    'status_label',
    'tracking_stats',
    'PermissiveTransitionPolicy',
    'StrictTransitionPolicy',
    'TransitionPolicy',
    'get_transition_policy',
]
