# Value objects
from .cake_configuration import CakeConfiguration, CakeFlavor, CakeShape, CakeSize, Customization
from .delivery_address import DeliveryAddress
from .money import Money
from .order_number import OrderNumber
from .order_status import DeliveryWindow, OrderStatus, PaymentStatus

__all__ = [
    'CakeConfiguration',
    'CakeFlavor',
    'CakeShape',
    'CakeSize',
    'Customization',
    'DeliveryAddress',
    'DeliveryWindow',
    'Money',
    'OrderNumber',
    'OrderStatus',
    'PaymentStatus',
]
