from .base import Base
from .menu import Menu
from .food import Food
from .table import Table
from .order import Order
from .order_item import OrderItem
from .invoice import Invoice
from .user import User
