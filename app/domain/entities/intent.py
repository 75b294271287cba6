from enum import Enum


class Intent(str, Enum):
    availability = "availability"
    booking = "booking"
    cancel_or_modify = "cancel_or_modify"
    view_bookings = "view_bookings"
    help = "help"
    greeting = "greeting"
    default = "default"
