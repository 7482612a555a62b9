from .reservation_events import PassengerPackageChanged as PassengerPackageChanged
from .reservation_events import ReservationCancelled as ReservationCancelled
from .reservation_events import ReservationConfirmed as ReservationConfirmed
from .reservation_events import ReservationCreated as ReservationCreated
