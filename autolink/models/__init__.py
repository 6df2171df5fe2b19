"""
The models package contains the database tables read by the
:class:`~autolink.store.database.DatabaseRentalProvider`.

.. autoclasstree:: autolink.models
"""

from .base import Base
from .rental import Rental
from .vehicle import Vehicle
