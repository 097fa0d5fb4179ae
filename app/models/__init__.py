"""
Model package.

``SQLModel.metadata`` is populated only when the table models are imported;
``init_db`` imports this package before calling ``create_all`` so every
``table=True`` model must be imported here.
"""

# Import table models so SQLModel registers them in metadata.
from app.donation.models import DonationRequest  # noqa: F401
from app.funding.models import Funding  # noqa: F401
from app.user.models import User  # noqa: F401
