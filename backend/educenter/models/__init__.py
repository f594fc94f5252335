"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - EduCenter is the aggregate root; every entity is scoped by edu_center_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from educenter.models.edu_center import EduCenter  # noqa: F401
from educenter.models.student import Student  # noqa: F401
from educenter.models.payment import Payment  # noqa: F401
from educenter.models.edu_center_message import EduCenterMessage  # noqa: F401
