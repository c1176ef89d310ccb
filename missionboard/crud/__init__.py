# missionboard/crud/__init__.py

from .crud_dashboard import dashboard
from .crud_event import event
from .crud_organization import organization
from .crud_payment import payment
from .crud_plan import plan
from .crud_registration import registration
from .crud_subscription import subscription
from .crud_user import user
