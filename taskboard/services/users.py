import uuid

from taskboard.errors import ValidationError
from taskboard.models import Roles, UserInfo


class UserDirectory:
    """
    Known users by name. Sign-in trusts the submitted username: there is no
    credential check, known names get their configured roles and any other
    name gets a fresh non-admin record.
    """

    def __init__(self, admins=None, users=None):
        self.known = {}
        for index, name in enumerate(list(admins or []) + list(users or []), start=1):
            roles = [Roles.admin] if name in (admins or []) else []
            self.known.setdefault(name, UserInfo(str(index), name, roles))

    @classmethod
    def from_config(cls, config):
        return cls(config.get("ADMIN_USERS"), config.get("KNOWN_USERS"))

    def sign_in(self, username):
        if not isinstance(username, str) or not username.strip():
            raise ValidationError("Username is required", model_state={"username": "Should not be empty"})
        username = username.strip()
        user = self.known.get(username)
        if user is None:
            user = UserInfo(uuid.uuid4().hex, username)
        return user
