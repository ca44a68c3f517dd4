from flask_login import UserMixin


class Roles:
    admin = "admin"


class UserInfo(UserMixin):
    """Signed-in user as kept in the session cookie. Never stored in the database."""

    def __init__(self, id, name, roles=None):
        self.id = str(id)
        self.name = name
        self.roles = list(roles or [])

    def has_role(self, role):
        return role in self.roles

    def to_dict(self):
        return {"id": self.id, "name": self.name, "roles": list(self.roles)}

    @classmethod
    def from_dict(cls, data):
        return cls(data["id"], data["name"], data.get("roles"))
