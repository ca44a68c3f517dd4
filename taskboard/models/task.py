from taskboard.extensions import db


class Task(db.Model):
    __tablename__ = 'tasks'
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    completed = db.Column(db.Boolean, nullable=False, default=False)

    def to_dict(self):
        return {"id": self.id, "title": self.title, "completed": bool(self.completed)}

    def __repr__(self):
        return f"<Task {self.id} {self.title!r} completed={self.completed}>"
