from models import db

__all__ = ["Item"]


class Item(db.Model):
    __tablename__ = 'items'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(256), nullable=False)
    description = db.Column(db.Text, nullable=True)

    def __repr__(self):
        return f"<Item {self.id} {self.name!r}>"
