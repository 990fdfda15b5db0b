from models import db, Item


def seed_items():
    if Item.query.first():
        return 0

    items = [
        Item(name="Notebook", description="A5, dotted"),
        Item(name="Fountain pen", description="Fine nib"),
        Item(name="Ink bottle", description="Blue-black, 50 ml"),
        Item(name="Desk lamp"),
        Item(name="Paper clips", description="Box of 100"),
    ]
    db.session.add_all(items)
    db.session.commit()
    return len(items)
