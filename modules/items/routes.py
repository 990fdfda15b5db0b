from flask import render_template, flash, url_for
from back_mark import back_mark, redirect_to_back_mark_or_default
from models import db, Item
from modules.items import items_bp
from .forms import ItemForm


def back_to_items():
    return redirect_to_back_mark_or_default(url_for("items.index"))


@items_bp.route("/", methods=["GET"])
def index():
    back_mark("Items")
    items = Item.query.order_by(Item.name).all()
    return render_template("items_index.html", items=items)


@items_bp.route("/<int:item_id>", methods=["GET"])
def show(item_id):
    item = Item.query.get_or_404(item_id)
    back_mark(item.name)
    return render_template("item_detail.html", item=item)


@items_bp.route("/new", methods=["GET"])
def new():
    form = ItemForm(mode="add")
    return render_template("item_form.html", form=form, action=url_for("items.create"))


@items_bp.route("/", methods=["POST"])
def create():
    form = ItemForm(mode="add")
    if form.validate_on_submit():
        item = Item(name=form.name.data, description=form.description.data)
        db.session.add(item)
        db.session.commit()
        flash("Item was created", "success")
        return back_to_items()

    return render_template("item_form.html", form=form, action=url_for("items.create"))


@items_bp.route("/<int:item_id>/edit", methods=["GET"])
def edit(item_id):
    item = Item.query.get_or_404(item_id)
    form = ItemForm(obj=item, mode="edit")
    return render_template(
        "item_form.html", form=form, item=item, action=url_for("items.update", item_id=item.id)
    )


@items_bp.route("/<int:item_id>/edit", methods=["POST"])
def update(item_id):
    item = Item.query.get_or_404(item_id)
    form = ItemForm(obj=item, mode="edit")

    if form.validate_on_submit():
        item.name = form.name.data
        item.description = form.description.data
        db.session.commit()
        flash("Item was updated", "success")
        return back_to_items()

    return render_template(
        "item_form.html", form=form, item=item, action=url_for("items.update", item_id=item.id)
    )


@items_bp.route("/<int:item_id>/delete", methods=["POST"])
def destroy(item_id):
    item = Item.query.get_or_404(item_id)
    db.session.delete(item)
    db.session.commit()
    flash("Item was deleted", "success")
    return back_to_items()
