from flask import render_template, jsonify
from back_mark import marks_back, skip_back_mark
from models import Item
from . import ui_bp


@ui_bp.route('/')
def home():
    return render_template('home.html', item_count=Item.query.count())


@ui_bp.route('/inbox')
@marks_back("Inbox")
def inbox():
    items = Item.query.order_by(Item.id.desc()).limit(10).all()
    return render_template('inbox.html', items=items)


# health check, never worth linking back to
@ui_bp.route('/ping')
@skip_back_mark
def ping():
    return jsonify(status="ok")
