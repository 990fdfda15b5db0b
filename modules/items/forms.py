from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, SubmitField
from wtforms.validators import DataRequired, Length, Optional


class ItemForm(FlaskForm):
    name = StringField("Name", validators=[DataRequired(), Length(max=256)])
    description = TextAreaField("Description", validators=[Optional()])
    submit = SubmitField("Create item")

    def __init__(self, *args, **kwargs):
        # Use "mode" to control the submit label
        self.mode = kwargs.pop("mode", "add")
        super().__init__(*args, **kwargs)

        if self.mode == "add":
            self.submit.label.text = "Create item"
            self.title = "New item"
        elif self.mode == "edit":
            self.submit.label.text = "Save changes"
            self.title = "Edit item"
