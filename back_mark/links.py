from markupsafe import Markup, escape


def link_to(text, url, **attrs):
    """
    Build an <a> tag. `text` is escaped unless it is already Markup,
    attribute values are always escaped. Attributes with a None value are left out.
    """
    parts = [Markup('<a href="{}"').format(url)]
    for name, value in attrs.items():
        if value is None:
            continue
        parts.append(Markup(' {}="{}"').format(name.rstrip("_").replace("_", "-"), value))
    parts.append(Markup(">"))
    parts.append(escape(text))
    parts.append(Markup("</a>"))
    return Markup("").join(parts)
