from flask import render_template


def register_error_handlers(app):
    """
    Error pages. Unhandled exceptions are already logged by Flask
    (`app.log_exception`) through the handlers set up in logging_setup.
    """

    @app.errorhandler(403)
    def forbidden_error(error):
        return render_template("errors/403.html", error=error), 403

    @app.errorhandler(404)
    def not_found_error(error):
        return render_template("errors/404.html", error=error), 404

    @app.errorhandler(500)
    def internal_error(error):
        return render_template("errors/500.html", error=error), 500
