"""WSGI entrypoint for the localized demo app."""

from url_localization import create_app

app = create_app()


if __name__ == '__main__':
    app.run(debug=True)
