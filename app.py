from app import create_app

# Expose a WSGI-compatible app object for production servers (e.g., gunicorn, waitress)
app = create_app()


if __name__ == '__main__':
    app.run(debug=True)
