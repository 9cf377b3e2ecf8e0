"""
Entry point WSGI (ex: gunicorn wsgi:app).
"""
from app import create_app

app = create_app()

if __name__ == '__main__':
    app.run(debug=app.config['DEVELOPMENT'])
