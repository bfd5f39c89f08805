"""
Trocas de Folga - Entry Point
"""

from trocas import create_app

app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=app.config['BACKEND_PORT'], debug=app.config.get('DEBUG', False))
