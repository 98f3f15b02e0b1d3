"""
Blogify
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the blogify package.
"""

import logging

from blogify import create_app

logging.basicConfig(format='%(asctime)s %(levelname)s %(name)s: %(message)s')

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=8000)
