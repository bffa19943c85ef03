import logging

from scorekeeper import create_app

app = create_app()

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    # Threaded server: concurrent requests share the one store
    app.run(host=app.config['HOST'], port=app.config['PORT'], threaded=True)
