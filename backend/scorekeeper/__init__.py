from flask import Flask
from flask_cors import CORS
from config import Config

from scorekeeper.services.scores import ScoreStore


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    CORS(
        flask_app,
        resources={r'/api/*': {'origins': flask_app.config['CORS_ALLOWED_ORIGINS']}},
        methods=flask_app.config['CORS_ALLOWED_METHODS'],
        allow_headers=flask_app.config['CORS_ALLOWED_HEADERS'],
    )

    if flask_app.config.get('REQUEST_LOGGING', True):
        from scorekeeper.request_log import register_request_logging
        register_request_logging(flask_app)

    # One store per app; routes reach it through current_app.extensions
    flask_app.extensions['score_store'] = ScoreStore(logger=flask_app.logger)

    from scorekeeper.api.scores import scores
    flask_app.register_blueprint(scores, url_prefix='/api')

    return flask_app
