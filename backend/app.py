import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS
from flasgger import Swagger

from config import CORS_ORIGINS, DB_URL, LOG_LEVEL, PORT
from db import init_db, make_engine, make_session_factory
from routes.company_routes import bp as company_bp
from services.company_service import CompanyService
from services.company_store import CompanyStore


def create_app(db_url: Optional[str] = None) -> Flask:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    app = Flask(__name__)
    CORS(app, origins=CORS_ORIGINS)

    engine = make_engine(db_url or DB_URL)
    init_db(engine)
    app.extensions["company_service"] = CompanyService(CompanyStore(make_session_factory(engine)))
    app.register_blueprint(company_bp)

    # Swagger UI at /apidocs
    Swagger(app, template={
        "info": {"title": "Biotech Companies API", "version": "1.0.0"},
        "basePath": "/"
    })

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=PORT, debug=True)
