"""
AWS Lambda entry point (API Gateway proxy events).

Configure the function handler as ``bgg_picker.api.lambda_handler.handler``.
"""

from mangum import Mangum

from .app import create_app

app = create_app()
handler = Mangum(app, lifespan="off")
